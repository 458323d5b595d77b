"""
Teacher employment value objects: AcademicTitle and EmploymentStatus.
"""

from enum import Enum


class AcademicTitle(str, Enum):
    """Academic rank of a teacher."""

    TEACHING_ASSISTANT = "TeachingAssistant"
    LECTURER = "Lecturer"
    ASSISTANT_PROFESSOR = "AssistantProfessor"
    ASSOCIATE_PROFESSOR = "AssociateProfessor"
    PROFESSOR = "Professor"
    DEPARTMENT_HEAD = "DepartmentHead"
    DEAN = "Dean"
    ADJUNCT = "Adjunct"
    VISITING = "Visiting"

    def default_max_courses(self) -> int:
        """Default teaching load per semester for this rank."""
        return _DEFAULT_MAX_COURSES.get(self, 3)

    @classmethod
    def from_string(cls, value: str) -> "AcademicTitle":
        for title in cls:
            if value and title.value.lower() == value.strip().lower():
                return title
        raise ValueError(f"Invalid academic title: {value}")


_DEFAULT_MAX_COURSES = {
    AcademicTitle.TEACHING_ASSISTANT: 2,
    AcademicTitle.LECTURER: 4,
    AcademicTitle.ASSISTANT_PROFESSOR: 3,
    AcademicTitle.ASSOCIATE_PROFESSOR: 2,
    AcademicTitle.PROFESSOR: 2,
    AcademicTitle.DEPARTMENT_HEAD: 1,
    AcademicTitle.DEAN: 1,
}


class EmploymentStatus(str, Enum):
    """Employment state of a teacher."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"
    TERMINATED = "Terminated"
    RETIRED = "Retired"
    ON_LEAVE = "OnLeave"

    @classmethod
    def from_string(cls, value: str) -> "EmploymentStatus":
        for status in cls:
            if value and status.value.lower() == value.strip().lower():
                return status
        raise ValueError(f"Invalid employment status: {value}")
