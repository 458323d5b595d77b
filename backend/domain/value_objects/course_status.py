"""
Course lifecycle value objects: CourseStatus and CourseLevel.
"""

from enum import Enum


def _parse(enum_cls, value: str, label: str):
    for member in enum_cls:
        if value and member.value.lower() == value.strip().lower():
            return member
    raise ValueError(f"Invalid {label}: {value}")


class CourseLevel(str, Enum):
    """Academic level a course is offered at."""

    UNDERGRADUATE = "Undergraduate"
    GRADUATE = "Graduate"
    POSTGRADUATE = "Postgraduate"
    DOCTORAL = "Doctoral"
    CERTIFICATE = "Certificate"
    CONTINUING = "Continuing"

    @classmethod
    def from_string(cls, value: str) -> "CourseLevel":
        return _parse(cls, value, "course level")


class CourseStatus(str, Enum):
    """
    Course lifecycle state.

    Draft -> Scheduled -> Active -> Completed is the normal path; a course can
    be cancelled or deactivated along the way.
    """

    DRAFT = "Draft"
    SCHEDULED = "Scheduled"
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    ARCHIVED = "Archived"

    def is_terminal(self) -> bool:
        """Check if no further lifecycle transitions are possible."""
        return self in {CourseStatus.COMPLETED, CourseStatus.CANCELLED, CourseStatus.ARCHIVED}

    def accepts_enrollment(self) -> bool:
        return self is CourseStatus.ACTIVE

    @classmethod
    def from_string(cls, value: str) -> "CourseStatus":
        return _parse(cls, value, "course status")
