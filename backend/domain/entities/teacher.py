"""
Teacher aggregate root.
"""

from datetime import date
from typing import List, Optional

from domain.entities.base_entity import BaseEntity
from domain.entities.student import calculate_age
from domain.events import (
    TeacherAssignedToCourseEvent,
    TeacherContactUpdatedEvent,
    TeacherCreatedEvent,
    TeacherDeactivatedEvent,
    TeacherReactivatedEvent,
    TeacherRemovedFromCourseEvent,
)
from domain.value_objects import AcademicTitle, Address, Email, EmploymentStatus, FullName, PhoneNumber
from exceptions import InvalidOperationError

MIN_TEACHER_AGE = 18
MAX_TEACHER_AGE = 80
MAX_COURSES_LIMIT = 15
SENIOR_YEARS_OF_SERVICE = 5


def _add_unique(items: List[str], value: str, label: str) -> bool:
    """Append value unless an equal one (ignoring case) is present."""
    if not value or not value.strip():
        raise ValueError(f"{label} cannot be empty")
    value = value.strip()
    if any(existing.lower() == value.lower() for existing in items):
        return False
    items.append(value)
    return True


def _remove_matching(items: List[str], value: str) -> bool:
    for existing in items:
        if value and existing.lower() == value.strip().lower():
            items.remove(existing)
            return True
    return False


class Teacher(BaseEntity):
    """
    A member of teaching staff.

    Tracks employment details plus the number of courses assigned this
    semester against a title-dependent maximum.
    """

    def __init__(
        self,
        full_name: FullName,
        email: Email,
        employee_id: str,
        department: str,
        title: AcademicTitle,
        hire_date: date,
        date_of_birth: date,
        phone_number: Optional[PhoneNumber] = None,
        address: Optional[Address] = None,
        status: EmploymentStatus = EmploymentStatus.ACTIVE,
        specializations: Optional[List[str]] = None,
        qualifications: Optional[List[str]] = None,
        max_courses_per_semester: Optional[int] = None,
        current_course_load: int = 0,
        office_location: Optional[str] = None,
        office_hours: Optional[str] = None,
        id: Optional[str] = None,
    ):
        super().__init__(id)
        self.full_name = full_name
        self.email = email
        self.employee_id = employee_id
        self.department = department
        self.title = title
        self.hire_date = hire_date
        self.date_of_birth = date_of_birth
        self.phone_number = phone_number
        self.address = address
        self.status = status
        self.specializations: List[str] = list(specializations or [])
        self.qualifications: List[str] = list(qualifications or [])
        self.max_courses_per_semester = max_courses_per_semester or title.default_max_courses()
        self.current_course_load = current_course_load
        self.office_location = office_location
        self.office_hours = office_hours

    @classmethod
    def create(
        cls,
        full_name: FullName,
        email: Email,
        employee_id: str,
        department: str,
        title: AcademicTitle,
        date_of_birth: date,
        hire_date: Optional[date] = None,
        phone_number: Optional[PhoneNumber] = None,
        address: Optional[Address] = None,
    ) -> "Teacher":
        """
        Hire a new teacher.

        Raises:
            ValueError: If employee id, department or date of birth are invalid
        """
        if not employee_id or not employee_id.strip():
            raise ValueError("Employee ID is required")
        employee_id = employee_id.strip().upper()
        if len(employee_id) < 3 or len(employee_id) > 20:
            raise ValueError("Employee ID must be between 3 and 20 characters")

        if not department or not department.strip():
            raise ValueError("Department is required")
        department = department.strip()
        if len(department) < 2 or len(department) > 50:
            raise ValueError("Department must be between 2 and 50 characters")

        if date_of_birth >= date.today():
            raise ValueError("Date of birth must be in the past")
        age = calculate_age(date_of_birth)
        if age < MIN_TEACHER_AGE or age > MAX_TEACHER_AGE:
            raise ValueError(
                f"Teacher must be between {MIN_TEACHER_AGE} and {MAX_TEACHER_AGE} years old"
            )

        teacher = cls(
            full_name=full_name,
            email=email,
            employee_id=employee_id,
            department=department,
            title=title,
            hire_date=hire_date or date.today(),
            date_of_birth=date_of_birth,
            phone_number=phone_number,
            address=address,
        )
        teacher.add_domain_event(
            TeacherCreatedEvent(
                teacher_id=teacher.id, full_name=str(full_name), employee_id=employee_id
            )
        )
        return teacher

    # --- Contact and profile -----------------------------------------------

    def update_contact_information(
        self,
        email: Email,
        phone_number: Optional[PhoneNumber] = None,
        address: Optional[Address] = None,
    ) -> None:
        if email is None:
            raise ValueError("Email is required")

        previous = self.email
        self.email = email
        self.phone_number = phone_number
        self.address = address
        self.mark_as_updated()
        self.add_domain_event(
            TeacherContactUpdatedEvent(
                teacher_id=self.id,
                new_email=str(email),
                previous_email=str(previous),
                new_phone_number=str(phone_number) if phone_number else None,
            )
        )

    def update_title(self, title: AcademicTitle) -> None:
        """Change rank; resets the course limit to the rank's default."""
        self.title = title
        self.max_courses_per_semester = title.default_max_courses()
        self.mark_as_updated()

    def set_office_info(self, office_location: Optional[str], office_hours: Optional[str]) -> None:
        self.office_location = office_location.strip() if office_location else None
        self.office_hours = office_hours.strip() if office_hours else None
        self.mark_as_updated()

    def add_specialization(self, specialization: str) -> None:
        if _add_unique(self.specializations, specialization, "Specialization"):
            self.mark_as_updated()

    def remove_specialization(self, specialization: str) -> None:
        if _remove_matching(self.specializations, specialization):
            self.mark_as_updated()

    def add_qualification(self, qualification: str) -> None:
        if _add_unique(self.qualifications, qualification, "Qualification"):
            self.mark_as_updated()

    def remove_qualification(self, qualification: str) -> None:
        if _remove_matching(self.qualifications, qualification):
            self.mark_as_updated()

    # --- Course load -------------------------------------------------------

    def assign_to_course(self, course_id: str, course_name: str) -> None:
        if not course_id:
            raise ValueError("Course ID is required")
        if not course_name or not course_name.strip():
            raise ValueError("Course name is required")
        if self.status != EmploymentStatus.ACTIVE:
            raise InvalidOperationError("Cannot assign courses to inactive teachers")
        if self.current_course_load >= self.max_courses_per_semester:
            raise InvalidOperationError(
                f"Teacher has reached maximum course load of {self.max_courses_per_semester}"
            )

        self.current_course_load += 1
        self.mark_as_updated()
        self.add_domain_event(
            TeacherAssignedToCourseEvent(
                teacher_id=self.id, course_id=course_id, course_name=course_name.strip()
            )
        )

    def remove_from_course(self, course_id: str) -> None:
        if not course_id:
            raise ValueError("Course ID is required")
        if self.current_course_load <= 0:
            raise InvalidOperationError("Teacher is not assigned to any courses")

        self.current_course_load -= 1
        self.mark_as_updated()
        self.add_domain_event(TeacherRemovedFromCourseEvent(teacher_id=self.id, course_id=course_id))

    def set_max_courses_per_semester(self, max_courses: int) -> None:
        if max_courses < 1 or max_courses > MAX_COURSES_LIMIT:
            raise ValueError(f"Maximum courses must be between 1 and {MAX_COURSES_LIMIT}")
        if max_courses < self.current_course_load:
            raise InvalidOperationError("Maximum courses cannot be less than current course load")
        self.max_courses_per_semester = max_courses
        self.mark_as_updated()

    # --- Employment --------------------------------------------------------

    def deactivate(self, status: EmploymentStatus) -> None:
        if status == EmploymentStatus.ACTIVE:
            raise ValueError("Use reactivate() to make a teacher active")

        self.status = status
        self.mark_as_updated()
        self.add_domain_event(TeacherDeactivatedEvent(teacher_id=self.id, status=status.value))

    def reactivate(self) -> None:
        if self.status == EmploymentStatus.ACTIVE:
            raise InvalidOperationError("Teacher is already active")
        if self.status == EmploymentStatus.TERMINATED:
            raise InvalidOperationError("Terminated teachers cannot be reactivated")

        self.status = EmploymentStatus.ACTIVE
        self.mark_as_updated()
        self.add_domain_event(TeacherReactivatedEvent(teacher_id=self.id))

    # --- Queries -----------------------------------------------------------

    @property
    def can_take_more_courses(self) -> bool:
        return (
            self.status == EmploymentStatus.ACTIVE
            and self.current_course_load < self.max_courses_per_semester
        )

    @property
    def workload_percentage(self) -> float:
        if self.max_courses_per_semester == 0:
            return 0.0
        return round(self.current_course_load / self.max_courses_per_semester * 100, 2)

    @property
    def is_overloaded(self) -> bool:
        return self.current_course_load > self.max_courses_per_semester

    @property
    def years_of_service(self) -> int:
        return calculate_age(self.hire_date)

    @property
    def is_senior(self) -> bool:
        return self.years_of_service >= SENIOR_YEARS_OF_SERVICE

    @property
    def age(self) -> int:
        return calculate_age(self.date_of_birth)
