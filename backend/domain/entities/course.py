"""
Course aggregate root.
"""

from datetime import date, timedelta
from typing import Optional

from domain.entities.base_entity import BaseEntity
from domain.events import (
    CourseActivatedEvent,
    CourseCancelledEvent,
    CourseCompletedEvent,
    CourseCreatedEvent,
    CourseScheduledEvent,
    CourseUpdatedEvent,
    StudentEnrolledInCourseEvent,
    StudentWithdrewFromCourseEvent,
)
from domain.value_objects import CourseLevel, CourseStatus
from exceptions import InvalidOperationError

DEFAULT_MAX_ENROLLMENT = 30
ENROLLMENT_CUTOFF_DAYS = 7
MIN_ACADEMIC_YEAR = 2000
MAX_ACADEMIC_YEAR = 2100


def _validate_length(value: str, label: str, minimum: int, maximum: int) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    value = value.strip()
    if len(value) < minimum or len(value) > maximum:
        raise ValueError(f"{label} must be between {minimum} and {maximum} characters")
    return value


def _validate_code(code: str) -> str:
    code = _validate_length(code, "Course code", 3, 20)
    if not code.isalnum():
        raise ValueError("Course code can only contain letters and numbers")
    return code.upper()


def _validate_credit_hours(credit_hours: int) -> int:
    if credit_hours < 1 or credit_hours > 12:
        raise ValueError("Credit hours must be between 1 and 12")
    return credit_hours


def _validate_max_enrollment(max_enrollment: int) -> int:
    if max_enrollment < 1 or max_enrollment > 500:
        raise ValueError("Maximum enrollment must be between 1 and 500")
    return max_enrollment


class Course(BaseEntity):
    """
    A course offering.

    Lifecycle: Draft -> Scheduled -> Active -> Completed. Students can only
    enroll while the course is Active and before the enrollment cutoff.
    """

    def __init__(
        self,
        title: str,
        code: str,
        description: str,
        credit_hours: int,
        level: CourseLevel,
        department: str,
        max_enrollment: int = DEFAULT_MAX_ENROLLMENT,
        current_enrollment: int = 0,
        prerequisite_credit_hours: int = 0,
        status: CourseStatus = CourseStatus.DRAFT,
        semester: str = "",
        academic_year: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        id: Optional[str] = None,
    ):
        super().__init__(id)
        self.title = title
        self.code = code
        self.description = description
        self.credit_hours = credit_hours
        self.level = level
        self.department = department
        self.max_enrollment = max_enrollment
        self.current_enrollment = current_enrollment
        self.prerequisite_credit_hours = prerequisite_credit_hours
        self.status = status
        self.semester = semester
        self.academic_year = academic_year or date.today().year
        self.start_date = start_date
        self.end_date = end_date

    @classmethod
    def create(
        cls,
        title: str,
        code: str,
        description: str,
        credit_hours: int,
        level: CourseLevel,
        department: str,
        max_enrollment: int = DEFAULT_MAX_ENROLLMENT,
    ) -> "Course":
        """
        Create a new draft course.

        Raises:
            ValueError: If any field is out of range
        """
        course = cls(
            title=_validate_length(title, "Course title", 3, 100),
            code=_validate_code(code),
            description=_validate_length(description, "Course description", 10, 1000),
            credit_hours=_validate_credit_hours(credit_hours),
            level=level,
            department=_validate_length(department, "Department", 2, 50),
            max_enrollment=_validate_max_enrollment(max_enrollment),
        )
        course.add_domain_event(
            CourseCreatedEvent(course_id=course.id, title=course.title, code=course.code)
        )
        return course

    # --- Lifecycle ---------------------------------------------------------

    def schedule(self, semester: str, academic_year: int, start_date: date, end_date: date) -> None:
        if not semester or not semester.strip():
            raise ValueError("Semester is required")
        if academic_year < MIN_ACADEMIC_YEAR or academic_year > MAX_ACADEMIC_YEAR:
            raise ValueError(
                f"Academic year must be between {MIN_ACADEMIC_YEAR} and {MAX_ACADEMIC_YEAR}"
            )
        if start_date >= end_date:
            raise ValueError("Start date must be before end date")
        if start_date < date.today():
            raise ValueError("Start date cannot be in the past")
        if self.status.is_terminal():
            raise InvalidOperationError(f"Cannot schedule a {self.status.value.lower()} course")

        self.semester = semester.strip()
        self.academic_year = academic_year
        self.start_date = start_date
        self.end_date = end_date
        self.status = CourseStatus.SCHEDULED
        self.mark_as_updated()
        self.add_domain_event(
            CourseScheduledEvent(
                course_id=self.id,
                semester=self.semester,
                academic_year=academic_year,
                start_date=start_date,
                end_date=end_date,
            )
        )

    def activate(self) -> None:
        if self.status == CourseStatus.DRAFT:
            raise InvalidOperationError("Cannot activate a course that hasn't been scheduled")
        if self.status.is_terminal():
            raise InvalidOperationError(f"Cannot activate a {self.status.value.lower()} course")

        self.status = CourseStatus.ACTIVE
        self.mark_as_updated()
        self.add_domain_event(CourseActivatedEvent(course_id=self.id))

    def deactivate(self) -> None:
        self.status = CourseStatus.INACTIVE
        self.mark_as_updated()

    def cancel(self, reason: str) -> None:
        if not reason or not reason.strip():
            raise ValueError("Cancellation reason is required")
        if self.status == CourseStatus.COMPLETED:
            raise InvalidOperationError("Cannot cancel a completed course")

        self.status = CourseStatus.CANCELLED
        self.mark_as_updated()
        self.add_domain_event(CourseCancelledEvent(course_id=self.id, reason=reason.strip()))

    def complete(self) -> None:
        if self.status != CourseStatus.ACTIVE:
            raise InvalidOperationError("Only active courses can be completed")

        self.status = CourseStatus.COMPLETED
        self.mark_as_updated()
        self.add_domain_event(
            CourseCompletedEvent(course_id=self.id, final_enrollment=self.current_enrollment)
        )

    # --- Catalog details ---------------------------------------------------

    def update_course_info(self, title: str, description: str, max_enrollment: int) -> None:
        """
        Change title, description and capacity.

        Raises:
            InvalidOperationError: If the course is running with students enrolled
        """
        if self.status == CourseStatus.ACTIVE and self.current_enrollment > 0:
            raise InvalidOperationError("Cannot update course information while students are enrolled")

        title = _validate_length(title, "Course title", 3, 100)
        description = _validate_length(description, "Course description", 10, 1000)
        max_enrollment = _validate_max_enrollment(max_enrollment)
        if max_enrollment < self.current_enrollment:
            raise ValueError("Maximum enrollment cannot be less than current enrollment")

        changed = (
            title != self.title
            or description != self.description
            or max_enrollment != self.max_enrollment
        )
        if not changed:
            return

        self.title = title
        self.description = description
        self.max_enrollment = max_enrollment
        self.mark_as_updated()
        self.add_domain_event(CourseUpdatedEvent(course_id=self.id, title=self.title))

    def update_catalog_details(
        self, code: str, credit_hours: int, department: str, level: CourseLevel
    ) -> None:
        """Replace code, credit hours, department and level."""
        self.code = _validate_code(code)
        self.credit_hours = _validate_credit_hours(credit_hours)
        self.department = _validate_length(department, "Department", 2, 50)
        self.level = level
        self.mark_as_updated()

    def set_prerequisite_requirement(self, credit_hours: int) -> None:
        if credit_hours < 0:
            raise ValueError("Prerequisite credit hours cannot be negative")
        self.prerequisite_credit_hours = credit_hours
        self.mark_as_updated()

    # --- Enrollment --------------------------------------------------------

    def enroll_student(self, student_id: str) -> None:
        if not student_id:
            raise ValueError("Student ID is required")
        if not self.status.accepts_enrollment():
            raise InvalidOperationError("Can only enroll students in active courses")
        if self.is_full:
            raise InvalidOperationError("Course is at maximum enrollment capacity")
        if self.start_date and date.today() > self.start_date - timedelta(days=ENROLLMENT_CUTOFF_DAYS):
            raise InvalidOperationError("Enrollment period has ended")

        self.current_enrollment += 1
        self.mark_as_updated()
        self.add_domain_event(StudentEnrolledInCourseEvent(course_id=self.id, student_id=student_id))

    def withdraw_student(self, student_id: str) -> None:
        if not student_id:
            raise ValueError("Student ID is required")
        if self.current_enrollment <= 0:
            raise InvalidOperationError("No students are enrolled in this course")

        self.current_enrollment -= 1
        self.mark_as_updated()
        self.add_domain_event(StudentWithdrewFromCourseEvent(course_id=self.id, student_id=student_id))

    # --- Queries -----------------------------------------------------------

    @property
    def has_available_spots(self) -> bool:
        return self.current_enrollment < self.max_enrollment

    @property
    def is_full(self) -> bool:
        return self.current_enrollment >= self.max_enrollment

    @property
    def enrollment_percentage(self) -> float:
        if self.max_enrollment == 0:
            return 0.0
        return round(self.current_enrollment / self.max_enrollment * 100, 2)

    @property
    def is_currently_running(self) -> bool:
        if self.status != CourseStatus.ACTIVE or not self.start_date or not self.end_date:
            return False
        return self.start_date <= date.today() <= self.end_date

    @property
    def is_enrollment_open(self) -> bool:
        if not self.status.accepts_enrollment() or self.is_full:
            return False
        if self.start_date is None:
            return True
        return date.today() <= self.start_date - timedelta(days=ENROLLMENT_CUTOFF_DAYS)

    @property
    def duration_days(self) -> Optional[int]:
        if not self.start_date or not self.end_date:
            return None
        return (self.end_date - self.start_date).days

    @property
    def academic_period(self) -> str:
        """Human-readable term such as "Fall 2025", empty until scheduled."""
        if not self.semester:
            return ""
        return f"{self.semester} {self.academic_year}"
