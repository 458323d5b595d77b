"""
Course Response DTOs
"""

from datetime import date, datetime
from typing import Optional

from domain.entities import Course
from dtos.base import CamelModel


class CourseResponse(CamelModel):
    id: str
    title: str
    code: str
    description: str
    credit_hours: int
    level: str
    department: str
    max_enrollment: int
    current_enrollment: int
    available_spots: int
    enrollment_percentage: float
    prerequisite_credit_hours: int
    status: str
    semester: str
    academic_year: int
    academic_period: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_days: Optional[int] = None
    is_enrollment_open: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id,
            title=course.title,
            code=course.code,
            description=course.description,
            credit_hours=course.credit_hours,
            level=course.level.value,
            department=course.department,
            max_enrollment=course.max_enrollment,
            current_enrollment=course.current_enrollment,
            available_spots=max(course.max_enrollment - course.current_enrollment, 0),
            enrollment_percentage=course.enrollment_percentage,
            prerequisite_credit_hours=course.prerequisite_credit_hours,
            status=course.status.value,
            semester=course.semester,
            academic_year=course.academic_year,
            academic_period=course.academic_period,
            start_date=course.start_date,
            end_date=course.end_date,
            duration_days=course.duration_days,
            is_enrollment_open=course.is_enrollment_open,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )


class CourseListItemResponse(CamelModel):
    """Catalog row; enrollment is rendered as "current/max"."""

    id: str
    title: str
    code: str
    credit_hours: int
    level: str
    department: str
    enrollment: str
    status: str
    academic_period: str

    @classmethod
    def from_entity(cls, course: Course) -> "CourseListItemResponse":
        return cls(
            id=course.id,
            title=course.title,
            code=course.code,
            credit_hours=course.credit_hours,
            level=course.level.value,
            department=course.department,
            enrollment=f"{course.current_enrollment}/{course.max_enrollment}",
            status=course.status.value,
            academic_period=course.academic_period,
        )
