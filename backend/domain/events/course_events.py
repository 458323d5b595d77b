"""Events raised by the Course aggregate."""

from dataclasses import dataclass
from datetime import date

from .base import DomainEvent


@dataclass(frozen=True)
class CourseCreatedEvent(DomainEvent):
    course_id: str
    title: str
    code: str


@dataclass(frozen=True)
class CourseScheduledEvent(DomainEvent):
    course_id: str
    semester: str
    academic_year: int
    start_date: date
    end_date: date


@dataclass(frozen=True)
class CourseActivatedEvent(DomainEvent):
    course_id: str


@dataclass(frozen=True)
class CourseUpdatedEvent(DomainEvent):
    course_id: str
    title: str


@dataclass(frozen=True)
class CourseCancelledEvent(DomainEvent):
    course_id: str
    reason: str


@dataclass(frozen=True)
class CourseCompletedEvent(DomainEvent):
    course_id: str
    final_enrollment: int


@dataclass(frozen=True)
class StudentEnrolledInCourseEvent(DomainEvent):
    course_id: str
    student_id: str


@dataclass(frozen=True)
class StudentWithdrewFromCourseEvent(DomainEvent):
    course_id: str
    student_id: str
