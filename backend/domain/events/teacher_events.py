"""Events raised by the Teacher aggregate."""

from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass(frozen=True)
class TeacherCreatedEvent(DomainEvent):
    teacher_id: str
    full_name: str
    employee_id: str


@dataclass(frozen=True)
class TeacherContactUpdatedEvent(DomainEvent):
    teacher_id: str
    new_email: str
    previous_email: str
    new_phone_number: Optional[str] = None


@dataclass(frozen=True)
class TeacherAssignedToCourseEvent(DomainEvent):
    teacher_id: str
    course_id: str
    course_name: str


@dataclass(frozen=True)
class TeacherRemovedFromCourseEvent(DomainEvent):
    teacher_id: str
    course_id: str


@dataclass(frozen=True)
class TeacherDeactivatedEvent(DomainEvent):
    teacher_id: str
    status: str


@dataclass(frozen=True)
class TeacherReactivatedEvent(DomainEvent):
    teacher_id: str
