"""Events raised by the Student aggregate."""

from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass(frozen=True)
class StudentCreatedEvent(DomainEvent):
    student_id: str
    full_name: str
    email: str


@dataclass(frozen=True)
class StudentContactUpdatedEvent(DomainEvent):
    student_id: str
    new_email: str
    previous_email: str


@dataclass(frozen=True)
class StudentPhoneNumberUpdatedEvent(DomainEvent):
    student_id: str
    new_phone_number: Optional[str]
    previous_phone_number: Optional[str]


@dataclass(frozen=True)
class StudentAddressUpdatedEvent(DomainEvent):
    student_id: str
    new_address: Optional[str]
    previous_address: Optional[str]


@dataclass(frozen=True)
class StudentGPAUpdatedEvent(DomainEvent):
    student_id: str
    new_gpa: Optional[float]
    previous_gpa: Optional[float]


@dataclass(frozen=True)
class StudentAcademicStandingChangedEvent(DomainEvent):
    student_id: str
    new_standing: str
    previous_standing: str


@dataclass(frozen=True)
class StudentStatusChangedEvent(DomainEvent):
    student_id: str
    new_status: str
    previous_status: str


@dataclass(frozen=True)
class StudentDeactivatedEvent(DomainEvent):
    student_id: str


@dataclass(frozen=True)
class StudentReactivatedEvent(DomainEvent):
    student_id: str


@dataclass(frozen=True)
class StudentGraduatedEvent(DomainEvent):
    student_id: str
    final_gpa: Optional[float]
