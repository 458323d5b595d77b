"""
Student Response DTOs
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from domain.entities import Student
from domain.value_objects import Address
from dtos.base import CamelModel


class AddressResponse(CamelModel):
    street: str
    street2: Optional[str] = None
    city: str
    state: str
    zip_code: str
    country: str
    full_address: str

    @classmethod
    def from_value(cls, address: Optional[Address]) -> Optional["AddressResponse"]:
        if address is None:
            return None
        return cls(
            street=address.street,
            street2=address.street2,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            country=address.country,
            full_address=address.full_address,
        )


class StudentResponse(CamelModel):
    """
    Full student representation.

    Adds the derived academic standing and letter grade to the stored fields.
    """

    id: str
    full_name: str
    date_of_birth: date
    age: int
    email: str
    phone_number: Optional[str] = None
    address: Optional[AddressResponse] = None
    gpa: Optional[float] = Field(None, description="GPA on the 4.0 scale")
    academic_standing: str
    letter_grade: Optional[str] = None
    status: str
    enrollment_date: date
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, student: Student) -> "StudentResponse":
        return cls(
            id=student.id,
            full_name=str(student.full_name),
            date_of_birth=student.date_of_birth,
            age=student.age,
            email=str(student.email),
            phone_number=str(student.phone_number) if student.phone_number else None,
            address=AddressResponse.from_value(student.address),
            gpa=student.gpa.value if student.gpa else None,
            academic_standing=student.academic_standing,
            letter_grade=student.gpa.letter_grade if student.gpa else None,
            status=student.status.value,
            enrollment_date=student.enrollment_date,
            created_at=student.created_at,
            updated_at=student.updated_at,
        )


class StudentListItemResponse(CamelModel):
    """Compact row used by list endpoints."""

    id: str
    full_name: str
    email: str
    age: int
    phone_number: Optional[str] = None
    gpa: Optional[float] = None
    status: str
    enrollment_date: date

    @classmethod
    def from_entity(cls, student: Student) -> "StudentListItemResponse":
        return cls(
            id=student.id,
            full_name=str(student.full_name),
            email=str(student.email),
            age=student.age,
            phone_number=str(student.phone_number) if student.phone_number else None,
            gpa=student.gpa.value if student.gpa else None,
            status=student.status.value,
            enrollment_date=student.enrollment_date,
        )
