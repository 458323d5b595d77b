"""
Student aggregate root.
"""

from datetime import date
from typing import Optional

from domain.entities.base_entity import BaseEntity
from domain.events import (
    StudentAcademicStandingChangedEvent,
    StudentAddressUpdatedEvent,
    StudentContactUpdatedEvent,
    StudentCreatedEvent,
    StudentDeactivatedEvent,
    StudentGPAUpdatedEvent,
    StudentGraduatedEvent,
    StudentPhoneNumberUpdatedEvent,
    StudentReactivatedEvent,
    StudentStatusChangedEvent,
)
from domain.value_objects import GPA, Address, Email, FullName, PhoneNumber, StudentStatus
from exceptions import InvalidOperationError

NO_GPA_STANDING = "No GPA Recorded"


def years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def calculate_age(date_of_birth: date, on: Optional[date] = None) -> int:
    """Age in whole years on the given day (today by default)."""
    today = on or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class Student(BaseEntity):
    """
    A student enrolled at the institution.

    Use Student.create() for new students; the constructor only rebuilds an
    existing student from storage and raises no events.
    """

    def __init__(
        self,
        full_name: FullName,
        date_of_birth: date,
        email: Email,
        phone_number: Optional[PhoneNumber] = None,
        address: Optional[Address] = None,
        gpa: Optional[GPA] = None,
        status: StudentStatus = StudentStatus.ACTIVE,
        enrollment_date: Optional[date] = None,
        id: Optional[str] = None,
    ):
        super().__init__(id)
        self.full_name = full_name
        self.date_of_birth = date_of_birth
        self.email = email
        self.phone_number = phone_number
        self.address = address
        self.gpa = gpa
        self.status = status
        self.enrollment_date = enrollment_date or date.today()

    @classmethod
    def create(
        cls,
        full_name: FullName,
        date_of_birth: date,
        email: Email,
        phone_number: Optional[PhoneNumber] = None,
        address: Optional[Address] = None,
    ) -> "Student":
        """
        Register a new student.

        Args:
            full_name: Validated name
            date_of_birth: Must be before today
            email: Validated email address
            phone_number: Optional phone number
            address: Optional postal address

        Returns:
            New active Student carrying a StudentCreatedEvent

        Raises:
            ValueError: If date of birth is not in the past
        """
        if full_name is None:
            raise ValueError("Full name is required")
        if email is None:
            raise ValueError("Email is required")
        if date_of_birth >= date.today():
            raise ValueError("Date of birth must be in the past")

        student = cls(
            full_name=full_name,
            date_of_birth=date_of_birth,
            email=email,
            phone_number=phone_number,
            address=address,
        )
        student.add_domain_event(
            StudentCreatedEvent(student_id=student.id, full_name=str(full_name), email=str(email))
        )
        return student

    # --- Mutations ---------------------------------------------------------

    def update_full_name(self, full_name: FullName) -> None:
        if full_name is None:
            raise ValueError("Full name is required")
        self.full_name = full_name
        self.mark_as_updated()

    def correct_date_of_birth(self, date_of_birth: date) -> None:
        if date_of_birth >= date.today():
            raise ValueError("Date of birth must be in the past")
        self.date_of_birth = date_of_birth
        self.mark_as_updated()

    def update_contact_information(self, email: Email) -> None:
        if email is None:
            raise ValueError("Email is required")
        if email == self.email:
            return

        previous = self.email
        self.email = email
        self.mark_as_updated()
        self.add_domain_event(
            StudentContactUpdatedEvent(
                student_id=self.id, new_email=str(email), previous_email=str(previous)
            )
        )

    def update_phone_number(self, phone_number: Optional[PhoneNumber]) -> None:
        """Replace the phone number; None clears it."""
        if phone_number == self.phone_number:
            return

        previous = self.phone_number
        self.phone_number = phone_number
        self.mark_as_updated()
        self.add_domain_event(
            StudentPhoneNumberUpdatedEvent(
                student_id=self.id,
                new_phone_number=str(phone_number) if phone_number else None,
                previous_phone_number=str(previous) if previous else None,
            )
        )

    def update_address(self, address: Optional[Address]) -> None:
        """Replace the address; None clears it."""
        if address == self.address:
            return

        previous = self.address
        self.address = address
        self.mark_as_updated()
        self.add_domain_event(
            StudentAddressUpdatedEvent(
                student_id=self.id,
                new_address=address.full_address if address else None,
                previous_address=previous.full_address if previous else None,
            )
        )

    def update_gpa(self, gpa: Optional[GPA]) -> None:
        """Record a new GPA (None clears it) and flag standing changes."""
        previous = self.gpa
        previous_standing = self.academic_standing

        self.gpa = gpa
        self.mark_as_updated()
        self.add_domain_event(
            StudentGPAUpdatedEvent(
                student_id=self.id,
                new_gpa=gpa.value if gpa else None,
                previous_gpa=previous.value if previous else None,
            )
        )

        if self.academic_standing != previous_standing:
            self.add_domain_event(
                StudentAcademicStandingChangedEvent(
                    student_id=self.id,
                    new_standing=self.academic_standing,
                    previous_standing=previous_standing,
                )
            )

    def change_status(self, status: StudentStatus) -> None:
        if status == self.status:
            return

        previous = self.status
        self.status = status
        self.mark_as_updated()
        self.add_domain_event(
            StudentStatusChangedEvent(
                student_id=self.id, new_status=status.value, previous_status=previous.value
            )
        )

    def deactivate(self) -> None:
        if self.status == StudentStatus.INACTIVE:
            raise InvalidOperationError("Student is already inactive")
        self.change_status(StudentStatus.INACTIVE)
        self.add_domain_event(StudentDeactivatedEvent(student_id=self.id))

    def reactivate(self) -> None:
        if self.status == StudentStatus.ACTIVE:
            raise InvalidOperationError("Student is already active")
        if self.status == StudentStatus.EXPELLED:
            raise InvalidOperationError("Expelled students cannot be reactivated")
        self.change_status(StudentStatus.ACTIVE)
        self.add_domain_event(StudentReactivatedEvent(student_id=self.id))

    def graduate(self) -> None:
        if self.status != StudentStatus.ACTIVE:
            raise InvalidOperationError("Only active students can graduate")
        self.change_status(StudentStatus.GRADUATED)
        self.add_domain_event(
            StudentGraduatedEvent(
                student_id=self.id, final_gpa=self.gpa.value if self.gpa else None
            )
        )

    # --- Queries -----------------------------------------------------------

    @property
    def age(self) -> int:
        return calculate_age(self.date_of_birth)

    @property
    def is_eligible_for_honors(self) -> bool:
        return self.gpa is not None and self.gpa.is_honors

    @property
    def is_on_academic_probation(self) -> bool:
        return self.gpa is not None and self.gpa.is_on_probation

    @property
    def academic_standing(self) -> str:
        return self.gpa.academic_standing if self.gpa else NO_GPA_STANDING

    @property
    def has_university_email(self) -> bool:
        return self.email.is_university_email
