"""
StudentStatus Value Object

Enrollment status of a student.
"""

from enum import Enum


class StudentStatus(str, Enum):
    """Enrollment status. Values double as the API representation."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"
    SUSPENDED = "Suspended"
    EXPELLED = "Expelled"

    def is_enrolled(self) -> bool:
        """Only active students count as currently enrolled."""
        return self is StudentStatus.ACTIVE

    @classmethod
    def from_string(cls, value: str) -> "StudentStatus":
        """
        Parse a status name, ignoring case.

        Raises:
            ValueError: If value is not a valid status
        """
        for status in cls:
            if value and status.value.lower() == value.strip().lower():
                return status
        raise ValueError(f"Invalid status: {value}")
