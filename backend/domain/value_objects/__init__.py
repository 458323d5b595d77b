"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- Email: Normalized address with university/corporate classification
- FullName: Title-cased person name split into parts
- GPA: 0.0-4.0 grade point average with letter grade and standing
- PhoneNumber: US phone number with formatting and masking
- Address: Postal address with state/ZIP validation
"""

from .address import Address
from .course_status import CourseLevel, CourseStatus
from .email import Email
from .employment import AcademicTitle, EmploymentStatus
from .full_name import FullName
from .gpa import GPA
from .phone_number import PhoneNumber
from .student_status import StudentStatus

__all__ = [
    "Address",
    "AcademicTitle",
    "CourseLevel",
    "CourseStatus",
    "Email",
    "EmploymentStatus",
    "FullName",
    "GPA",
    "PhoneNumber",
    "StudentStatus",
]
