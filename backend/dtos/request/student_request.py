"""
Student Request DTOs

DTOs for student commands and list queries.
"""

from datetime import date
from typing import Optional

from pydantic import Field, validator

from constants import Pagination, StudentRules
from domain.entities.student import years_before
from domain.value_objects import Address
from dtos.base import CamelModel


class AddressRequest(CamelModel):
    """Postal address block; detailed format rules live in the Address value object."""

    street: str = Field(description="Street address")
    street2: Optional[str] = Field(None, description="Apartment, suite, unit")
    city: str = Field(description="City")
    state: str = Field(description="Two-letter state code")
    zip_code: str = Field(description="ZIP or ZIP+4")
    country: str = Field("US", description="Country code")

    @validator("state", "country")
    def validate_region_length(cls, v):
        if len(v.strip()) < 2 or len(v.strip()) > 50:
            raise ValueError("Must be between 2 and 50 characters")
        return v

    def to_value(self) -> Address:
        """Build the Address value object (raises ValueError on bad parts)."""
        return Address(
            street=self.street,
            street2=self.street2,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            country=self.country,
        )


def _check_full_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if len(v) < StudentRules.MIN_NAME_LENGTH or len(v) > StudentRules.MAX_NAME_LENGTH:
        raise ValueError(
            f"Full name must be between {StudentRules.MIN_NAME_LENGTH} and "
            f"{StudentRules.MAX_NAME_LENGTH} characters"
        )
    return v


def _check_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if len(v) < StudentRules.MIN_EMAIL_LENGTH or len(v) > StudentRules.MAX_EMAIL_LENGTH:
        raise ValueError(
            f"Email must be between {StudentRules.MIN_EMAIL_LENGTH} and "
            f"{StudentRules.MAX_EMAIL_LENGTH} characters"
        )
    return v


def _check_date_of_birth(v: Optional[date]) -> Optional[date]:
    if v is None:
        return v
    today = date.today()
    if v > years_before(today, StudentRules.MIN_AGE):
        raise ValueError(f"Student must be at least {StudentRules.MIN_AGE} years old")
    if v < years_before(today, StudentRules.MAX_AGE):
        raise ValueError(f"Date of birth cannot be more than {StudentRules.MAX_AGE} years ago")
    return v


class CreateStudentRequest(CamelModel):
    """
    Request DTO for registering a student.
    """

    full_name: str = Field(description="First, optional middle, and last name")
    date_of_birth: date = Field(description="Date of birth (YYYY-MM-DD)")
    email: str = Field(description="Unique email address")
    phone_number: Optional[str] = Field(None, description="US phone number")
    address: Optional[AddressRequest] = Field(None, description="Home address")

    _full_name = validator("full_name", allow_reuse=True)(_check_full_name)
    _email = validator("email", allow_reuse=True)(_check_email)
    _date_of_birth = validator("date_of_birth", allow_reuse=True)(_check_date_of_birth)

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "fullName": "Jane Marie Doe",
                "dateOfBirth": "2003-04-17",
                "email": "jane.doe@university.edu",
                "phoneNumber": "(555) 234-5678",
                "address": {
                    "street": "123 Main St",
                    "city": "Springfield",
                    "state": "IL",
                    "zipCode": "62701",
                    "country": "US",
                },
            }
        }


class UpdateStudentRequest(CamelModel):
    """
    Request DTO for a partial student update.

    Only supplied fields are changed.
    """

    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[AddressRequest] = None
    gpa: Optional[float] = Field(None, description="GPA on the 4.0 scale")

    _full_name = validator("full_name", allow_reuse=True)(_check_full_name)
    _email = validator("email", allow_reuse=True)(_check_email)
    _date_of_birth = validator("date_of_birth", allow_reuse=True)(_check_date_of_birth)

    @validator("gpa")
    def validate_gpa(cls, v):
        if v is None:
            return v
        if not 0 <= v <= 4:
            raise ValueError("GPA must be between 0.0 and 4.0")
        if round(v, 2) != v:
            raise ValueError("GPA cannot have more than 2 decimal places")
        return v


class UpdateStudentContactRequest(CamelModel):
    email: str
    phone_number: Optional[str] = None

    _email = validator("email", allow_reuse=True)(_check_email)


class UpdateGpaRequest(CamelModel):
    gpa_value: float = Field(description="New GPA, 0.0 - 4.0")

    @validator("gpa_value")
    def validate_gpa_value(cls, v):
        if not 0 <= v <= 4:
            raise ValueError("GPA must be between 0.0 and 4.0")
        return v


class ChangeStatusRequest(CamelModel):
    new_status: str = Field(description="Target status name, e.g. Active or Graduated")


class StudentListRequest(CamelModel):
    """
    Query parameters for the paginated student list.
    """

    page_number: int = Field(Pagination.DEFAULT_PAGE_NUMBER, description="1-based page index")
    page_size: int = Field(Pagination.DEFAULT_PAGE_SIZE, description="Items per page")
    search_term: Optional[str] = Field(None, description="Matches name or email")
    status: Optional[str] = Field(None, description="Filter by status")
    sort_by: str = Field(StudentRules.DEFAULT_SORT, description="Sort column")
    sort_direction: str = Field("asc", description="asc or desc")
    min_gpa: Optional[float] = None
    max_gpa: Optional[float] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None

    @validator("page_number")
    def validate_page_number(cls, v):
        if v < 1:
            raise ValueError("Page number must be greater than 0")
        return v

    @validator("page_size")
    def validate_page_size(cls, v):
        if v < 1 or v > Pagination.MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {Pagination.MAX_PAGE_SIZE}")
        return v

    @validator("search_term")
    def validate_search_term(cls, v):
        if v is not None and len(v) > StudentRules.MAX_SEARCH_TERM_LENGTH:
            raise ValueError(
                f"Search term cannot exceed {StudentRules.MAX_SEARCH_TERM_LENGTH} characters"
            )
        return v

    @validator("sort_by")
    def validate_sort_by(cls, v):
        if v not in StudentRules.SORT_FIELDS:
            raise ValueError(f"Sort by must be one of: {', '.join(StudentRules.SORT_FIELDS)}")
        return v

    @validator("sort_direction")
    def validate_sort_direction(cls, v):
        if v.lower() not in ("asc", "desc"):
            raise ValueError("Sort direction must be 'asc' or 'desc'")
        return v.lower()

    @validator("min_gpa", "max_gpa")
    def validate_gpa_bound(cls, v):
        if v is not None and not 0 <= v <= 4:
            raise ValueError("GPA filter must be between 0.0 and 4.0")
        return v

    @validator("max_gpa")
    def validate_gpa_order(cls, v, values):
        min_gpa = values.get("min_gpa")
        if v is not None and min_gpa is not None and v < min_gpa:
            raise ValueError("Maximum GPA must be greater than or equal to minimum GPA")
        return v

    @validator("min_age", "max_age")
    def validate_age_bound(cls, v):
        if v is not None and (v < StudentRules.MIN_AGE or v > StudentRules.MAX_AGE):
            raise ValueError(f"Age filter must be between {StudentRules.MIN_AGE} and {StudentRules.MAX_AGE}")
        return v

    @validator("max_age")
    def validate_age_order(cls, v, values):
        min_age = values.get("min_age")
        if v is not None and min_age is not None and v < min_age:
            raise ValueError("Maximum age must be greater than or equal to minimum age")
        return v
