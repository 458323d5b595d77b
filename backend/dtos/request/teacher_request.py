"""
Teacher Request DTOs
"""

from datetime import date
from typing import Optional

from pydantic import Field, validator

from constants import Pagination
from domain.value_objects import AcademicTitle, EmploymentStatus
from dtos.base import CamelModel
from dtos.request.student_request import AddressRequest


class CreateTeacherRequest(CamelModel):
    """Request DTO for hiring a teacher."""

    full_name: str
    email: str
    employee_id: str = Field(description="Staff identifier, 3 - 20 characters")
    department: str
    title: str = Field(description="Lecturer, Professor, ...")
    date_of_birth: date
    hire_date: Optional[date] = None
    phone_number: Optional[str] = None
    address: Optional[AddressRequest] = None

    @validator("title")
    def validate_title(cls, v):
        return AcademicTitle.from_string(v).value

    @validator("hire_date")
    def validate_hire_date(cls, v):
        if v is not None and v > date.today():
            raise ValueError("Hire date cannot be in the future")
        return v


class ChangeEmploymentStatusRequest(CamelModel):
    new_status: str

    @validator("new_status")
    def validate_new_status(cls, v):
        return EmploymentStatus.from_string(v).value


class TeacherListRequest(CamelModel):
    page_number: int = Pagination.DEFAULT_PAGE_NUMBER
    page_size: int = Pagination.DEFAULT_PAGE_SIZE
    search_term: Optional[str] = None
    department: Optional[str] = None
    status: Optional[str] = None

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

    @validator("status")
    def validate_status(cls, v):
        if v is None:
            return v
        return EmploymentStatus.from_string(v).value
