"""
Course Request DTOs

DTOs for course catalog commands and list queries.
"""

import re
from datetime import date, timedelta
from typing import List, Optional

from pydantic import Field, validator

from constants import CourseRules, Pagination
from domain.value_objects import CourseLevel, CourseStatus
from dtos.base import CamelModel


def _check_code(v: str) -> str:
    if not re.match(CourseRules.CODE_PATTERN, v):
        raise ValueError("Course code must be 2-4 uppercase letters followed by 3-4 digits (e.g. CS101)")
    return v


def _check_level(v: str) -> str:
    return CourseLevel.from_string(v).value


def _check_title(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Title is required")
    if len(v) > CourseRules.MAX_TITLE_LENGTH:
        raise ValueError(f"Title cannot exceed {CourseRules.MAX_TITLE_LENGTH} characters")
    return v


def _check_description(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Description is required")
    if len(v) > CourseRules.MAX_DESCRIPTION_LENGTH:
        raise ValueError(f"Description cannot exceed {CourseRules.MAX_DESCRIPTION_LENGTH} characters")
    return v


def _check_department(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Department is required")
    if len(v) > CourseRules.MAX_DEPARTMENT_LENGTH:
        raise ValueError(f"Department cannot exceed {CourseRules.MAX_DEPARTMENT_LENGTH} characters")
    return v


class CreateCourseRequest(CamelModel):
    """
    Request DTO for adding a course to the catalog.

    ``academic_period`` such as "Fall 2025" schedules the course right away.
    """

    title: str
    description: str
    course_code: str = Field(description="e.g. CS101")
    credits: int = Field(description="Credit hours, 1 - 12")
    max_capacity: int = Field(description="Maximum enrollment, 1 - 500")
    department: str
    level: str = Field(description="Undergraduate, Graduate, ...")
    academic_period: Optional[str] = Field(None, description="Semester and year, e.g. 'Fall 2025'")
    prerequisites: List[str] = Field(default_factory=list, description="Prerequisite course codes")

    _title = validator("title", allow_reuse=True)(_check_title)
    _description = validator("description", allow_reuse=True)(_check_description)
    _department = validator("department", allow_reuse=True)(_check_department)
    _code = validator("course_code", allow_reuse=True)(_check_code)
    _level = validator("level", allow_reuse=True)(_check_level)

    @validator("credits")
    def validate_credits(cls, v):
        if v < 1 or v > 12:
            raise ValueError("Credits must be between 1 and 12")
        return v

    @validator("max_capacity")
    def validate_max_capacity(cls, v):
        if v < 1 or v > 500:
            raise ValueError("Max capacity must be between 1 and 500")
        return v

    @validator("academic_period")
    def validate_academic_period(cls, v):
        if v is None or not v.strip():
            return None
        parts = v.split()
        if len(parts) != 2 or parts[0] not in CourseRules.SEMESTERS or not parts[1].isdigit():
            raise ValueError("Academic period must look like 'Fall 2025'")
        return " ".join(parts)

    @validator("prerequisites")
    def validate_prerequisites(cls, v):
        if len(v) > CourseRules.MAX_PREREQUISITES:
            raise ValueError(f"Cannot have more than {CourseRules.MAX_PREREQUISITES} prerequisites")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "title": "Introduction to Programming",
                "description": "Fundamentals of programming using Python.",
                "courseCode": "CS101",
                "credits": 3,
                "maxCapacity": 40,
                "department": "Computer Science",
                "level": "Undergraduate",
                "academicPeriod": "Fall 2025",
                "prerequisites": [],
            }
        }


class UpdateCourseRequest(CamelModel):
    """Full replacement of a course's catalog data."""

    title: str
    description: str
    course_code: str
    credits: int
    max_capacity: int
    department: str
    level: str
    prerequisite_credit_hours: int = 0

    _title = validator("title", allow_reuse=True)(_check_title)
    _description = validator("description", allow_reuse=True)(_check_description)
    _department = validator("department", allow_reuse=True)(_check_department)
    _code = validator("course_code", allow_reuse=True)(_check_code)
    _level = validator("level", allow_reuse=True)(_check_level)

    @validator("credits")
    def validate_credits(cls, v):
        if v < 1 or v > 12:
            raise ValueError("Credits must be between 1 and 12")
        return v

    @validator("max_capacity")
    def validate_max_capacity(cls, v):
        if v < 1 or v > 500:
            raise ValueError("Max capacity must be between 1 and 500")
        return v

    @validator("prerequisite_credit_hours")
    def validate_prerequisite_credit_hours(cls, v):
        if v < 0 or v > CourseRules.MAX_PREREQUISITE_CREDIT_HOURS:
            raise ValueError(
                f"Prerequisite credit hours must be between 0 and {CourseRules.MAX_PREREQUISITE_CREDIT_HOURS}"
            )
        return v


class ScheduleCourseRequest(CamelModel):
    semester: str
    academic_year: int
    start_date: date
    end_date: date

    @validator("semester")
    def validate_semester(cls, v):
        if v not in CourseRules.SEMESTERS:
            raise ValueError(f"Semester must be one of: {', '.join(CourseRules.SEMESTERS)}")
        return v

    @validator("start_date")
    def validate_start_date(cls, v):
        if v < date.today():
            raise ValueError("Start date cannot be in the past")
        return v

    @validator("end_date")
    def validate_end_date(cls, v, values):
        start = values.get("start_date")
        if start is None:
            return v
        if v <= start:
            raise ValueError("End date must be after start date")
        if v > start + timedelta(days=365):
            raise ValueError("Course duration cannot exceed one year")
        return v


class CompleteCourseRequest(CamelModel):
    completion_notes: Optional[str] = None

    @validator("completion_notes")
    def validate_completion_notes(cls, v):
        if v is not None and len(v) > CourseRules.MAX_COMPLETION_NOTES_LENGTH:
            raise ValueError(
                f"Completion notes cannot exceed {CourseRules.MAX_COMPLETION_NOTES_LENGTH} characters"
            )
        return v


class CourseListRequest(CamelModel):
    """Query parameters for the paginated course list."""

    page_number: int = Pagination.DEFAULT_PAGE_NUMBER
    page_size: int = Pagination.DEFAULT_PAGE_SIZE
    search_term: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
    status: Optional[str] = None
    sort_by: str = CourseRules.DEFAULT_SORT
    sort_direction: str = "asc"

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

    @validator("level")
    def validate_level(cls, v):
        if v is None:
            return v
        return CourseLevel.from_string(v).value

    @validator("status")
    def validate_status(cls, v):
        if v is None:
            return v
        return CourseStatus.from_string(v).value

    @validator("sort_by")
    def validate_sort_by(cls, v):
        if v not in CourseRules.SORT_FIELDS:
            raise ValueError(f"Sort by must be one of: {', '.join(CourseRules.SORT_FIELDS)}")
        return v

    @validator("sort_direction")
    def validate_sort_direction(cls, v):
        if v.lower() not in ("asc", "desc"):
            raise ValueError("Sort direction must be 'asc' or 'desc'")
        return v.lower()
