"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum

from config import settings


class SortDirection(str, Enum):
    """Sort order accepted by list endpoints"""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "SortDirection":
        try:
            return cls((value or "").lower())
        except ValueError:
            raise ValueError("Sort direction must be 'asc' or 'desc'")


class ServerConfig:
    """Server configuration constants"""

    HOST = settings.HOST
    PORT = settings.PORT
    SERVICE_NAME = "EduTrack API"
    VERSION = "1.0.0"

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class Pagination:
    """Paging limits shared by all list endpoints"""

    DEFAULT_PAGE_NUMBER = 1
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100


class StudentRules:
    """Request-level limits for student commands and queries"""

    MIN_AGE = 16
    MAX_AGE = 100
    MIN_NAME_LENGTH = 2
    MAX_NAME_LENGTH = 100
    MIN_EMAIL_LENGTH = 5
    MAX_EMAIL_LENGTH = 100
    MAX_SEARCH_TERM_LENGTH = 100
    PROBATION_GPA_THRESHOLD = 2.0
    SORT_FIELDS = ("FullName", "Email", "DateOfBirth", "GPA", "Status", "EnrollmentDate")
    DEFAULT_SORT = "FullName"


class CourseRules:
    """Request-level limits for course commands and queries"""

    CODE_PATTERN = r"^[A-Z]{2,4}\d{3,4}$"
    MAX_TITLE_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 2000
    MAX_DEPARTMENT_LENGTH = 100
    MAX_PREREQUISITES = 10
    CREDITS_PER_PREREQUISITE = 3
    MAX_PREREQUISITE_CREDIT_HOURS = 100
    MAX_COMPLETION_NOTES_LENGTH = 1000
    SEMESTERS = ("Fall", "Spring", "Summer", "Winter")
    SORT_FIELDS = ("Title", "Code", "Department", "CreditHours", "Level", "Status")
    DEFAULT_SORT = "Title"
    # Default term length when a course is scheduled from an academic period
    DEFAULT_START_OFFSET_MONTHS = 1
    DEFAULT_DURATION_MONTHS = 4


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
