"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.

Benefits:
- Hide internal database structure
- Control exactly what data is exposed
- Add computed/derived fields without modifying models
- Version API responses independently
"""

from .common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
    MessageResponse,
    PaginatedResponse,
)
from .course_response import CourseListItemResponse, CourseResponse
from .student_response import AddressResponse, StudentListItemResponse, StudentResponse
from .teacher_response import TeacherListItemResponse, TeacherResponse

__all__ = [
    "AddressResponse",
    "CourseListItemResponse",
    "CourseResponse",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "PaginatedResponse",
    "StudentListItemResponse",
    "StudentResponse",
    "TeacherListItemResponse",
    "TeacherResponse",
]
