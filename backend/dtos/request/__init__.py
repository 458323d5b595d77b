"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Benefits:
- Validation at API boundary
- Independent of database schema
- Clear API documentation
- Type safety
"""

from .course_request import (
    CompleteCourseRequest,
    CourseListRequest,
    CreateCourseRequest,
    ScheduleCourseRequest,
    UpdateCourseRequest,
)
from .student_request import (
    AddressRequest,
    ChangeStatusRequest,
    CreateStudentRequest,
    StudentListRequest,
    UpdateGpaRequest,
    UpdateStudentContactRequest,
    UpdateStudentRequest,
)
from .teacher_request import (
    ChangeEmploymentStatusRequest,
    CreateTeacherRequest,
    TeacherListRequest,
)

__all__ = [
    "AddressRequest",
    "ChangeEmploymentStatusRequest",
    "ChangeStatusRequest",
    "CompleteCourseRequest",
    "CourseListRequest",
    "CreateCourseRequest",
    "CreateStudentRequest",
    "CreateTeacherRequest",
    "ScheduleCourseRequest",
    "StudentListRequest",
    "TeacherListRequest",
    "UpdateCourseRequest",
    "UpdateGpaRequest",
    "UpdateStudentContactRequest",
    "UpdateStudentRequest",
]
