"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.request import (
    ChangeEmploymentStatusRequest,
    ChangeStatusRequest,
    CompleteCourseRequest,
    CourseListRequest,
    CreateCourseRequest,
    CreateStudentRequest,
    CreateTeacherRequest,
    ScheduleCourseRequest,
    StudentListRequest,
    TeacherListRequest,
    UpdateCourseRequest,
    UpdateGpaRequest,
    UpdateStudentContactRequest,
    UpdateStudentRequest,
)
from dtos.response import (
    CourseListItemResponse,
    CourseResponse,
    PaginatedResponse,
    StudentListItemResponse,
    StudentResponse,
    TeacherListItemResponse,
    TeacherResponse,
)


class IStudentService(ABC):
    """
    Interface for student registration and record maintenance.

    Every write commits through a unit of work and publishes the domain
    events raised by the student.
    """

    @abstractmethod
    def create_student(self, request: CreateStudentRequest) -> str:
        """
        Register a new student.

        Args:
            request: Validated registration data

        Returns:
            ID of the new student

        Raises:
            ConflictError: If the email is already registered
            ValueError: If a value object rejects the input
        """
        pass

    @abstractmethod
    def get_student(self, student_id: str) -> StudentResponse:
        """
        Raises:
            NotFoundError: If no live student has this id
        """
        pass

    @abstractmethod
    def list_students(self, request: StudentListRequest) -> PaginatedResponse[StudentListItemResponse]:
        pass

    @abstractmethod
    def list_by_status(
        self, status: str, page_number: int, page_size: int
    ) -> PaginatedResponse[StudentListItemResponse]:
        pass

    @abstractmethod
    def list_on_probation(
        self, page_number: int, page_size: int
    ) -> PaginatedResponse[StudentListItemResponse]:
        pass

    @abstractmethod
    def update_student(self, student_id: str, request: UpdateStudentRequest) -> None:
        pass

    @abstractmethod
    def update_contact(self, student_id: str, request: UpdateStudentContactRequest) -> None:
        pass

    @abstractmethod
    def update_gpa(self, student_id: str, request: UpdateGpaRequest) -> None:
        pass

    @abstractmethod
    def change_status(self, student_id: str, request: ChangeStatusRequest) -> None:
        """
        Move a student to another status.

        Raises:
            InvalidOperationError: If the transition is not allowed
        """
        pass

    @abstractmethod
    def delete_student(self, student_id: str) -> None:
        pass


class ICourseService(ABC):
    """Interface for the course catalog and course lifecycle."""

    @abstractmethod
    def create_course(self, request: CreateCourseRequest) -> str:
        """
        Add a course to the catalog.

        Raises:
            ConflictError: If the course code is taken
        """
        pass

    @abstractmethod
    def update_course(self, course_id: str, request: UpdateCourseRequest) -> None:
        pass

    @abstractmethod
    def schedule_course(self, course_id: str, request: ScheduleCourseRequest) -> str:
        pass

    @abstractmethod
    def activate_course(self, course_id: str) -> str:
        pass

    @abstractmethod
    def complete_course(self, course_id: str, request: CompleteCourseRequest) -> str:
        pass

    @abstractmethod
    def get_course(self, course_id: str) -> CourseResponse:
        pass

    @abstractmethod
    def list_courses(self, request: CourseListRequest) -> PaginatedResponse[CourseListItemResponse]:
        pass

    @abstractmethod
    def list_by_department(
        self, department: str, level: str | None = None, status: str | None = None
    ) -> List[CourseListItemResponse]:
        pass


class ITeacherService(ABC):
    """Interface for teaching staff and their course assignments."""

    @abstractmethod
    def create_teacher(self, request: CreateTeacherRequest) -> str:
        pass

    @abstractmethod
    def get_teacher(self, teacher_id: str) -> TeacherResponse:
        pass

    @abstractmethod
    def list_teachers(self, request: TeacherListRequest) -> PaginatedResponse[TeacherListItemResponse]:
        pass

    @abstractmethod
    def assign_course(self, teacher_id: str, course_id: str) -> str:
        pass

    @abstractmethod
    def remove_course(self, teacher_id: str, course_id: str) -> str:
        pass

    @abstractmethod
    def change_status(self, teacher_id: str, request: ChangeEmploymentStatusRequest) -> None:
        pass
