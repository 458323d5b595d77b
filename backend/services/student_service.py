"""
Student Service

Handles business logic for student registration, record updates, status
changes and list queries.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from constants import SortDirection, StudentRules
from domain.entities import Student
from domain.value_objects import GPA, Email, FullName, PhoneNumber, StudentStatus
from dtos.request import (
    ChangeStatusRequest,
    CreateStudentRequest,
    StudentListRequest,
    UpdateGpaRequest,
    UpdateStudentContactRequest,
    UpdateStudentRequest,
)
from dtos.response import PaginatedResponse, StudentListItemResponse, StudentResponse
from exceptions import ConflictError, NotFoundError
from repositories import UnitOfWork
from repositories.specifications import Specification, all_of
from repositories.student_specifications import (
    StudentsByStatusSpec,
    StudentsInAgeRangeSpec,
    StudentsInGpaRangeSpec,
    StudentsMatchingSearchSpec,
)
from services.event_dispatcher import event_dispatcher
from services.interfaces import IStudentService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def _phone_or_none(raw: str | None) -> PhoneNumber | None:
    if raw is None or not raw.strip():
        return None
    return PhoneNumber(raw)


class StudentService(IStudentService):
    """Service for student-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize StudentService.

        Args:
            db: Database session
        """
        self.db = db
        self.uow = UnitOfWork(db, event_dispatcher)

    def _require(self, student_id: str) -> Student:
        student = self.uow.students.get_by_id(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)
        return student

    def _ensure_email_free(self, email: Email, exclude_id: str | None = None) -> None:
        if self.uow.students.exists_by_email(email, exclude_id=exclude_id):
            raise ConflictError("Student", "email", str(email))

    # --- Commands ----------------------------------------------------------

    @log_operation("create_student")
    def create_student(self, request: CreateStudentRequest) -> str:
        email = Email(request.email)
        self._ensure_email_free(email)

        student = Student.create(
            full_name=FullName(request.full_name),
            date_of_birth=request.date_of_birth,
            email=email,
            phone_number=_phone_or_none(request.phone_number),
            address=request.address.to_value() if request.address else None,
        )
        self.uow.students.add(student)
        self.uow.save_changes()
        logger.info(f"Registered student {student.id} ({email})")
        return student.id

    @log_operation("update_student")
    def update_student(self, student_id: str, request: UpdateStudentRequest) -> None:
        student = self._require(student_id)

        if request.full_name is not None:
            student.update_full_name(FullName(request.full_name))
        if request.date_of_birth is not None:
            student.correct_date_of_birth(request.date_of_birth)
        if request.email is not None:
            email = Email(request.email)
            self._ensure_email_free(email, exclude_id=student.id)
            student.update_contact_information(email)
        if request.phone_number is not None:
            student.update_phone_number(_phone_or_none(request.phone_number))
        if request.address is not None:
            student.update_address(request.address.to_value())
        if request.gpa is not None:
            student.update_gpa(GPA(request.gpa))

        self.uow.students.update(student)
        self.uow.save_changes()

    @log_operation("update_student_contact")
    def update_contact(self, student_id: str, request: UpdateStudentContactRequest) -> None:
        student = self._require(student_id)
        email = Email(request.email)
        self._ensure_email_free(email, exclude_id=student.id)

        student.update_contact_information(email)
        student.update_phone_number(_phone_or_none(request.phone_number))
        self.uow.students.update(student)
        self.uow.save_changes()

    @log_operation("update_student_gpa")
    def update_gpa(self, student_id: str, request: UpdateGpaRequest) -> None:
        student = self._require(student_id)
        student.update_gpa(GPA(request.gpa_value))
        self.uow.students.update(student)
        self.uow.save_changes()

    @log_operation("change_student_status")
    def change_status(self, student_id: str, request: ChangeStatusRequest) -> None:
        """
        Apply a status change.

        Active, Inactive and Graduated go through the lifecycle methods so
        their rules apply; other statuses are set directly. Asking for the
        current status is a no-op.
        """
        student = self._require(student_id)
        status = StudentStatus.from_string(request.new_status)
        if status == student.status:
            return

        if status == StudentStatus.ACTIVE:
            student.reactivate()
        elif status == StudentStatus.INACTIVE:
            student.deactivate()
        elif status == StudentStatus.GRADUATED:
            student.graduate()
        else:
            student.change_status(status)

        self.uow.students.update(student)
        self.uow.save_changes()

    @log_operation("delete_student")
    def delete_student(self, student_id: str) -> None:
        student = self._require(student_id)
        self.uow.students.delete(student)
        self.uow.save_changes()
        logger.info(f"Soft-deleted student {student_id}")

    # --- Queries -----------------------------------------------------------

    def get_student(self, student_id: str) -> StudentResponse:
        return StudentResponse.from_entity(self._require(student_id))

    def list_students(self, request: StudentListRequest) -> PaginatedResponse[StudentListItemResponse]:
        specs: List[Specification[Student]] = []
        if request.search_term and request.search_term.strip():
            specs.append(StudentsMatchingSearchSpec(request.search_term.strip()))
        if request.status:
            specs.append(StudentsByStatusSpec(StudentStatus.from_string(request.status)))
        if request.min_gpa is not None or request.max_gpa is not None:
            specs.append(StudentsInGpaRangeSpec(request.min_gpa, request.max_gpa))
        if request.min_age is not None or request.max_age is not None:
            specs.append(StudentsInAgeRangeSpec(request.min_age, request.max_age))

        page = self.uow.students.get_paginated(
            all_of(specs),
            request.page_number,
            request.page_size,
            sort_by=request.sort_by,
            sort_direction=SortDirection.from_string(request.sort_direction),
        )
        return PaginatedResponse[StudentListItemResponse].from_page(page, StudentListItemResponse.from_entity)

    def list_by_status(
        self, status: str, page_number: int, page_size: int
    ) -> PaginatedResponse[StudentListItemResponse]:
        spec = StudentsByStatusSpec(StudentStatus.from_string(status))
        page = self.uow.students.get_paginated(spec, page_number, page_size)
        return PaginatedResponse[StudentListItemResponse].from_page(page, StudentListItemResponse.from_entity)

    def list_on_probation(
        self, page_number: int, page_size: int
    ) -> PaginatedResponse[StudentListItemResponse]:
        page = self.uow.students.get_on_probation(
            StudentRules.PROBATION_GPA_THRESHOLD, page_number, page_size
        )
        return PaginatedResponse[StudentListItemResponse].from_page(page, StudentListItemResponse.from_entity)
