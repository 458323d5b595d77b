"""
Teacher Service

Handles hiring, employment status and course assignments of teaching staff.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from domain.entities import Course, Teacher
from domain.value_objects import AcademicTitle, Email, EmploymentStatus, FullName, PhoneNumber
from dtos.request import ChangeEmploymentStatusRequest, CreateTeacherRequest, TeacherListRequest
from dtos.response import PaginatedResponse, TeacherListItemResponse, TeacherResponse
from exceptions import ConflictError, NotFoundError
from repositories import UnitOfWork
from repositories.specifications import Specification, all_of
from repositories.teacher_specifications import (
    TeachersByDepartmentSpec,
    TeachersByStatusSpec,
    TeachersMatchingSearchSpec,
)
from services.event_dispatcher import event_dispatcher
from services.interfaces import ITeacherService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class TeacherService(ITeacherService):
    """Service for teaching staff business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.uow = UnitOfWork(db, event_dispatcher)

    def _require(self, teacher_id: str) -> Teacher:
        teacher = self.uow.teachers.get_by_id(teacher_id)
        if teacher is None:
            raise NotFoundError("Teacher", teacher_id)
        return teacher

    def _require_course(self, course_id: str) -> Course:
        course = self.uow.courses.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        return course

    @log_operation("create_teacher")
    def create_teacher(self, request: CreateTeacherRequest) -> str:
        """
        Hire a teacher.

        Raises:
            ConflictError: If the email or employee id is already in use
        """
        email = Email(request.email)
        if self.uow.teachers.exists_by_email(email):
            raise ConflictError("Teacher", "email", str(email))
        if self.uow.teachers.exists_by_employee_id(request.employee_id):
            raise ConflictError("Teacher", "employeeId", request.employee_id)

        phone = PhoneNumber(request.phone_number) if request.phone_number else None
        teacher = Teacher.create(
            full_name=FullName(request.full_name),
            email=email,
            employee_id=request.employee_id,
            department=request.department,
            title=AcademicTitle.from_string(request.title),
            date_of_birth=request.date_of_birth,
            hire_date=request.hire_date,
            phone_number=phone,
            address=request.address.to_value() if request.address else None,
        )
        self.uow.teachers.add(teacher)
        self.uow.save_changes()
        return teacher.id

    def get_teacher(self, teacher_id: str) -> TeacherResponse:
        return TeacherResponse.from_entity(self._require(teacher_id))

    def list_teachers(self, request: TeacherListRequest) -> PaginatedResponse[TeacherListItemResponse]:
        specs: List[Specification[Teacher]] = []
        if request.search_term and request.search_term.strip():
            specs.append(TeachersMatchingSearchSpec(request.search_term))
        if request.department:
            specs.append(TeachersByDepartmentSpec(request.department))
        if request.status:
            specs.append(TeachersByStatusSpec(EmploymentStatus.from_string(request.status)))

        page = self.uow.teachers.get_paginated(all_of(specs), request.page_number, request.page_size)
        return PaginatedResponse[TeacherListItemResponse].from_page(page, TeacherListItemResponse.from_entity)

    @log_operation("assign_teacher_to_course")
    def assign_course(self, teacher_id: str, course_id: str) -> str:
        teacher = self._require(teacher_id)
        course = self._require_course(course_id)
        teacher.assign_to_course(course.id, course.title)
        self.uow.teachers.update(teacher)
        self.uow.save_changes()
        return f"{teacher.full_name} assigned to {course.code}"

    @log_operation("remove_teacher_from_course")
    def remove_course(self, teacher_id: str, course_id: str) -> str:
        teacher = self._require(teacher_id)
        course = self._require_course(course_id)
        teacher.remove_from_course(course.id)
        self.uow.teachers.update(teacher)
        self.uow.save_changes()
        return f"{teacher.full_name} removed from {course.code}"

    @log_operation("change_teacher_status")
    def change_status(self, teacher_id: str, request: ChangeEmploymentStatusRequest) -> None:
        teacher = self._require(teacher_id)
        status = EmploymentStatus.from_string(request.new_status)
        if status == teacher.status:
            return

        if status == EmploymentStatus.ACTIVE:
            teacher.reactivate()
        else:
            teacher.deactivate(status)
        self.uow.teachers.update(teacher)
        self.uow.save_changes()
        logger.info(f"Teacher {teacher_id} is now {status.value}")
