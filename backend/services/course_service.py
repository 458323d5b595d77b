"""
Course Service

Handles the course catalog: creation, catalog edits, the
Draft -> Scheduled -> Active -> Completed lifecycle and catalog queries.
"""

import calendar
import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from constants import CourseRules, SortDirection
from domain.entities import Course
from domain.value_objects import CourseLevel, CourseStatus
from dtos.request import (
    CompleteCourseRequest,
    CourseListRequest,
    CreateCourseRequest,
    ScheduleCourseRequest,
    UpdateCourseRequest,
)
from dtos.response import CourseListItemResponse, CourseResponse, PaginatedResponse
from exceptions import ConflictError, NotFoundError
from repositories import UnitOfWork
from repositories.course_specifications import (
    CoursesByDepartmentSpec,
    CoursesByLevelSpec,
    CoursesByStatusSpec,
    CoursesMatchingSearchSpec,
)
from repositories.specifications import Specification, all_of
from services.event_dispatcher import event_dispatcher
from services.interfaces import ICourseService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class CourseService(ICourseService):
    """Service for course catalog business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.uow = UnitOfWork(db, event_dispatcher)

    def _require(self, course_id: str) -> Course:
        course = self.uow.courses.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        return course

    # --- Commands ----------------------------------------------------------

    @log_operation("create_course")
    def create_course(self, request: CreateCourseRequest) -> str:
        """
        Add a draft course to the catalog.

        Each listed prerequisite adds a fixed number of prerequisite credit
        hours. When an academic period such as "Fall 2025" is given, the
        course is scheduled straight away with a default term window.

        Returns:
            ID of the new course

        Raises:
            ConflictError: If the course code is already used
        """
        if self.uow.courses.exists_by_code(request.course_code):
            raise ConflictError("Course", "code", request.course_code)

        course = Course.create(
            title=request.title,
            code=request.course_code,
            description=request.description,
            credit_hours=request.credits,
            level=CourseLevel.from_string(request.level),
            department=request.department,
            max_enrollment=request.max_capacity,
        )
        if request.prerequisites:
            course.set_prerequisite_requirement(
                len(request.prerequisites) * CourseRules.CREDITS_PER_PREREQUISITE
            )

        if request.academic_period:
            semester, year = request.academic_period.split()
            start = add_months(date.today(), CourseRules.DEFAULT_START_OFFSET_MONTHS)
            end = add_months(start, CourseRules.DEFAULT_DURATION_MONTHS)
            course.schedule(semester, int(year), start, end)

        self.uow.courses.add(course)
        self.uow.save_changes()
        logger.info(f"Created course {course.code} ({course.id})")
        return course.id

    @log_operation("update_course")
    def update_course(self, course_id: str, request: UpdateCourseRequest) -> None:
        course = self._require(course_id)
        if self.uow.courses.exists_by_code(request.course_code, exclude_id=course.id):
            raise ConflictError("Course", "code", request.course_code)

        course.update_catalog_details(
            code=request.course_code,
            credit_hours=request.credits,
            department=request.department,
            level=CourseLevel.from_string(request.level),
        )
        course.update_course_info(request.title, request.description, request.max_capacity)
        course.set_prerequisite_requirement(request.prerequisite_credit_hours)

        self.uow.courses.update(course)
        self.uow.save_changes()

    @log_operation("schedule_course")
    def schedule_course(self, course_id: str, request: ScheduleCourseRequest) -> str:
        course = self._require(course_id)
        course.schedule(request.semester, request.academic_year, request.start_date, request.end_date)
        self.uow.courses.update(course)
        self.uow.save_changes()
        return f"Course {course.code} scheduled for {course.academic_period}"

    @log_operation("activate_course")
    def activate_course(self, course_id: str) -> str:
        course = self._require(course_id)
        course.activate()
        self.uow.courses.update(course)
        self.uow.save_changes()
        return f"Course {course.code} activated"

    @log_operation("complete_course")
    def complete_course(self, course_id: str, request: CompleteCourseRequest) -> str:
        course = self._require(course_id)
        course.complete()
        self.uow.courses.update(course)
        self.uow.save_changes()
        if request.completion_notes:
            logger.info(f"Completion notes for {course.code}: {request.completion_notes}")
        return f"Course {course.code} completed"

    # --- Queries -----------------------------------------------------------

    def get_course(self, course_id: str) -> CourseResponse:
        return CourseResponse.from_entity(self._require(course_id))

    def list_courses(self, request: CourseListRequest) -> PaginatedResponse[CourseListItemResponse]:
        specs: List[Specification[Course]] = []
        if request.search_term and request.search_term.strip():
            specs.append(CoursesMatchingSearchSpec(request.search_term.strip()))
        if request.department:
            specs.append(CoursesByDepartmentSpec(request.department))
        if request.level:
            specs.append(CoursesByLevelSpec(CourseLevel.from_string(request.level)))
        if request.status:
            specs.append(CoursesByStatusSpec(CourseStatus.from_string(request.status)))

        page = self.uow.courses.get_paginated(
            all_of(specs),
            request.page_number,
            request.page_size,
            sort_by=request.sort_by,
            sort_direction=SortDirection.from_string(request.sort_direction),
        )
        return PaginatedResponse[CourseListItemResponse].from_page(page, CourseListItemResponse.from_entity)

    def list_by_department(
        self, department: str, level: str | None = None, status: str | None = None
    ) -> List[CourseListItemResponse]:
        specs: List[Specification[Course]] = []
        if level:
            specs.append(CoursesByLevelSpec(CourseLevel.from_string(level)))
        if status:
            specs.append(CoursesByStatusSpec(CourseStatus.from_string(status)))
        extra = all_of(specs) if specs else None
        courses = self.uow.courses.get_by_department(department, extra)
        return [CourseListItemResponse.from_entity(course) for course in courses]
