"""
Course repository for data access operations.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from constants import SortDirection
from domain.entities import Course
from domain.value_objects import CourseLevel, CourseStatus
from models import Course as CourseModel
from .base_repository import BaseRepository, Page
from .course_specifications import CoursesByDepartmentSpec
from .specifications import Specification

SORT_COLUMNS = {
    "title": CourseModel.title,
    "code": CourseModel.code,
    "department": CourseModel.department,
    "credithours": CourseModel.credit_hours,
    "level": CourseModel.level,
    "status": CourseModel.status,
}


class CourseRepository(BaseRepository[Course, CourseModel]):
    """Repository for Course aggregates."""

    def __init__(self, db: Session):
        super().__init__(db, CourseModel)

    def _to_entity(self, row: CourseModel) -> Course:
        return Course(
            id=row.id,
            title=row.title,
            code=row.code,
            description=row.description,
            credit_hours=row.credit_hours,
            level=CourseLevel(row.level),
            department=row.department,
            max_enrollment=row.max_enrollment,
            current_enrollment=row.current_enrollment,
            prerequisite_credit_hours=row.prerequisite_credit_hours,
            status=CourseStatus(row.status),
            semester=row.semester,
            academic_year=row.academic_year,
            start_date=row.start_date,
            end_date=row.end_date,
        )

    def _apply_to_row(self, course: Course, row: CourseModel) -> None:
        row.title = course.title
        row.code = course.code
        row.description = course.description
        row.credit_hours = course.credit_hours
        row.level = course.level.value
        row.department = course.department
        row.max_enrollment = course.max_enrollment
        row.current_enrollment = course.current_enrollment
        row.prerequisite_credit_hours = course.prerequisite_credit_hours
        row.status = course.status.value
        row.semester = course.semester
        row.academic_year = course.academic_year
        row.start_date = course.start_date
        row.end_date = course.end_date

    def get_by_code(self, code: str) -> Optional[Course]:
        row = self._live().filter(CourseModel.code == code.strip().upper()).first()
        return self._load(row) if row else None

    def exists_by_code(self, code: str, exclude_id: Optional[str] = None) -> bool:
        """Check whether a course code is taken (soft-deleted courses included)."""
        query = self.db.query(CourseModel).filter(CourseModel.code == code.strip().upper())
        if exclude_id:
            query = query.filter(CourseModel.id != exclude_id)
        return query.count() > 0

    def get_by_department(self, department: str, extra: Optional[Specification[Course]] = None) -> List[Course]:
        """
        Courses in a department sorted by title.

        Args:
            department: Department name (case-insensitive)
            extra: Optional additional filter (level, status)

        Returns:
            Matching courses
        """
        spec = CoursesByDepartmentSpec(department)
        if extra is not None:
            spec = spec & extra
        return self.find(spec, order_by=CourseModel.title.asc())

    def get_paginated(
        self,
        spec: Specification[Course],
        page_number: int,
        page_size: int,
        sort_by: str = "Title",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> Page[Course]:
        column = SORT_COLUMNS.get(sort_by.lower(), CourseModel.title)
        ordered = column.desc() if sort_direction == SortDirection.DESC else column.asc()
        return self.paginate(spec, page_number, page_size, order_by=(ordered, CourseModel.id))
