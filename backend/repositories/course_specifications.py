"""
Course-specific Specifications

Concrete specifications for querying courses.
"""

from sqlalchemy import func, or_

from domain.entities import Course
from domain.value_objects import CourseLevel, CourseStatus
from models import Course as CourseModel
from .specifications import LIKE_ESCAPE, Specification, contains_pattern


class CoursesByDepartmentSpec(Specification[Course]):
    """Courses offered by a department (exact name, case-insensitive)."""

    def __init__(self, department: str):
        self.department = department.strip()

    def is_satisfied_by(self, course: Course) -> bool:
        return course.department.lower() == self.department.lower()

    def to_sql_filter(self):
        return func.lower(CourseModel.department) == self.department.lower()


class CoursesByLevelSpec(Specification[Course]):
    """Courses at a specific academic level."""

    def __init__(self, level: CourseLevel):
        self.level = level

    def is_satisfied_by(self, course: Course) -> bool:
        return course.level == self.level

    def to_sql_filter(self):
        return CourseModel.level == self.level.value


class CoursesByStatusSpec(Specification[Course]):
    """Courses in a specific lifecycle status."""

    def __init__(self, status: CourseStatus):
        self.status = status

    def is_satisfied_by(self, course: Course) -> bool:
        return course.status == self.status

    def to_sql_filter(self):
        return CourseModel.status == self.status.value


class CoursesMatchingSearchSpec(Specification[Course]):
    """Courses whose title or code contains a search term (case-insensitive)."""

    def __init__(self, term: str):
        self.term = term.strip()

    def is_satisfied_by(self, course: Course) -> bool:
        needle = self.term.lower()
        return needle in course.title.lower() or needle in course.code.lower()

    def to_sql_filter(self):
        pattern = contains_pattern(self.term)
        return or_(
            CourseModel.title.ilike(pattern, escape=LIKE_ESCAPE),
            CourseModel.code.ilike(pattern, escape=LIKE_ESCAPE),
        )
