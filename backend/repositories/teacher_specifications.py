"""
Teacher-specific Specifications
"""

from sqlalchemy import func, or_

from domain.entities import Teacher
from domain.value_objects import EmploymentStatus
from models import Teacher as TeacherModel
from .specifications import LIKE_ESCAPE, Specification, contains_pattern


class TeachersByDepartmentSpec(Specification[Teacher]):
    def __init__(self, department: str):
        self.department = department.strip()

    def is_satisfied_by(self, teacher: Teacher) -> bool:
        return teacher.department.lower() == self.department.lower()

    def to_sql_filter(self):
        return func.lower(TeacherModel.department) == self.department.lower()


class TeachersByStatusSpec(Specification[Teacher]):
    def __init__(self, status: EmploymentStatus):
        self.status = status

    def is_satisfied_by(self, teacher: Teacher) -> bool:
        return teacher.status == self.status

    def to_sql_filter(self):
        return TeacherModel.status == self.status.value


class TeachersMatchingSearchSpec(Specification[Teacher]):
    """Name, email or employee id contains the term."""

    def __init__(self, term: str):
        self.term = term.strip()

    def is_satisfied_by(self, teacher: Teacher) -> bool:
        needle = self.term.lower()
        return (
            needle in str(teacher.full_name).lower()
            or needle in str(teacher.email).lower()
            or needle in teacher.employee_id.lower()
        )

    def to_sql_filter(self):
        pattern = contains_pattern(self.term)
        return or_(
            TeacherModel.full_name.ilike(pattern, escape=LIKE_ESCAPE),
            TeacherModel.email.ilike(pattern, escape=LIKE_ESCAPE),
            TeacherModel.employee_id.ilike(pattern, escape=LIKE_ESCAPE),
        )
