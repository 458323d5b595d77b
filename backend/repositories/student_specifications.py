"""
Student-specific Specifications

Concrete specifications for querying students.
"""

from datetime import date, timedelta
from typing import Optional

from sqlalchemy import and_, or_, true

from domain.entities import Student
from domain.entities.student import years_before
from domain.value_objects import StudentStatus
from models import Student as StudentModel
from .specifications import LIKE_ESCAPE, Specification, contains_pattern


class StudentsByStatusSpec(Specification[Student]):
    """Students in a specific enrollment status."""

    def __init__(self, status: StudentStatus):
        self.status = status

    def is_satisfied_by(self, student: Student) -> bool:
        return student.status == self.status

    def to_sql_filter(self):
        return StudentModel.status == self.status.value


class StudentsMatchingSearchSpec(Specification[Student]):
    """Students whose name or email contains a search term (case-insensitive)."""

    def __init__(self, term: str):
        self.term = term.strip()

    def is_satisfied_by(self, student: Student) -> bool:
        needle = self.term.lower()
        return needle in str(student.full_name).lower() or needle in str(student.email).lower()

    def to_sql_filter(self):
        pattern = contains_pattern(self.term)
        return or_(
            StudentModel.full_name.ilike(pattern, escape=LIKE_ESCAPE),
            StudentModel.email.ilike(pattern, escape=LIKE_ESCAPE),
        )


class StudentsInGpaRangeSpec(Specification[Student]):
    """
    Students whose GPA lies within an inclusive range.

    Students without a recorded GPA never match.
    """

    def __init__(self, min_gpa: Optional[float] = None, max_gpa: Optional[float] = None):
        self.min_gpa = min_gpa
        self.max_gpa = max_gpa

    def is_satisfied_by(self, student: Student) -> bool:
        if student.gpa is None:
            return False
        if self.min_gpa is not None and student.gpa.value < self.min_gpa:
            return False
        if self.max_gpa is not None and student.gpa.value > self.max_gpa:
            return False
        return True

    def to_sql_filter(self):
        clauses = [StudentModel.gpa.isnot(None)]
        if self.min_gpa is not None:
            clauses.append(StudentModel.gpa >= self.min_gpa)
        if self.max_gpa is not None:
            clauses.append(StudentModel.gpa <= self.max_gpa)
        return and_(*clauses)


class StudentsInAgeRangeSpec(Specification[Student]):
    """
    Students whose age in whole years lies within an inclusive range.

    Ages are translated into date-of-birth bounds relative to `today`.
    """

    def __init__(self, min_age: Optional[int] = None, max_age: Optional[int] = None, today: Optional[date] = None):
        self.min_age = min_age
        self.max_age = max_age
        self.today = today or date.today()

    def is_satisfied_by(self, student: Student) -> bool:
        if self.min_age is not None and student.date_of_birth > self._latest_birth_date():
            return False
        if self.max_age is not None and student.date_of_birth < self._earliest_birth_date():
            return False
        return True

    def _latest_birth_date(self) -> date:
        return years_before(self.today, self.min_age)

    def _earliest_birth_date(self) -> date:
        # Born the day after this date one year further back is still max_age
        return years_before(self.today, self.max_age + 1) + timedelta(days=1)

    def to_sql_filter(self):
        clauses = []
        if self.min_age is not None:
            clauses.append(StudentModel.date_of_birth <= self._latest_birth_date())
        if self.max_age is not None:
            clauses.append(StudentModel.date_of_birth >= self._earliest_birth_date())
        return and_(*clauses) if clauses else true()


class StudentsOnProbationSpec(Specification[Student]):
    """Students with a recorded GPA below the probation threshold."""

    def __init__(self, threshold: float = 2.0):
        self.threshold = threshold

    def is_satisfied_by(self, student: Student) -> bool:
        return student.gpa is not None and student.gpa.value < self.threshold

    def to_sql_filter(self):
        return and_(StudentModel.gpa.isnot(None), StudentModel.gpa < self.threshold)
