"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and map between SQLAlchemy rows and domain entities.
"""

from .base_repository import BaseRepository, Page
from .course_repository import CourseRepository
from .student_repository import StudentRepository
from .teacher_repository import TeacherRepository
from .unit_of_work import UnitOfWork

__all__ = [
    "BaseRepository",
    "Page",
    "CourseRepository",
    "StudentRepository",
    "TeacherRepository",
    "UnitOfWork",
]
