"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import ICourseService, IStudentService, ITeacherService
from services.course_service import CourseService
from services.student_service import StudentService
from services.teacher_service import TeacherService


def get_student_service(db: Session = Depends(get_db)) -> IStudentService:
    """
    Factory function for creating StudentService instances.

    Args:
        db: Database session (injected)

    Returns:
        IStudentService: Student service implementation
    """
    return StudentService(db)


def get_course_service(db: Session = Depends(get_db)) -> ICourseService:
    """
    Factory function for creating CourseService instances.

    Args:
        db: Database session (injected)

    Returns:
        ICourseService: Course service implementation
    """
    return CourseService(db)


def get_teacher_service(db: Session = Depends(get_db)) -> ITeacherService:
    return TeacherService(db)
