"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

Examples:
- Student: Enrolled student with contact details and GPA
- Course: Course offering with schedule and enrollment counts
- Teacher: Teaching staff member with course load
"""

from .base_entity import BaseEntity
from .course import Course
from .student import Student
from .teacher import Teacher

__all__ = ["BaseEntity", "Course", "Student", "Teacher"]
