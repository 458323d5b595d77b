"""
Domain Events

Immutable records of state changes raised by aggregates. They are buffered on
the entity and handed to the event dispatcher once the unit of work commits.
"""

from .base import DomainEvent
from .course_events import (
    CourseActivatedEvent,
    CourseCancelledEvent,
    CourseCompletedEvent,
    CourseCreatedEvent,
    CourseScheduledEvent,
    CourseUpdatedEvent,
    StudentEnrolledInCourseEvent,
    StudentWithdrewFromCourseEvent,
)
from .student_events import (
    StudentAcademicStandingChangedEvent,
    StudentAddressUpdatedEvent,
    StudentContactUpdatedEvent,
    StudentCreatedEvent,
    StudentDeactivatedEvent,
    StudentGPAUpdatedEvent,
    StudentGraduatedEvent,
    StudentPhoneNumberUpdatedEvent,
    StudentReactivatedEvent,
    StudentStatusChangedEvent,
)
from .teacher_events import (
    TeacherAssignedToCourseEvent,
    TeacherContactUpdatedEvent,
    TeacherCreatedEvent,
    TeacherDeactivatedEvent,
    TeacherReactivatedEvent,
    TeacherRemovedFromCourseEvent,
)

__all__ = [
    "DomainEvent",
    "CourseActivatedEvent",
    "CourseCancelledEvent",
    "CourseCompletedEvent",
    "CourseCreatedEvent",
    "CourseScheduledEvent",
    "CourseUpdatedEvent",
    "StudentEnrolledInCourseEvent",
    "StudentWithdrewFromCourseEvent",
    "StudentAcademicStandingChangedEvent",
    "StudentAddressUpdatedEvent",
    "StudentContactUpdatedEvent",
    "StudentCreatedEvent",
    "StudentDeactivatedEvent",
    "StudentGPAUpdatedEvent",
    "StudentGraduatedEvent",
    "StudentPhoneNumberUpdatedEvent",
    "StudentReactivatedEvent",
    "StudentStatusChangedEvent",
    "TeacherAssignedToCourseEvent",
    "TeacherContactUpdatedEvent",
    "TeacherCreatedEvent",
    "TeacherDeactivatedEvent",
    "TeacherReactivatedEvent",
    "TeacherRemovedFromCourseEvent",
]
