"""
Domain Event Dispatching

Routes domain events raised by aggregates to registered handlers once the
unit of work has committed. Handlers only observe; they never change
aggregates, so a failing handler is logged and skipped rather than failing
the request that raised the event.
"""
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Type
import logging

from domain.events import (
    DomainEvent,
    StudentAcademicStandingChangedEvent,
    StudentContactUpdatedEvent,
    StudentCreatedEvent,
    StudentGPAUpdatedEvent,
    StudentGraduatedEvent,
    StudentStatusChangedEvent,
    CourseCompletedEvent,
    TeacherDeactivatedEvent,
)

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventDispatcher:
    """
    In-process publish/subscribe registry for domain events.

    Handlers registered for DomainEvent itself receive every event.
    """

    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)

    def register(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        handlers = []
        for event_type in type(event).__mro__:
            handlers.extend(self._handlers.get(event_type, []))
        return handlers

    def dispatch(self, events: Iterable[DomainEvent]) -> int:
        """
        Deliver events to their handlers in the order they were raised.

        Args:
            events: Events collected from committed aggregates

        Returns:
            Number of handler invocations that succeeded
        """
        delivered = 0
        for event in events:
            for handler in self.handlers_for(event):
                try:
                    handler(event)
                    delivered += 1
                except Exception as e:
                    logger.error(
                        f"Handler {getattr(handler, '__name__', handler)} failed for "
                        f"{event.event_type} ({event.event_id}): {e}",
                        exc_info=True,
                    )
        return delivered


# --- Default handlers ----------------------------------------------------------

def log_event(event: DomainEvent) -> None:
    logger.debug(f"Domain event {event.event_type} {event.event_id} at {event.occurred_on.isoformat()}")


def on_student_created(event: StudentCreatedEvent) -> None:
    logger.info(f"Student created: {event.full_name} <{event.email}> ({event.student_id})")


def on_student_contact_updated(event: StudentContactUpdatedEvent) -> None:
    logger.info(
        f"Student {event.student_id} email changed from {event.previous_email} to {event.new_email}"
    )


def on_student_gpa_updated(event: StudentGPAUpdatedEvent) -> None:
    logger.info(f"Student {event.student_id} GPA changed: {event.previous_gpa} -> {event.new_gpa}")


def on_academic_standing_changed(event: StudentAcademicStandingChangedEvent) -> None:
    logger.info(
        f"Student {event.student_id} academic standing: "
        f"{event.previous_standing} -> {event.new_standing}"
    )


def on_student_status_changed(event: StudentStatusChangedEvent) -> None:
    logger.info(f"Student {event.student_id} status: {event.previous_status} -> {event.new_status}")


def on_student_graduated(event: StudentGraduatedEvent) -> None:
    logger.info(f"Student {event.student_id} graduated with GPA {event.final_gpa}")


def on_course_completed(event: CourseCompletedEvent) -> None:
    logger.info(f"Course {event.course_id} completed with {event.final_enrollment} student(s)")


def on_teacher_deactivated(event: TeacherDeactivatedEvent) -> None:
    logger.info(f"Teacher {event.teacher_id} deactivated ({event.status})")


def create_default_dispatcher() -> EventDispatcher:
    dispatcher = EventDispatcher()
    dispatcher.register(DomainEvent, log_event)
    dispatcher.register(StudentCreatedEvent, on_student_created)
    dispatcher.register(StudentContactUpdatedEvent, on_student_contact_updated)
    dispatcher.register(StudentGPAUpdatedEvent, on_student_gpa_updated)
    dispatcher.register(StudentAcademicStandingChangedEvent, on_academic_standing_changed)
    dispatcher.register(StudentStatusChangedEvent, on_student_status_changed)
    dispatcher.register(StudentGraduatedEvent, on_student_graduated)
    dispatcher.register(CourseCompletedEvent, on_course_completed)
    dispatcher.register(TeacherDeactivatedEvent, on_teacher_deactivated)
    return dispatcher


event_dispatcher = create_default_dispatcher()
