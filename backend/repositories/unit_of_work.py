"""
Unit of Work

Groups the repositories used by one request around a single SQLAlchemy
session. Nothing is committed until save_changes(); domain events raised by
the touched aggregates are dispatched only after a successful commit.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.events import DomainEvent
from exceptions import DatabaseError
from .base_repository import translate_integrity_error
from .course_repository import CourseRepository
from .student_repository import StudentRepository
from .teacher_repository import TeacherRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Transactional boundary over the student, course and teacher repositories."""

    def __init__(self, db: Session, dispatcher=None):
        """
        Args:
            db: Session owned by the current request
            dispatcher: Receives domain events after commit (None to skip dispatch)
        """
        self.db = db
        self.dispatcher = dispatcher
        self.students = StudentRepository(db)
        self.courses = CourseRepository(db)
        self.teachers = TeacherRepository(db)

    @property
    def _repositories(self):
        return (self.students, self.courses, self.teachers)

    def _collect_events(self) -> List[DomainEvent]:
        events: List[DomainEvent] = []
        for repository in self._repositories:
            for entity in repository.tracked_entities():
                events.extend(entity.domain_events)
                entity.clear_domain_events()
        events.sort(key=lambda event: event.occurred_on)
        return events

    def save_changes(self) -> int:
        """
        Commit the transaction and publish pending domain events.

        Returns:
            Number of aggregates written

        Raises:
            ConflictError: If a unique column is already taken
            DatabaseError: If the commit fails for any other reason

        The transaction is rolled back on failure.
        """
        written = sum(len(repository.tracked_entities()) for repository in self._repositories)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.rollback()
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            self.rollback()
            raise DatabaseError("commit", str(e))

        events = self._collect_events()
        for repository in self._repositories:
            repository.clear_tracked()

        if events and self.dispatcher is not None:
            self.dispatcher.dispatch(events)
        logger.debug(f"Committed {written} aggregate(s), {len(events)} event(s)")
        return written

    def rollback(self) -> None:
        self.db.rollback()
        for repository in self._repositories:
            repository.clear_tracked()
