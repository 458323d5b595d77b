"""
Base entity with identity, audit fields, soft delete and domain event buffer.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from domain.events import DomainEvent


def generate_id() -> str:
    return str(uuid.uuid4())


class BaseEntity:
    """
    Base class for aggregate roots.

    Two entities are equal when they are of the same type and share an id,
    regardless of their other attributes.
    """

    def __init__(self, id: Optional[str] = None):
        now = datetime.utcnow()
        self.id = id or generate_id()
        self.created_at: datetime = now
        self.updated_at: datetime = now
        self.created_by: Optional[str] = None
        self.updated_by: Optional[str] = None
        self.deleted_at: Optional[datetime] = None
        self.deleted_by: Optional[str] = None
        self._domain_events: List[DomainEvent] = []

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Pending events, oldest first (a copy)."""
        return list(self._domain_events)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def remove_domain_event(self, event: DomainEvent) -> None:
        if event in self._domain_events:
            self._domain_events.remove(event)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def mark_as_updated(self, updated_by: Optional[str] = None) -> None:
        self.updated_at = datetime.utcnow()
        if updated_by:
            self.updated_by = updated_by

    def mark_as_deleted(self, deleted_by: Optional[str] = None) -> None:
        """Soft delete; the row stays in storage but is hidden from queries."""
        self.deleted_at = datetime.utcnow()
        self.deleted_by = deleted_by
        self.mark_as_updated(deleted_by)

    def restore(self) -> None:
        self.deleted_at = None
        self.deleted_by = None
        self.mark_as_updated()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, BaseEntity) or type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
