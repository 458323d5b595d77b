"""
Domain event base type.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class DomainEvent:
    """
    Something notable that happened to an aggregate.

    Events are collected on the entity and dispatched after the unit of work
    commits.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()), init=False)
    occurred_on: datetime = field(default_factory=datetime.utcnow, init=False)

    @property
    def event_type(self) -> str:
        return type(self).__name__
