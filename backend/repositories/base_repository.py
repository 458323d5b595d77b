"""
Base repository providing common CRUD operations.

Repositories speak domain entities on the outside and SQLAlchemy rows on the
inside. Subclasses supply the two mapping hooks; everything else (soft
delete filtering, specification queries, paging) lives here.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from domain.entities import BaseEntity
from exceptions import ApplicationError, ConflictError, DatabaseError
from .specifications import Specification

E = TypeVar('E', bound=BaseEntity)
M = TypeVar('M')

RESOURCE_NAMES = {"students": "Student", "courses": "Course", "teachers": "Teacher"}

# SQLite: "UNIQUE constraint failed: students.email"
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (\w+)\.(\w+)")
# PostgreSQL: "Key (email)=(a@b.edu) already exists"
_POSTGRES_UNIQUE = re.compile(r"Key \((\w+)\)=\((.*)\) already exists")


def _camel(column: str) -> str:
    first, *rest = column.split("_")
    return first + "".join(part.title() for part in rest)


def translate_integrity_error(error: IntegrityError) -> ApplicationError:
    """
    Map a database integrity failure to an application error.

    Unique-constraint violations become ConflictError so a write that loses a
    race still reports 409; anything else is a DatabaseError.
    """
    message = str(error.orig)
    match = _SQLITE_UNIQUE.search(message)
    if match:
        table, column = match.groups()
        return ConflictError(RESOURCE_NAMES.get(table, table), _camel(column))
    match = _POSTGRES_UNIQUE.search(message)
    if match:
        column, value = match.groups()
        return ConflictError("Record", _camel(column), value)
    return DatabaseError("flush", f"Constraint violation: {message}")


@dataclass
class Page(Generic[E]):
    """One page of a larger result set."""

    items: List[E]
    page_number: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1


class BaseRepository(Generic[E, M]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[M]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model
        self._tracked: List[E] = []

    # --- Mapping hooks -----------------------------------------------------

    def _to_entity(self, row: M) -> E:
        """Rebuild a domain entity from its row."""
        raise NotImplementedError

    def _apply_to_row(self, entity: E, row: M) -> None:
        """Copy entity state onto a row (new or existing)."""
        raise NotImplementedError

    def _load(self, row: M) -> E:
        entity = self._to_entity(row)
        entity.created_at = row.created_at
        entity.updated_at = row.updated_at
        entity.created_by = row.created_by
        entity.updated_by = row.updated_by
        entity.deleted_at = row.deleted_at
        entity.deleted_by = row.deleted_by
        return entity

    def _write_audit(self, entity: E, row: M) -> None:
        row.created_at = entity.created_at
        row.updated_at = entity.updated_at
        row.created_by = entity.created_by
        row.updated_by = entity.updated_by
        row.deleted_at = entity.deleted_at
        row.deleted_by = entity.deleted_by

    # --- Queries -----------------------------------------------------------

    def _live(self) -> Query:
        """Query over rows that are not soft-deleted."""
        return self.db.query(self.model).filter(self.model.deleted_at.is_(None))

    def get_by_id(self, id: str) -> Optional[E]:
        """
        Retrieve an entity by its ID.

        Args:
            id: Primary key value

        Returns:
            Entity or None if not found (or soft-deleted)
        """
        row = self._live().filter(self.model.id == id).first()
        return self._load(row) if row else None

    def find(self, spec: Specification[E], order_by: Any = None) -> List[E]:
        """
        Find all entities matching a specification.

        Args:
            spec: Specification to match
            order_by: Optional column expression to sort by

        Returns:
            Matching entities
        """
        query = self._live().filter(spec.to_sql_filter())
        if order_by is not None:
            query = query.order_by(order_by)
        return [self._load(row) for row in query.all()]

    def count(self, spec: Optional[Specification[E]] = None) -> int:
        query = self._live()
        if spec is not None:
            query = query.filter(spec.to_sql_filter())
        return query.count()

    def paginate(
        self,
        spec: Specification[E],
        page_number: int,
        page_size: int,
        order_by: Tuple[Any, ...] = (),
    ) -> Page[E]:
        """
        Fetch one page of entities matching a specification.

        Args:
            spec: Filter to apply
            page_number: 1-based page index
            page_size: Items per page
            order_by: Column expressions, applied in order

        Returns:
            Page with the items and the unpaged total
        """
        query = self._live().filter(spec.to_sql_filter())
        total = query.count()
        if order_by:
            query = query.order_by(*order_by)
        rows = query.offset((page_number - 1) * page_size).limit(page_size).all()
        return Page(
            items=[self._load(row) for row in rows],
            page_number=page_number,
            page_size=page_size,
            total_count=total,
        )

    # --- Writes ------------------------------------------------------------

    def add(self, entity: E) -> E:
        """
        Stage a new entity for insertion.

        Args:
            entity: Entity to persist

        Returns:
            The same entity
        """
        row = self.model(id=entity.id)
        self._apply_to_row(entity, row)
        self._write_audit(entity, row)
        self.db.add(row)
        self._flush()
        self._track(entity)
        return entity

    def update(self, entity: E) -> E:
        """
        Write entity changes back to its row.

        Args:
            entity: Entity previously loaded from this repository

        Returns:
            The same entity
        """
        row = self.db.get(self.model, entity.id)
        if row is None:
            raise LookupError(f"{self.model.__name__} '{entity.id}' is not persisted")
        self._apply_to_row(entity, row)
        self._write_audit(entity, row)
        self._flush()
        self._track(entity)
        return entity

    def delete(self, entity: E, deleted_by: Optional[str] = None) -> None:
        """Soft-delete the entity; it disappears from every query."""
        entity.mark_as_deleted(deleted_by)
        self.update(entity)

    # --- Unit of work support ----------------------------------------------

    def _flush(self) -> None:
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise translate_integrity_error(e) from e

    def _track(self, entity: E) -> None:
        if not any(tracked is entity for tracked in self._tracked):
            self._tracked.append(entity)

    def tracked_entities(self) -> List[E]:
        """Entities added or updated through this repository."""
        return list(self._tracked)

    def clear_tracked(self) -> None:
        self._tracked.clear()
