"""
Specification Pattern Implementation

A specification is one query rule that can be evaluated two ways: against an
in-memory domain entity (is_satisfied_by) and as a SQLAlchemy WHERE clause
(to_sql_filter). Specifications compose with &, | and ~, which lets list
endpoints build a filter from whichever query parameters were supplied.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from sqlalchemy import and_, not_, or_, true


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    Subclasses implement the rule once for entities and once for SQL; the two
    must agree for every candidate.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a domain entity satisfies this specification.

        Args:
            candidate: Entity to check

        Returns:
            True if candidate satisfies specification
        """

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy boolean clause over the aggregate's table
        """

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


class MatchAllSpecification(Specification[T]):
    """Neutral element for AND; matches every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self):
        return true()

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return other


class AndSpecification(Specification[T]):
    """Both operands must match."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())


class OrSpecification(Specification[T]):
    """Either operand may match."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())


class NotSpecification(Specification[T]):
    """Negates the wrapped specification."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return not_(self.spec.to_sql_filter())


def all_of(specs: Iterable[Specification[T]]) -> Specification[T]:
    """
    AND together any number of specifications.

    Args:
        specs: Specifications to combine; may be empty

    Returns:
        Combined specification (matches everything when specs is empty)
    """
    combined: Specification[T] = MatchAllSpecification()
    for spec in specs:
        combined = combined & spec
    return combined


LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """LIKE pattern matching ``term`` literally anywhere in the column."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
