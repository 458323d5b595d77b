"""
Shared response envelopes: pagination, plain messages and errors.
"""

from datetime import datetime
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import Field

from dtos.base import CamelModel

T = TypeVar("T")


class PaginatedResponse(CamelModel, Generic[T]):
    """One page of a list query."""

    items: List[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_page(cls, page, mapper: Callable[[Any], T]) -> "PaginatedResponse[T]":
        """
        Build from a repository Page, converting each entity with ``mapper``.
        """
        return cls(
            items=[mapper(item) for item in page.items],
            page_number=page.page_number,
            page_size=page.page_size,
            total_count=page.total_count,
            total_pages=page.total_pages,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )


class MessageResponse(CamelModel):
    message: str


class HealthResponse(CamelModel):
    status: str
    service: str
    version: str


class FieldErrorResponse(CamelModel):
    """A single invalid input field."""

    property: str
    message: str
    attempted_value: Optional[Any] = None


class ErrorResponse(CamelModel):
    """
    Error envelope returned for every failed request.

    Example:
        {
            "message": "Validation failed",
            "details": "One or more validation errors occurred",
            "errors": [{"property": "email", "message": "...", "attemptedValue": "x"}],
            "timestamp": "2025-01-01T12:00:00Z"
        }
    """

    message: str
    details: Optional[str] = None
    errors: List[FieldErrorResponse] = Field(default_factory=list)
    timestamp: str

    @staticmethod
    def now() -> str:
        return datetime.utcnow().isoformat(timespec="milliseconds") + "Z"
