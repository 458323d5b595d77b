"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application. Every exception maps to
one HTTP status in utils.error_handlers.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when request validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)

    @property
    def invalid_fields(self) -> dict:
        """Field name -> error message"""
        return self.details.get("invalid_fields", {})


class InvalidArgumentError(ApplicationError):
    """Raised when an argument is rejected by a business rule"""

    def __init__(self, message: str, argument: str | None = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message, details)


class InvalidOperationError(ApplicationError):
    """Raised when an entity is asked to do something its current state forbids"""


class NotFoundError(ApplicationError):
    """Raised when a requested resource does not exist"""

    def __init__(self, resource: str, resource_id: str):
        details = {"resource": resource, "id": resource_id}
        super().__init__(f"{resource} '{resource_id}' not found", details)


class ConflictError(ApplicationError):
    """Raised when a write would violate a uniqueness rule"""

    def __init__(self, resource: str, field: str, value: str | None = None):
        details = {"resource": resource, "field": field, "value": value}
        if value is None:
            super().__init__(f"{resource} with this {field} already exists", details)
        else:
            super().__init__(f"{resource} with {field} '{value}' already exists", details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
