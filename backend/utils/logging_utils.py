"""
Structured Logging Utilities

Adds request-scoped context (request id, entity ids) to log records so a
single request can be followed through the API, service and repository
layers.
"""

import logging
import time
from contextvars import ContextVar
from functools import wraps
from typing import Any, Dict, Optional

from exceptions import ApplicationError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Keyword arguments copied into the log context when present
CONTEXT_KEYS = ("student_id", "course_id", "teacher_id")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Student enrolled", extra={"student_id": student.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Merge the request context with per-call extras (extras win)."""
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    Example:
        set_logging_context(request_id="abc-123", student_id=student.id)
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def log_operation(operation_name: str):
    """
    Decorator that logs start, completion time and failure of a service call.

    Expected application errors (not found, conflicts, rule violations) are
    logged as warnings without a traceback; anything else as an error.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("create_student")
        def create_student(self, request): ...
    """
    def decorator(func):
        def _context(kwargs) -> Dict[str, Any]:
            context = {"operation": operation_name}
            for key in CONTEXT_KEYS:
                if key in kwargs:
                    context[key] = kwargs[key]
            return context

        def _failed(logger, context, started, exc):
            context["duration_ms"] = round((time.perf_counter() - started) * 1000, 1)
            context["error_type"] = type(exc).__name__
            if isinstance(exc, (ApplicationError, ValueError)):
                logger.warning(f"Rejected {operation_name}: {exc}", extra=context)
            else:
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)

        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(kwargs)
            started = time.perf_counter()
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _failed(logger, context, started, e)
                raise
            context["duration_ms"] = round((time.perf_counter() - started) * 1000, 1)
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
