"""
Error handling decorators and exception handlers for API endpoints.

Endpoints are wrapped in handle_api_errors() so every failure is logged with
the operation name. The exception then propagates to the handlers installed by
register_exception_handlers(), which turn it into the common error envelope:

    {"message": ..., "details": ..., "errors": [...], "timestamp": ...}
"""

import inspect
import logging
import math
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, Optional

import pydantic
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from constants import HTTPStatus
from dtos.response import ErrorResponse, FieldErrorResponse
from exceptions import (
    ApplicationError,
    ConflictError,
    InvalidArgumentError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Expected failures are logged without a traceback
EXPECTED_ERRORS = (ApplicationError, ValueError, StarletteHTTPException)

VALIDATION_DETAILS = "One or more validation errors occurred"
UNEXPECTED_DETAILS = "An unexpected error occurred"

# pydantic prefixes messages raised from validators
_PYDANTIC_PREFIXES = ("Value error, ", "Assertion failed, ")
# Location roots that are not part of the field name
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def handle_api_errors(operation_name: str):
    """
    Decorator that logs endpoint failures and re-raises them.

    Application errors (not found, conflicts, invalid input) are logged as
    warnings; anything else is logged as an error with its traceback. The
    conversion to an HTTP response is left to the exception handlers.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create student")

    Example:
        @router.post("")
        @handle_api_errors("Create student")
        def create_student(...):
            return service.create_student(request)
    """
    def decorator(func: Callable):
        def _log(e: Exception) -> None:
            if isinstance(e, EXPECTED_ERRORS):
                logger.warning(f"{operation_name} - {type(e).__name__}: {e}")
            else:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _log(e)
                raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _log(e)
                raise

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _clean_message(message: str) -> str:
    for prefix in _PYDANTIC_PREFIXES:
        if message.startswith(prefix):
            return message[len(prefix):]
    return message


def _field_name(location: Iterable[Any]) -> str:
    parts = [str(part) for part in location]
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts)


def _attempted_value(value: Any) -> Any:
    # JSON has no NaN or Infinity
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def field_errors_from_pydantic(errors: Iterable[Dict[str, Any]]) -> List[FieldErrorResponse]:
    """Convert pydantic error dicts into envelope field errors."""
    return [
        FieldErrorResponse(
            property=_field_name(error.get("loc", ())),
            message=_clean_message(error.get("msg", "")),
            attempted_value=_attempted_value(error.get("input")),
        )
        for error in errors
    ]


def error_response(
    status_code: int,
    message: str,
    details: Optional[str] = None,
    errors: Optional[List[FieldErrorResponse]] = None,
) -> JSONResponse:
    """Build the JSON error envelope."""
    body = ErrorResponse(
        message=message,
        details=details,
        errors=errors or [],
        timestamp=ErrorResponse.now(),
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the handlers that map exceptions to HTTP responses.

    Args:
        app: Application to configure
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            HTTPStatus.BAD_REQUEST,
            "Validation failed",
            VALIDATION_DETAILS,
            field_errors_from_pydantic(exc.errors()),
        )

    @app.exception_handler(pydantic.ValidationError)
    async def model_validation_handler(request: Request, exc: pydantic.ValidationError):
        return error_response(
            HTTPStatus.BAD_REQUEST,
            "Validation failed",
            VALIDATION_DETAILS,
            field_errors_from_pydantic(exc.errors()),
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        errors = [
            FieldErrorResponse(property=field, message=str(message))
            for field, message in exc.invalid_fields.items()
        ]
        return error_response(HTTPStatus.BAD_REQUEST, "Validation failed", exc.message, errors)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return error_response(HTTPStatus.BAD_REQUEST, "Invalid argument", exc.message)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return error_response(HTTPStatus.BAD_REQUEST, "Invalid argument", str(exc))

    @app.exception_handler(InvalidOperationError)
    async def invalid_operation_handler(request: Request, exc: InvalidOperationError):
        return error_response(HTTPStatus.BAD_REQUEST, "Invalid operation", exc.message)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return error_response(HTTPStatus.NOT_FOUND, "Resource not found", exc.message)

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return error_response(HTTPStatus.CONFLICT, "Resource conflict", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
        return error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error", UNEXPECTED_DETAILS
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error", UNEXPECTED_DETAILS
        )
