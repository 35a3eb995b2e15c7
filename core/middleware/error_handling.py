"""
Error handling middleware with error sanitization.
Every error leaves the API as the same JSON envelope:
``{"error": {"code", "message", "path", "method", "details"?}}``.
"""

import logging
import re
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.integrations.stripe import PaymentProviderError
from core.jobs.posting import WizardError

logger = logging.getLogger(__name__)

# Patterns for sensitive data that should never be returned or logged
SENSITIVE_PATTERNS = [
    re.compile(r'token["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'api[_-]?key["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'secret["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'password["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'authorization["\s:]+(bearer\s+)?[^"\s,}]+', re.IGNORECASE),
    re.compile(r'\b(sk|rk)_(live|test)_[A-Za-z0-9]+\b'),  # Stripe secret keys
    re.compile(r'\beyJ[\w-]+\.[\w-]+\.[\w-]+'),  # JWTs
    re.compile(r'postgres(ql)?(\+\w+)?://[^\s"]+', re.IGNORECASE),  # DSNs with credentials
]


def sanitize_error_message(message: Any) -> str:
    """
    Remove sensitive information from error messages.

    Args:
        message: Original error message (non-strings are converted)

    Returns:
        Sanitized error message
    """
    sanitized = str(message)
    for pattern in SENSITIVE_PATTERNS:
        sanitized = pattern.sub('[REDACTED]', sanitized)
    return sanitized


def get_safe_error_details(exc: Exception, include_traceback: bool = False) -> dict[str, Any]:
    """Type and sanitized message of an exception; traceback only in debug."""
    details = {
        "type": type(exc).__name__,
        "message": sanitize_error_message(str(exc)),
    }
    if include_traceback:
        details["traceback"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return details


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Per-field validation messages, without echoing input values."""
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": sanitize_error_message(error["msg"]),
            "type": error["type"],
        }
        for error in exc.errors()
    ]


@dataclass
class ErrorOutcome:
    status_code: int
    code: str
    message: str
    details: Optional[Any] = None


def classify_exception(exc: Exception, debug: bool = False) -> ErrorOutcome:
    """
    Map an exception to its HTTP status, error code and public message.
    Order matters: subclasses are checked before their bases.
    """
    if isinstance(exc, StarletteHTTPException):
        return ErrorOutcome(exc.status_code, "HTTP_EXCEPTION", sanitize_error_message(exc.detail))

    if isinstance(exc, RequestValidationError):
        return ErrorOutcome(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Request validation failed",
            format_validation_errors(exc),
        )

    if isinstance(exc, WizardError):
        return ErrorOutcome(status.HTTP_409_CONFLICT, "WIZARD_STATE", sanitize_error_message(exc))

    if isinstance(exc, PaymentProviderError):
        return ErrorOutcome(
            status.HTTP_502_BAD_GATEWAY,
            "PAYMENT_PROVIDER_ERROR",
            sanitize_error_message(exc) or "Failed to create checkout session",
        )

    if isinstance(exc, IntegrityError):
        return ErrorOutcome(
            status.HTTP_409_CONFLICT,
            "INTEGRITY_ERROR",
            "Database integrity constraint violated",
            get_safe_error_details(exc) if debug else None,
        )

    if isinstance(exc, OperationalError):
        return ErrorOutcome(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "DATABASE_ERROR",
            "Database service temporarily unavailable",
        )

    if isinstance(exc, SQLAlchemyError):
        return ErrorOutcome(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "DATABASE_ERROR",
            "A database error occurred",
            get_safe_error_details(exc) if debug else None,
        )

    if isinstance(exc, ValueError):
        return ErrorOutcome(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_INPUT",
            sanitize_error_message(str(exc)) or "Invalid input provided",
        )

    if isinstance(exc, PermissionError):
        return ErrorOutcome(
            status.HTTP_403_FORBIDDEN,
            "PERMISSION_DENIED",
            "You don't have permission to perform this action",
        )

    if isinstance(exc, TimeoutError):
        return ErrorOutcome(status.HTTP_504_GATEWAY_TIMEOUT, "TIMEOUT", "The request timed out")

    return ErrorOutcome(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
        get_safe_error_details(exc, include_traceback=True) if debug else None,
    )


def _log_outcome(exc: Exception, outcome: ErrorOutcome, method: str, path: str) -> None:
    summary = f"{type(exc).__name__}: {method} {path} -> {outcome.status_code} {outcome.code}"
    if outcome.status_code >= 500:
        logger.error(
            f"{summary} ({sanitize_error_message(str(exc))})",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.warning(f"{summary} - {outcome.message}")


def error_response(outcome: ErrorOutcome, path: str, method: str, request_id: Optional[str] = None) -> JSONResponse:
    """Build the error envelope."""
    error = {
        "code": outcome.code,
        "message": outcome.message,
        "path": path,
        "method": method,
    }
    if outcome.details is not None:
        error["details"] = outcome.details
    if request_id:
        error["request_id"] = request_id

    headers = None
    if outcome.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=outcome.status_code, content={"error": error}, headers=headers)


class ErrorHandlingMiddleware:
    """
    ASGI middleware right outside the routes. Anything that escapes the exception handlers
    (including errors raised by other middleware) is turned into the envelope.
    """

    def __init__(self, app: Callable, debug: bool = False):
        """
        Initialize error handling middleware.

        Args:
            app: The ASGI application
            debug: Whether to include detailed error information
        """
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = self._handle_exception(exc, scope)
            await response(scope, receive, send)

    def _handle_exception(self, exc: Exception, scope: dict) -> Response:
        path = scope.get("path", "unknown")
        method = scope.get("method", "unknown")

        outcome = classify_exception(exc, debug=self.debug)
        _log_outcome(exc, outcome, method, path)

        request_id = None
        for name, value in scope.get("headers", []):
            if name == b"x-request-id":
                request_id = value.decode()
                break

        return error_response(outcome, path, method, request_id)


def setup_error_handlers(app, debug: bool = False):
    """
    Set up exception handlers for FastAPI application.

    Args:
        app: FastAPI application instance
        debug: Whether to include detailed error information
    """

    async def handle(request: Request, exc: Exception) -> JSONResponse:
        outcome = classify_exception(exc, debug=debug)
        _log_outcome(exc, outcome, request.method, request.url.path)
        return error_response(
            outcome,
            str(request.url.path),
            request.method,
            getattr(request.state, "request_id", None),
        )

    for exc_class in (
        StarletteHTTPException,
        RequestValidationError,
        WizardError,
        PaymentProviderError,
        SQLAlchemyError,
    ):
        app.add_exception_handler(exc_class, handle)
