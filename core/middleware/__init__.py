"""
Core middleware package.

- Error handling with a single JSON error envelope and message sanitization
- Structured request logging with credential and contact detail masking
"""

from core.middleware.error_handling import (
    ErrorHandlingMiddleware,
    classify_exception,
    setup_error_handlers,
    sanitize_error_message,
)

from core.middleware.logging import (
    StructuredFormatter,
    StructuredLoggingMiddleware,
    setup_logging,
)

__all__ = [
    # Error handling
    "ErrorHandlingMiddleware",
    "classify_exception",
    "setup_error_handlers",
    "sanitize_error_message",
    # Logging
    "StructuredFormatter",
    "StructuredLoggingMiddleware",
    "setup_logging",
]
