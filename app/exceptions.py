# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries the same shape: {"error": ..., "code": ...}.
# The landing page modal shows `error` to the visitor verbatim.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to process request. Please try again."


class TaxMateException(Exception):
    """
    Base exception for the TaxMate waitlist API.

    All custom exceptions inherit from this class. `message` is safe to
    show to the visitor; anything internal goes in `details`, which is
    logged but never serialized.
    """

    def __init__(
        self,
        message: str,
        code: str = "TAXMATE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {
            "error": self.message,
            "code": self.code,
        }


# =============================================================================
# Waitlist Exceptions
# =============================================================================

class SignupValidationError(TaxMateException):
    """Raised when the submitted email is missing or malformed."""

    def __init__(self, message: str = "Valid email is required"):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
        )


class DuplicateEmailError(TaxMateException):
    """Raised when the normalized email is already on the waitlist."""

    def __init__(self, email: str):
        super().__init__(
            message="This email is already on the waitlist!",
            code="DUPLICATE_EMAIL",
            status_code=400,
            details={"email": email},
        )


class PersistenceError(TaxMateException):
    """
    Raised when the waitlist insert fails for any reason other than a
    duplicate email. The store error is kept in details only.
    """

    def __init__(self, error: str):
        super().__init__(
            message=GENERIC_FAILURE_MESSAGE,
            code="PERSISTENCE_ERROR",
            status_code=500,
            details={"error": error},
        )


class NotificationError(TaxMateException):
    """Raised by the notifier when an email could not be sent. Never surfaced."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to send email: {error}",
            code="NOTIFICATION_ERROR",
            status_code=502,
            details={"error": error},
        )


class MethodNotAllowedError(TaxMateException):
    """Raised for any non-POST request on the waitlist endpoint."""

    def __init__(self, method: str):
        super().__init__(
            message="Method not allowed. Use POST to join the waitlist.",
            code="METHOD_NOT_ALLOWED",
            status_code=405,
            details={"method": method},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def taxmate_exception_handler(
    request: Request,
    exc: TaxMateException
) -> JSONResponse:
    """Convert TaxMateException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body errors (non-JSON bodies, wrong field types).

    Reported as 400 like every other bad submission, instead of FastAPI's 422.
    """
    logger.debug(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "code": "VALIDATION_ERROR",
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Reshape framework HTTP errors (unknown paths, unrouted methods) into
    the {"error", "code"} body. Headers such as Allow are kept.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "code": f"HTTP_{exc.status_code}",
        },
        headers=exc.headers,
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": GENERIC_FAILURE_MESSAGE,
            "code": "INTERNAL_ERROR",
        }
    )
