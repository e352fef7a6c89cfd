"""Structured error reports for rejected input.

Turns pydantic validation failures and ``InputValidationError`` into a
uniform ``ErrorResponse`` that an outer layer can serialize as-is. Every
message placed in a report is sanitized first.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from wordguard.lib.errors import InputValidationError
from wordguard.lib.logging_config import get_logger

logger = get_logger(__name__)

MAX_ERROR_MESSAGE_LENGTH = 200
MAX_LOGGED_INPUT_LENGTH = 50
BAD_REQUEST = 400

_LINE_BREAK_RE = re.compile(r"[\r\n\t]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")


class ErrorResponse(BaseModel):
    """Standard error payload.

    Attributes:
        error: Machine-readable error code
        message: Human-readable summary
        details: Per-field messages, if any
        status: HTTP-style status code
        timestamp: When the report was created (UTC)
    """

    error: str
    message: str
    details: dict[str, str] | None = None
    status: int = BAD_REQUEST
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def sanitize_error_message(message: str | None) -> str:
    """Flatten and bound an error message for display.

    Line breaks and tabs become spaces, whitespace runs collapse to a single
    space, and messages over 200 characters are cut with ``...``.
    """
    if message is None:
        return "Invalid input"

    sanitized = _LINE_BREAK_RE.sub(" ", message.strip())
    sanitized = _WHITESPACE_RUN_RE.sub(" ", sanitized)

    if len(sanitized) > MAX_ERROR_MESSAGE_LENGTH:
        return sanitized[:MAX_ERROR_MESSAGE_LENGTH] + "..."
    return sanitized


def sanitize_input(value: str | None) -> str:
    """Make raw user input safe to write to logs."""
    if value is None:
        return "null"

    sanitized = _CONTROL_CHAR_RE.sub("", value).strip()

    if len(sanitized) > MAX_LOGGED_INPUT_LENGTH:
        return sanitized[:MAX_LOGGED_INPUT_LENGTH] + "..."
    return sanitized


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(item) for item in loc) if loc else "unknown"


def build_validation_error_response(exc: PydanticValidationError) -> ErrorResponse:
    """Convert a pydantic ValidationError into an ErrorResponse.

    Only the first error for each field is kept.

    Args:
        exc: Error raised while building a request model

    Returns:
        ErrorResponse with code ``VALIDATION_ERROR``
    """
    logger.warning(f"Validation error: {exc.error_count()} field error(s)")

    details: dict[str, str] = {}
    for error in exc.errors():
        field = _field_path(error.get("loc", ()))
        if field not in details:
            details[field] = sanitize_error_message(error.get("msg"))

    return ErrorResponse(
        error="VALIDATION_ERROR",
        message="Invalid input provided",
        details=details,
    )


def build_invalid_argument_response(exc: InputValidationError) -> ErrorResponse:
    """Convert an InputValidationError into an ErrorResponse."""
    logger.warning(f"Illegal argument error: {sanitize_input(exc.message)}")

    return ErrorResponse(
        error="INVALID_ARGUMENT",
        message=sanitize_error_message(exc.message),
    )
