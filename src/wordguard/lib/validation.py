"""Word validation rules for WordGuard.

This module holds the alphabetic word rule, the sanitizer used to embed
rejected input in error messages, and a small pipeline for composing rules
explicitly. Rules report rejections as ``ValidationResult`` values and never
raise.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from wordguard.lib.logging_config import get_logger

logger = get_logger(__name__)

VALID_WORD_PATTERN = re.compile(r"[A-Za-z]+")
# Cc covers \x00-\x1f and \x7f-\x9f; \s is Unicode-aware for str patterns.
CONTROL_OR_SPACE_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\s]")

MAX_DISPLAY_LENGTH = 50
EMPTY_PLACEHOLDER = "[empty]"
ABSENT_PLACEHOLDER = "null"

INVALID_WORD_TEMPLATE = (
    "Word '{word}' contains invalid characters. Only letters A-Z are allowed."
)
DEFAULT_REQUIRED_MESSAGE = "Word cannot be blank"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation call.

    Attributes:
        is_valid: Whether the value passed
        message: User-facing rejection message, only set when invalid
    """

    is_valid: bool
    message: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult:
        """Return a passing result."""
        return cls(True)

    @classmethod
    def invalid(cls, message: str) -> ValidationResult:
        """Return a failing result carrying ``message``."""
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.is_valid


class Validator(Protocol):
    """Anything that can judge a candidate value."""

    def validate(self, value: str | None) -> ValidationResult:
        """Validate ``value`` and return the outcome."""
        ...


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def is_alphabetic(value: str | None) -> bool:
    """Check that a word consists solely of ASCII letters.

    Blank values return True: they are left to the required-field rule.
    Whitespace anywhere in a non-blank value makes it invalid, as do
    digits, punctuation and non-ASCII letters.

    Args:
        value: Candidate word

    Returns:
        True if the value is blank or matches ``[A-Za-z]+`` in full
    """
    if is_blank(value):
        return True
    return VALID_WORD_PATTERN.fullmatch(value) is not None  # type: ignore[arg-type]


def sanitize_for_display(value: str | None) -> str:
    """Make a rejected value safe to embed in an error message.

    Strips every control and whitespace character, then truncates the
    stripped text to ``MAX_DISPLAY_LENGTH``. Never returns an empty string.

    Args:
        value: Raw user input, possibly None

    Returns:
        Display-safe text of at most 50 characters
    """
    if value is None:
        return ABSENT_PLACEHOLDER

    sanitized = CONTROL_OR_SPACE_RE.sub("", value)[:MAX_DISPLAY_LENGTH]
    return sanitized if sanitized else EMPTY_PLACEHOLDER


class WordValidator:
    """Alphabetic word rule.

    Blank input is reported valid so that a separate ``RequiredValidator``
    decides whether the field may be omitted.
    """

    def validate(self, value: str | None) -> ValidationResult:
        """Validate ``value`` against the alphabetic rule."""
        if is_blank(value) or is_alphabetic(value):
            return ValidationResult.valid()

        display = sanitize_for_display(value)
        logger.debug(f"Rejected word '{display}': non-alphabetic characters")
        return ValidationResult.invalid(INVALID_WORD_TEMPLATE.format(word=display))


class RequiredValidator:
    """Reject absent or blank values."""

    def __init__(self, message: str = DEFAULT_REQUIRED_MESSAGE) -> None:
        self.message = message

    def validate(self, value: str | None) -> ValidationResult:
        """Fail when ``value`` is blank."""
        if is_blank(value):
            return ValidationResult.invalid(self.message)
        return ValidationResult.valid()


class LengthValidator:
    """Bound the length of non-blank values.

    Blank values are deferred to ``RequiredValidator``.
    """

    def __init__(
        self,
        max_length: int,
        min_length: int = 1,
        message: str | None = None,
    ) -> None:
        """Initialize the length bounds.

        Args:
            max_length: Largest accepted length (inclusive)
            min_length: Smallest accepted length (inclusive)
            message: Override for the rejection message

        Raises:
            ValueError: If the bounds are inconsistent
        """
        if min_length < 0 or max_length < min_length:
            raise ValueError(
                f"Invalid length bounds: min={min_length}, max={max_length}"
            )
        self.max_length = max_length
        self.min_length = min_length
        self.message = message or (
            f"Word must be between {min_length} and {max_length} characters"
        )

    def validate(self, value: str | None) -> ValidationResult:
        """Fail when a non-blank value falls outside the bounds."""
        if is_blank(value):
            return ValidationResult.valid()
        if not self.min_length <= len(value) <= self.max_length:  # type: ignore[arg-type]
            return ValidationResult.invalid(self.message)
        return ValidationResult.valid()


class ValidationPipeline:
    """Ordered, explicitly registered sequence of validators."""

    def __init__(self, validators: Iterable[Validator] | None = None) -> None:
        """Initialize the pipeline with an optional list of validators."""
        self._validators: list[Validator] = list(validators or [])

    @property
    def validators(self) -> tuple[Validator, ...]:
        """Registered validators in execution order."""
        return tuple(self._validators)

    def register(self, validator: Validator) -> ValidationPipeline:
        """Append ``validator`` and return the pipeline for chaining."""
        self._validators.append(validator)
        return self

    def validate(self, value: str | None) -> ValidationResult:
        """Run validators in order and return the first failure."""
        for validator in self._validators:
            result = validator.validate(value)
            if not result.is_valid:
                return result
        return ValidationResult.valid()

    def validate_all(self, value: str | None) -> list[ValidationResult]:
        """Run every validator and return all failures."""
        failures = []
        for validator in self._validators:
            result = validator.validate(value)
            if not result.is_valid:
                failures.append(result)
        return failures


def word_pipeline(max_length: int = 15) -> ValidationPipeline:
    """Build the standard required → length → alphabetic pipeline.

    Args:
        max_length: Longest accepted word

    Returns:
        Configured ValidationPipeline
    """
    return ValidationPipeline(
        [
            RequiredValidator(),
            LengthValidator(max_length),
            WordValidator(),
        ]
    )
