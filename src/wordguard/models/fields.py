"""Pydantic field types backed by WordGuard validation rules.

Rule rejections are raised as ``PydanticCustomError`` so that the rule's own
message replaces pydantic's default wording.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from wordguard.lib.validation import (
    LengthValidator,
    RequiredValidator,
    ValidationPipeline,
    Validator,
    WordValidator,
)


def custom_error(error_type: str, message: str) -> PydanticCustomError:
    """Build a pydantic error whose message is exactly ``message``.

    The message travels through the context so braces in user input are
    never treated as template placeholders.
    """
    return PydanticCustomError(error_type, "{reason}", {"reason": message})


def rule_validator(
    validator: Validator, error_type: str = "valid_word"
) -> Callable[[str], str]:
    """Wrap a WordGuard validator for use with ``AfterValidator``.

    Args:
        validator: Validator or pipeline to run
        error_type: Pydantic error type reported on rejection

    Returns:
        Function returning the value unchanged or raising PydanticCustomError
    """

    def _check(value: str) -> str:
        result = validator.validate(value)
        if not result.is_valid:
            raise custom_error(error_type, result.message or "Invalid value")
        return value

    return _check


ValidWord = Annotated[str, AfterValidator(rule_validator(WordValidator()))]

# Required, 1-15 characters, letters only.
PlayableWord = Annotated[
    str,
    AfterValidator(
        rule_validator(
            ValidationPipeline(
                [
                    RequiredValidator("Word cannot be blank"),
                    LengthValidator(
                        15, 1, "Word must be between 1 and 15 characters"
                    ),
                    WordValidator(),
                ]
            )
        )
    ),
]

# Required, at most 10 characters. Alphabet is not enforced.
RecordedWord = Annotated[
    str,
    AfterValidator(
        rule_validator(
            ValidationPipeline(
                [
                    RequiredValidator("Word cannot be blank"),
                    LengthValidator(10, 1, "Word cannot exceed 10 characters"),
                ]
            ),
            error_type="word_constraint",
        )
    ),
]
