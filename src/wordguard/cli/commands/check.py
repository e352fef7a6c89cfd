"""CLI command for checking words against the alphabetic word rule.

Implements the 'wordguard check' command.
"""

from __future__ import annotations

import sys

import click

from wordguard.cli.common import resolve_command_config
from wordguard.lib.errors import InputValidationError, WordGuardError
from wordguard.lib.input_validation import MAX_WORD_LENGTH, validate_word
from wordguard.lib.logging_config import get_logger
from wordguard.lib.ui import format_result
from wordguard.lib.validation import (
    ValidationResult,
    sanitize_for_display,
    word_pipeline,
)

logger = get_logger(__name__)


def _check_strict(word: str, max_length: int) -> ValidationResult:
    try:
        validate_word(word, max_length=max_length)
    except InputValidationError as e:
        return ValidationResult.invalid(e.message)
    return ValidationResult.valid()


@click.command()
@click.argument("words", nargs=-1, required=True)
@click.option(
    "--strict",
    is_flag=True,
    help="Trim words and apply the recorded-word length limit",
)
@click.option(
    "--max-length",
    type=int,
    default=None,
    help="Longest accepted word (default: 15, or 10 with --strict)",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off (default: auto-detect)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only log warnings and errors",
)
def check(
    words: tuple[str, ...],
    strict: bool,
    max_length: int | None,
    color: bool | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Check that each WORD contains only letters A-Z.

    Example:

        wordguard check HELLO world

        wordguard check --strict "  cat  "

    Exits with status 1 if any word is rejected.
    """
    try:
        config = resolve_command_config(verbose, quiet, color, max_length)
    except WordGuardError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if strict and max_length is None:
        limit = MAX_WORD_LENGTH
    else:
        limit = config.max_word_length

    logger.info(f"Check command invoked: words={len(words)}, strict={strict}")

    pipeline = word_pipeline(max_length=limit)
    failures = 0
    for word in words:
        result = _check_strict(word, limit) if strict else pipeline.validate(word)
        if not result.is_valid:
            failures += 1
        click.echo(
            format_result(
                sanitize_for_display(word),
                result.is_valid,
                result.message,
                force_tty=config.color,
            )
        )

    logger.info(f"Checked {len(words)} word(s), {failures} rejected")
    if failures:
        sys.exit(1)
