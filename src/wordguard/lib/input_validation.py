"""Imperative checks for word-game request parameters.

These complement the word rules in ``wordguard.lib.validation`` for
parameters that are not bound to a model field. Each check returns the
normalized value on success and raises ``InputValidationError`` otherwise.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from wordguard.lib.errors import InputValidationError
from wordguard.lib.validation import VALID_WORD_PATTERN, is_blank

# Matches the storage limit for recorded words.
MAX_WORD_LENGTH = 10
# A single board row never holds more than this many tiles.
MAX_POSITIONS = 25

SPECIAL_TILE_TYPES = ("normal", "dl", "tl", "dw", "tw")
DIFFICULTY_LEVELS = ("easy", "medium", "hard")

_SPECIAL_TILE_RE = re.compile(rf"{'|'.join(SPECIAL_TILE_TYPES)}")
_DIFFICULTY_RE = re.compile(rf"{'|'.join(DIFFICULTY_LEVELS)}")


def validate_word(word: str | None, max_length: int = MAX_WORD_LENGTH) -> str:
    """Validate a word parameter.

    Args:
        word: Raw word value
        max_length: Longest accepted word after trimming

    Returns:
        The trimmed word

    Raises:
        InputValidationError: If the word is blank, too long, or not alphabetic
    """
    if is_blank(word):
        raise InputValidationError("word", "Word cannot be empty")

    trimmed = word.strip()  # type: ignore[union-attr]
    if len(trimmed) > max_length:
        raise InputValidationError(
            "word", f"Word cannot exceed {max_length} characters"
        )
    if not VALID_WORD_PATTERN.fullmatch(trimmed):
        raise InputValidationError(
            "word", "Word must contain only alphabetic characters (A-Z)"
        )
    return trimmed


def validate_positions(positions: Sequence[int | None] | None) -> list[int] | None:
    """Validate letter positions.

    Args:
        positions: Optional list of 0-based board positions

    Returns:
        The positions as a list, or None when omitted

    Raises:
        InputValidationError: If there are too many positions or one is out of range
    """
    if positions is None:
        return None

    if len(positions) > MAX_POSITIONS:
        raise InputValidationError("positions", "Too many positions specified")

    for i, pos in enumerate(positions):
        # bool is an int subclass but never a position
        if (
            not isinstance(pos, int)
            or isinstance(pos, bool)
            or not 0 <= pos < MAX_POSITIONS
        ):
            raise InputValidationError(
                "positions",
                f"Position {i} is invalid. Must be between 0 and {MAX_POSITIONS - 1}",
            )
    return list(positions)  # type: ignore[arg-type]


def validate_special_tiles(
    special_tiles: Sequence[str | None] | None,
) -> list[str | None] | None:
    """Validate special tile types.

    ``None`` entries are allowed and mean a plain square.

    Raises:
        InputValidationError: If there are too many tiles or one is unknown
    """
    if special_tiles is None:
        return None

    if len(special_tiles) > MAX_POSITIONS:
        raise InputValidationError(
            "special_tiles", "Too many special tiles specified"
        )

    for i, tile in enumerate(special_tiles):
        if tile is not None and not _SPECIAL_TILE_RE.fullmatch(tile):
            raise InputValidationError(
                "special_tiles",
                f"Special tile at position {i} is invalid. "
                f"Must be one of: {', '.join(SPECIAL_TILE_TYPES)}",
            )
    return list(special_tiles)


def validate_positions_and_tiles_match(
    positions: Sequence[int] | None,
    special_tiles: Sequence[str | None] | None,
) -> None:
    """Check that positions and special tiles line up one-to-one.

    Raises:
        InputValidationError: If both lists are given with different lengths
    """
    if positions is not None and special_tiles is not None:
        if len(positions) != len(special_tiles):
            raise InputValidationError(
                "special_tiles",
                "Positions and special tiles lists must have the same length",
            )


def validate_difficulty(difficulty: str | None) -> str | None:
    """Validate and normalize a scramble difficulty.

    Returns:
        The lower-cased, trimmed difficulty, or None when omitted

    Raises:
        InputValidationError: If the difficulty is not easy, medium or hard
    """
    if difficulty is None:
        return None

    normalized = difficulty.lower().strip()
    if not _DIFFICULTY_RE.fullmatch(normalized):
        raise InputValidationError(
            "difficulty",
            f"Difficulty must be one of: {', '.join(DIFFICULTY_LEVELS)}",
        )
    return normalized
