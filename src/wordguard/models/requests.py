"""Request payload models for the word-game API.

These models describe incoming payloads only; binding them to routes is up
to the caller. Build them with ``model_validate`` and hand any pydantic
``ValidationError`` to ``wordguard.lib.error_report``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from wordguard.lib.errors import InputValidationError
from wordguard.lib.input_validation import (
    MAX_POSITIONS,
    validate_positions,
    validate_positions_and_tiles_match,
    validate_special_tiles,
)
from wordguard.models.fields import PlayableWord, RecordedWord, custom_error

MAX_HAND_TILES = 7


class ScoreRequest(BaseModel):
    """Payload for recording a word score."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    word: RecordedWord
    enhanced_score: int | None = Field(None, alias="enhancedScore")
    positions: list[int] | None = None
    special_tiles: list[str | None] | None = Field(None, alias="specialTiles")

    @field_validator("enhanced_score")
    @classmethod
    def validate_enhanced_score(cls, v: int | None) -> int | None:
        """Enhanced score must be positive when given."""
        if v is not None and v <= 0:
            raise custom_error("positive", "Enhanced score must be positive")
        return v


class CalculateScoreRequest(BaseModel):
    """Payload for calculating a word score with optional special tiles.

    Attributes:
        word: Word to score, letters only, 1-15 characters
        positions: 0-based board index of each letter
        special_tiles: Tile type (normal, dl, tl, dw, tw) at each position
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    word: PlayableWord
    positions: list[int] | None = None
    special_tiles: list[str | None] | None = Field(None, alias="specialTiles")

    @field_validator("positions")
    @classmethod
    def check_positions(cls, v: list[int] | None) -> list[int] | None:
        """Validate position range and count."""
        try:
            return validate_positions(v)
        except InputValidationError as e:
            raise custom_error("positions", e.message) from e

    @field_validator("special_tiles")
    @classmethod
    def check_special_tiles(
        cls, v: list[str | None] | None, info: ValidationInfo
    ) -> list[str | None] | None:
        """Validate tile types and that they line up with positions."""
        try:
            tiles = validate_special_tiles(v)
            validate_positions_and_tiles_match(info.data.get("positions"), tiles)
        except InputValidationError as e:
            raise custom_error("special_tiles", e.message) from e
        return tiles


class WordFinderRequest(BaseModel):
    """Payload for finding playable words on a board.

    Board entries are single letters or empty strings for open squares.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    board_tiles: list[str] = Field(..., alias="boardTiles")
    hand_tiles: list[str] = Field(..., alias="handTiles")

    @field_validator("board_tiles")
    @classmethod
    def check_board_tiles(cls, v: list[str]) -> list[str]:
        """Board must have between 1 and 25 positions."""
        if not 1 <= len(v) <= MAX_POSITIONS:
            raise custom_error(
                "board_tiles",
                f"Board tiles must have between 1 and {MAX_POSITIONS} positions",
            )
        return v

    @field_validator("hand_tiles")
    @classmethod
    def check_hand_tiles(cls, v: list[str]) -> list[str]:
        """Hand must hold between 1 and 7 letters."""
        if not 1 <= len(v) <= MAX_HAND_TILES:
            raise custom_error(
                "hand_tiles",
                f"Hand tiles must have between 1 and {MAX_HAND_TILES} letters",
            )
        return v
