"""Configuration models for WordGuard commands."""

from pydantic import BaseModel, ConfigDict, Field


class CheckConfig(BaseModel):
    """Settings for the ``check`` and ``validate-payload`` commands.

    Every field is optional so a partially filled instance can represent
    one layer of the resolution hierarchy (CLI flags, environment).
    """

    model_config = ConfigDict(extra="forbid")

    verbose: bool | None = Field(None, description="Enable debug logging")
    quiet: bool | None = Field(None, description="Only log warnings and errors")
    color: bool | None = Field(
        None, description="Colorize output (auto-detected from TTY when unset)"
    )
    max_word_length: int | None = Field(
        None, ge=1, le=100, description="Longest accepted word"
    )
