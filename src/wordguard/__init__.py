"""WordGuard - input rules for a word-game backend.

Main features:
- Alphabetic word rule with display-safe rejection messages
- Explicit, composable validation pipelines
- Pydantic field types and request payload models
- Structured error reports for rejected input
- ``wordguard`` CLI for checking words and payload files
"""

from wordguard.lib.errors import ConfigError, InputValidationError, WordGuardError
from wordguard.lib.validation import (
    ValidationPipeline,
    ValidationResult,
    WordValidator,
    is_alphabetic,
    sanitize_for_display,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "InputValidationError",
    "ValidationPipeline",
    "ValidationResult",
    "WordGuardError",
    "WordValidator",
    "is_alphabetic",
    "sanitize_for_display",
]
