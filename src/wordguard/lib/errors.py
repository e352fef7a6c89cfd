"""Custom exception hierarchy for WordGuard configuration and input checks."""


class WordGuardError(Exception):
    """Base exception for all WordGuard errors.

    All WordGuard-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI.
    """

    pass


class ConfigError(WordGuardError):
    """Exception raised for configuration errors.

    Raised when configuration or payload loading fails. Includes the
    offending field so users can locate the issue.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class InputValidationError(WordGuardError):
    """Exception raised when an imperative input check rejects a value.

    Unlike the word rules in ``wordguard.lib.validation``, which report
    rejections as data, the request-parameter checks raise so callers can
    abort early.

    Attributes:
        field: The request parameter that failed the check
        message: User-facing description of the failure
    """

    def __init__(self, field: str, message: str) -> None:
        """Create an input validation error.

        Args:
            field: Name of the rejected parameter
            message: User-facing description of the failure
        """
        self.field = field
        self.message = message
        super().__init__(message)


class FileNotFoundError(WordGuardError):
    """Exception raised when a payload or env file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")
