"""Tests for custom exception hierarchy in wordguard.lib.errors."""

from wordguard.lib.errors import (
    ConfigError,
    FileNotFoundError,
    InputValidationError,
    WordGuardError,
)


class TestWordGuardError:
    """Tests for base WordGuardError exception."""

    def test_wordguard_error_creates_with_message(self) -> None:
        """Test that WordGuardError can be created with a message."""
        error = WordGuardError("Test error message")
        assert str(error) == "Test error message"

    def test_wordguard_error_is_exception(self) -> None:
        """Test that WordGuardError is an Exception subclass."""
        assert isinstance(WordGuardError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("max_word_length", "Input should be at least 1")
        assert str(error) == (
            "Configuration error in 'max_word_length': Input should be at least 1"
        )
        assert error.field == "max_word_length"

    def test_config_error_is_wordguard_error(self) -> None:
        """Test that ConfigError is a WordGuardError subclass."""
        assert isinstance(ConfigError("field", "message"), WordGuardError)


class TestInputValidationError:
    """Tests for InputValidationError exception."""

    def test_message_is_unprefixed(self) -> None:
        """Test the message is shown to users as-is."""
        error = InputValidationError("word", "Word cannot be empty")
        assert str(error) == "Word cannot be empty"
        assert error.field == "word"
        assert error.message == "Word cannot be empty"

    def test_is_wordguard_error(self) -> None:
        """Test that InputValidationError is a WordGuardError subclass."""
        assert isinstance(InputValidationError("word", "x"), WordGuardError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_includes_path_and_hint(self) -> None:
        """Test the path and hint are both in the message."""
        error = FileNotFoundError("/tmp/requests.yaml", "Check the path.")
        assert "/tmp/requests.yaml" in str(error)
        assert "Check the path." in str(error)
        assert error.path == "/tmp/requests.yaml"
