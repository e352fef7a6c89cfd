"""Unit tests for the wordguard check CLI command."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from wordguard.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def cli_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, isolated_env: dict
) -> Generator[MagicMock]:
    """Run commands in an empty directory without touching real logging."""
    monkeypatch.chdir(tmp_path)
    with patch("wordguard.cli.common.setup_logging") as mock_setup_logging:
        yield mock_setup_logging


@pytest.mark.unit
class TestCheckCommand:
    """Tests for 'wordguard check'."""

    def test_valid_words_exit_zero(self, runner: CliRunner) -> None:
        """Test all-valid input succeeds."""
        result = runner.invoke(main, ["check", "HELLO", "world"])
        assert result.exit_code == 0
        assert "✓ HELLO" in result.output
        assert "✓ world" in result.output

    def test_invalid_word_exit_one(self, runner: CliRunner) -> None:
        """Test a rejected word fails the command with the rule message."""
        result = runner.invoke(main, ["check", "HELLO", "cat3"])
        assert result.exit_code == 1
        assert (
            "✗ Word 'cat3' contains invalid characters. Only letters A-Z are allowed."
            in result.output
        )

    def test_blank_word_is_required(self, runner: CliRunner) -> None:
        """Test blank arguments fail the required rule."""
        result = runner.invoke(main, ["check", "  "])
        assert result.exit_code == 1
        assert "Word cannot be blank" in result.output

    def test_max_length_option(self, runner: CliRunner) -> None:
        """Test --max-length bounds the accepted words."""
        result = runner.invoke(main, ["check", "--max-length", "3", "hello"])
        assert result.exit_code == 1
        assert "between 1 and 3" in result.output

    def test_max_length_from_env(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test WORDGUARD_MAX_WORD_LENGTH applies when no flag is given."""
        monkeypatch.setenv("WORDGUARD_MAX_WORD_LENGTH", "4")
        result = runner.invoke(main, ["check", "hello"])
        assert result.exit_code == 1

    def test_strict_trims_and_limits(self, runner: CliRunner) -> None:
        """Test --strict trims input and applies the 10 character limit."""
        ok = runner.invoke(main, ["check", "--strict", " cat "])
        assert ok.exit_code == 0

        too_long = runner.invoke(main, ["check", "--strict", "abcdefghijk"])
        assert too_long.exit_code == 1
        assert "Word cannot exceed 10 characters" in too_long.output

    def test_color_forced_on(self, runner: CliRunner) -> None:
        """Test --color adds ANSI codes even without a TTY."""
        result = runner.invoke(main, ["check", "--color", "HELLO"])
        assert "\033[92m" in result.output

    def test_invalid_config_reports_error(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test configuration errors exit with status 1."""
        monkeypatch.setenv("WORDGUARD_MAX_WORD_LENGTH", "500")
        result = runner.invoke(main, ["check", "hello"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    @pytest.mark.parametrize("value", ["0", "101"])
    def test_out_of_range_max_length_flag(
        self, runner: CliRunner, value: str
    ) -> None:
        """Test an out-of-range --max-length exits cleanly with an error line."""
        result = runner.invoke(main, ["check", "--max-length", value, "cat"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Configuration error in 'max_word_length'" in result.output

    def test_verbose_flag_configures_logging(
        self, runner: CliRunner, cli_env: MagicMock
    ) -> None:
        """Test -v turns on debug logging."""
        runner.invoke(main, ["check", "-v", "HELLO"])
        cli_env.assert_called_once_with(verbose=True, quiet=False)

    def test_requires_a_word(self, runner: CliRunner) -> None:
        """Test at least one word is needed."""
        result = runner.invoke(main, ["check"])
        assert result.exit_code == 2
