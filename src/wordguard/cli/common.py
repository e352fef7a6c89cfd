"""Helpers shared by WordGuard CLI commands."""

from __future__ import annotations

from wordguard.config.defaults import DEFAULT_CHECK_CONFIG, DEFAULT_ENV_FILE
from wordguard.config.env_loader import load_env_file
from wordguard.config.loader import ConfigLoader, build_check_config
from wordguard.lib.logging_config import setup_logging
from wordguard.models.config import CheckConfig


def resolve_command_config(
    verbose: bool,
    quiet: bool,
    color: bool | None = None,
    max_word_length: int | None = None,
) -> CheckConfig:
    """Load .env, resolve settings and configure logging for a command.

    Boolean flags that were not passed on the command line are treated as
    unset so environment variables can still apply.

    Raises:
        ConfigError: If a flag or the resolved settings are out of range
    """
    load_env_file(DEFAULT_ENV_FILE)

    cli_config = build_check_config(
        verbose=verbose or None,
        quiet=quiet or None,
        color=color,
        max_word_length=max_word_length,
    )
    config = ConfigLoader().resolve_check_config(
        cli_config=cli_config, defaults=DEFAULT_CHECK_CONFIG
    )
    setup_logging(verbose=bool(config.verbose), quiet=bool(config.quiet))
    return config
