"""Environment variable helpers for WordGuard configuration."""

from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import load_dotenv

from wordguard.lib.errors import ConfigError
from wordguard.lib.logging_config import get_logger

logger = get_logger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, or ``default`` when unset."""
    return os.environ.get(name, default)


def load_env_file(path: str | Path, override: bool = False) -> bool:
    """Load variables from a dotenv file into ``os.environ``.

    Args:
        path: Path to the .env file
        override: Replace variables that are already set

    Returns:
        True if the file existed and was loaded
    """
    env_path = Path(path)
    if not env_path.is_file():
        logger.debug(f"No env file at {env_path}")
        return False

    load_dotenv(env_path, override=override)
    logger.debug(f"Loaded env file {env_path}")
    return True


def substitute_env_vars(text: str) -> str:
    """Replace ``${VAR}`` references with environment values.

    Args:
        text: Raw text, typically YAML file contents

    Returns:
        Text with every reference substituted

    Raises:
        ConfigError: If a referenced variable is not set
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = os.environ.get(name)
        if value is None:
            raise ConfigError(
                name,
                f"Environment variable '{name}' is referenced but not set",
            )
        return value

    return ENV_VAR_PATTERN.sub(_replace, text)
