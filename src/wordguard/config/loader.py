"""Configuration and payload loading for WordGuard.

Resolves command settings from CLI flags, environment variables and
built-in defaults, and reads request payload files for batch validation.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from wordguard.config.defaults import DEFAULT_CHECK_CONFIG
from wordguard.config.env_loader import substitute_env_vars
from wordguard.lib.errors import ConfigError, FileNotFoundError
from wordguard.models.config import CheckConfig

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "verbose": "WORDGUARD_VERBOSE",
    "quiet": "WORDGUARD_QUIET",
    "color": "WORDGUARD_COLOR",
    "max_word_length": "WORDGUARD_MAX_WORD_LENGTH",
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "max_word_length":
        return int(value)
    return value.lower() in ("true", "1", "yes", "on")


def _get_env_value(
    field_name: str, env_vars: os._Environ[str] | dict[str, str]
) -> Any | None:
    """Get environment variable value for a field.

    Returns:
        Parsed value or None if not found or invalid
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    try:
        return _parse_env_value(field_name, env_vars[env_var_name])
    except (ValueError, KeyError):
        logger.warning(
            f"Ignoring invalid value for {env_var_name}: {env_vars[env_var_name]!r}"
        )
        return None


def build_check_config(**values: Any) -> CheckConfig:
    """Create a CheckConfig, reporting out-of-range values as ConfigError.

    Raises:
        ConfigError: If a value fails validation
    """
    try:
        return CheckConfig(**values)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(item) for item in first.get("loc", ())) or "config"
        raise ConfigError(field, first.get("msg", "Invalid value")) from e


class ConfigLoader:
    """Load command settings and payload files."""

    def resolve_check_config(
        self,
        cli_config: CheckConfig | None = None,
        defaults: dict[str, Any] | None = None,
        env_vars: os._Environ[str] | dict[str, str] | None = None,
    ) -> CheckConfig:
        """Resolve settings with priority hierarchy.

        Configuration priority (highest to lowest):
        1. CLI flags (cli_config)
        2. Environment variables (WORDGUARD_* vars)
        3. Built-in defaults

        Args:
            cli_config: Settings from CLI flags (optional)
            defaults: Dictionary of default values
            env_vars: Environment mapping, ``os.environ`` when omitted

        Returns:
            Resolved CheckConfig

        Raises:
            ConfigError: If the resolved values are out of range
        """
        defaults = DEFAULT_CHECK_CONFIG if defaults is None else defaults
        env_vars = os.environ if env_vars is None else env_vars
        resolved: dict[str, Any] = {}

        for field in CheckConfig.model_fields:
            # Priority 1: CLI flag
            if cli_config and getattr(cli_config, field, None) is not None:
                resolved[field] = getattr(cli_config, field)
            # Priority 2: Environment variable
            elif (env_value := _get_env_value(field, env_vars)) is not None:
                resolved[field] = env_value
            # Priority 3: Built-in default
            else:
                resolved[field] = defaults.get(field)

        return build_check_config(**resolved)

    def load_payloads(self, path: str | Path) -> list[dict[str, Any]]:
        """Read request payloads from a YAML file.

        The file may hold a single mapping or a list of mappings.
        ``${VAR}`` references are substituted before parsing.

        Args:
            path: Path to the payload file

        Returns:
            List of payload dictionaries (empty for an empty file)

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file cannot be parsed or has the wrong shape
        """
        payload_path = Path(path)
        if not payload_path.is_file():
            raise FileNotFoundError(
                str(payload_path),
                "Check the path or create a YAML file with request payloads.",
            )

        try:
            raw_text = payload_path.read_text(encoding="utf-8")
            content = yaml.safe_load(substitute_env_vars(raw_text))
        except yaml.YAMLError as e:
            raise ConfigError("payloads", f"Invalid YAML in {payload_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(
                "payloads", f"{payload_path} is not valid UTF-8: {e.reason}"
            ) from e
        except OSError as e:
            raise ConfigError("payloads", f"Cannot read {payload_path}: {e}") from e

        if content is None:
            return []
        if isinstance(content, dict):
            content = [content]
        if not isinstance(content, list) or not all(
            isinstance(item, dict) for item in content
        ):
            raise ConfigError(
                "payloads", "Payload file must contain a mapping or a list of mappings"
            )

        logger.debug(f"Loaded {len(content)} payload(s) from {payload_path}")
        return content
