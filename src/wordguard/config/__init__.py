"""Configuration loading for WordGuard.

Main components:
- ConfigLoader: Resolve command settings and read payload files
- Environment variable substitution (${VAR_NAME} pattern)
- Default configuration values
"""

from wordguard.config.env_loader import get_env_var, load_env_file, substitute_env_vars
from wordguard.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "substitute_env_vars",
    "get_env_var",
    "load_env_file",
]
