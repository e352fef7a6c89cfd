"""Default configuration values for WordGuard."""

DEFAULT_CHECK_CONFIG: dict[str, int | bool | None] = {
    "verbose": False,
    "quiet": False,
    "color": None,  # None means detect from TTY
    "max_word_length": 15,
}

# Name of the dotenv file read from the working directory
DEFAULT_ENV_FILE = ".env"
