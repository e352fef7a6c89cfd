"""Logging setup for WordGuard.

All modules obtain loggers through ``get_logger`` so that records land under
the ``wordguard`` namespace and share one handler configured by the CLI.
"""

import logging
import sys

ROOT_LOGGER_NAME = "wordguard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``wordguard`` namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the ``wordguard`` logger for CLI use.

    Verbose wins over quiet. Calling this more than once replaces the
    previously installed handler instead of stacking a new one.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit WARNING and above
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_wordguard_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._wordguard_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
