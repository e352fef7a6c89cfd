"""Pytest configuration and shared fixtures for WordGuard tests."""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Removes WORDGUARD_* variables for the duration of the test and restores
    the original environment afterwards.
    """
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("WORDGUARD_"):
            del os.environ[key]
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
