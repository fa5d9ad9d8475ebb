"""
Pytest configuration for CLI tests.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from suitokengen.config.validation import KNOWN_KEYS


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Put back the root handlers the CLI group replaces."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide an environment without any token generator settings."""
    for key in KNOWN_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def test_env_file(tmp_path: Path) -> Path:
    """Create a test environment file."""
    env_file = tmp_path / ".env"
    env_content = f"""
    LOG_LEVEL=INFO
    LOG_FILE={tmp_path / "suitokengen.log"}
    SERVER_URL=http://127.0.0.1:5001
    SERVER_PORT=5001
    GIT_CLONE_TIMEOUT=60
    """
    env_file.write_text("\n".join(line.strip() for line in env_content.strip().splitlines()))
    return env_file


@pytest.fixture
def create_args(tmp_path: Path) -> list:
    """Non-interactive arguments for ``create --local``."""
    return [
        "create",
        "--local",
        "--name",
        "My Token",
        "--symbol",
        "MTK",
        "--decimals",
        "8",
        "--description",
        "A custom token.",
        "--not-frozen",
        "--environment",
        "testnet",
        "--output-dir",
        str(tmp_path),
    ]
