"""Pytest configuration and shared fixtures."""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from filename_sanitize.infrastructure.config import DEFAULT_CONFIG, Config
from filename_sanitize.infrastructure.config.sanitize_config import ENV_PREFIX
from filename_sanitize.infrastructure.logging import LoggerSetup

CLI_ENV_VARS = (
    "BASE_DIRECTORY",
    "DEFAULT_FILENAME",
    "SEPARATOR",
    "VERBOSE",
    "LOG_TO_FILE",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test without configuration leaking in from the environment or a .env file."""
    for key in DEFAULT_CONFIG:
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)
    for name in CLI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Allow LoggerSetup to be initialized again and drop its handlers afterwards."""
    LoggerSetup.reset()
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if not type(handler).__module__.startswith("_pytest"):
            root_logger.removeHandler(handler)
            handler.close()
    LoggerSetup.reset()


@pytest.fixture
def config() -> Config:
    """Load configuration from environment."""
    return Config.from_env()


@pytest.fixture(scope="session")
def long_digits() -> str:
    """Return 300 digits, longer than any filesystem allows for a name."""
    return "1234567890" * 30
