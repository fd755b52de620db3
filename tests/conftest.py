"""
Pytest configuration and shared fixtures for private_dist_url tests.
"""
import logging
from pathlib import Path

import pytest

from private_dist_url.config import get_settings


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """
    Run every test from an empty working directory with no placeholder
    variables or PRIVATE_DIST_URL_* settings in the environment.
    Returns a function to set environment variables for testing.
    """
    env_vars_to_clear = [
        "KEY_FOO",
        "KEY_BAR",
        "PRIVATE_DIST_URL_DOTENV_FILENAME",
        "PRIVATE_DIST_URL_DOTENV_DIR",
        "PRIVATE_DIST_URL_DOTENV_ENABLED",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    def set_env(**kwargs):
        """Set environment variables for testing."""
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    yield set_env

    get_settings.cache_clear()


@pytest.fixture
def write_dotenv(tmp_path):
    """Fixture that writes a .env file into the working directory."""
    def _write_dotenv(content: str, directory: Path = tmp_path) -> Path:
        path = directory / ".env"
        path.write_text(content)
        return path

    return _write_dotenv
