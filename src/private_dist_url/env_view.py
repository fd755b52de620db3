"""
Two-tier variable lookup: process environment first, then a local .env file.

The file is parsed with python-dotenv on every lookup and is never loaded
into ``os.environ``.
"""
import logging
import os
from io import StringIO
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


def mask_sensitive(value: Optional[str], visible_chars: int = 3) -> str:
    """
    Mask sensitive values for safe logging.

    Values shorter than four times ``visible_chars`` are masked completely.
    """
    if value is None:
        return "<None>"
    if len(value) < visible_chars * 4:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


class EnvironmentView:
    """
    Read-only view over the process environment and an optional .env file.

    Args:
        dotenv_path: File consulted when a name is missing from the environment.
            ``None`` disables the file fallback.
        environ: Mapping used as the process environment (default: ``os.environ``).
    """

    def __init__(
        self,
        dotenv_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._dotenv_path = Path(dotenv_path) if dotenv_path is not None else None
        self._environ = environ if environ is not None else os.environ

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EnvironmentView":
        """Build a view whose .env location follows the given (or cached) settings."""
        settings = settings or get_settings()
        return cls(dotenv_path=settings.dotenv_path())

    @property
    def dotenv_path(self) -> Optional[Path]:
        return self._dotenv_path

    def read_dotenv(self) -> Dict[str, str]:
        """
        Parse the .env file into a dict.

        A missing file yields an empty dict. Entries without a value are skipped.
        """
        path = self._dotenv_path
        if path is None or not path.exists():
            logger.debug(f"read_dotenv: No dotenv file at {path}")
            return {}

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"read_dotenv: Failed to read dotenv file {path}: {e}")
            return {}

        parsed = dotenv_values(stream=StringIO(content))
        values: Dict[str, str] = {}
        for key, value in parsed.items():
            if value is not None:
                values[key] = value
        logger.debug(f"read_dotenv: Parsed {len(values)} entries from {path}")
        return values

    def get(self, name: str) -> Optional[str]:
        """
        Look a variable up by exact name.

        Returns:
            The environment value if set, else the .env value, else None.
        """
        value = self._environ.get(name)
        if value is not None:
            logger.debug(f"get: '{name}' found in environment ({mask_sensitive(value)})")
            return value

        value = self.read_dotenv().get(name)
        if value is not None:
            logger.debug(f"get: '{name}' found in {self._dotenv_path} ({mask_sensitive(value)})")
            return value

        logger.debug(f"get: '{name}' not found")
        return None
