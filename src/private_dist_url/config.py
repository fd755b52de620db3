"""Settings for locating the .env fallback file, loaded with Pydantic Settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from PRIVATE_DIST_URL_* environment variables."""

    DOTENV_FILENAME: str = ".env"
    DOTENV_DIR: Optional[str] = None  # None means the cwd at lookup time
    DOTENV_ENABLED: bool = True

    class Config:
        case_sensitive = True
        env_prefix = "PRIVATE_DIST_URL_"
        env_file = None  # Use system env only

    def dotenv_path(self) -> Optional[Path]:
        """Return the .env path to consult, or None when the fallback is disabled."""
        if not self.DOTENV_ENABLED:
            return None
        base = Path(self.DOTENV_DIR) if self.DOTENV_DIR else Path(os.getcwd())
        return base / self.DOTENV_FILENAME


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
