"""Application configuration.

Values are read from the environment (``FIT_AVATAR_`` prefix) or a ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FIT_AVATAR_",
        env_file=".env",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Path.home() / ".fit-avatar"
    db_filename: str = "fit_avatar.db"

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"  # console or json

    # Statistics
    recent_workouts_limit: int = 5

    # Web API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def db_path(self) -> Path:
        """Path of the SQLite database file."""
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
