"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_data_dir() -> Path:
    """Per-user directory holding the database, client state and logs."""
    return Path.home() / "Documents" / "Portfolio Tracker Data"


class Settings(BaseSettings):
    """
    Configuration for both the backend and the client.

    Every field can be set through a PORTFOLIO_-prefixed environment
    variable or a .env file, e.g. PORTFOLIO_JWT_SECRET.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Portfolio Tracker"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_to_file: bool = False

    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    # Client side
    api_base_url: str = "http://localhost:3777"
    request_timeout_seconds: float = 10.0
    client_state_filename: str = "client_state.json"

    # Backend side
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_ttl_minutes: int = 60
    cors_origins: list[str] = ["*"]

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def get_data_dir(self) -> Path:
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Explicit database_url, else a SQLite file in the data directory."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.get_data_dir() / 'portfolio.db'}"

    def get_client_state_path(self) -> Path:
        return self.get_data_dir() / self.client_state_filename

    def get_log_dir(self) -> Path:
        log_dir = self.get_data_dir() / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
