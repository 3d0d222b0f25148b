"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="FamilyTracker", description="Application name")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode; also echoes SQL")

    # Database settings - SQLite
    data_dir: Path = Field(
        default=Path("data"), description="Directory holding the SQLite file"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy URL; defaults to sqlite:///<data_dir>/tracker.db",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    seed_on_startup: bool = Field(
        default=True, description="Seed default family members during bootstrap"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @property
    def resolved_database_url(self) -> str:
        """Explicit database_url, or the tracker.db file inside data_dir"""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{(self.data_dir / 'tracker.db').as_posix()}"


# Global settings instance
settings = Settings()
