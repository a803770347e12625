"""
Configuration management for Clientstore.
"""
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clientstore.constants import DEFAULT_DATABASE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application
    app_name: str = "Clientstore"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 7474

    # Database
    database_url: str = Field(
        DEFAULT_DATABASE_URL,
        description="Database connection URL (async driver, e.g. sqlite+aiosqlite)"
    )
    delete_isolation_level: Optional[str] = Field(
        None,
        description="Isolation level for cascading client deletes (defaults per backend)"
    )

    # Repository
    cache_storage_hits: bool = Field(
        False,
        description="Cache download clients read from storage by id (read-through)"
    )

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[Path] = Field(None, description="Directory for the rotating log file")


settings = Settings()
