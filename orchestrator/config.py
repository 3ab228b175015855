"""Application configuration."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API server
    host: str = "127.0.0.1"
    port: int = 3001
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Scanning
    default_scan_depth: int = 3
    max_scan_depth: int = 10

    # Planning
    unsorted_root_name: str = "_UNSORTED_DESKTOP"
    inbox_target: str = "00_Inbox"

    model_config = SettingsConfigDict(
        env_prefix="ORCHESTRATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


# Global settings instance
settings = Settings()
