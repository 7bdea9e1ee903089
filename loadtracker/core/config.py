"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Training Load Tracker"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Training Load Tracker contributors"]

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Storage
    DATABASE_URL: str = "sqlite:///./training_load.db"
    TRACK_SESSIONS_KEY: str = "trackSessions"
    GYM_SESSIONS_KEY: str = "gymSessions"

    # Dashboard
    SEED_SAMPLE_DATA: bool = True
    RECENT_SESSIONS_LIMIT: int = 20

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
