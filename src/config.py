"""Application configuration loaded from environment variables and .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    Drug rules are code, not settings: see src.core.pharmacy.rules.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # Reference simulation (src.main)
    SIMULATION_DAYS: int = Field(default=30, ge=0)


settings = Settings()
