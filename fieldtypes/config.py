# ABOUTME: Application configuration and settings
# ABOUTME: Loads service settings from environment variables using pydantic-settings

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    model_config = SettingsConfigDict(env_file=".env", env_prefix="FIELDTYPES_")

    environment: str = "development"
    log_level: str = "INFO"
    max_rows: int = 100000


@lru_cache
def get_settings() -> Settings:
    """Returns cached settings instance."""
    return Settings()
