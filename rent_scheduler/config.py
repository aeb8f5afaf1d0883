"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "rent-scheduler"
    log_level: str = "INFO"

    # Schedule output
    currency: str = "PHP"  # display label only, no conversion
    max_rent_changes: int = 100


settings = Settings()
