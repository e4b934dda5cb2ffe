"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Polo Club"
    app_version: str = "0.1.0"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]

    # Database
    database_url: str = "sqlite:///./data/poloclub.db"

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Auth
    admin_emails: list[str] = ["admin@example.com"]
    auth_secret_key: str = "change-me-in-production"
    auth_algorithm: str = "HS256"
    auth_token_expire_minutes: int = 720

    # Practices
    balance_threshold: float = 2.0  # handicap delta flagged as unbalanced
    default_chukker_count: int = 4
    max_chukker_count: int = 8

    # Horses
    default_max_chukkers_per_day: int = 2
    horse_log_page_size: int = 30

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
