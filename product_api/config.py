"""Application configuration."""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = "development"
    database_url: str = "sqlite:///./products.db"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Servers advertised in the OpenAPI document
    openapi_dev_url: str = "http://localhost:8080"
    openapi_prod_url: str = "https://magadiflo.com"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
