# hotel_search/config.py
"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings shared by the listing service and the browser client."""

    # App
    APP_NAME: str = "Hotel Search API"
    APP_VERSION: str = "0.1.0"

    # Database (Postgres in production, e.g. postgresql+psycopg2://user:pw@host/wb)
    DATABASE_URL: str = "sqlite:///db.sqlite"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Return the raw database error text in 500 envelopes
    EXPOSE_DB_ERRORS: bool = True

    # Client
    API_URL: str = "http://localhost:8080/api"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
