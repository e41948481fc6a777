"""
Configuration management for the leads backend
"""
import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when a required configuration value is missing"""


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database. DIRECT_URL bypasses the Supabase pooler and is required for DDL.
    direct_url: str = ""
    database_url: str = ""

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 8000
    api_prefix: str = "/api"
    python_env: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields like VITE_* from .env
        env_file=(".env", ".env.development"),
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def resolve_connection_string(settings: Optional[Settings] = None) -> str:
    """
    Resolve the database connection string.

    DIRECT_URL wins over DATABASE_URL because the pooled connection does not
    reliably accept schema changes.

    Raises:
        ConfigurationError: if neither value is set
    """
    settings = settings or get_settings()
    connection_string = settings.direct_url or settings.database_url
    if not connection_string:
        raise ConfigurationError("Set DIRECT_URL or DATABASE_URL in the environment or .env")
    return connection_string


def configure_logging(level: Optional[str] = None):
    """Configure root logging for scripts and the app. Unknown levels fall back to INFO."""
    requested = (level or get_settings().log_level).upper()
    known = isinstance(logging.getLevelName(requested), int)
    logging.basicConfig(
        level=requested if known else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    if not known:
        logging.getLogger(__name__).warning(f"⚠️ Unknown LOG_LEVEL {requested!r}, using INFO")
