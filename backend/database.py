"""
Database connection helpers
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
import logging

from backend.config import ConfigurationError

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """SQLAlchemy no longer accepts the postgres:// scheme Supabase hands out"""
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def create_script_engine(connection_string: str) -> Engine:
    """
    Create an engine for one-off scripts.

    No pooling: the script owns a single connection and releases it on exit.
    Autocommit so each DDL statement stands on its own.
    """
    url = normalize_database_url(connection_string)
    logger.debug("Creating script engine (NullPool, autocommit)")
    try:
        return create_engine(url, poolclass=NullPool, isolation_level="AUTOCOMMIT")
    except (ArgumentError, ValueError) as e:  # ValueError: malformed port
        raise ConfigurationError(f"Invalid database URL: {e}") from e
