"""
Migration configuration for Alembic

Static descriptor handed to migrations/env.py. No migration logic lives here.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from backend.config import ConfigurationError, Settings, get_settings, resolve_connection_string
from backend.database import normalize_database_url

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class MigrationConfig:
    """Where the schema lives, where revisions go, and how to connect"""
    schema: str
    schema_dir: Path
    out: Path
    dialect: str
    url: str

    @property
    def sqlalchemy_url(self) -> str:
        return normalize_database_url(self.url)

    def check_script_location(self, script_location: str):
        """
        Alembic reads the revisions directory from alembic.ini; it must be `out`.

        Raises:
            ConfigurationError: if the two disagree
        """
        if Path(script_location).resolve() != self.out.resolve():
            raise ConfigurationError(
                f"alembic.ini script_location {script_location} does not match {self.out}"
            )


def load_migration_config(settings: Optional[Settings] = None) -> MigrationConfig:
    """
    Build the migration descriptor.

    Uses DIRECT_URL over DATABASE_URL (the pooler does not handle DDL well).

    Raises:
        ConfigurationError: if neither connection string is set
    """
    url = resolve_connection_string(settings or get_settings())
    return MigrationConfig(
        schema="backend.models",
        schema_dir=PROJECT_ROOT / "backend" / "models",
        out=PROJECT_ROOT / "migrations",
        dialect="postgresql",
        url=url,
    )
