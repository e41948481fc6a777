"""
Alembic environment

Reads the migration descriptor from backend.migration_config and the target
metadata from backend.models.
"""
import importlib
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from backend.database import Base
from backend.migration_config import load_migration_config

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

# Fails fast with ConfigurationError before any connection is attempted
migration_config = load_migration_config()
migration_config.check_script_location(config.get_main_option("script_location"))
logger.info(f"Schema {migration_config.schema} ({migration_config.schema_dir}), revisions in {migration_config.out}")
importlib.import_module(migration_config.schema)  # registers tables on Base.metadata

config.set_main_option("sqlalchemy.url", migration_config.sqlalchemy_url.replace("%", "%%"))
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a live connection"""
    context.configure(
        url=migration_config.sqlalchemy_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against the database"""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    logger.info(f"Generating offline SQL for {migration_config.dialect}")
    run_migrations_offline()
else:
    run_migrations_online()
