#!/usr/bin/env python3
"""
Inspect the database: tables in the public schema, their columns and row
counts, then the enum types. Read-only.

Usage:
    python -m backend.scripts.db_inspect
"""
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError

from backend.config import ConfigurationError, configure_logging, get_settings, resolve_connection_string
from backend.database import create_script_engine

logger = logging.getLogger(__name__)

TABLES_SQL = text("""
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = 'public'
    ORDER BY table_name
""")

COLUMNS_SQL = text("""
    SELECT column_name, data_type, is_nullable
    FROM information_schema.columns
    WHERE table_schema = 'public' AND table_name = :table_name
    ORDER BY ordinal_position
""")

ENUMS_SQL = text("""
    SELECT t.typname, array_agg(e.enumlabel ORDER BY e.enumsortorder) AS labels
    FROM pg_type t
    JOIN pg_enum e ON t.oid = e.enumtypid
    JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
    WHERE n.nspname = 'public'
    GROUP BY t.typname
    ORDER BY t.typname
""")


@dataclass
class ColumnInfo:
    name: str
    data_type: str
    nullable: bool


@dataclass
class TableInfo:
    name: str
    columns: List[ColumnInfo] = field(default_factory=list)
    row_count: Optional[int] = None  # None when COUNT(*) failed


def inspect_schema(connection: Connection) -> List[TableInfo]:
    tables = []
    for (name,) in connection.execute(TABLES_SQL):
        columns = [
            ColumnInfo(row[0], row[1], row[2] != "NO")
            for row in connection.execute(COLUMNS_SQL, {"table_name": name})
        ]
        tables.append(TableInfo(name=name, columns=columns, row_count=_row_count(connection, name)))
    return tables


def _row_count(connection: Connection, table_name: str) -> Optional[int]:
    quoted = '"' + table_name.replace('"', '""') + '"'
    try:
        return connection.execute(text(f"SELECT COUNT(*) FROM {quoted}")).scalar()
    except DBAPIError as e:
        logger.warning(f"⚠️ Could not count rows in {table_name}: {e.orig}")
        return None


def list_enums(connection: Connection) -> Dict[str, List[str]]:
    return {name: list(labels) for name, labels in connection.execute(ENUMS_SQL)}


def print_report(tables: List[TableInfo], enums: Dict[str, List[str]]):
    print("--- TABLES IN SCHEMA public ---\n")
    print("Tables:", ", ".join(t.name for t in tables) or "(none)")

    for table in tables:
        print(f"\n=== {table.name} ({len(table.columns)} columns) ===")
        for column in table.columns:
            suffix = "" if column.nullable else " NOT NULL"
            print(f"  {column.name}: {column.data_type}{suffix}")
        count = "error" if table.row_count is None else table.row_count
        print(f"  -> rows: {count}")

    print("\n--- ENUMS ---\n")
    for name, labels in enums.items():
        print(f"{name}: [{', '.join(labels)}]")


def main(engine_factory=create_script_engine) -> int:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        engine = engine_factory(resolve_connection_string(settings))
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1

    try:
        with engine.connect() as connection:
            tables = inspect_schema(connection)
            enums = list_enums(connection)
    except DBAPIError as e:
        logger.error(f"❌ Error: {e.orig}")
        return 1
    finally:
        engine.dispose()

    print_report(tables, enums)
    return 0


if __name__ == "__main__":
    sys.exit(main())
