"""
Builders for guarded DDL statements
"""
from typing import Sequence

from .runner import Statement


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def create_enum(name: str, values: Sequence[str]) -> Statement:
    """CREATE TYPE has no IF NOT EXISTS; swallow duplicate_object inside the DO block"""
    labels = ", ".join(quote_literal(v) for v in values)
    return Statement(
        label=f"enum {name}",
        sql=(
            "DO $$ BEGIN\n"
            f"  CREATE TYPE {name} AS ENUM ({labels});\n"
            "EXCEPTION WHEN duplicate_object THEN NULL; END $$"
        ),
    )


def create_index(name: str, table: str, *columns: str) -> Statement:
    cols = ", ".join(f'"{c}"' for c in columns)
    return Statement(
        label=f"index {name}",
        sql=f'CREATE INDEX IF NOT EXISTS {name} ON "{table}" ({cols})',
    )
