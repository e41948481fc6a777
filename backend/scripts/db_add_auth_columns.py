#!/usr/bin/env python3
"""
Add the auth columns to the users table
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_add_auth_columns
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.auth_columns import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
