#!/usr/bin/env python3
"""
Create the support ticket enums and tables
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_create_support_tables
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.support_tables import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
