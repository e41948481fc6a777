#!/usr/bin/env python3
"""
Create the appointments table
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_create_appointments_table
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.appointments_table import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
