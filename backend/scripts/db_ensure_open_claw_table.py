#!/usr/bin/env python3
"""
Create open_claw_automations if missing
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_ensure_open_claw_table
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.open_claw_table import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
