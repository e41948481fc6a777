#!/usr/bin/env python3
"""
Add qualificationChecklist to the leads table
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_add_leads_qualification
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.leads_qualification import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
