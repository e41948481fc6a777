#!/usr/bin/env python3
"""
Create the AI Copilot tables (ai_copilot_conversations, ai_copilot_messages)
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_create_copilot_tables
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.copilot_tables import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
