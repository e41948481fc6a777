#!/usr/bin/env python3
"""
Allow the 'support_reply' notification type
Requires DIRECT_URL or DATABASE_URL. Safe to re-run.

Usage:
    python -m backend.scripts.db_add_notification_type_support_reply
"""
import sys

from backend.schema_patches import run_cli
from backend.schema_patches.notification_types import PATCH


def main() -> int:
    return run_cli(PATCH)


if __name__ == "__main__":
    sys.exit(main())
