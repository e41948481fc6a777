#!/usr/bin/env python3
"""
Supabase connectivity check

Issues one bounded read (limit 1) against the users table.

Usage:
    python -m backend.scripts.supabase_check

Exit codes:
    0: Success
    1: Missing configuration or query failed
"""
import sys
import logging

from postgrest.exceptions import APIError

from backend.config import ConfigurationError, configure_logging, get_settings
from backend.supabase_client import get_supabase

logger = logging.getLogger(__name__)

PROBE_TABLE = "users"


def probe(client, table: str = PROBE_TABLE) -> bool:
    """Read at most one row from `table`; raises APIError on failure"""
    client.table(table).select("id").limit(1).execute()
    return True


def main() -> int:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.supabase_url or not settings.supabase_anon_key:
        logger.error("❌ SUPABASE_URL and SUPABASE_ANON_KEY are not configured")
        return 1

    logger.info("🔍 Testing Supabase connection...")
    logger.info(f"📍 URL: {settings.supabase_url}")

    try:
        client = get_supabase(settings)
        probe(client)
    except APIError as e:
        logger.error(f"❌ Connection error: {e.message}")
        return 1
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1
    except Exception as e:
        logger.error(f"❌ Unexpected error: {e}")
        return 1

    logger.info("✅ Supabase connection established!")
    logger.info(f"📊 Table \"{PROBE_TABLE}\" is reachable")
    return 0


if __name__ == "__main__":
    sys.exit(main())
