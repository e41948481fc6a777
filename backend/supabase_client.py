"""
Supabase Client Configuration
Handles the connection to the Supabase REST API
"""
from typing import Optional
from supabase import create_client, Client
import logging

from backend.config import ConfigurationError, Settings, get_settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Singleton Supabase client"""

    _instance: Optional[Client] = None

    @classmethod
    def get_client(cls, url: str, key: str) -> Client:
        """Get or create Supabase client instance"""
        if cls._instance is None:
            if not url or not key:
                raise ConfigurationError(
                    "SUPABASE_URL and SUPABASE_ANON_KEY must be set in environment variables"
                )

            cls._instance = create_client(url, key)
            logger.info("✓ Supabase client initialized")

        return cls._instance

    @classmethod
    def reset(cls):
        """Reset client instance (for testing)"""
        cls._instance = None


# Convenience function
def get_supabase(settings: Optional[Settings] = None) -> Client:
    """Get Supabase client instance using the anon key"""
    settings = settings or get_settings()
    return SupabaseClient.get_client(settings.supabase_url, settings.supabase_anon_key)
