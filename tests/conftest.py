"""
Pytest fixtures shared by all tests.
Isolates configuration from the developer's shell and .env files; no test
touches a real database or Supabase project.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import Settings, get_settings
from backend.supabase_client import SupabaseClient

CONFIG_ENV_VARS = ["DIRECT_URL", "DATABASE_URL", "SUPABASE_URL", "SUPABASE_ANON_KEY"]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Blank every configuration variable so .env files cannot leak in."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.setenv(name, "")
    get_settings.cache_clear()
    SupabaseClient.reset()
    yield
    get_settings.cache_clear()
    SupabaseClient.reset()


@pytest.fixture
def make_settings():
    """Build Settings without reading any .env file."""
    def _make(**overrides):
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def fake_engine():
    """Engine double whose connect() hands back a MagicMock connection."""
    engine = MagicMock(name="engine")
    connection = MagicMock(name="connection")
    engine.connect.return_value = connection
    return engine


@pytest.fixture
def engine_factory(fake_engine):
    return MagicMock(name="engine_factory", return_value=fake_engine)
