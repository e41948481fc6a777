"""
Tests for the Supabase client singleton and the connectivity check script.
"""
from unittest.mock import MagicMock, patch

import pytest
from postgrest.exceptions import APIError

from backend.config import ConfigurationError
from backend.scripts import supabase_check
from backend.supabase_client import SupabaseClient, get_supabase

URL = "https://example.supabase.co"
KEY = "anon-key"


@pytest.fixture
def supabase_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", URL)
    monkeypatch.setenv("SUPABASE_ANON_KEY", KEY)


@pytest.fixture
def mock_create_client():
    with patch("backend.supabase_client.create_client") as m:
        m.return_value = MagicMock(name="supabase")
        yield m


class TestSupabaseClient:
    def test_singleton(self, mock_create_client):
        first = SupabaseClient.get_client(URL, KEY)
        second = SupabaseClient.get_client(URL, KEY)

        assert first is second
        mock_create_client.assert_called_once_with(URL, KEY)

    def test_missing_credentials(self, mock_create_client):
        with pytest.raises(ConfigurationError):
            SupabaseClient.get_client("", KEY)
        mock_create_client.assert_not_called()

    def test_get_supabase_uses_settings(self, make_settings, mock_create_client):
        get_supabase(make_settings(supabase_url=URL, supabase_anon_key=KEY))
        mock_create_client.assert_called_once_with(URL, KEY)


class TestProbe:
    def test_issues_one_bounded_read(self):
        client = MagicMock()

        assert supabase_check.probe(client) is True

        client.table.assert_called_once_with("users")
        client.table.return_value.select.return_value.limit.assert_called_once_with(1)
        client.table.return_value.select.return_value.limit.return_value.execute.assert_called_once_with()


class TestMain:
    @pytest.mark.parametrize("missing", ["SUPABASE_URL", "SUPABASE_ANON_KEY"])
    def test_missing_configuration(self, supabase_env, monkeypatch, mock_create_client, missing):
        monkeypatch.setenv(missing, "")

        assert supabase_check.main() == 1
        mock_create_client.assert_not_called()

    def test_success(self, supabase_env, mock_create_client):
        assert supabase_check.main() == 0
        mock_create_client.assert_called_once_with(URL, KEY)

    def test_api_error(self, supabase_env, mock_create_client):
        client = mock_create_client.return_value
        client.table.return_value.select.return_value.limit.return_value.execute.side_effect = APIError(
            {"message": 'relation "public.users" does not exist', "code": "42P01", "hint": None, "details": None}
        )

        assert supabase_check.main() == 1

    def test_unexpected_error(self, supabase_env, mock_create_client):
        mock_create_client.side_effect = ConnectionError("network down")

        assert supabase_check.main() == 1
