"""
Tests for the mount-prefix path normalizer and the serverless entry point.
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from backend.health import ROOT_PAYLOAD
from backend.main import app as backend_app
from backend.path_normalizer import API_PREFIX, MountPrefixMiddleware, normalize_path


class RecordingApp:
    """ASGI app that records every scope it receives."""

    def __init__(self, error=None):
        self.scopes = []
        self.error = error

    async def __call__(self, scope, receive, send):
        self.scopes.append(dict(scope))
        if self.error is not None:
            raise self.error


async def _noop_receive():
    return {"type": "http.request", "body": b""}


async def _noop_send(message):
    pass


def _call(middleware, scope):
    asyncio.run(middleware(scope, _noop_receive, _noop_send))
    return scope


@pytest.mark.unit
class TestNormalizePath:
    @pytest.mark.parametrize("path, expected", [
        ("/users/42", "/api/users/42"),
        ("/", "/api"),
        ("/api/users", "/api/users"),
        ("/api", "/api"),
        ("/docs", "/api/docs"),
        ("/trpc/leads.list", "/api/trpc/leads.list"),
    ])
    def test_examples(self, path, expected):
        assert normalize_path(path) == expected

    def test_empty_path_is_root(self):
        assert normalize_path("") == "/api"
        assert normalize_path(None) == "/api"

    def test_relative_path_untouched(self):
        assert normalize_path("users") == "users"

    @pytest.mark.parametrize("path", ["/", "/users/42", "/api", "/api/x", "/a/b/c/", "/health"])
    def test_idempotent(self, path):
        once = normalize_path(path)
        assert normalize_path(once) == once
        assert once.startswith(API_PREFIX)

    def test_root_maps_to_prefix_without_trailing_slash(self):
        assert normalize_path("/", "/v1") == "/v1"
        assert not normalize_path("/").endswith("/")

    def test_custom_prefix(self):
        assert normalize_path("/users", "/v1") == "/v1/users"


class TestMountPrefixMiddleware:
    def test_rewrites_scope_in_place(self):
        inner = RecordingApp()
        scope = {"type": "http", "path": "/users/42", "raw_path": b"/users/42"}

        _call(MountPrefixMiddleware(inner), scope)

        assert scope["path"] == "/api/users/42"
        assert scope["raw_path"] == b"/api/users/42"
        assert len(inner.scopes) == 1
        assert inner.scopes[0]["path"] == "/api/users/42"

    def test_prefixed_path_is_left_alone(self):
        inner = RecordingApp()
        scope = {"type": "http", "path": "/api/users"}

        _call(MountPrefixMiddleware(inner), scope)

        assert scope["path"] == "/api/users"
        assert "raw_path" not in scope

    def test_websocket_scope_is_rewritten(self):
        inner = RecordingApp()
        scope = {"type": "websocket", "path": "/"}

        _call(MountPrefixMiddleware(inner), scope)

        assert inner.scopes[0]["path"] == "/api"

    def test_lifespan_passes_through(self):
        inner = RecordingApp()
        scope = {"type": "lifespan"}

        _call(MountPrefixMiddleware(inner), scope)

        assert inner.scopes == [{"type": "lifespan"}]

    def test_errors_propagate_unchanged(self):
        boom = RuntimeError("handler failed")
        middleware = MountPrefixMiddleware(RecordingApp(error=boom))

        with pytest.raises(RuntimeError) as excinfo:
            _call(middleware, {"type": "http", "path": "/x"})

        assert excinfo.value is boom


class TestServerlessApp:
    @pytest.fixture
    def client(self):
        return TestClient(MountPrefixMiddleware(backend_app))

    def test_root_reaches_api_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == ROOT_PAYLOAD

    def test_unprefixed_route(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_prefixed_route(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_docs_served_under_prefix(self, client):
        assert client.get("/docs").status_code == 200
        assert client.get("/api/openapi.json").status_code == 200

    def test_unknown_route_is_handled_by_app(self, client):
        assert client.get("/nope").status_code == 404
