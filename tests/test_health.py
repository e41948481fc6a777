"""
Tests for the root responder and the Vercel entry modules.
"""
import importlib.util
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.health import ROOT_PAYLOAD, root_app, root_response

PROJECT_ROOT = Path(__file__).resolve().parent.parent

client = TestClient(root_app)


def load_entry(name):
    spec = importlib.util.spec_from_file_location(f"vercel_{name}", PROJECT_ROOT / "api" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_payload_is_fixed():
    assert ROOT_PAYLOAD == {"message": "Hello World", "docs": "/api/docs", "trpc": "/api/trpc"}


def test_root_response():
    response = root_response()
    assert response.status_code == 200
    assert response.media_type == "application/json"


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_every_method_gets_payload(method):
    response = client.request(method, "/")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == ROOT_PAYLOAD


def test_head_returns_ok():
    assert client.head("/").status_code == 200


@pytest.mark.parametrize("path", ["/", "/api", "/anything/else"])
def test_any_path_and_headers(path):
    response = client.post(path, headers={"X-Custom": "1", "Accept": "text/html"}, content=b"ignored")
    assert response.status_code == 200
    assert response.json() == ROOT_PAYLOAD


def test_index_entry_exports_root_app():
    module = load_entry("index")
    assert module.handler is root_app


def test_app_entry_wraps_backend():
    module = load_entry("app")
    assert module.app.prefix == "/api"
    response = TestClient(module.app).get("/health")
    assert response.status_code == 200
