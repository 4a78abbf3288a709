"""
Tests for routing misses, unhandled faults and provider timeouts
"""

import asyncio

from fastapi import HTTPException
from fastapi.testclient import TestClient

from aimcs_backend.main import create_app
from aimcs_backend.services import ChatDispatcher, ChatProvider

from .conftest import make_settings


def _boom():
    raise RuntimeError("database exploded")


def _forbidden():
    raise HTTPException(status_code=403, detail="Forbidden")


def test_unknown_path_returns_404(client):
    response = client.get("/unknown-path")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found", "path": "/unknown-path"}


def test_not_found_path_includes_query_string(client):
    response = client.get("/nope?x=1")
    assert response.status_code == 404
    assert response.json()["path"] == "/nope?x=1"


def test_unlisted_method_on_known_path_returns_404(client):
    for method in ("post", "put", "delete"):
        response = getattr(client, method)("/health")
        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found", "path": "/health"}


def test_trailing_slash_is_not_redirected(client):
    response = client.get("/api/models/", follow_redirects=False)
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found", "path": "/api/models/"}


def test_other_http_errors_keep_status_and_detail(app):
    app.add_api_route("/api/forbidden", _forbidden)
    client = TestClient(app)

    response = client.get("/api/forbidden")
    assert response.status_code == 403
    assert response.json() == {"error": "Forbidden"}


def test_fault_exposes_detail_in_development(app):
    app.add_api_route("/api/boom", _boom)
    client = TestClient(app)

    response = client.get("/api/boom")
    assert response.status_code == 500
    assert response.json() == {
        "error": "Something went wrong!",
        "message": "database exploded",
    }


def test_fault_hides_detail_in_production():
    app = create_app(make_settings(node_env="production"))
    app.add_api_route("/api/boom", _boom)
    client = TestClient(app)

    response = client.get("/api/boom")
    assert response.status_code == 500
    assert response.json() == {
        "error": "Something went wrong!",
        "message": "Internal server error",
    }
    assert "exploded" not in response.text


def test_fault_response_keeps_cors_and_security_headers(app):
    app.add_api_route("/api/boom", _boom)
    client = TestClient(app)

    response = client.get("/api/boom", headers={"Origin": "https://aimcs.net"})
    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "https://aimcs.net"
    assert response.headers["x-content-type-options"] == "nosniff"


class SlowProvider(ChatProvider):
    name = "slow"

    async def complete(self, chat_request, model):
        await asyncio.sleep(1)
        return "too late"


def test_provider_timeout_returns_504():
    settings = make_settings(chat_timeout_seconds=0.05)
    app = create_app(settings)
    app.state.chat_dispatcher = ChatDispatcher(
        default_model=settings.default_model,
        timeout_seconds=settings.chat_timeout_seconds,
        providers={"OpenAI": SlowProvider()},
    )
    client = TestClient(app)

    response = client.post("/api/chat", json={"message": "hello"})
    assert response.status_code == 504
    assert response.json() == {
        "error": "Upstream provider timed out",
        "model": "gpt-4o-mini",
    }

    # Other providers are unaffected
    response = client.post("/api/chat", json={"message": "hello", "model": "claude-3-haiku"})
    assert response.status_code == 200
