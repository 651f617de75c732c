"""
tests/test_health.py -- Integration tests for GET /health and the docs page.
"""

from __future__ import annotations


def test_health_returns_200_with_version(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"


def test_health_no_auth_required(client):
    """Health endpoint is accessible without any authentication headers."""
    resp = client.get("/health", headers={})
    assert resp.status_code == 200


def test_api_docs_served(client):
    resp = client.get("/api-docs")
    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


def test_unknown_route_uses_error_body(client):
    resp = client.get("/no-such-route")
    assert resp.status_code == 404
    assert resp.json()["code"] == "http_404"
    assert "message" in resp.json()
