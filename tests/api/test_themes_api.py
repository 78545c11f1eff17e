# tests/api/test_themes_api.py

import pytest
from fastapi.testclient import TestClient

from arkfolio.infra.config.settings import reset_settings
from arkfolio.main import create_app


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "req-42"})
    assert resp.headers["X-Request-ID"] == "req-42"


def test_list_themes_ordered_without_css(client):
    resp = client.get("/api/v1/themes")
    assert resp.status_code == 200
    themes = resp.json()

    assert [t["slug"] for t in themes] == [
        "professional",
        "normal",
        "neon",
        "minimal",
        "glass",
    ]
    for theme in themes:
        assert "cssContent" not in theme
        assert {"id", "name", "previewColor", "isDefault", "order"} <= set(theme)


def test_default_theme_has_css(client):
    resp = client.get("/api/v1/themes/default")
    assert resp.status_code == 200
    data = resp.json()

    assert data["slug"] == "normal"
    assert data["isDefault"] is True
    assert "data-cyber-theme" in data["cssContent"]


def test_theme_by_slug(client):
    resp = client.get("/api/v1/themes/neon")
    assert resp.status_code == 200
    data = resp.json()

    assert data["slug"] == "neon"
    assert data["name"] == "Neon"
    assert data["cssContent"]


def test_unknown_theme_returns_404(client):
    resp = client.get("/api/v1/themes/retro")
    assert resp.status_code == 404
    body = resp.json()

    assert body["error"] == "THEME_NOT_FOUND"
    assert body["detail"] == "Theme 'retro' not found"
    assert "timestamp" in body


@pytest.mark.parametrize("slug", ["Neon", "neon_glow", "neon--x", "a" * 101])
def test_malformed_slug_returns_422(client, slug):
    resp = client.get(f"/api/v1/themes/{slug}")
    assert resp.status_code == 422
    body = resp.json()

    assert body["error"] == "VALIDATION_ERROR"
    assert body["detail"].startswith("Validation failed: path -> slug:")
    assert "timestamp" in body


def test_default_theme_missing_returns_404(test_env, monkeypatch):
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    reset_settings()
    with TestClient(create_app()) as client:
        resp = client.get("/api/v1/themes/default")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "No default theme configured"
    assert resp.json()["error"] == "DEFAULT_THEME_NOT_CONFIGURED"


def test_seeding_is_idempotent(test_env):
    for _ in range(2):
        with TestClient(create_app()) as client:
            themes = client.get("/api/v1/themes").json()
            slides = client.get("/api/v1/carousel").json()

    assert len(themes) == 5
    assert len(slides) == 3
