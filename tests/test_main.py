"""Tests for app wiring — welcome page, CORS, settings on app.state."""


def test_root_returns_welcome_text(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text.startswith("Welcome to the Spotify Backend API.")


def test_settings_stored_on_app_state(client, fake_settings):
    assert client.app.state.settings is fake_settings


def test_cors_allows_frontend_origin(client):
    r = client.get("/", headers={"Origin": "http://localhost:5173"})
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_ignores_other_origins(client):
    r = client.get("/", headers={"Origin": "https://evil.example.com"})
    assert "access-control-allow-origin" not in r.headers
