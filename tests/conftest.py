"""Shared fixtures for the Spotify relay test suite."""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.main import create_app


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        redirect_uri="http://localhost:8000/auth/callback",
        frontend_url="http://localhost:5173",
    )


@pytest.fixture
def client(fake_settings) -> TestClient:
    return TestClient(create_app(fake_settings))


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": "Bearer user-access-token"}


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    def _make(status_code=200, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = json_data if json_data is not None else {}
        resp.text = "raw upstream body"
        return resp
    return _make
