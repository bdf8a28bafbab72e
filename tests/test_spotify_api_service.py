"""Tests for SpotifyApiClient.get — the authenticated GET primitive."""
from unittest.mock import patch

import pytest
import requests

from app.services.spotify_api_service import SpotifyApiClient, SpotifyApiError

GET = "app.services.spotify_api_service.requests.get"


def test_get_attaches_bearer_and_params(fake_settings, make_response):
    with patch(GET, return_value=make_response(200, {"id": "me"})) as get:
        data = SpotifyApiClient(fake_settings).get("me/top/tracks", "tok", params={"time_range": "long_term"})

    assert data == {"id": "me"}
    args, kwargs = get.call_args
    assert args[0] == "https://api.spotify.com/v1/me/top/tracks"
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
    assert kwargs["params"] == {"time_range": "long_term"}


def test_get_without_token_makes_no_call(fake_settings):
    with patch(GET) as get:
        with pytest.raises(ValueError):
            SpotifyApiClient(fake_settings).get("me", "")
    get.assert_not_called()


def test_get_non_2xx_raises(fake_settings, make_response):
    with patch(GET, return_value=make_response(404, {"error": {"status": 404}})):
        with pytest.raises(SpotifyApiError) as exc_info:
            SpotifyApiClient(fake_settings).get("artists/nope", "tok")
    assert exc_info.value.status_code == 404


def test_get_network_error_raises(fake_settings):
    with patch(GET, side_effect=requests.Timeout("slow")):
        with pytest.raises(SpotifyApiError) as exc_info:
            SpotifyApiClient(fake_settings).get("me", "tok")
    assert exc_info.value.status_code is None


def test_get_non_json_raises(fake_settings, make_response):
    resp = make_response(200)
    resp.json.side_effect = ValueError("html page")
    with patch(GET, return_value=resp):
        with pytest.raises(SpotifyApiError):
            SpotifyApiClient(fake_settings).get("me", "tok")
