"""Tests for the pydantic models / enums."""
import pytest
from pydantic import ValidationError

from app.models.spotify_auth_models import RefreshTokenResponse, TimeRange, TokenGrant


@pytest.mark.parametrize("value,expected", [
    ("short_term", TimeRange.SHORT_TERM),
    ("medium_term", TimeRange.MEDIUM_TERM),
    ("long_term", TimeRange.LONG_TERM),
    (None, TimeRange.MEDIUM_TERM),
    ("", TimeRange.MEDIUM_TERM),
    ("forever", TimeRange.MEDIUM_TERM),
    ("LONG_TERM", TimeRange.MEDIUM_TERM),
])
def test_time_range_parse(value, expected):
    assert TimeRange.parse(value) is expected


def test_refresh_response_drops_extra_fields():
    resp = RefreshTokenResponse.model_validate(
        {"access_token": "a", "expires_in": 3600, "scope": "user-top-read"}
    )
    assert resp.model_dump() == {"access_token": "a", "expires_in": 3600}


@pytest.mark.parametrize("body", [
    {"access_token": "", "refresh_token": "ref", "expires_in": 3600},
    {"access_token": "acc", "refresh_token": "", "expires_in": 3600},
    {"access_token": "acc", "refresh_token": "ref", "expires_in": 0},
])
def test_token_grant_rejects_empty_values(body):
    with pytest.raises(ValidationError):
        TokenGrant.model_validate(body)
