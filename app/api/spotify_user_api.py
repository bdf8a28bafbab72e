# app/api/spotify_user_api.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_api_client
from app.api.forwarding import forward_get
from app.models.spotify_auth_models import TimeRange
from app.services.access_token_guard import require_access_token
from app.services.spotify_api_service import SpotifyApiClient

router = APIRouter()

TIME_RANGE_DESCRIPTION = "short_term / medium_term / long_term，不合法時用 medium_term"


@router.get("/profile")
def get_profile(
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(spotify, "me", access_token, "Failed to fetch user profile")


@router.get("/playlists")
def get_playlists(
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(spotify, "me/playlists", access_token, "Failed to fetch playlists")


@router.get("/top-tracks")
def get_top_tracks(
    time_range: Optional[str] = Query(None, description=TIME_RANGE_DESCRIPTION),
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify,
        "me/top/tracks",
        access_token,
        "Failed to fetch top tracks",
        params={"time_range": TimeRange.parse(time_range).value},
    )


@router.get("/recently-played")
def get_recently_played(
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify,
        "me/player/recently-played",
        access_token,
        "Failed to fetch recently played tracks",
    )


@router.get("/top-artists")
def get_top_artists(
    time_range: Optional[str] = Query(None, description=TIME_RANGE_DESCRIPTION),
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify,
        "me/top/artists",
        access_token,
        "Failed to fetch top artists",
        params={"time_range": TimeRange.parse(time_range).value},
    )


@router.get("/following")
def get_following(
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    # 目前只有追蹤的 artist
    return forward_get(
        spotify,
        "me/following",
        access_token,
        "Failed to fetch following artists",
        params={"type": "artist"},
    )
