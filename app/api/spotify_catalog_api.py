# app/api/spotify_catalog_api.py
from fastapi import APIRouter, Depends

from app.api.dependencies import get_api_client
from app.api.forwarding import forward_get
from app.services.access_token_guard import require_access_token
from app.services.spotify_api_service import SpotifyApiClient

router = APIRouter()

# artist top tracks 一定要帶 market，固定用 US
TOP_TRACKS_MARKET = "US"


@router.get("/artist/{artist_id}")
def get_artist(
    artist_id: str,
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify, f"artists/{artist_id}", access_token, "Failed to fetch artist details"
    )


@router.get("/artist/{artist_id}/top-tracks")
def get_artist_top_tracks(
    artist_id: str,
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify,
        f"artists/{artist_id}/top-tracks",
        access_token,
        "Failed to fetch artist top tracks",
        params={"market": TOP_TRACKS_MARKET},
    )


@router.get("/track/{track_id}")
def get_track(
    track_id: str,
    access_token: str = Depends(require_access_token),
    spotify: SpotifyApiClient = Depends(get_api_client),
):
    return forward_get(
        spotify, f"tracks/{track_id}", access_token, "Failed to fetch track details"
    )
