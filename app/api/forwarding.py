# app/api/forwarding.py
from typing import Dict, Optional

from fastapi import HTTPException

from app.services.spotify_api_service import SpotifyApiClient, SpotifyApiError


def forward_get(
    spotify: SpotifyApiClient,
    path: str,
    access_token: str,
    failure_message: str,
    params: Optional[Dict] = None,
) -> Dict:
    """
    各 endpoint 共用：轉發到 Spotify，失敗一律 500 + 固定訊息
    （不回傳 Spotify 原始 body）。
    """
    try:
        return spotify.get(path, access_token, params=params)
    except (SpotifyApiError, ValueError):
        raise HTTPException(status_code=500, detail=failure_message)
