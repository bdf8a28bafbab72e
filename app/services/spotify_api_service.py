# app/services/spotify_api_service.py
import logging
from typing import Dict, Optional

import requests

from app.config.settings import Settings

logger = logging.getLogger(__name__)


class SpotifyApiError(Exception):
    """Spotify Web API 呼叫失敗（連線錯誤、非 2xx、回傳不是 JSON）"""

    def __init__(self, url: str, status_code: Optional[int] = None):
        detail = f"status {status_code}" if status_code is not None else "no response"
        super().__init__(f"Spotify request to {url} failed ({detail})")
        self.url = url
        self.status_code = status_code


class SpotifyApiClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    def get(self, path: str, access_token: str, params: Optional[Dict] = None) -> Dict:
        """
        帶 Bearer token 打 Spotify GET，回傳 parse 過的 JSON。
        不 retry、不 cache；任何失敗都變成 SpotifyApiError。
        """
        if not access_token:
            raise ValueError("No access token provided")

        url = f"{self.settings.api_base_url}/{path}"
        headers = {"Authorization": f"Bearer {access_token}"}

        try:
            r = requests.get(url, headers=headers, params=params)
        except requests.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            raise SpotifyApiError(url) from e

        if not 200 <= r.status_code < 300:
            logger.error(f"Error fetching {url}: Spotify returned {r.status_code}")
            raise SpotifyApiError(url, r.status_code)

        try:
            return r.json()
        except ValueError as e:
            logger.error(f"Error fetching {url}: response is not JSON")
            raise SpotifyApiError(url, r.status_code) from e
