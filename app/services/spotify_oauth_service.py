# app/services/spotify_oauth_service.py
import logging
from typing import Dict
from urllib.parse import quote, urlencode

import requests
from pydantic import ValidationError

from app.config.settings import Settings
from app.models.spotify_auth_models import RefreshTokenResponse, TokenGrant

logger = logging.getLogger(__name__)

SCOPES = (
    "user-read-private "
    "user-follow-read "
    "user-read-email "
    "playlist-read-private "
    "user-library-read "
    "user-read-recently-played "
    "user-top-read"
)


class SpotifyAuthError(Exception):
    """連不到 token endpoint，或回傳內容無法解析"""


class SpotifyTokenRejected(SpotifyAuthError):
    """Spotify 有回應，但不是可用的 token（非 200 或缺欄位）"""

    def __init__(self, status_code: int, reason: str = "invalid token"):
        super().__init__(f"Spotify token endpoint rejected request ({status_code}): {reason}")
        self.status_code = status_code
        self.reason = reason


class SpotifyOAuthClient:
    """
    Authorization Code Flow（client secret 版，非 PKCE）:
    1. build_authorize_url() → 前端被 redirect 到 Spotify 同意頁
    2. exchange_code(code)   → 用 code 換 access_token / refresh_token
    3. refresh_access_token() → 用 refresh_token 換新的 access_token

    token 一律不落地，交給前端保管。
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def token_url(self) -> str:
        return f"{self.settings.accounts_base_url}/api/token"

    def build_authorize_url(self) -> str:
        query = urlencode(
            {
                "response_type": "code",
                "client_id": self.settings.client_id,
                "scope": SCOPES,
                "redirect_uri": self.settings.redirect_uri,
                "show_dialog": "true",
            },
            quote_via=quote,
        )
        return f"{self.settings.accounts_base_url}/authorize?{query}"

    def exchange_code(self, code: str) -> TokenGrant:
        data = self._post_token(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.settings.redirect_uri,
            }
        )

        try:
            return TokenGrant.model_validate(data)
        except ValidationError:
            logger.error("Spotify token response missing access_token / refresh_token / expires_in")
            raise SpotifyTokenRejected(200, "incomplete token response")

    def refresh_access_token(self, refresh_token: str) -> RefreshTokenResponse:
        data = self._post_token(
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
            }
        )

        try:
            return RefreshTokenResponse.model_validate(data)
        except ValidationError:
            logger.error("Spotify refresh response missing access_token / expires_in")
            raise SpotifyTokenRejected(200, "incomplete token response")

    def _post_token(self, payload: Dict[str, str]) -> Dict:
        grant_type = payload["grant_type"]
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": self.settings.basic_auth_header,
        }

        try:
            r = requests.post(self.token_url, data=payload, headers=headers)
        except requests.RequestException as e:
            logger.error(f"Spotify token request failed ({grant_type}): {e}")
            raise SpotifyAuthError(f"Token request failed: {e}") from e

        if r.status_code != 200:
            # 不把 Spotify 的 body 往外丟，只記 log
            logger.error(f"Spotify token endpoint returned {r.status_code} ({grant_type})")
            raise SpotifyTokenRejected(r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            logger.error(f"Spotify token response is not JSON ({grant_type})")
            raise SpotifyAuthError("Token response is not JSON") from e

        if not isinstance(data, dict):
            raise SpotifyAuthError("Token response is not a JSON object")

        return data
