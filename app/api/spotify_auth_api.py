# app/api/spotify_auth_api.py
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from app.api.dependencies import get_oauth_client, get_settings
from app.config.settings import Settings
from app.models.spotify_auth_models import RefreshTokenResponse
from app.services.spotify_oauth_service import (
    SpotifyAuthError,
    SpotifyOAuthClient,
    SpotifyTokenRejected,
)

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get(
    "/login",
    summary="Spotify Login — redirect 到授權頁",
    description="把使用者 redirect 到 Spotify 同意頁（show_dialog=true，每次都會詢問）。",
)
def login(oauth: SpotifyOAuthClient = Depends(get_oauth_client)):
    try:
        url = oauth.build_authorize_url()
    except Exception as e:
        logger.error(f"Error in /auth/login: {e}")
        raise HTTPException(status_code=500, detail="Authentication failed")

    return RedirectResponse(url=url)


@router.get(
    "/callback",
    summary="Spotify OAuth Callback",
    description=(
        "Spotify 授權完成後會 redirect 到此 endpoint 並附上 code。"
        "後端用 code 交換 token，再帶著 token redirect 回前端。"
    ),
)
def callback(
    code: Optional[str] = Query(None, description="Spotify 回傳的授權 code"),
    settings: Settings = Depends(get_settings),
    oauth: SpotifyOAuthClient = Depends(get_oauth_client),
):
    # 沒有 code（例如使用者按取消）→ 直接回前端首頁，不算錯誤
    if not code:
        return RedirectResponse(url=settings.frontend_url)

    try:
        grant = oauth.exchange_code(code)
    except SpotifyTokenRejected:
        query = urlencode({"error": "invalid_token"})
        return RedirectResponse(url=f"{settings.frontend_url}?{query}")
    except SpotifyAuthError as e:
        logger.error(f"Error in /auth/callback: {e}")
        raise HTTPException(status_code=500, detail="Authentication failed")

    query = urlencode(
        {
            "access_token": grant.access_token,
            "refresh_token": grant.refresh_token,
            "expires_in": grant.expires_in,
        }
    )
    return RedirectResponse(url=f"{settings.frontend_url}?{query}")


@router.get(
    "/refresh_token",
    summary="用 refresh_token 換新的 access_token",
    response_model=RefreshTokenResponse,
)
def refresh_token(
    refresh_token: Optional[str] = Query(None, description="前端保存的 refresh_token"),
    oauth: SpotifyOAuthClient = Depends(get_oauth_client),
):
    if not refresh_token:
        raise HTTPException(status_code=400, detail="Missing refresh_token")

    try:
        return oauth.refresh_access_token(refresh_token)
    except SpotifyAuthError as e:
        logger.error(f"Error refreshing token: {e}")
        raise HTTPException(status_code=500, detail="Failed to refresh token")


@router.get("/logout", summary="登出 — token 在前端，後端只負責導回首頁")
def logout(settings: Settings = Depends(get_settings)):
    return RedirectResponse(url=settings.frontend_url)
