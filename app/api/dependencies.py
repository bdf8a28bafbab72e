# app/api/dependencies.py
from fastapi import Depends, Request

from app.config.settings import Settings
from app.services.spotify_api_service import SpotifyApiClient
from app.services.spotify_oauth_service import SpotifyOAuthClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_oauth_client(settings: Settings = Depends(get_settings)) -> SpotifyOAuthClient:
    return SpotifyOAuthClient(settings)


def get_api_client(settings: Settings = Depends(get_settings)) -> SpotifyApiClient:
    return SpotifyApiClient(settings)
