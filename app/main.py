# app/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import Settings, load_settings

# === Import Routers ===
from app.api.spotify_auth_api import router as spotify_auth_router
from app.api.spotify_user_api import router as spotify_user_router
from app.api.spotify_catalog_api import router as spotify_catalog_router

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to the Spotify Backend API. "
    "Use /auth/login to start the authentication process."
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Spotify Backend API",
        description=(
            "Backend for: "
            "• Spotify OAuth (Authorization Code) "
            "• Token refresh "
            "• Read-only Spotify Web API relay"
        ),
        version="1.0.0",
    )
    app.state.settings = settings

    # === CORS Middleware ===
    # 只允許前端網址
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # === 錯誤一律回純文字 ===
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    # === Spotify OAuth（Authorization Code Flow） ===
    app.include_router(spotify_auth_router, prefix="/auth", tags=["Spotify OAuth"])

    # === 使用者資料（需 Bearer token） ===
    app.include_router(spotify_user_router, prefix="/user", tags=["Spotify User"])

    # === Artist / Track 查詢（需 Bearer token） ===
    app.include_router(spotify_catalog_router, tags=["Spotify Catalog"])

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return WELCOME_MESSAGE

    return app


app = create_app()
