import base64
import logging
import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)


class Settings(BaseModel):
    """
    啟動時讀一次的設定，之後不可修改。
    由 create_app() 放到 app.state，再透過 Depends 傳給 service。
    """
    model_config = ConfigDict(frozen=True)

    # Spotify
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    accounts_base_url: str = "https://accounts.spotify.com"
    api_base_url: str = "https://api.spotify.com/v1"

    # 前端（CORS + 登入後 redirect）
    frontend_url: str = "http://localhost:5173"

    log_level: str = "INFO"

    @property
    def basic_auth_header(self) -> str:
        credentials = f"{self.client_id}:{self.client_secret}".encode()
        return "Basic " + base64.b64encode(credentials).decode()


def load_settings() -> Settings:
    load_env()

    settings = Settings(
        client_id=os.getenv("SPOTIFY_CLIENT_ID", ""),
        client_secret=os.getenv("SPOTIFY_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI", ""),
        accounts_base_url=os.getenv("SPOTIFY_ACCOUNTS_URL", "https://accounts.spotify.com"),
        api_base_url=os.getenv("SPOTIFY_API_URL", "https://api.spotify.com/v1"),
        frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5173"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

    if not settings.client_id or not settings.client_secret:
        logger.warning("SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET not set, token exchange will fail")

    return settings
