"""
Configuration settings for GIF Explorer
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "GIF Explorer Relay"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Giphy upstream. An empty key is forwarded as-is and fails upstream.
    GIPHY_KEY: str = ""
    GIPHY_BASE_URL: str = "https://api.giphy.com/v1/gifs"
    UPSTREAM_TIMEOUT: Optional[float] = None

    # CORS
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20

    # Session controller (browser side)
    RELAY_API_URL: str = "http://localhost:3001/api"
    SEARCH_DEBOUNCE_SECONDS: float = 0.5

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
