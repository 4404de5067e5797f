from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``API_KEY``), so field
    # matching is case-insensitive.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    netatmo_api_url: str = "https://api.netatmo.com"
    credentials_path: Path = Path("credentials.json")
    http_timeout: float = 30.0
    user_agent: str = f"netatmo-dashboard/{__version__}"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
