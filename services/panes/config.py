"""
Panes — Application Configuration
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # App
    APP_NAME: str = "panes"
    APP_ENV: str = "development"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080

    # Initial page state
    DEFAULT_CATEGORY: str = "user"
    DEFAULT_HISTORY_ITEM: str = "heute"
    DEFAULT_OWNER_ITEM: str = "Owner-1"

    # Combo widgets
    OWNER_COMBO_SIZE: int = 21
    HISTORY_COMBO_SIZE: int = 42
    HISTORY_BASE_YEAR: int = 2025

    # Truncates service lists for large categories (None = full list)
    SERVICE_LIST_CAP: Optional[int] = None

    # Assets
    HTMX_SCRIPT_URL: str = "https://unpkg.com/htmx.org@1.9.10/dist/htmx.min.js"
    BOOTSTRAP_CSS_URL: str = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
