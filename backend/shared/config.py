"""
Centralized configuration for the Urban Farm Share backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, CHAT_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Urban Farm Share API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8080"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py

    # Frontend URLs (for QR verification links)
    frontend_url: str = "http://localhost:5173"

    # Access tokens: issued when the request is created, or lazily on approval
    access_token_policy: Literal["on_create", "on_approval"] = "on_create"

    # Chat
    chat_poll_interval: float = 2.0  # seconds

    # Storage
    avatar_bucket: str = "avatars"
    space_image_bucket: str = "space-images"
    avatar_max_bytes: int = 2 * 1024 * 1024
    space_image_max_bytes: int = 5 * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
