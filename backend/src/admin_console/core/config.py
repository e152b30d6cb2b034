"""Configuration settings for the application.

This module defines the configuration settings using Pydantic's
SettingsConfigDict to load environment variables from a .env file.
"""

import logging
from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("uvicorn")


class Settings(BaseSettings):
    """Settings class for the application."""

    # ENVIRONMENT CONFIG
    environment: str = "dev"
    testing: bool = bool(0)

    # API CONFIG
    project_name: str = "Admin Console API"
    api_v1_str: str = "/api/v1"
    backend_cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # REMOTE ADMIN API CONFIG
    client_provider: Literal["http", "memory"] = "http"
    admin_api_url: str = "https://localhost:7118/api"
    admin_api_token: Optional[str] = None
    admin_api_timeout: float = 30.0
    admin_api_verify_ssl: bool = True
    api_page_index_base: int = 1  # The remote API counts pages from 1

    # TABLE CONFIG
    default_page_size: int = Field(default=10, gt=0)
    refresh_settle_delay: float = Field(default=1.0, ge=0)  # seconds
    notification_history: int = Field(default=50, gt=0)

    model_config = SettingsConfigDict(
        env_file=["../../../backend/.env", "../../.env", "../.env", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get the settings for the application."""
    logger.info("Loading config settings from the environment...")

    settings = Settings()

    if settings.client_provider == "memory":
        logger.warning("Using the in-memory demo backend instead of the remote admin API")
    elif settings.admin_api_token:
        logger.info(f"Admin API token is set for {settings.admin_api_url}")
    else:
        logger.warning(f"Admin API token is not set for {settings.admin_api_url}")

    return settings
