"""Environment-backed settings powered by Pydantic BaseSettings."""

import logging
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fetch_cookie.config import FetchCookieConfig
from fetch_cookie.constants import DEFAULT_MAX_REDIRECT, MAX_REDIRECT_LIMIT
from fetch_cookie.models import RedirectMode


class FetchCookieSettings(BaseSettings):
    """Centralized environment configuration (``FETCH_COOKIE_*`` variables)."""

    model_config = SettingsConfigDict(
        env_prefix="FETCH_COOKIE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_redirect: Annotated[int, Field(ge=0, le=MAX_REDIRECT_LIMIT)] = (
        DEFAULT_MAX_REDIRECT
    )
    ignore_error: bool = True
    default_redirect: str = RedirectMode.FOLLOW.value
    log_level: str = "INFO"
    log_json: bool = True

    def to_config(self) -> FetchCookieConfig:
        """Build the client configuration from these settings."""
        return FetchCookieConfig(
            max_redirect=self.max_redirect,
            ignore_error=self.ignore_error,
            default_redirect=self.default_redirect,
        )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> FetchCookieSettings:
    """Get a settings instance."""
    return FetchCookieSettings()
