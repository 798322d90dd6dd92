"""Configuration model for cookie-aware fetching."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fetch_cookie.constants import DEFAULT_MAX_REDIRECT, MAX_REDIRECT_LIMIT
from fetch_cookie.models import RedirectMode


class FetchCookieConfig(BaseModel):
    """Client-wide defaults for cookie handling and redirect following.

    Per-call options passed to ``CookieFetcher.fetch`` take precedence.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_redirect: Annotated[int, Field(ge=0, le=MAX_REDIRECT_LIMIT)] = (
        DEFAULT_MAX_REDIRECT
    )
    ignore_error: bool = Field(
        default=True,
        description="Silently drop cookies the jar refuses",
    )
    default_redirect: str = Field(
        default=RedirectMode.FOLLOW.value,
        description="Redirect mode used when a call does not pass one",
    )

    @field_validator("default_redirect")
    @classmethod
    def validate_redirect(cls, v: str) -> str:
        """Ensure the default redirect mode is a known one."""
        try:
            return RedirectMode(v).value
        except ValueError as e:
            msg = f"Invalid redirect option: {v}"
            raise ValueError(msg) from e
