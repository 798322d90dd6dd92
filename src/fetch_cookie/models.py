"""Data models for cookie-aware fetching."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

import httpx

from fetch_cookie.body import EMPTY_BODY, RequestBody, to_body_variant
from fetch_cookie.constants import DEFAULT_MAX_REDIRECT, REDIRECT_STATUSES
from fetch_cookie.headers import RequestHeaders, to_header_variant


class RedirectMode(str, Enum):
    """How a redirect response is handled.

    - FOLLOW: follow the redirect chain
    - ERROR: fail on the first redirect
    - MANUAL: return the redirect response as-is
    """

    FOLLOW = "follow"
    ERROR = "error"
    MANUAL = "manual"


def is_redirect(status_code: int) -> bool:
    """Check if a status code is one of the followed redirect statuses."""
    return status_code in REDIRECT_STATUSES


@dataclass(frozen=True)
class RequestInit:
    """Snapshot of the request configuration for one hop.

    Never mutated; every change produces a new snapshot via ``evolve``.

    Attributes:
        method: Upper-case HTTP method.
        headers: Header variant, or None when the caller gave no headers.
        body: Body variant.
        redirect: Redirect mode. Kept as a plain string, an unknown value
            only fails once a redirect response has to be handled.
        referrer_policy: Referrer policy for the request.
        max_redirect: Redirect ceiling for the logical call.
        redirect_count: Redirects already followed in the logical call.
        extensions: Opaque per-request settings handed to the transport
            (timeouts and the like), unchanged on every hop.
    """

    method: str = "GET"
    headers: RequestHeaders | None = None
    body: RequestBody = EMPTY_BODY
    redirect: str = RedirectMode.FOLLOW.value
    referrer_policy: str = ""
    max_redirect: int = DEFAULT_MAX_REDIRECT
    redirect_count: int = 0
    extensions: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(
        cls,
        *,
        method: str | None = None,
        headers: Any = None,
        content: Any = None,
        redirect: str | RedirectMode = RedirectMode.FOLLOW,
        referrer_policy: str = "",
        max_redirect: int = DEFAULT_MAX_REDIRECT,
        extensions: Mapping[str, Any] | None = None,
    ) -> "RequestInit":
        """Build a request record from caller-facing options.

        Header and body shapes are narrowed to their variants here, once.

        Raises:
            TypeError: If headers or content have an unsupported shape.
            ValueError: If max_redirect is negative.
        """
        if max_redirect < 0:
            msg = f"max_redirect must be >= 0, got {max_redirect}"
            raise ValueError(msg)
        if isinstance(redirect, RedirectMode):
            redirect = redirect.value
        return cls(
            method=(method or "GET").upper(),
            headers=to_header_variant(headers),
            body=to_body_variant(content),
            redirect=redirect,
            referrer_policy=referrer_policy,
            max_redirect=max_redirect,
            extensions=dict(extensions or {}),
        )

    def evolve(self, **changes: Any) -> "RequestInit":
        """Clone this snapshot with some fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class HopState:
    """Where the redirect loop stands: next URL and its request record."""

    url: str
    init: RequestInit

    @property
    def hop_count(self) -> int:
        return self.init.redirect_count


@dataclass(frozen=True)
class FetchResponse:
    """Final response of a logical call.

    Wraps the transport's response object unchanged.

    Attributes:
        response: The transport response of the last hop.
        redirected: Whether at least one redirect was followed.
        redirect_count: Number of redirects followed.
    """

    response: Any
    redirected: bool = False
    redirect_count: int = 0

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def status_code(self) -> int:
        return int(self.response.status_code)

    @property
    def headers(self) -> Any:
        return self.response.headers

    @property
    def is_redirect(self) -> bool:
        return is_redirect(self.status_code)


def request_url(target: str | httpx.URL | httpx.Request) -> str:
    """Resolve the URL of a request target."""
    if isinstance(target, httpx.Request):
        return str(target.url)
    return str(target)
