"""Cookie persistence and browser-like redirect following for HTTP clients.

This package wraps an HTTP transport so that one logical request:
- sends the cookies a jar holds for every hop's URL
- stores every Set-Cookie the responses carry
- follows 301/302/303/307/308 redirects the way browsers do (method and
  body rewriting, credential stripping across hosts, Referrer-Policy,
  redirect ceiling)
"""

from fetch_cookie.body import BufferedBody, EmptyBody, StreamingBody
from fetch_cookie.client import CookieFetcher, fetch_with_cookies
from fetch_cookie.config import FetchCookieConfig
from fetch_cookie.constants import DEFAULT_MAX_REDIRECT, REDIRECT_STATUSES
from fetch_cookie.cookies import (
    CookieJar,
    StdlibCookieJar,
    get_cookies_from_response,
    inject_cookie,
    split_set_cookie_header,
)
from fetch_cookie.errors import (
    CookieRejectedError,
    FetchCookieError,
    FetchCookieErrorClass,
    InvalidRedirectOptionError,
    RedirectLimitExceededError,
    RedirectNotAllowedError,
    UnreplayableBodyError,
)
from fetch_cookie.headers import MultiValueHeaders, SimpleHeaders
from fetch_cookie.metrics import FetchCookieMetrics
from fetch_cookie.models import (
    FetchResponse,
    HopState,
    RedirectMode,
    RequestInit,
    is_redirect,
)
from fetch_cookie.observability import (
    configure_logging,
    configure_logging_from_settings,
)
from fetch_cookie.settings import FetchCookieSettings, get_settings
from fetch_cookie.transport import HttpxTransport, Transport


__all__ = [
    # Client
    "CookieFetcher",
    "fetch_with_cookies",
    # Transport
    "Transport",
    "HttpxTransport",
    # Cookies
    "CookieJar",
    "StdlibCookieJar",
    "get_cookies_from_response",
    "inject_cookie",
    "split_set_cookie_header",
    # Config
    "FetchCookieConfig",
    "FetchCookieSettings",
    "get_settings",
    # Models
    "RequestInit",
    "HopState",
    "FetchResponse",
    "RedirectMode",
    "MultiValueHeaders",
    "SimpleHeaders",
    "EmptyBody",
    "BufferedBody",
    "StreamingBody",
    "is_redirect",
    # Errors
    "FetchCookieError",
    "FetchCookieErrorClass",
    "InvalidRedirectOptionError",
    "RedirectNotAllowedError",
    "RedirectLimitExceededError",
    "UnreplayableBodyError",
    "CookieRejectedError",
    # Constants
    "DEFAULT_MAX_REDIRECT",
    "REDIRECT_STATUSES",
    # Observability
    "FetchCookieMetrics",
    "configure_logging",
    "configure_logging_from_settings",
]
