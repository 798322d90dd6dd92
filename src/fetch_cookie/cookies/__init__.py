"""Cookie jar access: injection, harvesting and Set-Cookie splitting."""

from fetch_cookie.cookies.harvest import get_cookies_from_response
from fetch_cookie.cookies.inject import inject_cookie
from fetch_cookie.cookies.jar import CookieJar, StdlibCookieJar
from fetch_cookie.cookies.split import split_set_cookie_header


__all__ = [
    "CookieJar",
    "StdlibCookieJar",
    "get_cookies_from_response",
    "inject_cookie",
    "split_set_cookie_header",
]
