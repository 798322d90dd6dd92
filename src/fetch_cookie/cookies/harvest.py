"""Extraction of Set-Cookie values from transport responses."""

from typing import Any

from fetch_cookie.constants import HEADER_SET_COOKIE
from fetch_cookie.cookies.split import split_set_cookie_header
from fetch_cookie.headers import lookup_header


# Multi-value accessors, by library:
# httpx.Headers, multidict (aiohttp), email.message.Message, urllib3/werkzeug
_MULTI_VALUE_GETTERS = ("get_list", "getall", "get_all", "getlist")


def get_cookies_from_response(response: Any) -> list[str]:
    """Get the raw Set-Cookie strings of a response.

    Header objects are checked in order, first match wins:

    1. a multi-value getter returning one entry per Set-Cookie header;
    2. a plain mapping holding a list under the Set-Cookie key;
    3. a single combined string, split on cookie boundaries.

    Args:
        response: Transport response exposing ``headers``.

    Returns:
        Set-Cookie strings in header order; empty if there are none.
    """
    headers = response.headers

    for attr in _MULTI_VALUE_GETTERS:
        getter = getattr(headers, attr, None)
        if callable(getter):
            return _call_multi_value_getter(attr, getter)

    raw = lookup_header(headers, HEADER_SET_COOKIE)
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        return [str(value) for value in raw]
    return split_set_cookie_header(str(raw))


def _call_multi_value_getter(attr: str, getter: Any) -> list[str]:
    if attr == "get_all":
        # email.message.Message returns None when the header is missing
        return list(getter(HEADER_SET_COOKIE) or [])
    if attr == "getall":
        # multidict raises KeyError without a default
        return list(getter(HEADER_SET_COOKIE, []))
    return list(getter(HEADER_SET_COOKIE))
