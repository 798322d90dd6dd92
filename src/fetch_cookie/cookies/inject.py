"""Cookie header injection into outgoing request records."""

from fetch_cookie.constants import HEADER_COOKIE
from fetch_cookie.headers import MultiValueHeaders, SimpleHeaders
from fetch_cookie.models import RequestInit


def inject_cookie(init: RequestInit, cookie: str) -> RequestInit:
    """Add a jar-supplied cookie string to the request's Cookie header.

    MultiValueHeaders get an extra ``cookie`` entry, keeping any Cookie
    header the caller already set. SimpleHeaders (and missing headers) are
    shallow-merged with a ``cookie`` key, which replaces a caller value
    stored under that exact key instead of combining with it.

    Args:
        init: Request record of the current hop.
        cookie: Cookie string from the jar, possibly empty.

    Returns:
        The same record if there is nothing to add, else a new record.
    """
    if cookie == "":
        return init

    headers = init.headers
    if isinstance(headers, MultiValueHeaders):
        return init.evolve(headers=headers.append(HEADER_COOKIE, cookie))

    merged = (headers or SimpleHeaders()).merge(**{HEADER_COOKIE: cookie})
    return init.evolve(headers=merged)
