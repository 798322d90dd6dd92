"""Hostname comparison and redirect URL resolution."""

from urllib.parse import urlsplit

import httpx


def hostname(url: str) -> str:
    """Get the lower-cased hostname of a URL (empty if it has none)."""
    return (urlsplit(url).hostname or "").lower()


def is_same_host_or_subdomain(redirect_url: str, request_url: str) -> bool:
    """Check whether a redirect target stays inside the request host's subtree.

    Only hostnames are compared; scheme and port are ignored.

    Args:
        redirect_url: URL the redirect points to.
        request_url: URL of the request that was redirected.

    Returns:
        True if the redirect host equals the request host or is a subdomain
        of it. A parent domain of the request host is not covered.
    """
    original = hostname(request_url)
    destination = hostname(redirect_url)
    return destination == original or destination.endswith(f".{original}")


def resolve_redirect_url(location: str, base_url: str) -> str:
    """Resolve a Location header value against the URL that produced it.

    Args:
        location: Raw Location header value (absolute or relative).
        base_url: URL of the redirect response.

    Returns:
        Absolute URL of the next hop.
    """
    return str(httpx.URL(base_url).join(location))
