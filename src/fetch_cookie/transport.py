"""Transport interface and the httpx-backed implementation."""

from collections.abc import AsyncIterator, Iterator
from typing import Any, Protocol

import httpx

from fetch_cookie.constants import HEADER_COOKIE
from fetch_cookie.headers import has_header, header_pairs
from fetch_cookie.models import RedirectMode, RequestInit


class Transport(Protocol):
    """Performs one HTTP exchange.

    Must return 3xx responses unfollowed when ``init.redirect`` is
    "manual". The returned object needs ``url``, ``status_code`` and
    ``headers``.
    """

    async def __call__(self, url: str, init: RequestInit) -> Any: ...


class HttpxTransport:
    """Transport over a caller-owned ``httpx.AsyncClient``.

    The client's default headers and timeout apply to every hop. The client
    is not closed by this class.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def __call__(self, url: str, init: RequestInit) -> httpx.Response:
        """Send one request described by ``init``.

        Args:
            url: Absolute URL of this hop.
            init: Request record of this hop.

        Returns:
            The httpx response; redirects are followed by httpx only when
            the record's redirect mode is not "manual".
        """
        request = self._client.build_request(
            init.method,
            url,
            headers=header_pairs(init.headers),
            content=_async_content(init.body.content()),
            extensions=dict(init.extensions),
        )
        # Cookies come from the record only, never from the client's own store
        if not has_header(init.headers, HEADER_COOKIE):
            request.headers.pop(HEADER_COOKIE, None)

        return await self._client.send(
            request,
            follow_redirects=init.redirect != RedirectMode.MANUAL.value,
        )


def _async_content(content: Any) -> Any:
    """Wrap a sync chunk iterator, ``httpx.AsyncClient`` only streams async."""
    if isinstance(content, Iterator):
        return _iterate_async(content)
    return content


async def _iterate_async(chunks: Iterator[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk
