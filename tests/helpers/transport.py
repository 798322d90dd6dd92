"""Scripted transport and jar doubles for fetch-cookie tests."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from fetch_cookie.models import RequestInit


@dataclass
class SentRequest:
    """One transport call as the transport saw it."""

    url: str
    init: RequestInit


ResponseFactory = Callable[[str, RequestInit], httpx.Response]


def make_response(
    url: str,
    status_code: int = 200,
    headers: list[tuple[str, str]] | None = None,
    content: bytes = b"",
) -> httpx.Response:
    """Build an httpx response whose ``url`` is ``url``."""
    return httpx.Response(
        status_code,
        headers=headers or [],
        content=content,
        request=httpx.Request("GET", url),
    )


def redirect_to(location: str, status_code: int = 302, **extra: str) -> ResponseFactory:
    """Response factory answering every call with a redirect."""

    def factory(url: str, init: RequestInit) -> httpx.Response:  # noqa: ARG001
        headers = [("location", location), *extra.items()]
        return make_response(url, status_code, headers)

    return factory


def ok(content: bytes = b"ok", **headers: str) -> ResponseFactory:
    """Response factory answering every call with a 200."""

    def factory(url: str, init: RequestInit) -> httpx.Response:  # noqa: ARG001
        return make_response(url, 200, list(headers.items()), content)

    return factory


@dataclass
class ScriptedTransport:
    """Transport returning scripted responses in order and recording calls.

    The last factory is reused once the script runs out.
    """

    script: list[ResponseFactory]
    sent: list[SentRequest] = field(default_factory=list)

    async def __call__(self, url: str, init: RequestInit) -> httpx.Response:
        self.sent.append(SentRequest(url=url, init=init))
        index = min(len(self.sent) - 1, len(self.script) - 1)
        return self.script[index](url, init)


@dataclass
class PlainResponse:
    """Transport response without httpx: any object with url/status/headers."""

    url: str
    status_code: int
    headers: Any


@dataclass
class RecordingJar:
    """Cookie jar double with fixed cookie strings and recorded writes."""

    cookies: dict[str, str] = field(default_factory=dict)
    stored: list[tuple[str, str, bool]] = field(default_factory=list)
    fail_on: str | None = None

    async def get_cookie_string(self, url: str) -> str:
        return self.cookies.get(url, "")

    async def set_cookie(
        self, cookie_string: str, url: str, *, ignore_error: bool = True
    ) -> None:
        self.stored.append((cookie_string, url, ignore_error))
        if self.fail_on is not None and cookie_string == self.fail_on and not ignore_error:
            msg = f"rejected {cookie_string}"
            raise ValueError(msg)
