"""Cookie jar interface and the standard-library backed implementation."""

import email.message
import time
import urllib.request
from http.cookiejar import CookieJar as _StdlibJar
from http.cookiejar import DefaultCookiePolicy, parse_ns_headers
from typing import Protocol, runtime_checkable

import structlog

from fetch_cookie.errors import CookieRejectedError
from fetch_cookie.redact import redact_url_credentials


logger = structlog.get_logger()


@runtime_checkable
class CookieJar(Protocol):
    """String-based cookie store keyed by URL.

    Implementations own cookie parsing, matching, expiry and storage.
    ``set_cookie`` must not raise when ``ignore_error`` is true.
    """

    async def get_cookie_string(self, url: str) -> str:
        """Get the Cookie header value to send to ``url`` ("" if none)."""
        ...

    async def set_cookie(
        self, cookie_string: str, url: str, *, ignore_error: bool = True
    ) -> None:
        """Store one Set-Cookie string received from ``url``."""
        ...


class _SetCookieResponse:
    """Minimal response shim exposing ``info()`` for ``http.cookiejar``."""

    def __init__(self, cookie_string: str) -> None:
        self._headers = email.message.Message()
        self._headers["Set-Cookie"] = cookie_string

    def info(self) -> email.message.Message:
        return self._headers


class StdlibCookieJar:
    """Cookie jar adapter over ``http.cookiejar.CookieJar``.

    One instance per client. ``http.cookiejar`` locks its own storage, so
    concurrent requests may share an instance; overlapping writes to the
    same cookie are last-writer-wins.
    """

    def __init__(
        self,
        jar: _StdlibJar | None = None,
        policy: DefaultCookiePolicy | None = None,
    ) -> None:
        """Initialize the jar.

        Args:
            jar: Existing standard-library jar to wrap (e.g.
                ``httpx.Cookies().jar``). A new one is created if omitted.
            policy: Acceptance policy. Replaces the wrapped jar's policy.
        """
        self._policy = policy or DefaultCookiePolicy()
        self._jar = jar if jar is not None else _StdlibJar(self._policy)
        self._jar.set_policy(self._policy)
        self._log = logger.bind(component="cookie_jar")

    @property
    def jar(self) -> _StdlibJar:
        """The wrapped standard-library jar."""
        return self._jar

    async def get_cookie_string(self, url: str) -> str:
        request = urllib.request.Request(url)
        self._jar.add_cookie_header(request)
        return request.get_header("Cookie", "") or ""

    async def set_cookie(
        self, cookie_string: str, url: str, *, ignore_error: bool = True
    ) -> None:
        """Parse and store one Set-Cookie string.

        Args:
            cookie_string: Raw Set-Cookie value.
            url: URL the cookie was received from.
            ignore_error: Drop unparseable or refused cookies silently.

        Raises:
            CookieRejectedError: If the cookie is unparseable or refused by
                the policy and ``ignore_error`` is false.
        """
        request = urllib.request.Request(url)
        cookies = self._jar.make_cookies(_SetCookieResponse(cookie_string), request)

        if not cookies:
            if _is_expiry(cookie_string):
                return
            self._reject(cookie_string, url, "unparseable cookie", ignore_error)
            return

        for cookie in cookies:
            if not self._policy.set_ok(cookie, request):
                self._reject(cookie.name, url, "refused by cookie policy", ignore_error)
                continue
            self._jar.set_cookie(cookie)

    def _reject(self, cookie: str, url: str, reason: str, ignore_error: bool) -> None:
        if not ignore_error:
            raise CookieRejectedError(cookie, url, reason)
        self._log.debug(
            "cookie_ignored",
            url=redact_url_credentials(url),
            reason=reason,
        )


def _is_expiry(cookie_string: str) -> bool:
    """Whether a Set-Cookie string is a deletion (past expiry or max-age <= 0).

    ``http.cookiejar`` applies such cookies by clearing the stored one and
    returns nothing, which is not a failure. A valid Max-Age wins over Expires.
    """
    parsed = parse_ns_headers([cookie_string])
    if not parsed:
        return False
    attrs = dict(parsed[0][1:])

    if "max-age" in attrs:
        try:
            return int(attrs["max-age"]) <= 0
        except (TypeError, ValueError):
            return False

    expires = attrs.get("expires")
    return expires is not None and expires <= time.time()
