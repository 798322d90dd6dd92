"""Cookie-aware HTTP client with browser-like redirect following."""

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx
import structlog

from fetch_cookie.config import FetchCookieConfig
from fetch_cookie.cookies.harvest import get_cookies_from_response
from fetch_cookie.cookies.inject import inject_cookie
from fetch_cookie.cookies.jar import CookieJar
from fetch_cookie.errors import FetchCookieError
from fetch_cookie.headers import MultiValueHeaders, headers_to_dict
from fetch_cookie.metrics import FetchCookieMetrics
from fetch_cookie.models import (
    FetchResponse,
    HopState,
    RedirectMode,
    RequestInit,
    is_redirect,
    request_url,
)
from fetch_cookie.redact import cookie_names, redact_headers, redact_url_credentials
from fetch_cookie.redirect import resolve_redirect
from fetch_cookie.settings import FetchCookieSettings
from fetch_cookie.transport import Transport


logger = structlog.get_logger()

RequestTarget = str | httpx.URL | httpx.Request


class CookieFetcher:
    """HTTP client wrapper that keeps cookies in a jar and follows redirects.

    Every hop:
    - adds the jar's cookies for the hop URL to the request
    - sends it with the transport in manual redirect mode
    - stores the response's Set-Cookie values in the jar
    - on a redirect status, lets the redirect resolver pick the next hop

    The jar is owned by the caller and shared by reference; use one jar per
    client (or share it deliberately between clients).
    """

    def __init__(
        self,
        transport: Transport,
        jar: CookieJar,
        config: FetchCookieConfig | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            transport: Performs the HTTP exchanges.
            jar: Cookie store consulted and updated on every hop.
            config: Client-wide defaults.
        """
        self._transport = transport
        self._jar = jar
        self._config = config or FetchCookieConfig()
        self._metrics = FetchCookieMetrics.get_instance()
        self._log = logger.bind(component="fetch_cookie")

    @classmethod
    def from_settings(
        cls,
        transport: Transport,
        jar: CookieJar,
        settings: FetchCookieSettings | None = None,
    ) -> "CookieFetcher":
        """Build a fetcher configured from ``FETCH_COOKIE_*`` settings."""
        settings = settings or FetchCookieSettings()
        return cls(transport, jar, settings.to_config())

    @property
    def jar(self) -> CookieJar:
        return self._jar

    @property
    def config(self) -> FetchCookieConfig:
        return self._config

    async def fetch(
        self,
        target: RequestTarget,
        *,
        method: str | None = None,
        headers: Any = None,
        content: Any = None,
        redirect: str | RedirectMode | None = None,
        referrer_policy: str = "",
        max_redirect: int | None = None,
        extensions: Mapping[str, Any] | None = None,
    ) -> FetchResponse:
        """Fetch a URL, handling cookies and redirects on every hop.

        Args:
            target: URL, or an ``httpx.Request`` whose method, headers and
                body are used unless overridden here.
            method: HTTP method (default GET).
            headers: Request headers: a mapping, ``httpx.Headers`` or a
                list of pairs.
            content: Request body: bytes, str, a list of bytes chunks, or an
                (async) iterator of bytes chunks (one-shot stream).
            redirect: "follow", "error" or "manual".
            referrer_policy: Referrer policy of the first hop.
            max_redirect: Redirect ceiling for this call.
            extensions: Opaque transport settings, passed on every hop.

        Returns:
            FetchResponse wrapping the last hop's transport response.

        Raises:
            FetchCookieError: On redirect or cookie handling failures.
            Exception: Transport failures are passed through unchanged.
        """
        url, init = self._build_init(
            target,
            method=method,
            headers=headers,
            content=content,
            redirect=redirect,
            referrer_policy=referrer_policy,
            max_redirect=max_redirect,
            extensions=extensions,
        )

        try:
            result = await self._run(HopState(url=url, init=init))
        except FetchCookieError as e:
            self._metrics.record_failure(e.error_class)
            self._log.warning("fetch_failed", **e.to_dict())
            raise

        self._metrics.record_fetch()
        self._log.info(
            "fetch_complete",
            url=redact_url_credentials(result.url),
            status_code=result.status_code,
            redirect_count=result.redirect_count,
        )
        return result

    async def _run(self, state: HopState) -> FetchResponse:
        """Run hops until a response is final."""
        while True:
            response = await self._send_hop(state)
            redirected = state.init.redirect_count > 0

            if not is_redirect(int(response.status_code)):
                return self._final(response, redirected, state)

            next_state = resolve_redirect(state.init, response)
            if next_state is None:
                return self._final(response, redirected, state)

            self._metrics.record_redirect()
            state = next_state

    async def _send_hop(self, state: HopState) -> Any:
        """Send one hop: attach cookies, call the transport, store cookies."""
        working = state.init.evolve(redirect=RedirectMode.MANUAL.value)

        cookie = await self._jar.get_cookie_string(state.url)
        working = inject_cookie(working, cookie)
        if cookie:
            self._metrics.record_cookie_sent()

        self._log.debug(
            "fetch_hop",
            url=redact_url_credentials(state.url),
            method=working.method,
            hop=state.hop_count,
            headers=redact_headers(headers_to_dict(working.headers)),
            cookie_names=cookie_names(cookie),
        )

        response = await self._transport(state.url, working)
        self._metrics.record_request(int(response.status_code))

        await self._store_cookies(response)
        return response

    async def _store_cookies(self, response: Any) -> None:
        """Store every Set-Cookie value of a response, concurrently."""
        cookies = get_cookies_from_response(response)
        if not cookies:
            return

        response_url = str(response.url)
        await asyncio.gather(
            *(
                self._jar.set_cookie(
                    cookie, response_url, ignore_error=self._config.ignore_error
                )
                for cookie in cookies
            )
        )
        self._metrics.record_cookies_stored(len(cookies))
        self._log.debug(
            "cookies_stored",
            url=redact_url_credentials(response_url),
            count=len(cookies),
        )

    def _final(self, response: Any, redirected: bool, state: HopState) -> FetchResponse:
        return FetchResponse(
            response=response,
            redirected=redirected,
            redirect_count=state.hop_count,
        )

    def _build_init(
        self,
        target: RequestTarget,
        *,
        method: str | None,
        headers: Any,
        content: Any,
        redirect: str | RedirectMode | None,
        referrer_policy: str,
        max_redirect: int | None,
        extensions: Mapping[str, Any] | None,
    ) -> tuple[str, RequestInit]:
        """Resolve the target URL and build the first hop's request record.

        An ``httpx.Request`` target is folded in here: its method, headers
        (minus Host) and body fill in whatever the call does not override.
        """
        if isinstance(target, httpx.Request):
            method = method or target.method
            if headers is None:
                headers = MultiValueHeaders(
                    (key, value)
                    for key, value in target.headers.multi_items()
                    if key.lower() != "host"
                )
            if content is None:
                content = _request_content(target)

        init = RequestInit.from_options(
            method=method,
            headers=headers,
            content=content,
            redirect=redirect if redirect is not None else self._config.default_redirect,
            referrer_policy=referrer_policy,
            max_redirect=(
                max_redirect if max_redirect is not None else self._config.max_redirect
            ),
            extensions=extensions,
        )
        return request_url(target), init


def _request_content(request: httpx.Request) -> Any:
    try:
        return request.content or None
    except httpx.RequestNotRead:
        pass
    # httpx byte streams are iterables, the body record wants a one-shot iterator
    if isinstance(request.stream, httpx.AsyncByteStream):
        return aiter(request.stream)
    return iter(request.stream)


def fetch_with_cookies(
    transport: Transport,
    jar: CookieJar,
    ignore_error: bool = True,
) -> Callable[..., Awaitable[FetchResponse]]:
    """Wrap a transport into a cookie-aware fetch function.

    Args:
        transport: Performs the HTTP exchanges.
        jar: Cookie store shared by every call of the returned function.
        ignore_error: Silently drop cookies the jar refuses.

    Returns:
        ``fetch(target, **options)`` coroutine function, see
        ``CookieFetcher.fetch``.
    """
    fetcher = CookieFetcher(
        transport, jar, FetchCookieConfig(ignore_error=ignore_error)
    )
    return fetcher.fetch
