"""Redirect resolution: decides what the next hop of a redirect chain is.

Given the request record of the hop that was redirected and the redirect
response, either stops the chain (returns None), fails, or returns the
next hop's state:

1. mode dispatch: "error" fails, "manual" stops, "follow" goes on,
   anything else fails
2. no Location header: stop
3. resolve Location against the response URL
4. redirect ceiling reached: fail
5. clone the record with redirect_count + 1
6. leaving the request host's subtree: strip credentials headers
7. one-shot stream body on anything but 303: fail
8. 303, or 301/302 after POST: switch to a bodiless GET
9. carry over the response's Referrer-Policy
"""

from typing import Any

import structlog

from fetch_cookie.body import EMPTY_BODY
from fetch_cookie.constants import (
    CROSS_ORIGIN_STRIPPED_HEADERS,
    HEADER_CONTENT_LENGTH,
    HEADER_LOCATION,
    HEADER_REFERRER_POLICY,
    HTTP_STATUS_SEE_OTHER,
    POST_DOWNGRADE_STATUSES,
)
from fetch_cookie.errors import (
    InvalidRedirectOptionError,
    RedirectLimitExceededError,
    RedirectNotAllowedError,
    UnreplayableBodyError,
)
from fetch_cookie.headers import identify_header_deleter, lookup_header
from fetch_cookie.hosts import is_same_host_or_subdomain, resolve_redirect_url
from fetch_cookie.models import HopState, RedirectMode, RequestInit
from fetch_cookie.redact import redact_url_credentials
from fetch_cookie.referrer import parse_referrer_policy


logger = structlog.get_logger()


def resolve_redirect(
    init: RequestInit,
    response: Any,
) -> HopState | None:
    """Work out the next hop for a redirect response.

    Args:
        init: Request record of the redirected hop, as the caller built it
            (redirect mode not forced to manual, no jar cookies added).
        response: Redirect response of that hop.

    Returns:
        State of the next hop, or None if the response is final.

    Raises:
        InvalidRedirectOptionError: Unknown redirect mode.
        RedirectNotAllowedError: Redirect mode is "error".
        RedirectLimitExceededError: ``redirect_count`` reached ``max_redirect``.
        UnreplayableBodyError: A stream body would have to be resent.
    """
    request_url = str(response.url)
    status_code = int(response.status_code)
    log = logger.bind(
        component="fetch_cookie",
        url=redact_url_credentials(request_url),
        status_code=status_code,
    )

    try:
        mode = RedirectMode(init.redirect)
    except ValueError as e:
        raise InvalidRedirectOptionError(init.redirect) from e

    if mode is RedirectMode.ERROR:
        raise RedirectNotAllowedError(request_url)
    if mode is RedirectMode.MANUAL:
        log.debug("redirect_stopped", reason="manual")
        return None

    location = lookup_header(response.headers, HEADER_LOCATION)
    if location is None:
        log.debug("redirect_stopped", reason="no_location")
        return None

    # response.url is the URL of this hop because the transport ran in manual mode
    redirect_url = resolve_redirect_url(location, request_url)

    if init.redirect_count >= init.max_redirect:
        raise RedirectLimitExceededError(init.max_redirect, request_url)

    next_init = init.evolve(redirect_count=init.redirect_count + 1)
    delete_header = identify_header_deleter(next_init.headers)

    # Do not forward credentials outside the original host's subtree
    stripped = not is_same_host_or_subdomain(redirect_url, request_url)
    if stripped:
        headers = next_init.headers
        for name in CROSS_ORIGIN_STRIPPED_HEADERS:
            headers = delete_header(headers, name)
        next_init = next_init.evolve(headers=headers)

    if status_code != HTTP_STATUS_SEE_OTHER and not next_init.body.replayable:
        raise UnreplayableBodyError(request_url, status_code)

    if status_code == HTTP_STATUS_SEE_OTHER or (
        status_code in POST_DOWNGRADE_STATUSES and next_init.method == "POST"
    ):
        next_init = next_init.evolve(
            method="GET",
            body=EMPTY_BODY,
            headers=delete_header(next_init.headers, HEADER_CONTENT_LENGTH),
        )

    policy_header = lookup_header(response.headers, HEADER_REFERRER_POLICY)
    if policy_header is not None:
        next_init = next_init.evolve(
            referrer_policy=parse_referrer_policy(policy_header)
        )

    log.info(
        "redirect_followed",
        location=redact_url_credentials(redirect_url),
        redirect_count=next_init.redirect_count,
        method=next_init.method,
        credentials_stripped=stripped,
    )
    return HopState(url=redirect_url, init=next_init)
