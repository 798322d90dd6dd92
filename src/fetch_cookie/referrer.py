"""Referrer-Policy header parsing."""

import re

from fetch_cookie.constants import REFERRER_POLICY_TOKENS


_TOKEN_SEPARATOR = re.compile(r"[,\s]+")


def parse_referrer_policy(policy_header: str) -> str:
    """Parse a Referrer-Policy header value.

    The header may list several policies; the last one this client knows
    wins and unknown tokens are skipped.

    Args:
        policy_header: Raw header value.

    Returns:
        The last recognised policy token, or "" if there is none.
    """
    policy = ""
    for token in _TOKEN_SEPARATOR.split(policy_header):
        if token and token in REFERRER_POLICY_TOKENS:
            policy = token
    return policy
