"""HTTP constants for cookie handling and redirect following.

Centralizes status codes, header names and policy tokens shared by the
redirect resolver and the dispatcher.
"""

# Redirect statuses (anything else is terminal, even with a Location header)
HTTP_STATUS_MOVED_PERMANENTLY = 301
HTTP_STATUS_FOUND = 302
HTTP_STATUS_SEE_OTHER = 303
HTTP_STATUS_TEMPORARY_REDIRECT = 307
HTTP_STATUS_PERMANENT_REDIRECT = 308

REDIRECT_STATUSES = frozenset(
    {
        HTTP_STATUS_MOVED_PERMANENTLY,
        HTTP_STATUS_FOUND,
        HTTP_STATUS_SEE_OTHER,
        HTTP_STATUS_TEMPORARY_REDIRECT,
        HTTP_STATUS_PERMANENT_REDIRECT,
    }
)

# Statuses that turn a POST into a bodiless GET
POST_DOWNGRADE_STATUSES = frozenset(
    {HTTP_STATUS_MOVED_PERMANENTLY, HTTP_STATUS_FOUND}
)

DEFAULT_MAX_REDIRECT = 20
MAX_REDIRECT_LIMIT = 1000

# Headers never forwarded to a host outside the original host's subtree
CROSS_ORIGIN_STRIPPED_HEADERS = (
    "authorization",
    "www-authenticate",
    "cookie",
    "cookie2",
)

HEADER_COOKIE = "cookie"
HEADER_SET_COOKIE = "set-cookie"
HEADER_LOCATION = "location"
HEADER_CONTENT_LENGTH = "content-length"
HEADER_REFERRER_POLICY = "referrer-policy"

REFERRER_POLICY_TOKENS = frozenset(
    {
        "",
        "no-referrer",
        "no-referrer-when-downgrade",
        "same-origin",
        "origin",
        "strict-origin",
        "origin-when-cross-origin",
        "strict-origin-when-cross-origin",
        "unsafe-url",
    }
)
