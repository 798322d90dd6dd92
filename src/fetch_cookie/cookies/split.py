"""Splitting of combined Set-Cookie header values.

When several Set-Cookie headers are folded into one value they are joined
with commas, but ``Expires`` dates contain commas too
("Expires=Wed, 09 Jun 2021 10:18:14 GMT"). A comma only starts a new cookie
when the text after it reads as ``name=`` before any ``;`` or ``,``.
"""

_SPECIAL_CHARS = frozenset("=;,")


def split_set_cookie_header(value: str) -> list[str]:
    """Split a combined Set-Cookie value into individual cookie strings.

    Args:
        value: Header value, possibly holding several cookies.

    Returns:
        Cookie strings in order of appearance.
    """
    cookies: list[str] = []
    length = len(value)
    pos = 0

    def skip_whitespace() -> bool:
        nonlocal pos
        while pos < length and value[pos].isspace():
            pos += 1
        return pos < length

    while pos < length:
        start = pos
        separator_found = False

        while skip_whitespace():
            if value[pos] != ",":
                pos += 1
                continue

            last_comma = pos
            pos += 1
            skip_whitespace()
            next_start = pos

            while pos < length and value[pos] not in _SPECIAL_CHARS:
                pos += 1

            if pos < length and value[pos] == "=":
                separator_found = True
                pos = next_start
                cookies.append(value[start:last_comma])
                start = pos
            else:
                pos = last_comma + 1

        if not separator_found or pos >= length:
            cookies.append(value[start:length])

    return cookies
