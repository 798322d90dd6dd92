"""Unit tests for Set-Cookie harvesting from responses."""

import email.message

from fetch_cookie.cookies.harvest import get_cookies_from_response
from tests.helpers.transport import PlainResponse, make_response


URL = "https://example.com/"


class _GetAllOnlyHeaders:
    """Header object that only exposes a multidict-style getall."""

    def __init__(self, values: list[str]) -> None:
        self._values = values

    def getall(self, name: str, default: list[str]) -> list[str]:
        if name == "set-cookie" and self._values:
            return list(self._values)
        return default


class TestMultiValueRetrieval:
    """Tests for headers with a multi-value getter."""

    def test_httpx_headers(self) -> None:
        """Test that each Set-Cookie header of an httpx response is kept apart."""
        response = make_response(
            URL,
            headers=[
                ("set-cookie", "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT"),
                ("set-cookie", "b=2"),
            ],
        )

        assert get_cookies_from_response(response) == [
            "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT",
            "b=2",
        ]

    def test_httpx_headers_without_cookies(self) -> None:
        """Test that a response without Set-Cookie yields an empty list."""
        assert get_cookies_from_response(make_response(URL)) == []

    def test_getall_style(self) -> None:
        """Test multidict-style getall headers."""
        response = PlainResponse(URL, 200, _GetAllOnlyHeaders(["x=1", "y=2"]))

        assert get_cookies_from_response(response) == ["x=1", "y=2"]

    def test_getall_style_missing(self) -> None:
        """Test multidict-style headers without Set-Cookie."""
        response = PlainResponse(URL, 200, _GetAllOnlyHeaders([]))

        assert get_cookies_from_response(response) == []

    def test_email_message_headers(self) -> None:
        """Test http.client/email style headers with get_all."""
        message = email.message.Message()
        message["Set-Cookie"] = "a=1"
        message["Set-Cookie"] = "b=2"

        response = PlainResponse(URL, 200, message)

        assert get_cookies_from_response(response) == ["a=1", "b=2"]

    def test_email_message_without_cookies(self) -> None:
        """Test that get_all returning None is treated as no cookies."""
        response = PlainResponse(URL, 200, email.message.Message())

        assert get_cookies_from_response(response) == []


class TestRawHeaderMap:
    """Tests for plain mappings holding lists."""

    def test_list_under_set_cookie_key(self) -> None:
        """Test that a list value is returned as-is."""
        response = PlainResponse(URL, 200, {"Set-Cookie": ["a=1", "b=2"]})

        assert get_cookies_from_response(response) == ["a=1", "b=2"]

    def test_missing_key(self) -> None:
        """Test that a mapping without Set-Cookie yields an empty list."""
        response = PlainResponse(URL, 200, {"content-type": "text/html"})

        assert get_cookies_from_response(response) == []


class TestCombinedString:
    """Tests for headers that fold Set-Cookie into one string."""

    def test_combined_value_is_split(self) -> None:
        """Test that a folded value is split on cookie boundaries."""
        response = PlainResponse(
            URL,
            200,
            {"set-cookie": "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT, b=2"},
        )

        assert get_cookies_from_response(response) == [
            "a=1; Expires=Wed, 09 Jun 2021 10:18:14 GMT",
            "b=2",
        ]

    def test_single_value(self) -> None:
        """Test a single cookie string."""
        response = PlainResponse(URL, 200, {"Set-Cookie": "id=1"})

        assert get_cookies_from_response(response) == ["id=1"]

