"""Unit tests for cookie injection into request records."""

from fetch_cookie.cookies.inject import inject_cookie
from fetch_cookie.headers import MultiValueHeaders, SimpleHeaders
from fetch_cookie.models import RequestInit


class TestInjectCookie:
    """Tests for inject_cookie."""

    def test_empty_cookie_is_noop(self) -> None:
        """Test that an empty cookie string returns the same record."""
        init = RequestInit.from_options(headers={"Accept": "*/*"})

        assert inject_cookie(init, "") is init

    def test_appends_to_multi_value_headers(self) -> None:
        """Test that MultiValueHeaders keep an existing Cookie and gain one."""
        init = RequestInit.from_options(headers=[("Cookie", "caller=1")])

        result = inject_cookie(init, "jar=2")

        assert isinstance(result.headers, MultiValueHeaders)
        assert result.headers.get_list("cookie") == ["caller=1", "jar=2"]

    def test_original_record_untouched(self) -> None:
        """Test that injection never mutates the given snapshot."""
        init = RequestInit.from_options(headers=[("Accept", "*/*")])

        inject_cookie(init, "jar=2")

        assert init.headers is not None
        assert "cookie" not in init.headers

    def test_no_headers_creates_simple_headers(self) -> None:
        """Test that a record without headers gets a cookie key."""
        init = RequestInit.from_options()

        result = inject_cookie(init, "id=1")

        assert isinstance(result.headers, SimpleHeaders)
        assert result.headers.to_dict() == {"cookie": "id=1"}

    def test_simple_headers_merged(self) -> None:
        """Test that other plain headers survive the merge."""
        init = RequestInit.from_options(headers={"Accept": "*/*"})

        result = inject_cookie(init, "id=1")

        assert result.headers is not None
        assert result.headers.to_dict() == {"Accept": "*/*", "cookie": "id=1"}

    def test_simple_headers_overwrite_existing_cookie_key(self) -> None:
        """Test the plain-mapping path replaces a caller's cookie key.

        Unlike MultiValueHeaders, the caller value is not combined with the
        jar's cookies.
        """
        init = RequestInit.from_options(headers={"cookie": "caller=1"})

        result = inject_cookie(init, "jar=2")

        assert result.headers is not None
        assert result.headers.to_dict() == {"cookie": "jar=2"}
