"""Unit tests for header variants and header deletion strategies."""

import httpx
import pytest

from fetch_cookie.headers import (
    MultiValueHeaders,
    SimpleHeaders,
    has_header,
    header_pairs,
    identify_header_deleter,
    lookup_header,
    to_header_variant,
)


class TestToHeaderVariant:
    """Tests for narrowing caller headers to a variant."""

    def test_none_stays_none(self) -> None:
        """Test that missing headers stay missing."""
        assert to_header_variant(None) is None

    def test_dict_becomes_simple_headers(self) -> None:
        """Test that a plain dict becomes SimpleHeaders with keys untouched."""
        headers = to_header_variant({"X-Token": "abc"})

        assert isinstance(headers, SimpleHeaders)
        assert list(headers) == ["X-Token"]

    def test_httpx_headers_become_multi_value(self) -> None:
        """Test that httpx.Headers keep repeated entries."""
        source = httpx.Headers([("accept", "a"), ("accept", "b")])

        headers = to_header_variant(source)

        assert isinstance(headers, MultiValueHeaders)
        assert headers.get_list("Accept") == ["a", "b"]

    def test_pairs_become_multi_value(self) -> None:
        """Test that a list of pairs becomes MultiValueHeaders."""
        headers = to_header_variant([("Cookie", "a=1"), ("Cookie", "b=2")])

        assert isinstance(headers, MultiValueHeaders)
        assert len(headers) == 2

    def test_variant_passes_through(self) -> None:
        """Test that an existing variant is returned as-is."""
        headers = MultiValueHeaders([("a", "1")])

        assert to_header_variant(headers) is headers

    def test_unsupported_type(self) -> None:
        """Test that an unknown header shape is rejected."""
        with pytest.raises(TypeError, match="Unsupported headers type"):
            to_header_variant(42)


class TestMultiValueHeaders:
    """Tests for the immutable multimap."""

    def test_append_returns_new_instance(self) -> None:
        """Test that append leaves the original untouched."""
        original = MultiValueHeaders([("cookie", "a=1")])

        updated = original.append("cookie", "b=2")

        assert original.get_list("cookie") == ["a=1"]
        assert updated.get_list("cookie") == ["a=1", "b=2"]

    def test_delete_is_case_insensitive(self) -> None:
        """Test that delete removes every spelling of a name."""
        headers = MultiValueHeaders(
            [("Authorization", "x"), ("AUTHORIZATION", "y"), ("Accept", "*/*")]
        )

        result = headers.delete("authorization")

        assert result.multi_items() == [("Accept", "*/*")]
        assert len(headers) == 3

    def test_get_joins_values(self) -> None:
        """Test that get joins repeated values."""
        headers = MultiValueHeaders([("Accept", "a"), ("accept", "b")])

        assert headers.get("ACCEPT") == "a, b"
        assert headers.get("missing") is None

    def test_contains(self) -> None:
        """Test case-insensitive membership."""
        headers = MultiValueHeaders([("Content-Length", "3")])

        assert "content-length" in headers
        assert "cookie" not in headers


class TestSimpleHeaders:
    """Tests for the plain-mapping variant."""

    def test_merge_overwrites_same_key(self) -> None:
        """Test that merge replaces a key with the exact same spelling."""
        headers = SimpleHeaders({"cookie": "old=1"})

        assert headers.merge(cookie="new=2")["cookie"] == "new=2"

    def test_merge_keeps_other_spelling(self) -> None:
        """Test that merge does not touch a differently spelled key."""
        headers = SimpleHeaders({"Cookie": "old=1"})

        merged = headers.merge(cookie="new=2")

        assert merged.to_dict() == {"Cookie": "old=1", "cookie": "new=2"}


class TestIdentifyHeaderDeleter:
    """Tests for header deletion strategy selection."""

    def test_no_headers_is_noop(self) -> None:
        """Test that deleting from missing headers keeps them missing."""
        delete = identify_header_deleter(None)

        assert delete(None, "cookie") is None

    def test_multi_value_uses_delete(self) -> None:
        """Test deletion on MultiValueHeaders."""
        headers = MultiValueHeaders([("Cookie", "a=1"), ("Accept", "*/*")])

        result = identify_header_deleter(headers)(headers, "cookie")

        assert isinstance(result, MultiValueHeaders)
        assert result.multi_items() == [("Accept", "*/*")]

    def test_simple_headers_scan_keys(self) -> None:
        """Test deletion on SimpleHeaders removes every key spelling."""
        headers = SimpleHeaders({"Cookie": "a", "cookie": "b", "Accept": "*/*"})

        result = identify_header_deleter(headers)(headers, "cookie")

        assert isinstance(result, SimpleHeaders)
        assert result.to_dict() == {"Accept": "*/*"}
        assert "Cookie" in headers


class TestHeaderHelpers:
    """Tests for variant-independent helpers."""

    def test_header_pairs(self) -> None:
        """Test that both variants list their pairs."""
        assert header_pairs(None) == []
        assert header_pairs(SimpleHeaders({"a": "1"})) == [("a", "1")]
        assert header_pairs(MultiValueHeaders([("a", "1"), ("a", "2")])) == [
            ("a", "1"),
            ("a", "2"),
        ]

    def test_has_header(self) -> None:
        """Test case-insensitive presence checks."""
        assert has_header(SimpleHeaders({"Cookie": "a=1"}), "cookie")
        assert not has_header(None, "cookie")

    def test_lookup_header_on_plain_dict(self) -> None:
        """Test case-insensitive lookup on a plain dict."""
        assert lookup_header({"Location": "/next"}, "location") == "/next"
        assert lookup_header({}, "location") is None

    def test_lookup_header_on_httpx_headers(self) -> None:
        """Test lookup on httpx.Headers."""
        assert lookup_header(httpx.Headers({"Location": "/x"}), "location") == "/x"
