"""Unit tests for Referrer-Policy parsing."""

import pytest

from fetch_cookie.constants import REFERRER_POLICY_TOKENS
from fetch_cookie.referrer import parse_referrer_policy


class TestParseReferrerPolicy:
    """Tests for parse_referrer_policy."""

    @pytest.mark.parametrize(
        "token", sorted(token for token in REFERRER_POLICY_TOKENS if token)
    )
    def test_single_known_token(self, token: str) -> None:
        """Test that each known token parses to itself."""
        assert parse_referrer_policy(token) == token

    def test_last_valid_token_wins(self) -> None:
        """Test that the last recognised token is used."""
        assert parse_referrer_policy("no-referrer, strict-origin") == "strict-origin"

    def test_unknown_tokens_are_skipped(self) -> None:
        """Test that an unknown trailing token does not override a valid one."""
        assert (
            parse_referrer_policy("same-origin, made-up-policy") == "same-origin"
        )

    def test_whitespace_separated(self) -> None:
        """Test that whitespace separates tokens like commas do."""
        assert parse_referrer_policy("origin   unsafe-url") == "unsafe-url"

    def test_no_valid_token(self) -> None:
        """Test that a header without known tokens yields the empty policy."""
        assert parse_referrer_policy("bogus, nonsense") == ""

    def test_empty_header(self) -> None:
        """Test that an empty header yields the empty policy."""
        assert parse_referrer_policy("") == ""

    def test_tokens_are_case_sensitive(self) -> None:
        """Test that tokens must match exactly."""
        assert parse_referrer_policy("No-Referrer") == ""
