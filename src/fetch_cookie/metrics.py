"""Metrics collection for cookie-aware fetching."""

from dataclasses import dataclass, field
from typing import ClassVar

from fetch_cookie.errors import FetchCookieErrorClass


@dataclass
class FetchCookieMetrics:
    """Metrics for cookie-aware fetch operations.

    Singleton class that tracks transport calls per status, followed
    redirects, cookies sent and stored, and failures.
    """

    requests_total: dict[int, int] = field(default_factory=dict)
    redirects_followed_total: int = 0
    cookies_sent_total: int = 0
    cookies_stored_total: int = 0
    failures_total: dict[str, int] = field(default_factory=dict)
    fetch_count: int = 0

    _instance: ClassVar["FetchCookieMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchCookieMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status_code: int) -> None:
        """Record one transport call.

        Args:
            status_code: HTTP status code of the response.
        """
        self.requests_total[status_code] = self.requests_total.get(status_code, 0) + 1

    def record_redirect(self) -> None:
        self.redirects_followed_total += 1

    def record_cookie_sent(self) -> None:
        self.cookies_sent_total += 1

    def record_cookies_stored(self, count: int) -> None:
        self.cookies_stored_total += count

    def record_fetch(self) -> None:
        """Record a completed logical call (all hops)."""
        self.fetch_count += 1

    def record_failure(self, error_class: FetchCookieErrorClass) -> None:
        """Record a failed logical call.

        Args:
            error_class: Classification of the failure.
        """
        key = error_class.value
        self.failures_total[key] = self.failures_total.get(key, 0) + 1

    def to_dict(self) -> dict[str, int | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "requests_total": dict(self.requests_total),
            "redirects_followed_total": self.redirects_followed_total,
            "cookies_sent_total": self.cookies_sent_total,
            "cookies_stored_total": self.cookies_stored_total,
            "failures_total": dict(self.failures_total),
            "fetch_count": self.fetch_count,
        }
