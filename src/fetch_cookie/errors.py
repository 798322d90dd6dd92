"""Error types for cookie-aware fetching."""

from enum import Enum


class FetchCookieErrorClass(str, Enum):
    """Classification of fetch-cookie errors.

    - INVALID_OPTION: redirect mode is not one of follow/error/manual
    - REDIRECT_NOT_ALLOWED: redirect received while mode is "error"
    - REDIRECT_LIMIT_EXCEEDED: redirect chain hit the configured ceiling
    - UNREPLAYABLE_BODY: a one-shot stream body would have to be resent
    - COOKIE_REJECTED: the jar refused a cookie and errors are not ignored
    """

    INVALID_OPTION = "INVALID_OPTION"
    REDIRECT_NOT_ALLOWED = "REDIRECT_NOT_ALLOWED"
    REDIRECT_LIMIT_EXCEEDED = "REDIRECT_LIMIT_EXCEEDED"
    UNREPLAYABLE_BODY = "UNREPLAYABLE_BODY"
    COOKIE_REJECTED = "COOKIE_REJECTED"


class FetchCookieError(Exception):
    """Base exception for fetch-cookie errors.

    Provides structured error information for logging.
    """

    def __init__(
        self,
        error_class: FetchCookieErrorClass,
        message: str,
        url: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            error_class: Classification of the error.
            message: Human-readable error message.
            url: URL the failure relates to.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.error_class = error_class
        self.message = message
        self.url = url
        self.details = details or {}

    def to_dict(
        self,
    ) -> dict[str, str | int | bool | None | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "url": self.url,
            "details": self.details,
        }


class InvalidRedirectOptionError(FetchCookieError):
    """Raised when the redirect mode is not follow, error or manual."""

    def __init__(self, redirect: str) -> None:
        """Initialize the error.

        Args:
            redirect: The rejected redirect mode.
        """
        super().__init__(
            FetchCookieErrorClass.INVALID_OPTION,
            f"Invalid redirect option: {redirect}",
            details={"redirect": redirect},
        )
        self.redirect = redirect


class RedirectNotAllowedError(FetchCookieError):
    """Raised when a redirect is received and redirect mode is "error"."""

    def __init__(self, url: str) -> None:
        """Initialize the error.

        Args:
            url: URL of the response that redirected.
        """
        super().__init__(
            FetchCookieErrorClass.REDIRECT_NOT_ALLOWED,
            "URI requested responded with a redirect and redirect mode "
            f"is set to error: {url}",
            url=url,
        )


class RedirectLimitExceededError(FetchCookieError):
    """Raised when a redirect chain reaches the maximum redirect count."""

    def __init__(self, max_redirect: int, url: str) -> None:
        """Initialize the error.

        Args:
            max_redirect: The configured redirect ceiling.
            url: URL of the response that would have exceeded it.
        """
        super().__init__(
            FetchCookieErrorClass.REDIRECT_LIMIT_EXCEEDED,
            f"Reached maximum redirect of {max_redirect} for URL: {url}",
            url=url,
            details={"max_redirect": max_redirect},
        )
        self.max_redirect = max_redirect


class UnreplayableBodyError(FetchCookieError):
    """Raised when a redirect would resend a one-shot stream body."""

    def __init__(self, url: str, status_code: int) -> None:
        """Initialize the error.

        Args:
            url: URL of the redirect response.
            status_code: Redirect status that required the body again.
        """
        super().__init__(
            FetchCookieErrorClass.UNREPLAYABLE_BODY,
            "Cannot follow redirect with body being a readable stream",
            url=url,
            details={"status_code": status_code},
        )
        self.status_code = status_code


class CookieRejectedError(FetchCookieError):
    """Raised by a jar when a cookie cannot be stored and errors count."""

    def __init__(self, cookie: str, url: str, reason: str) -> None:
        """Initialize the error.

        Args:
            cookie: Name of the cookie (or the raw string if unparseable).
            url: URL the cookie was received from.
            reason: Why the jar refused it.
        """
        super().__init__(
            FetchCookieErrorClass.COOKIE_REJECTED,
            f"Cookie rejected for {url}: {reason}",
            url=url,
            details={"cookie": cookie, "reason": reason},
        )
        self.reason = reason
