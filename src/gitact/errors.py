"""Application exception classes."""

from datetime import datetime
from typing import Optional


class GitActError(Exception):
    """Base class for all gitact errors."""


class ConfigError(GitActError):
    """Raised when configuration is invalid."""


# ── Data source errors ────────────────────────────────────────────────────

class FetchError(GitActError):
    """Raised when a GitHub data source cannot be read."""

    category = "fetch"


class UserNotFoundError(FetchError):
    """The requested GitHub user does not exist."""

    category = "not_found"

    def __init__(self, username: str) -> None:
        super().__init__(f"user '{username}' not found")
        self.username = username


class HTTPStatusError(FetchError):
    """GitHub answered with a non-2xx status."""

    category = "http"

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(HTTPStatusError):
    """The GitHub rate limit is exhausted (or nearly so)."""

    category = "rate_limited"

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 403,
        reset_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.reset_at = reset_at


class NetworkError(FetchError):
    """The request never got an HTTP answer."""

    category = "transport"


class DecodeError(FetchError):
    """The response body was not the expected JSON shape."""

    category = "decode"


# ── Side-effect action errors ─────────────────────────────────────────────

class ActionError(GitActError):
    """Raised when a clipboard or browser action fails."""


class ClipboardUnavailableError(ActionError):
    """No clipboard utility could be found or run."""


class BrowserUnsupportedError(ActionError):
    """No browser could be launched."""


class OSUnsupportedError(ActionError):
    """The current platform has no supported implementation."""
