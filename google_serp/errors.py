"""Exception classes for google-serp."""

from typing import Optional


class GoogleSearchError(Exception):
    """Base exception for google-serp."""

    pass


class SearchError(GoogleSearchError):
    """The search request was invalid."""

    pass


class Cancelled(GoogleSearchError):
    """The caller's cancellation token fired before the search completed."""

    def __init__(self, message: str = "search cancelled"):
        super().__init__(message)


class DeadlineExceeded(Cancelled):
    """The cancellation token's deadline passed."""

    def __init__(self, message: str = "deadline exceeded"):
        super().__init__(message)


class TransportError(GoogleSearchError):
    """Fetching the results page failed."""

    def __init__(self, message: str, status: Optional[int] = None, url: str = ""):
        self.message = message
        self.status = status
        self.url = url
        super().__init__(message)


class Blocked(GoogleSearchError):
    """Google refused the request as rate-limited or abusive.

    Raised instead of :class:`TransportError` so callers can back off.
    The transport error that triggered it is available as ``__cause__``.
    """

    def __init__(self, message: str = "google blocked the request (Too Many Requests)"):
        super().__init__(message)
