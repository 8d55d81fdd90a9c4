"""Exception hierarchy for showcase.

Callers can catch ShowcaseError when they do not care about the specific failure.
"""


class ShowcaseError(Exception):
    """Base exception for showcase failures."""


class FetchError(ShowcaseError):
    """Raised when an HTTP request cannot be completed (DNS, refused connection, timeout).

    HTTP error statuses are not failures here; they produce a non-ok response.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
