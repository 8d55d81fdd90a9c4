"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Any, Protocol


class Response(Protocol):
    """Result of a completed HTTP request."""

    url: str
    status: int

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        ...

    async def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError on malformed content."""
        ...


class Fetcher(Protocol):
    """Issues a GET request. Resolves to a Response or raises on network failure."""

    async def __call__(self, url: str) -> Response:
        ...
