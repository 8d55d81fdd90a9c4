"""HTTP GET over urllib.request, awaited from a worker thread."""

import asyncio
import http.client
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any

from showcase.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class HttpResponse:
    """Completed response. Error statuses are carried, not raised."""

    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8")

    async def json(self) -> Any:
        return json.loads(self.text())


def _get(url: str, timeout: float) -> HttpResponse:
    req = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as r:
            return HttpResponse(
                url=url,
                status=r.status,
                headers=dict(r.headers.items()),
                body=r.read(),
            )
    except urllib.error.HTTPError as e:
        # Status errors still have a response.
        logger.debug("GET %s -> %s", url, e.code)
        return HttpResponse(
            url=url,
            status=e.code,
            headers=dict(e.headers.items()) if e.headers else {},
            body=e.read() or b"",
        )
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        reason = getattr(e, "reason", None) or e
        raise FetchError(url, str(reason)) from e


async def fetch(url: str, timeout: float = DEFAULT_TIMEOUT) -> HttpResponse:
    """GET url. Resolves to an HttpResponse; raises FetchError on network or protocol failure."""
    logger.debug("GET %s", url)
    return await asyncio.to_thread(_get, url, timeout)


class UrllibFetcher:
    """Fetcher bound to a timeout, for passing to the async operations."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    async def __call__(self, url: str) -> HttpResponse:
        return await fetch(url, timeout=self._timeout)
