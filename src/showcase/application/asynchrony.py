"""Async/await examples: timed delay, guarded fetch, and a concurrent batch fetch."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from showcase.application.ports import Fetcher

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 2000


async def delay(ms: float) -> None:
    """Complete after ms milliseconds."""
    await asyncio.sleep(ms / 1000)


async def fetch_data(delay_ms: float = DEFAULT_DELAY_MS) -> str:
    await delay(delay_ms)
    message = "Data fetched successfully!"
    print(message)
    return message


async def get_data(url: str, fetcher: Fetcher) -> Any | None:
    """Fetch url and decode its JSON body. Failures are logged, not raised; returns None then."""
    try:
        response = await fetcher(url)
        data = await response.json()
    except Exception as exc:
        logger.error("Error fetching data: %s", exc)
        return None
    print(data)
    return data


async def fetch_all(urls: Sequence[str], fetcher: Fetcher) -> list[Any]:
    """Fetch every url concurrently, then decode every body concurrently.

    Results are in url order. Any failure propagates and aborts the batch.
    """
    responses = await asyncio.gather(*(fetcher(url) for url in urls))
    data = await asyncio.gather(*(response.json() for response in responses))
    print(data)
    return list(data)
