"""Run catalog demos in order, printing a header per demo."""

import asyncio
import inspect
import logging

from showcase.catalog import DemoEntry
from showcase.config import Settings

logger = logging.getLogger(__name__)


def run_demo(entry: DemoEntry, settings: Settings) -> None:
    """Run one demo; coroutine functions are driven with asyncio.run."""
    func = entry.resolve()
    if inspect.iscoroutinefunction(func):
        asyncio.run(func(settings))
    else:
        func(settings)


def run_demos(entries: list[DemoEntry], settings: Settings) -> list[str]:
    """Run every entry. A failing demo is logged and the rest still run.

    Returns the ids of demos that raised.
    """
    failed: list[str] = []
    for number, entry in enumerate(entries, start=1):
        print(f"== {number}. {entry.id}: {entry.title} ==")
        try:
            run_demo(entry, settings)
        except Exception:
            logger.exception("Demo %s failed", entry.id)
            failed.append(entry.id)
    if failed:
        logger.warning("%d of %d demos failed: %s", len(failed), len(entries), ", ".join(failed))
    return failed
