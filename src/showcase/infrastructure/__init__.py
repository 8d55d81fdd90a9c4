"""Infrastructure layer: host capabilities (HTTP fetch, event dispatch)."""

from showcase.infrastructure.events import CustomEvent, Event, EventTarget
from showcase.infrastructure.http import HttpResponse, UrllibFetcher, fetch

__all__ = [
    "CustomEvent",
    "Event",
    "EventTarget",
    "HttpResponse",
    "UrllibFetcher",
    "fetch",
]
