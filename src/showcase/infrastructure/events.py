"""Named-event dispatch: Event, CustomEvent, and EventTarget.

Listeners are called synchronously, in registration order, with the event
object. A listener that raises is reported through logging and the remaining
listeners still run.
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], Any]


class Event:
    """A named occurrence. Cancelable events can have their default prevented."""

    def __init__(self, type: str, *, cancelable: bool = False) -> None:
        if not type or not type.strip():
            raise ValueError("Event type must be non-empty.")
        self.type = type
        self.cancelable = cancelable
        self.default_prevented = False
        self.target: "EventTarget | None" = None

    def prevent_default(self) -> None:
        if self.cancelable:
            self.default_prevented = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type!r})"


class CustomEvent(Event):
    """Event carrying an arbitrary payload in detail."""

    def __init__(self, type: str, *, detail: Any = None, cancelable: bool = False) -> None:
        super().__init__(type, cancelable=cancelable)
        self.detail = detail


class _Registration:
    """One add_event_listener call. Re-adding after removal creates a new one."""

    __slots__ = ("listener", "once", "removed")

    def __init__(self, listener: Listener, once: bool) -> None:
        self.listener = listener
        self.once = once
        self.removed = False


class EventTarget:
    """Registry of listeners per event type."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._listeners: dict[str, list[_Registration]] = {}

    def add_event_listener(self, type: str, listener: Listener, *, once: bool = False) -> None:
        """Register listener for type. Registering the same listener again is a no-op."""
        entries = self._listeners.setdefault(type, [])
        if any(reg.listener == listener for reg in entries):
            return
        entries.append(_Registration(listener, once))

    def remove_event_listener(self, type: str, listener: Listener) -> None:
        entries = self._listeners.get(type)
        if not entries:
            return
        kept = []
        for reg in entries:
            if reg.listener == listener:
                reg.removed = True
            else:
                kept.append(reg)
        self._listeners[type] = kept

    def listener_count(self, type: str) -> int:
        return len(self._listeners.get(type, []))

    def dispatch_event(self, event: Event) -> bool:
        """Call every listener for event.type. Returns False if the default was prevented."""
        event.target = self
        # Snapshot: registrations made during dispatch wait for the next one,
        # including a listener removed and re-added by an earlier listener.
        for reg in list(self._listeners.get(event.type, [])):
            if reg.removed:
                continue
            if reg.once:
                self.remove_event_listener(event.type, reg.listener)
            try:
                reg.listener(event)
            except Exception:
                logger.exception(
                    "Listener %r for %r on %s raised", reg.listener, event.type, self.name or "target"
                )
        return not event.default_prevented
