"""
Showcase: language feature demonstrations, one independent snippet each.

- domain: records the demos work on (Person, UserProfile, PersonRecord, Range).
- application: the demonstrated operations (closures, arithmetic, unpacking, async).
- infrastructure: host capabilities (HTTP fetch over urllib, EventTarget dispatch).
"""

from showcase.application import (
    add,
    create_counter,
    factorial,
    fetch_all,
    get_data,
    higher_order,
    subtract,
    sum_numbers,
)
from showcase.domain import Address, Person, PersonRecord, Range, UserProfile
from showcase.errors import FetchError, ShowcaseError
from showcase.infrastructure import CustomEvent, Event, EventTarget, fetch

__all__ = [
    "Address",
    "CustomEvent",
    "Event",
    "EventTarget",
    "FetchError",
    "Person",
    "PersonRecord",
    "Range",
    "ShowcaseError",
    "UserProfile",
    "add",
    "create_counter",
    "factorial",
    "fetch",
    "fetch_all",
    "get_data",
    "higher_order",
    "subtract",
    "sum_numbers",
]

__version__ = "0.1.0"
