"""Closure-based counter and a higher-order operation wrapper."""

from collections.abc import Callable
from typing import Any


def create_counter(output: Callable[[str], Any] = print) -> Callable[[], int]:
    """Return a counter function. Each call reports the current count, then increments it.

    The count lives in the enclosing scope; two counters never share it.
    """
    count = 0

    def counter() -> int:
        nonlocal count
        current = count
        output(f"Current count: {current}")
        count += 1
        return current

    return counter


def higher_order(operation: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Wrap a binary operation; the wrapper forwards both arguments unchanged."""

    def apply(x, y):
        return operation(x, y)

    return apply
