"""Arithmetic helpers: binary operations, variadic sum, factorial, and list transforms."""

import math
from collections.abc import Iterable
from functools import reduce


def add(a, b):
    return a + b


def subtract(a, b):
    return a - b


def sum_numbers(*numbers):
    """Sum any number of positional arguments. No arguments sums to 0."""
    return reduce(lambda total, number: total + number, numbers, 0)


def factorial(n: int) -> int:
    """Return n! = n * (n - 1)!, with 0! = 1. Rejects negative and non-integer input.

    Computed as a product rather than by recursion so large n does not hit the
    interpreter recursion limit.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() requires an int, got {type(n).__name__}.")
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers.")
    return math.prod(range(1, n + 1))


def double_all(numbers: Iterable[int]) -> list[int]:
    return [number * 2 for number in numbers]


def keep_even(numbers: Iterable[int]) -> list[int]:
    return [number for number in numbers if number % 2 == 0]


def total(numbers: Iterable[int]) -> int:
    return reduce(lambda acc, number: acc + number, numbers, 0)
