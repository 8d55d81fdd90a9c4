"""Domain entities: Person, UserProfile, PersonRecord/Address, and Range."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """
    A named individual with an age.
    introduce() prints and returns the self-introduction line.
    """

    name: str = ""
    age: int = 0

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Person name must be non-empty.")
        if self.age < 0:
            raise ValueError("Person age must be non-negative.")

    def introduce(self) -> str:
        line = f"Hi, my name is {self.name} and I'm {self.age} years old."
        print(line)
        return line


@dataclass(frozen=True)
class UserProfile:
    """User record built from loose values (username, age) with a greeting."""

    username: str
    age: int

    def greeting(self) -> str:
        line = f"Hello, my name is {self.username} and I'm {self.age} years old."
        print(line)
        return line


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    country: str


@dataclass(frozen=True)
class PersonRecord:
    """
    Person with a nested Address. as_dict() gives the plain nested mapping
    used by the unpacking helpers.
    """

    name: str
    age: int
    address: Address

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "age": self.age,
            "address": {
                "street": self.address.street,
                "city": self.address.city,
                "country": self.address.country,
            },
        }


class _RangeCursor:
    """Single-pass cursor over [current, end]. Owned by one traversal."""

    def __init__(self, start: int, end: int) -> None:
        self._current = start
        self._end = end

    def __iter__(self) -> "_RangeCursor":
        return self

    def __next__(self) -> int:
        if self._current > self._end:
            raise StopIteration
        value = self._current
        self._current += 1
        return value


class Range:
    """
    Lazy, finite, restartable sequence of integers from start to end inclusive.
    Empty when start > end. Each iter() starts a fresh cursor.
    """

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[int]:
        return _RangeCursor(self.start, self.end)

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __repr__(self) -> str:
        return f"Range({self.start}, {self.end})"
