"""Unit tests for domain entities: Person, UserProfile, PersonRecord, Range."""

import pytest

from showcase.domain import Address, Person, PersonRecord, Range, UserProfile


def test_person_introduce_prints_and_returns_line(capsys) -> None:
    line = Person(name="John Doe", age=30).introduce()
    assert line == "Hi, my name is John Doe and I'm 30 years old."
    assert capsys.readouterr().out == line + "\n"


def test_person_requires_name() -> None:
    with pytest.raises(ValueError, match="name must be non-empty"):
        Person(name="   ", age=30)


def test_person_rejects_negative_age() -> None:
    with pytest.raises(ValueError, match="age must be non-negative"):
        Person(name="Ann", age=-1)


def test_user_profile_greeting(capsys) -> None:
    line = UserProfile(username="John Doe", age=25).greeting()
    assert line == "Hello, my name is John Doe and I'm 25 years old."
    assert "John Doe" in capsys.readouterr().out


def test_person_record_as_dict_is_nested() -> None:
    record = PersonRecord(
        name="John Doe",
        age=30,
        address=Address(street="123 Main St", city="New York", country="USA"),
    )
    assert record.as_dict() == {
        "name": "John Doe",
        "age": 30,
        "address": {"street": "123 Main St", "city": "New York", "country": "USA"},
    }


def test_range_yields_inclusive_sequence() -> None:
    assert list(Range(1, 5)) == [1, 2, 3, 4, 5]


def test_range_empty_when_start_after_end() -> None:
    r = Range(5, 1)
    assert list(r) == []
    assert len(r) == 0


def test_range_single_element() -> None:
    assert list(Range(3, 3)) == [3]


def test_range_is_restartable() -> None:
    r = Range(1, 3)
    assert list(r) == [1, 2, 3]
    assert list(r) == [1, 2, 3]


def test_range_traversals_do_not_share_cursor() -> None:
    r = Range(1, 3)
    a = iter(r)
    b = iter(r)
    assert next(a) == 1
    assert next(a) == 2
    assert next(b) == 1
    assert list(a) == [3]


def test_range_is_lazy() -> None:
    big = Range(0, 10**12)
    it = iter(big)
    assert [next(it) for _ in range(3)] == [0, 1, 2]
    assert len(big) == 10**12 + 1
