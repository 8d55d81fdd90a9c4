"""Tests for string formatting helpers."""

from showcase.application import describe, temperature_message


def test_describe() -> None:
    assert describe("John Doe", 30) == "My name is John Doe and I'm 30 years old."


def test_temperature_message() -> None:
    assert temperature_message(25) == "It is not hot outside"
    assert temperature_message(30) == "It is not hot outside"
    assert temperature_message(31) == "It is hot outside"
    assert temperature_message(20, threshold=10) == "It is hot outside"
