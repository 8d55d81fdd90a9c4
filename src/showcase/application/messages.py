"""String formatting and conditional-expression helpers."""

HOT_THRESHOLD = 30


def describe(name: str, age: int) -> str:
    return f"My name is {name} and I'm {age} years old."


def temperature_message(temperature: float, threshold: float = HOT_THRESHOLD) -> str:
    """Return the weather line; strictly above threshold counts as hot."""
    return "It is hot outside" if temperature > threshold else "It is not hot outside"
