"""Booleans, characters, arrays, slices and tuples."""

from collections.abc import Sequence
from typing import Any


def day_greetings(is_morning: bool, is_evening: bool) -> list[str]:
    greetings = []
    if is_morning:
        greetings.append("Good morning!")
    if is_evening:
        greetings.append("Good evening!")
    return greetings


def classify_char(character: str) -> str:
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sequence[Any]) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any]) -> Sequence[Any]:
    """Return the second to fourth elements."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def second_element(numbers: tuple[Any, ...]) -> Any:
    return numbers[1]