"""Conversions between strings, people, colours and numbers."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


class PersonParseError(ValueError):
    """Text could not be read as a person."""


def _parse_age(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise PersonParseError("Age parsing error")
    age = int(text)
    if age > _USIZE_MAX:
        raise PersonParseError("Age parsing error")
    return age


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def parse(cls, s: str) -> Person:
        """Read "name,age"; raise PersonParseError if the text does not fit."""
        parts = s.split(",")
        if len(parts) < 2:
            raise PersonParseError("Parsing error")
        name = parts[0]
        if not name:
            raise PersonParseError("No name given")
        return cls(name=name, age=_parse_age(parts[1]))

    @classmethod
    def coerce(cls, s: str) -> Person:
        """Read "name,age", falling back to the default person on any error."""
        try:
            return cls.parse(s)
        except PersonParseError:
            return cls.default()


def is_color_valid(red: int, green: int, blue: int) -> bool:
    """Tell whether all three components lie in 0..=255."""
    return all(0 <= component <= 255 for component in (red, green, blue))


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, values: Sequence[int] | Iterable[int]) -> Color:
        """Build a colour from exactly three integers in 0..=255."""
        components = tuple(values)
        if (
            len(components) != 3
            or not all(
                isinstance(c, int) and not isinstance(c, bool) for c in components
            )
            or not is_color_valid(*components)
        ):
            raise ValueError("Invalid colors")
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values, 0.0) / len(values)