"""Optional values: unwrapping, conditional binding and popping until empty."""

from __future__ import annotations

from collections.abc import Sequence


def print_number(maybe_number: int | None) -> str:
    """Describe the number; raise ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("called print_number on a missing value")
    return f"printing: {maybe_number}"


def number_table() -> list[int | None]:
    """Five computed slots, each filled with a value."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_optional(optional_value: str | None) -> str:
    if optional_value is not None:
        return f"the value of optional value is: {optional_value}"
    return "The optional value doesn't contain anything!"


def pop_values(values: Sequence[int | None]) -> list[int]:
    """Values from the end of the sequence backwards, skipping empty slots."""
    return [value for value in reversed(values) if value is not None]