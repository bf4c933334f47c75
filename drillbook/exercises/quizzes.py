"""Mixed quizzes: pricing, string kinds, doubling and a greeting."""

from __future__ import annotations

from typing import Any

BULK_THRESHOLD = 40


def calculate_apple_price(count: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    return count * 2 if count <= BULK_THRESHOLD else count


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    if not isinstance(arg, str):
        raise TypeError(f"expected text, got {type(arg).__name__}")
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    if not isinstance(arg, str):
        raise TypeError(f"expected text, got {type(arg).__name__}")
    print(arg)


def times_two(num: int) -> int:
    return num * 2


def my_macro(val: Any) -> str:
    return f"Hello {val}"