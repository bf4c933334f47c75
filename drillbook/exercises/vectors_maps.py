"""Vectors and hash maps."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LICHI = "lichi"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five fruits in all."""
    return {"banana": 2, "apple": 1, "mango": 3}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from the basket, leaving others untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every element."""
    return [value * 2 for value in values]