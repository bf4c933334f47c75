"""Handing a vector to a function and getting a filled one back."""

from __future__ import annotations

from collections.abc import Iterable

_FILL = (22, 44, 66)


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """Return a new list: the given elements, if any, followed by 22, 44 and 66."""
    filled = list(vec) if vec is not None else []
    filled.extend(_FILL)
    return filled