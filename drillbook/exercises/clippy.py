"""Comparing floats with a tolerance and adding an optional value."""

from __future__ import annotations

import sys


def floats_differ(x: float, y: float) -> bool:
    """Tell whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(res: int, option: int | None) -> int:
    """Add the optional value to res when it is present."""
    if option is not None:
        res += option
    return res