"""One operation, appending "Bar", defined for strings and lists of strings."""

from __future__ import annotations

from functools import singledispatch
from typing import Any

BAR = "Bar"


@singledispatch
def append_bar(value: Any) -> Any:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append {BAR!r} to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, BAR]