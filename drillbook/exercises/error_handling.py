"""Errors as values: validation, integer parsing and error propagation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Read a decimal integer that must fit between low and high."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Build nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    qty = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def afford(tokens: int, item_quantity: str) -> str:
    """Describe whether the purchase fits in the tokens at hand."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A number cannot become a positive nonzero integer."""


class NegativeNumberError(CreationError):
    def __init__(self, message: str = "Number is negative") -> None:
        super().__init__(message)


class ZeroNumberError(CreationError):
    def __init__(self, message: str = "Number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ZeroNumberError()
        if self.value < 0:
            raise NegativeNumberError()


def read_and_validate(stream: TextIO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive nonzero integer.

    I/O errors, parse errors and creation errors all propagate to the caller.
    """
    line = stream.readline()
    number = _parse_int(line.strip(), _I64_MIN, _I64_MAX)
    return PositiveNonzeroInteger(number)