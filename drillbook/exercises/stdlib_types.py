"""Shared data across threads, recursive lists and iterators."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_U64_MAX = 2**64 - 1


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every `workers`-th number starting at each offset, one thread per offset."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    shared: Sequence[int] = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda offset: sum(shared[offset::workers]), range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; a tail of None ends the list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def _build_list(values: Iterable[int]) -> Cons | None:
    """Build a cons list holding the values in order; None when there are none."""
    result: Cons | None = None
    for value in reversed(tuple(values)):
        result = Cons(value, result)
    return result


def create_empty_list() -> Cons | None:
    return _build_list(())


def create_non_empty_list() -> Cons | None:
    return _build_list((0,))


def favourite_fruits() -> Iterator[str]:
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest as it is."""
    return text[:1].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def factorial(num: int) -> int:
    """Product of 1..=num, within the unsigned 64-bit range."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result