"""A message builder that accepts no argument or one."""

from typing import Any


def my_macro(*args: Any) -> str:
    match args:
        case ():
            return "Check out my macro!"
        case (value,):
            return f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")