"""Coloured status lines for the terminal."""

from rich.console import Console
from rich.text import Text


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _symbol(console: Console, emoji: str, fallback: str) -> str:
    try:
        emoji.encode(console.encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def _announce(emoji: str, fallback: str, colour: str, message: str) -> None:
    console = _console()
    symbol = _symbol(console, emoji, fallback)
    console.print(Text.assemble((symbol, colour), " ", (message, colour)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce("⚠️ ", "!", "red", message)


def success(message: str) -> None:
    """Print a green success line."""
    _announce("✅", "✓", "green", message)