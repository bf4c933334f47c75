"""Message variants and a state machine that processes them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class MessageKind(enum.Enum):
    QUIT = "Quit"
    ECHO = "Echo"
    MOVE = "Move"
    CHANGE_COLOR = "ChangeColor"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    pass


Message = Move | Echo | ChangeColor | Quit


def call(message: Message | MessageKind) -> str:
    """Debug description of a message."""
    match message:
        case MessageKind():
            return message.value
        case Move(point=Point(x=x, y=y)):
            return f"Move {{ x: {x}, y: {y} }}"
        case Echo(text=text):
            return f"Echo({text!r})".replace("'", '"') if '"' not in text else f"Echo({text!r})"
        case ChangeColor(color=(red, green, blue)):
            return f"ChangeColor({red}, {green}, {blue})"
        case Quit():
            return "Quit"
    raise TypeError(f"not a message: {message!r}")


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Quit():
                self.quit()
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case _:
                raise TypeError(f"not a message: {message!r}")