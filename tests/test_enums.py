import pytest

from drillbook.exercises.enums import (
    ChangeColor,
    Echo,
    MessageKind,
    Move,
    Point,
    Quit,
    State,
    call,
)


def test_match_message_call(capsys):
    state = State(has_quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_state_defaults_are_independent():
    first = State()
    first.move_position(Point(3, 4))
    assert State().position == Point(0, 0)


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        State().process("jump")


def test_call_describes_messages():
    assert call(Move(Point(10, 30))) == "Move { x: 10, y: 30 }"
    assert call(Echo("hello world")) == 'Echo("hello world")'
    assert call(ChangeColor((200, 255, 255))) == "ChangeColor(200, 255, 255)"
    assert call(Quit()) == "Quit"


def test_call_describes_kinds():
    assert call(MessageKind.CHANGE_COLOR) == "ChangeColor"
    assert call(MessageKind.QUIT) == "Quit"