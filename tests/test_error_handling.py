import io

import pytest

from drillbook.exercises.error_handling import (
    CreationError,
    NegativeNumberError,
    PositiveNonzeroInteger,
    ZeroNumberError,
    afford,
    generate_nametag_text,
    read_and_validate,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as excinfo:
        generate_nametag_text("")
    assert str(excinfo.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as excinfo:
        total_cost("beep boop")
    assert str(excinfo.value) == "invalid digit found in string"


def test_total_cost_empty_input():
    with pytest.raises(ValueError) as excinfo:
        total_cost("")
    assert str(excinfo.value) == "cannot parse integer from empty string"


def test_afford_within_budget():
    assert afford(100, "8") == "You now have 59 tokens."


def test_afford_over_budget():
    assert afford(10, "8") == "You can't afford that many!"


def test_afford_propagates_parse_error():
    with pytest.raises(ValueError):
        afford(100, "eight")


def _with_str(text):
    return read_and_validate(io.StringIO(text))


def test_success():
    assert _with_str("42\n") == PositiveNonzeroInteger(42)


def test_not_num():
    with pytest.raises(ValueError):
        _with_str("eleven billion\n")


def test_non_positive():
    with pytest.raises(NegativeNumberError):
        _with_str("-40\n")


class _Broken:
    def readline(self):
        raise BrokenPipeError("uh-oh!")


def test_ioerror():
    with pytest.raises(OSError) as excinfo:
        read_and_validate(_Broken())
    assert str(excinfo.value) == "uh-oh!"


def test_positive_nonzero_integer_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeNumberError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroNumberError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="^Number is negative$"):
        PositiveNonzeroInteger(-1)
    with pytest.raises(CreationError, match="^Number is zero$"):
        PositiveNonzeroInteger(0)