from drillbook.exercises.functions import call_me, is_even, sale_price, square


def test_is_true_when_even():
    assert is_even(2)


def test_is_false_when_odd():
    assert not is_even(1)


def test_call_me_rings_once_per_call():
    lines = call_me(3)
    assert len(lines) == 3
    assert lines[0] == "Ring! Call number 1"
    assert lines[-1] == "Ring! Call number 3"


def test_call_me_with_zero_is_silent():
    assert call_me(0) == []


def test_sale_price_even_and_odd():
    assert sale_price(52) == 42
    assert sale_price(51) == 48


def test_square():
    assert square(3) == 9
    assert square(-4) == 16