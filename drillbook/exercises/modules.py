"""Visibility and re-exported names."""

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def make_sausage() -> str:
    return "sausage!"


def favorite_snacks() -> str:
    return f"favorite snacks: {FRUIT} and {VEGGIE}"