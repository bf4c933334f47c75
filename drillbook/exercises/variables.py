"""Bindings, mutation, shadowing and constants; each returns the lines it shows."""

NUMBER = 3


def variables1() -> list[str]:
    x = 5
    return [f"x has the value {x}"]


def variables2() -> list[str]:
    x = 10
    return ["Ten!" if x == 10 else "Not ten!"]


def variables3() -> list[str]:
    x = 3
    lines = [f"Number {x}"]
    x = 5
    lines.append(f"Number {x}")
    return lines


def variables4() -> list[str]:
    x = 0
    return [f"Number {x}"]


def variables5() -> list[str]:
    number = "T-H-R-E-E"
    spelled = f"Spell a Number : {number}"
    count = 3
    return [spelled, f"Number plus two is : {count + 2}"]


def variables6() -> list[str]:
    return [f"Number {NUMBER}"]