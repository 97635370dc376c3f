"""Worked answers for the variables, functions and if drills."""

from __future__ import annotations

NUMBER = 3


def describe_x(x: int) -> str:
    """Say whether x is ten."""
    return "x is ten!" if x == 10 else "x is not ten!"


def call_me(num: int) -> list[str]:
    """Print and return one ring line per call."""
    lines = [f"Ring! Call number {i + 1}" for i in range(num)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    """Whether num is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Square a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map 'fizz' to 'foo', 'fuzz' to 'bar' and anything else to 'baz'."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return 2 * num if num <= 40 else num