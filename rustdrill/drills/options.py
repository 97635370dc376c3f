"""Worked answers for the option drills."""

from __future__ import annotations

from dataclasses import dataclass


def print_number(maybe_number: int | None) -> str:
    """Print and return 'printing: N'; raise ValueError when there is no number."""
    if maybe_number is None:
        raise ValueError("no number to print")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of the 24-hour day; None for an hour past 24."""
    if time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0


def describe_word(optional_word: str | None) -> str:
    """Describe the word, or say that there is none."""
    if optional_word is not None:
        return f"The word is: {optional_word}"
    return "The optional word doesn't contain anything"


def drain_integers(values: list[int | None]) -> list[int]:
    """Pop integers off the end until the list is empty or a None is popped.

    Each drained value is printed; the list is changed in place.
    """
    drained = []
    while values and (integer := values.pop()) is not None:
        print(f"current value: {integer}")
        drained.append(integer)
    return drained


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: int
    y: int


def describe_point(maybe_point: Point | None) -> str:
    """Describe the point's coordinates, or report no match."""
    match maybe_point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"