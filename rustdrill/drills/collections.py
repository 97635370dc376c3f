"""Worked answers for the primitive types and vector drills."""

from __future__ import annotations


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that apply."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values) -> str:
    """Comment on whether a sequence holds at least 100 elements."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values):
    """Return the elements at positions 1 to 3."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Unpack a (name, age) pair into a sentence."""
    name, age = cat
    return f"{name} is {age} years old."


def second_of(numbers):
    """Return the second element of a tuple."""
    return numbers[1]


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]