"""Worked answers for the string drills."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!'."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' with 'balloons'."""
    return text.replace("cars", "balloons")