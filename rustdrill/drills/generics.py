"""Worked answers for the generics drills."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """Return a shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T