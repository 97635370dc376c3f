"""Worked answers for the quizzes: a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends of the string."""


@dataclass(frozen=True)
class Append:
    """Append 'bar' to the string a number of times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count):
            return text + "bar" * count
        case _:
            raise TypeError(f"not a command: {command!r}")


def transformer(items) -> list[str]:
    """Apply each (string, command) pair's command to its string."""
    return [_apply(text, command) for text, command in items]


Grade = TypeVar("Grade")


@dataclass
class ReportCard(Generic[Grade]):
    """A report card whose grade may be numeric or alphabetical."""

    grade: Grade
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report card's line of text."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"