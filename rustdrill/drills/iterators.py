"""Worked answers for the standard library type drills: shared data, cons lists and iterators."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum

_U64_MAX = (1 << 64) - 1


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every value congruent to each offset modulo workers, one thread per offset.

    The numbers are shared between the threads without being copied.
    """
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")

    def sum_offset(offset: int) -> int:
        total = sum(n for n in numbers if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons list cell: a value and the rest of the list."""

    value: int
    rest: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        cell: Cons | Nil = self
        while isinstance(cell, Cons):
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Nil:
    """Return the empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """Return a cons list holding 1 and 2."""
    return Cons(1, Cons(2, Nil()))


def capitalize_first(text: str) -> str:
    """Upper-case the first character: 'hello' -> 'Hello'."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word: ['hello', 'world'] -> ['Hello', 'World']."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them: ['hello', ' ', 'world'] -> 'Hello World'."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised when one integer does not divide another evenly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, NotDivisibleError)
            and other.dividend == self.dividend
            and other.divisor == self.divisor
        )

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZero)

    def __hash__(self) -> int:
        return hash(DivideByZero)

    def __repr__(self) -> str:
        return "DivideByZero()"


def divide(a: int, b: int) -> int:
    """Divide a by b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def _division_results(numbers: Iterable[int], divisor: int) -> Iterator[int | DivisionError]:
    for n in numbers:
        try:
            yield divide(n, divisor)
        except DivisionError as err:
            yield err


def result_with_list() -> list[int]:
    """Divide every sample number by 27; raise the first DivisionError met."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide every sample number by 27, keeping each quotient or error in place."""
    return list(_division_results(_NUMBERS, _DIVISOR))


def factorial(num: int) -> int:
    """Return num!, which must fit in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError(f"factorial of a negative number: {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count exercises with the given progress using a loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count exercises with the given progress using iterator operations."""
    return operator.countOf(progress_map.values(), value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps using nested loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count across several maps using iterator operations."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)