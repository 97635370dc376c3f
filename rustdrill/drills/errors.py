"""Worked answers for the error handling drills."""

from __future__ import annotations

from dataclasses import dataclass

_I32 = 32
_I64 = 64


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer the strict way: optional sign, then ASCII digits."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 1 << (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for the quantity typed in: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << (_I32 - 1)) <= cost < 1 << (_I32 - 1):
        raise OverflowError(f"total cost {cost} does not fit in 32 bits")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable, print the outcome and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised for a value that is not a positive, nonzero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    def __init__(self, kind: str) -> None:
        if kind not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(f"number is {kind}")
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))

    def __repr__(self) -> str:
        return f"CreationError({self.kind!r})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a PositiveNonzeroInteger."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        """Wrap an error from creating the integer."""
        return cls(err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        """Wrap an error from parsing the text."""
        return cls(err)

    @property
    def is_creation(self) -> bool:
        """Whether the text parsed but the number was not positive."""
        return isinstance(self.cause, CreationError)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ParsePosNonzeroError)
            and type(other.cause) is type(self.cause)
            and str(other.cause) == str(self.cause)
        )

    def __hash__(self) -> int:
        return hash((type(self.cause), str(self.cause)))

    def __repr__(self) -> str:
        return f"ParsePosNonzeroError({self.cause!r})"


def parse_and_create(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and make it positive-nonzero; either step may raise ValueError."""
    return PositiveNonzeroInteger(_parse_int(text, _I64))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_int(s, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err