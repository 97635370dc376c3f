"""Worked answers for the trait drills: shared behaviour through functions and mixins."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Return the value with 'Bar' appended."""
    raise TypeError(f"cannot append 'Bar' to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Mixin giving every licensed product the same licensing information."""

    def licensing_info(self) -> str:
        """The licensing information."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed products carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Mixin providing some_function."""

    def some_function(self) -> bool:
        """Always true."""
        return True


class OtherTrait:
    """Mixin providing other_function."""

    def other_function(self) -> bool:
        """Always true."""
        return True


@dataclass
class SomeStruct(SomeTrait, OtherTrait):
    """A struct that has both behaviours."""

    name: str


def some_func(item: SomeTrait) -> bool:
    """Whether the item's some_function and other_function both hold."""
    return item.some_function() and item.other_function()