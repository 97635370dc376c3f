"""Worked answers for the enum drills: messages and the state they update."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte("x", self.x)
        _check_byte("y", self.y)


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new RGB colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """The state that messages act upon."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        """Set the colour."""
        self.color = color

    def quit(self) -> None:
        """Mark the state as quitting."""
        self.quit_requested = True

    def echo(self, s: str) -> None:
        """Print the text."""
        print(s)

    def move_position(self, p: Point) -> None:
        """Set the position."""
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")