"""Solutions to the exercises on structs, enums and validated construction."""

from __future__ import annotations

from dataclasses import dataclass, field

_MIN_PACKAGE_WEIGHT = 10


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_PACKAGE_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """True when sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents."""
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    """A position."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Message: move to a point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Message: store a text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Message: change the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    """Message: quit."""


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Move | Echo | ChangeColor | Quit) -> None:
        """Apply one message to the state."""
        match message:
            case Move(point):
                self.position = point
            case Echo(text):
                self.message = text
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")