"""Solutions to the exercises on functions, conditionals, lists and strings."""

from __future__ import annotations

from collections.abc import Iterable

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}
_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_even(num: int) -> bool:
    """True when num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of num."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """'foo' for 'fizz', 'bar' for 'fuzz', 'baz' for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or 'Unknown'."""
    return _HABITATS.get(animal, "Unknown")


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def is_a_color_word(attempt: str) -> bool:
    """True for 'green', 'blue' and 'red'."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!'."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' with 'balloons'."""
    return text.replace("cars", "balloons")