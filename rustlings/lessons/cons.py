"""Solution to the exercise on a recursive cons list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0, Nil())