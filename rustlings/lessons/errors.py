"""Solutions to the exercises on error handling."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly, with the usual overflow limits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 1 << (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity of items: 5 tokens each plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


class CreationError(ValueError):
    """Raised when a value cannot be a positive non-zero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a positive non-zero integer."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def creation(self) -> CreationError | None:
        """The creation error, when the text was a number but not a valid one."""
        return self.error if isinstance(self.error, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The parse error, when the text was not a number."""
        return None if isinstance(self.error, CreationError) else self.error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc