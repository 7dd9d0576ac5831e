"""Solutions to the quizzes: apple pricing, a string machine and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

_BULK_THRESHOLD = 40
_UNIT_PRICE = 2
_BULK_UNIT_PRICE = 1


def calculate_price_of_apples(quantity: int) -> int:
    """Price of an order: 2 each, or 1 each when more than 40 are bought."""
    unit = _BULK_UNIT_PRICE if quantity > _BULK_THRESHOLD else _UNIT_PRICE
    return quantity * unit


class CommandKind(enum.Enum):
    """What the string machine does to a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A command for the string machine; `times` is used by APPEND only."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output: list[str] = []
    for text, command in items:
        match command.kind:
            case CommandKind.UPPERCASE:
                output.append(text.upper())
            case CommandKind.TRIM:
                output.append(text.strip())
            case CommandKind.APPEND:
                output.append(text + "bar" * command.times)
    return output


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card whose grade is numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """Render the report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )