"""Solutions to the exercises on dictionaries and optional values."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_NEW_FRUIT_AMOUNT = 10
_CLOSING_HOUR = 12
_LAST_HOUR = 23
_ICECREAM_PIECES = 5


class Fruit(enum.Enum):
    """Kinds of fruit that can go into the basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add ten of every kind of fruit that is not yet in the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_AMOUNT)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = int(fields[2]), int(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day, or None for an invalid hour."""
    if time_of_day > _LAST_HOUR:
        return None
    if time_of_day > _CLOSING_HOUR:
        return 0
    return _ICECREAM_PIECES