"""Solutions to the vector and hash map exercises."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def default_fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and five fruits."""
    return {"banana": 2, "apple": 3, "mango": 1}


class Fruit(enum.Enum):
    """Kinds of fruit for the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add one of every kind of fruit that is not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)
    return basket


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"goal count {value} is out of range 0..={_U8_MAX}")
    return value


def _add(team: Team, scored: int, conceded: int) -> None:
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError("goal total exceeds 255")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        _add(scores.setdefault(team_1, Team()), score_1, score_2)
        _add(scores.setdefault(team_2, Team()), score_2, score_1)
    return scores