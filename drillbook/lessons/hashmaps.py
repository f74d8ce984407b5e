"""Dictionaries: fruit baskets and a table of football scores."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 5, "kiwi": 5}


class Fruit(Enum):
    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit missing from the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goals scored and conceded over all matches."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.setdefault(name, Team(name))
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal total of {name} out of range")


def build_scores_table(results: str) -> dict[str, Team]:
    """Goals scored and conceded per team from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1 = _parse_goals(fields[2])
        score_2 = _parse_goals(fields[3])
        _record(scores, team_1, score_1, score_2)
        _record(scores, team_2, score_2, score_1)
    return scores