"""Worked answers for the hash map drills: fruit baskets and a scores table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


class Fruit(Enum):
    """The kinds of fruit a basket may hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's goal totals."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def add_match(self, scored: int, conceded: int) -> None:
        """Add one match's goals to the totals."""
        self.goals_scored = _add_u8(self.goals_scored, scored)
        self.goals_conceded = _add_u8(self.goals_conceded, conceded)


def _add_u8(total: int, amount: int) -> int:
    result = total + amount
    if result > _U8_MAX:
        raise OverflowError(f"goal count {result} exceeds {_U8_MAX}")
    return result


def _parse_goals(text: str) -> int:
    if not text or not all(c in "0123456789" for c in text.removeprefix("+")) or text == "+":
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from 'team1,team2,goals1,goals2' lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team(team_1_name)).add_match(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).add_match(team_2_score, team_1_score)
    return scores