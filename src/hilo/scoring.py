"""Hi-Lo scoring rules.

Rounds 1-2 are HIGH rounds (the most popular answer wins) and rounds 3-4 are
LOW rounds (the least popular answer wins). Each round has a fixed multiplier:

| Round | Direction | Points                                |
|-------|-----------|---------------------------------------|
| 1     | high      | max(0, (N + 1 - rank) * 1)            |
| 2     | high      | max(0, (N + 1 - rank) * 2)            |
| 3     | low       | rank * 3                              |
| 4     | low       | rank * 4                              |

A perfect game at answer count N is worth N * 10 points. LOW rounds are not
capped at N: a judge-ranked answer beyond the seed list scores its full rank.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

Direction = Literal["high", "low"]

DEFAULT_ANSWER_COUNT = 400
DEFAULT_MAX_RANK = 500


class InvalidScoringInput(ValueError):
    """Raised when a caller passes a round number or rank outside the contract."""


@dataclass(frozen=True)
class RoundRule:
    direction: Direction
    multiplier: int


ROUND_RULES: dict[int, RoundRule] = {
    1: RoundRule("high", 1),
    2: RoundRule("high", 2),
    3: RoundRule("low", 3),
    4: RoundRule("low", 4),
}


@dataclass(frozen=True)
class RoundResult:
    round_number: int
    rank: int | None
    on_list: bool
    score: int

    @classmethod
    def create(
        cls,
        round_number: int,
        rank: int | None,
        answer_count: int = DEFAULT_ANSWER_COUNT,
    ) -> "RoundResult":
        score = calculate_round_score(round_number, rank, answer_count)
        return cls(
            round_number=round_number,
            rank=None if rank is None else int(rank),
            on_list=rank is not None,
            score=score,
        )


def _round_rule(round_number: int) -> RoundRule:
    if (
        isinstance(round_number, bool)
        or not isinstance(round_number, (int, float))
        or round_number not in ROUND_RULES
    ):
        raise InvalidScoringInput(f"Invalid round number: {round_number!r}. Must be 1-4.")
    return ROUND_RULES[round_number]


def _is_positive_integer(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 1
    if isinstance(value, float):
        return value.is_integer() and value >= 1
    return False


def clamp_rank(raw_rank: float, max_rank: int = DEFAULT_MAX_RANK) -> int:
    """Round a judge-assigned rank half-up and clamp it into ``[1, max_rank]``."""

    # Ints stay exact; huge judge ranks would overflow a float conversion.
    if isinstance(raw_rank, int) and not isinstance(raw_rank, bool):
        return max(1, min(max_rank, raw_rank))
    if not math.isfinite(raw_rank):
        raise ValueError(f"Rank must be a finite number, got {raw_rank!r}")
    rounded = math.floor(raw_rank + 0.5)
    return max(1, min(max_rank, rounded))


def get_round_direction(round_number: int) -> Direction:
    return _round_rule(round_number).direction


def calculate_round_score(
    round_number: int,
    rank: int | None,
    answer_count: int = DEFAULT_ANSWER_COUNT,
) -> int:
    """Score one round.

    ``rank`` is ``None`` for a miss, which scores 0. HIGH rounds are clamped
    at zero for ranks beyond ``answer_count``; LOW rounds are not clamped.
    """

    rule = _round_rule(round_number)

    if rank is None:
        return 0

    if not _is_positive_integer(rank):
        raise InvalidScoringInput(f"Invalid rank: {rank!r}. Must be a positive integer.")
    rank = int(rank)

    if rule.direction == "high":
        return max(0, (answer_count + 1 - rank) * rule.multiplier)
    return rank * rule.multiplier


def calculate_total_score(rounds: Iterable[RoundResult]) -> int:
    return sum(result.score for result in rounds)


def get_round_max_score(round_number: int, answer_count: int = DEFAULT_ANSWER_COUNT) -> int:
    return answer_count * _round_rule(round_number).multiplier


def get_max_score(answer_count: int = DEFAULT_ANSWER_COUNT) -> int:
    """Best possible game total: answer_count times the sum of all multipliers."""

    return answer_count * sum(rule.multiplier for rule in ROUND_RULES.values())
