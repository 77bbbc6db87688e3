"""Seed-list lookup and validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .parsing import normalize_answer
from .scoring import DEFAULT_MAX_RANK

MIN_SEED_ANSWERS = 80
MAX_SEED_ANSWERS = 200


@dataclass(frozen=True)
class SeedAnswer:
    answer: str
    rank: int

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "SeedAnswer":
        return cls(answer=str(row["answer"]), rank=int(row["rank"]))


@dataclass(frozen=True)
class SeedValidation:
    valid: bool
    error: str | None = None


def find_exact_match(answer: str, seed_answers: Iterable[SeedAnswer]) -> SeedAnswer | None:
    """Return the first seed entry equal to ``answer`` after normalization.

    No fuzzy matching happens here; near-misses are left to the AI judge.
    """

    target = normalize_answer(answer)
    for seed in seed_answers:
        if normalize_answer(seed.answer) == target:
            return seed
    return None


def validate_seed_answers(
    answers: Iterable[SeedAnswer],
    *,
    min_count: int = MIN_SEED_ANSWERS,
    max_count: int = MAX_SEED_ANSWERS,
    max_rank: int = DEFAULT_MAX_RANK,
) -> SeedValidation:
    """Check a generated seed list for size, rank bounds and uniqueness."""

    entries = list(answers)
    if len(entries) < min_count or len(entries) > max_count:
        return SeedValidation(
            False,
            f"Expected {min_count}-{max_count} answers, got {len(entries)}",
        )

    ranks: set[int] = set()
    words: set[str] = set()

    for entry in entries:
        if not isinstance(entry.answer, str) or not entry.answer.strip():
            return SeedValidation(False, "Answer contains empty string")

        rank = entry.rank
        if isinstance(rank, bool) or not isinstance(rank, int) or not 1 <= rank <= max_rank:
            return SeedValidation(False, f"Invalid rank {rank!r}: must be 1-{max_rank}")

        if rank in ranks:
            return SeedValidation(False, f"Duplicate rank: {rank}")
        ranks.add(rank)

        normalized = normalize_answer(entry.answer)
        if normalized in words:
            return SeedValidation(False, f'Answer "{entry.answer}" is a duplicate')
        words.add(normalized)

    return SeedValidation(True)
