"""Answer resolution: exact seed match first, AI judge only on a miss."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .client import ChatClient
from .matching import MAX_SEED_ANSWERS, MIN_SEED_ANSWERS, SeedAnswer, find_exact_match
from .parsing import AIJudgment, parse_ai_judgment
from .prompts import build_judge_prompt
from .scoring import (
    DEFAULT_ANSWER_COUNT,
    DEFAULT_MAX_RANK,
    Direction,
    RoundResult,
    calculate_round_score,
    clamp_rank,
    get_round_direction,
)
from .submission import SubmitParams, build_submit_params

logger = logging.getLogger("hilo.judge")


@dataclass(frozen=True)
class GameConfig:
    answer_count: int = DEFAULT_ANSWER_COUNT
    max_rank: int = DEFAULT_MAX_RANK
    min_seed_answers: int = MIN_SEED_ANSWERS
    max_seed_answers: int = MAX_SEED_ANSWERS

    # Judge call settings.
    judge_temperature: float = 0.0
    judge_max_tokens: int = 100


@dataclass(frozen=True)
class Verdict:
    round_number: int
    answer: str
    direction: Direction
    source: str
    rank: int | None
    score: int
    submit_params: SubmitParams
    matched: SeedAnswer | None = None
    judgment: AIJudgment | None = None
    judge_error: str | None = None

    @property
    def on_list(self) -> bool:
        return self.rank is not None

    def to_round_result(self) -> RoundResult:
        return RoundResult(
            round_number=self.round_number,
            rank=self.rank,
            on_list=self.on_list,
            score=self.score,
        )

    @property
    def debug_summary(self) -> dict[str, Any]:
        return {
            "round_number": self.round_number,
            "answer": self.answer,
            "direction": self.direction,
            "source": self.source,
            "on_list": self.on_list,
            "rank": self.rank,
            "score": self.score,
            "matched": self.matched.answer if self.matched else None,
            "judgment": self.judgment.to_dict() if self.judgment else None,
            "judge_error": self.judge_error,
        }


class AnswerJudge:
    """Resolves a player's guess to a rank and a round score."""

    def __init__(
        self,
        client: ChatClient | None = None,
        *,
        config: GameConfig | None = None,
    ) -> None:
        self.client = client
        self.config = config or GameConfig()

    def resolve(
        self,
        answer: str,
        seed_answers: Sequence[SeedAnswer],
        *,
        game_id: str,
        round_number: int,
        core_question: str = "",
    ) -> Verdict:
        direction = get_round_direction(round_number)

        match = find_exact_match(answer, seed_answers)
        if match is not None:
            logger.debug("Exact match: %r -> rank %s", answer, match.rank)
            return self._verdict(
                answer,
                round_number=round_number,
                direction=direction,
                game_id=game_id,
                source="exact",
                rank=match.rank,
                matched=match,
            )

        if self.client is None:
            return self._verdict(
                answer,
                round_number=round_number,
                direction=direction,
                game_id=game_id,
                source="no_judge",
                rank=None,
            )

        prompt = build_judge_prompt(core_question, answer, seed_answers, self.config.answer_count)
        try:
            reply = self.client.generate(
                system_prompt=prompt.system,
                user_prompt=prompt.user,
                temperature=self.config.judge_temperature,
                max_tokens=self.config.judge_max_tokens,
            )
        except Exception as exc:
            logger.warning("Judge call failed for %r: %s", answer, exc)
            return self._verdict(
                answer,
                round_number=round_number,
                direction=direction,
                game_id=game_id,
                source="judge",
                rank=None,
                judge_error=str(exc),
            )

        judgment = parse_ai_judgment(reply)
        logger.info(
            "Judge verdict for %r: valid=%s rank=%s reason=%r",
            answer,
            judgment.valid,
            judgment.rank,
            judgment.reason,
        )

        rank: int | None = None
        if judgment.valid and judgment.rank is not None:
            rank = clamp_rank(judgment.rank, self.config.max_rank)

        matched = None
        if rank is not None and judgment.matched_to:
            matched = find_exact_match(judgment.matched_to, seed_answers)

        return self._verdict(
            answer,
            round_number=round_number,
            direction=direction,
            game_id=game_id,
            source="judge",
            rank=rank,
            matched=matched,
            judgment=judgment,
        )

    def _verdict(
        self,
        answer: str,
        *,
        round_number: int,
        direction: Direction,
        game_id: str,
        source: str,
        rank: int | None,
        matched: SeedAnswer | None = None,
        judgment: AIJudgment | None = None,
        judge_error: str | None = None,
    ) -> Verdict:
        return Verdict(
            round_number=round_number,
            answer=answer,
            direction=direction,
            source=source,
            rank=rank,
            score=calculate_round_score(round_number, rank, self.config.answer_count),
            submit_params=build_submit_params(game_id, round_number, answer),
            matched=matched,
            judgment=judgment,
            judge_error=judge_error,
        )
