"""Hi-Lo survey game answer judging and scoring."""

from .judge import AnswerJudge, GameConfig, Verdict
from .matching import SeedAnswer, find_exact_match, validate_seed_answers
from .parsing import AIJudgment, normalize_answer, parse_ai_judgment
from .scoring import (
    InvalidScoringInput,
    RoundResult,
    calculate_round_score,
    calculate_total_score,
    clamp_rank,
)
from .submission import SubmitParams, build_submit_params

__all__ = [
    "AIJudgment",
    "AnswerJudge",
    "GameConfig",
    "InvalidScoringInput",
    "RoundResult",
    "SeedAnswer",
    "SubmitParams",
    "Verdict",
    "build_submit_params",
    "calculate_round_score",
    "calculate_total_score",
    "clamp_rank",
    "find_exact_match",
    "normalize_answer",
    "parse_ai_judgment",
    "validate_seed_answers",
]
