"""Prompt templates for the Hi-Lo answer judge."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .matching import SeedAnswer

# Judge ranks may run past the seed list for very obscure answers.
RANK_HEADROOM = 50


@dataclass(frozen=True)
class PromptBundle:
    system: str
    user: str


JUDGE_SYSTEM_PROMPT = """You are the game manager for a Hi-Lo youth ministry trivia game.
Players try to name answers from a ranked survey list (1 = most popular).

Judging rules:
1) Decide whether the player's answer is a legitimate, appropriate answer to the question.
2) REJECT (valid=false) if ANY of these apply:
   - Profanity, slurs, crude humor
   - Sexual or suggestive content
   - Demonic/occult words (satan, demon, hell-as-swear, witchcraft, curse, etc.)
   - Violent words (kill, murder, stab) unless clearly biblical (e.g., "sacrifice")
   - Not actually answering the question
   - A youth pastor would be uncomfortable seeing it on screen
3) A word form of an existing answer (plural, past tense, gerund) takes that answer's rank.
4) A synonym of an existing answer gets a rank close to, but not identical to, that answer.
5) A new valid answer gets the rank it would have if 100,000 teens were surveyed.

Respond with one JSON object only, no markdown:
{"valid": true/false, "rank": <integer or null>, "matched_to": "<existing answer or omit>", "reason": "<5 words max>"}
"""


def format_seed_list(seed_answers: Iterable["SeedAnswer"]) -> str:
    ordered = sorted(seed_answers, key=lambda seed: seed.rank)
    return "\n".join(f"{seed.rank}. {seed.answer}" for seed in ordered)


def build_judge_prompt(
    core_question: str,
    answer: str,
    seed_answers: Iterable["SeedAnswer"],
    answer_count: int,
) -> PromptBundle:
    """Compose the judge prompt for an answer with no exact seed match."""

    user = f"""Question: "{core_question}"
Player's answer: "{answer}"

Existing ranked answers (1 = most popular, {answer_count} = least):
{format_seed_list(seed_answers)}

Ranks can range from 1 to {answer_count + RANK_HEADROOM} (beyond the seed list for very obscure answers).
"""

    return PromptBundle(system=JUDGE_SYSTEM_PROMPT, user=user)
