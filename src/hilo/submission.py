"""Persistence payload for a submitted guess."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SubmitParams:
    p_game_id: str
    p_round_number: int
    p_answer: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_submit_params(game_id: str, round_number: int, answer: str) -> SubmitParams:
    """Build the submit RPC arguments.

    ``p_answer`` is always the player's literal text, for hits and misses alike.
    """

    return SubmitParams(p_game_id=game_id, p_round_number=round_number, p_answer=answer)
