"""Dataframe-level utilities for scoring batches of Hi-Lo guesses."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from .client import RecordedReplyClient
from .judge import AnswerJudge
from .matching import SeedAnswer
from .scoring import RoundResult, calculate_total_score

RESULT_COLUMNS = ["player", "round", "answer", "source", "on_list", "rank", "score"]
TOTAL_COLUMNS = ["player", "rounds_played", "total_score"]


def _require_columns(frame: pd.DataFrame, required: set[str]) -> None:
    missing = required - set(frame.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")


def load_seed_answers(path: str | Path) -> list[SeedAnswer]:
    """Read a seed list CSV with ``answer`` and ``rank`` columns."""

    frame = pd.read_csv(path, dtype={"answer": str}, keep_default_na=False)
    _require_columns(frame, {"answer", "rank"})
    return [SeedAnswer.from_mapping(row) for row in frame.to_dict(orient="records")]


def load_guesses(path: str | Path) -> pd.DataFrame:
    frame = pd.read_csv(path, dtype={"player": str, "answer": str}, keep_default_na=False)
    _require_columns(frame, {"player", "round", "answer"})
    return frame


def score_guesses(
    judge: AnswerJudge,
    seed_answers: list[SeedAnswer],
    guesses_df: pd.DataFrame,
    *,
    game_id: str,
    core_question: str = "",
    reply_col: str = "judge_reply",
    verbose: bool = True,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Resolve every guess and total each player's rounds.

    Every attempt gets a row in the results frame. For totals, each
    ``(player, round)`` keeps its most recent on-list verdict, or the miss when
    no attempt landed.

    When ``guesses_df`` carries a ``judge_reply`` column, a non-empty value is
    used as the recorded judge reply for that row instead of the live client.
    """

    _require_columns(guesses_df, {"player", "round", "answer"})
    has_replies = reply_col in guesses_df.columns

    rows: list[dict[str, Any]] = []
    rounds_by_player: dict[str, dict[int, RoundResult]] = {}

    total = len(guesses_df)
    for idx, row in enumerate(guesses_df.to_dict(orient="records"), start=1):
        player = str(row["player"])
        round_number = int(row["round"])
        answer = str(row["answer"])

        row_judge = judge
        reply = row.get(reply_col) if has_replies else None
        if isinstance(reply, str) and reply.strip():
            row_judge = AnswerJudge(RecordedReplyClient(reply), config=judge.config)

        verdict = row_judge.resolve(
            answer,
            seed_answers,
            game_id=game_id,
            round_number=round_number,
            core_question=core_question,
        )

        rows.append(
            {
                "player": player,
                "round": round_number,
                "answer": verdict.submit_params.p_answer,
                "source": verdict.source,
                "on_list": verdict.on_list,
                "rank": verdict.rank,
                "score": verdict.score,
            }
        )
        # A later on-list verdict replaces the round; misses never replace a hit.
        player_rounds = rounds_by_player.setdefault(player, {})
        current = player_rounds.get(round_number)
        if current is None or verdict.on_list:
            player_rounds[round_number] = verdict.to_round_result()

        if verbose:
            print(
                f"[{idx:02d}/{total:02d}] player={player} round={round_number} "
                f"source={verdict.source} rank={verdict.rank} score={verdict.score}"
            )

    totals = [
        {
            "player": player,
            "rounds_played": len(results),
            "total_score": calculate_total_score(results.values()),
        }
        for player, results in rounds_by_player.items()
    ]

    results_df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    results_df["rank"] = results_df["rank"].astype("Int64")
    totals_df = pd.DataFrame(totals, columns=TOTAL_COLUMNS)
    return results_df, totals_df


def save_results(frame: pd.DataFrame, output_path: str | Path) -> Path:
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output, index=False)
    return output
