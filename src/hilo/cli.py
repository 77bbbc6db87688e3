"""Command-line interface for Hi-Lo answer judging and scoring."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .judge import AnswerJudge, GameConfig
from .matching import find_exact_match, validate_seed_answers
from .parsing import normalize_answer, parse_ai_judgment
from .pipeline import load_guesses, load_seed_answers, save_results, score_guesses
from .scoring import (
    DEFAULT_ANSWER_COUNT,
    DEFAULT_MAX_RANK,
    calculate_round_score,
    get_max_score,
    get_round_direction,
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise SystemExit(f"{name} must be an integer, got {raw!r}") from exc


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _add_game_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--answer-count",
        type=int,
        default=_env_int("HILO_ANSWER_COUNT", DEFAULT_ANSWER_COUNT),
        help="Size of the seed list for the question (env: HILO_ANSWER_COUNT).",
    )
    parser.add_argument(
        "--max-rank",
        type=int,
        default=_env_int("HILO_MAX_RANK", DEFAULT_MAX_RANK),
        help="Upper clamp for judge-assigned ranks (env: HILO_MAX_RANK).",
    )


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(answer_count=args.answer_count, max_rank=args.max_rank)


def cmd_match(args: argparse.Namespace) -> dict[str, object]:
    seeds = load_seed_answers(args.seeds)
    match = find_exact_match(args.answer, seeds)
    payload: dict[str, object] = {
        "answer": args.answer,
        "normalized": normalize_answer(args.answer),
        "matched": match is not None,
        "seed_answer": match.answer if match else None,
        "rank": match.rank if match else None,
    }
    _print_json(payload)
    return payload


def cmd_parse_judgment(args: argparse.Namespace) -> dict[str, object]:
    if args.input == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(args.input).read_text(encoding="utf-8")
    judgment = parse_ai_judgment(raw)
    payload = judgment.to_dict()
    payload["source"] = judgment.source
    _print_json(payload)
    return payload


def cmd_score_round(args: argparse.Namespace) -> dict[str, object]:
    score = calculate_round_score(args.round, args.rank, args.answer_count)
    payload: dict[str, object] = {
        "round": args.round,
        "direction": get_round_direction(args.round),
        "rank": args.rank,
        "answer_count": args.answer_count,
        "score": score,
    }
    _print_json(payload)
    return payload


def cmd_validate_seeds(args: argparse.Namespace) -> dict[str, object]:
    seeds = load_seed_answers(args.seeds)
    result = validate_seed_answers(
        seeds,
        min_count=args.min_count,
        max_count=args.max_count,
        max_rank=args.max_rank,
    )
    payload: dict[str, object] = {"count": len(seeds), "valid": result.valid, "error": result.error}
    _print_json(payload)
    if not result.valid and args.strict:
        raise SystemExit(1)
    return payload


def cmd_score_game(args: argparse.Namespace) -> dict[str, object]:
    config = _config_from_args(args)
    seeds = load_seed_answers(args.seeds)
    guesses = load_guesses(args.guesses)

    judge = AnswerJudge(config=config)
    results_df, totals_df = score_guesses(
        judge,
        seeds,
        guesses,
        game_id=args.game_id,
        core_question=args.question,
        verbose=not args.quiet,
    )

    out_dir = Path(args.output_dir)
    results_path = save_results(results_df, out_dir / "round_results.csv")
    totals_path = save_results(totals_df, out_dir / "totals.csv")

    print(f"Saved round results: {results_path}")
    print(f"Saved totals: {totals_path}")
    print(
        f"Scored {len(results_df)} guesses for {len(totals_df)} players "
        f"(max possible per player: {get_max_score(config.answer_count)})"
    )
    return {
        "results": str(results_path),
        "totals": str(totals_path),
        "guesses": int(len(results_df)),
        "players": int(len(totals_df)),
    }


def _optional_int(value: str) -> int | None:
    if value.lower() in {"none", "null", ""}:
        return None
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hi-Lo answer judging and scoring tools")
    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="Look up an answer in a seed list without the AI judge.")
    match.add_argument("--seeds", required=True, help="CSV with answer,rank columns.")
    match.add_argument("answer")
    match.set_defaults(func=cmd_match)

    parse = sub.add_parser("parse-judgment", help="Parse a raw AI judge reply.")
    parse.add_argument("input", nargs="?", default="-", help="File with the reply text, or - for stdin.")
    parse.set_defaults(func=cmd_parse_judgment)

    score = sub.add_parser("score-round", help="Score one round for a resolved rank.")
    score.add_argument("--round", type=int, required=True, choices=[1, 2, 3, 4])
    score.add_argument("--rank", type=_optional_int, default=None, help="Resolved rank, or 'none' for a miss.")
    _add_game_args(score)
    score.set_defaults(func=cmd_score_round)

    validate = sub.add_parser("validate-seeds", help="Check a seed list for size, ranks and duplicates.")
    validate.add_argument("--seeds", required=True)
    validate.add_argument("--min-count", type=int, default=GameConfig.min_seed_answers)
    validate.add_argument("--max-count", type=int, default=GameConfig.max_seed_answers)
    validate.add_argument("--max-rank", type=int, default=_env_int("HILO_MAX_RANK", DEFAULT_MAX_RANK))
    validate.add_argument("--strict", action="store_true", help="Exit non-zero when the list is invalid.")
    validate.set_defaults(func=cmd_validate_seeds)

    game = sub.add_parser("score-game", help="Resolve and score a CSV of guesses (player,round,answer).")
    game.add_argument("--seeds", required=True)
    game.add_argument("--guesses", required=True)
    game.add_argument("--game-id", default="local")
    game.add_argument("--question", default="")
    game.add_argument("--output-dir", default="artifacts")
    game.add_argument("--quiet", action="store_true")
    _add_game_args(game)
    game.set_defaults(func=cmd_score_game)

    return parser


def main() -> None:
    load_dotenv(override=False)
    parser = build_parser()
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
