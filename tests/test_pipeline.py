import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

import pandas as pd

from hilo.judge import AnswerJudge, GameConfig
from hilo.matching import SeedAnswer
from hilo.pipeline import load_guesses, load_seed_answers, save_results, score_guesses

SEEDS = [SeedAnswer("saves", 1), SeedAnswer("forgives", 4), SeedAnswer("loves", 120)]


class SeedLoadingTests(unittest.TestCase):
    def test_load_seed_answers_from_csv(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "seeds.csv"
            pd.DataFrame([{"answer": "Saves", "rank": 1}, {"answer": "null", "rank": 2}]).to_csv(path, index=False)

            seeds = load_seed_answers(path)

        self.assertEqual(seeds, [SeedAnswer("Saves", 1), SeedAnswer("null", 2)])

    def test_missing_columns_rejected(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "seeds.csv"
            pd.DataFrame([{"word": "saves"}]).to_csv(path, index=False)

            with self.assertRaises(ValueError):
                load_seed_answers(path)

    def test_load_guesses_requires_columns(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "guesses.csv"
            pd.DataFrame([{"player": "ana", "answer": "saves"}]).to_csv(path, index=False)

            with self.assertRaises(ValueError):
                load_guesses(path)


class ScoreGuessesTests(unittest.TestCase):
    def test_scores_and_totals_per_player(self) -> None:
        guesses = pd.DataFrame(
            [
                {"player": "ana", "round": 1, "answer": "Saves", "judge_reply": ""},
                {"player": "ana", "round": 2, "answer": "xylophone", "judge_reply": ""},
                {
                    "player": "ana",
                    "round": 3,
                    "answer": "rescues",
                    "judge_reply": '{"valid": true, "rank": 150, "reason": "obscure"}',
                },
                {"player": "ben", "round": 4, "answer": "loves", "judge_reply": ""},
            ]
        )
        judge = AnswerJudge(config=GameConfig(answer_count=120))

        results, totals = score_guesses(judge, SEEDS, guesses, game_id="g1", verbose=False)

        self.assertEqual(results["answer"].tolist(), ["Saves", "xylophone", "rescues", "loves"])
        self.assertEqual(results["source"].tolist(), ["exact", "no_judge", "judge", "exact"])
        self.assertEqual(results["on_list"].tolist(), [True, False, True, True])
        self.assertEqual(results["score"].tolist(), [120, 0, 450, 480])
        self.assertTrue(pd.isna(results["rank"].iloc[1]))

        by_player = dict(zip(totals["player"], totals["total_score"]))
        self.assertEqual(by_player, {"ana": 570, "ben": 480})
        self.assertEqual(totals["rounds_played"].tolist(), [3, 1])

    def test_repeated_attempts_keep_latest_hit_per_round(self) -> None:
        guesses = pd.DataFrame(
            [
                {"player": "ana", "round": 1, "answer": "xylophone"},
                {"player": "ana", "round": 1, "answer": "saves"},
                {"player": "ana", "round": 1, "answer": "forgives"},
                {"player": "ana", "round": 1, "answer": "think"},
            ]
        )
        judge = AnswerJudge(config=GameConfig(answer_count=120))

        results, totals = score_guesses(judge, SEEDS, guesses, game_id="g1", verbose=False)

        self.assertEqual(len(results), 4)
        self.assertEqual(results["score"].tolist(), [0, 120, 117, 0])
        self.assertEqual(totals["rounds_played"].tolist(), [1])
        self.assertEqual(totals["total_score"].tolist(), [117])

    def test_round_with_only_misses_counts_once_at_zero(self) -> None:
        guesses = pd.DataFrame(
            [
                {"player": "ben", "round": 2, "answer": "think"},
                {"player": "ben", "round": 2, "answer": "xylophone"},
            ]
        )
        results, totals = score_guesses(AnswerJudge(), SEEDS, guesses, game_id="g1", verbose=False)

        self.assertEqual(totals["rounds_played"].tolist(), [1])
        self.assertEqual(totals["total_score"].tolist(), [0])

    def test_missing_reply_column_uses_configured_judge(self) -> None:
        guesses = pd.DataFrame([{"player": "ana", "round": 1, "answer": "think"}])
        results, totals = score_guesses(AnswerJudge(), SEEDS, guesses, game_id="g1", verbose=False)

        self.assertEqual(results["source"].tolist(), ["no_judge"])
        self.assertEqual(totals["total_score"].tolist(), [0])

    def test_save_results_creates_parent_dirs(self) -> None:
        with TemporaryDirectory() as tmpdir:
            out = save_results(pd.DataFrame([{"player": "ana", "total_score": 5}]), Path(tmpdir) / "a" / "b.csv")
            self.assertTrue(out.exists())
            self.assertEqual(pd.read_csv(out)["total_score"].tolist(), [5])


if __name__ == "__main__":
    unittest.main()
