import unittest

from hilo.submission import build_submit_params


class BuildSubmitParamsTests(unittest.TestCase):
    def test_uses_players_answer(self) -> None:
        params = build_submit_params("game-123", 1, "think")
        self.assertEqual(params.p_answer, "think")
        self.assertEqual(params.p_game_id, "game-123")
        self.assertEqual(params.p_round_number, 1)

    def test_never_produces_placeholder(self) -> None:
        for answer in ("love", "xylophone", "saves"):
            params = build_submit_params("game-123", 2, answer)
            self.assertNotIn("__ai_miss", params.p_answer)
            self.assertNotIn("__", params.p_answer)
            self.assertEqual(params.p_answer, answer)

    def test_miss_and_hit_treated_identically(self) -> None:
        self.assertEqual(build_submit_params("game-123", 1, "xylophone").p_answer, "xylophone")
        self.assertEqual(build_submit_params("game-123", 1, "saves").p_answer, "saves")

    def test_literal_text_is_kept_verbatim(self) -> None:
        for answer in ("  Olive   Oil ", "", "__ai_miss_123", "ÉMOJI 🙏"):
            self.assertEqual(build_submit_params("g", 3, answer).p_answer, answer)

    def test_to_dict_has_exactly_three_fields(self) -> None:
        self.assertEqual(
            build_submit_params("game-9", 4, "Grace").to_dict(),
            {"p_game_id": "game-9", "p_round_number": 4, "p_answer": "Grace"},
        )


if __name__ == "__main__":
    unittest.main()
