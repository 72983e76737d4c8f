import json
import tempfile
import unittest
from pathlib import Path

from wordsearch.core.constants import DEFAULT_GRID_SIZE, Difficulty
from wordsearch.data.wordlist import parse_word_entries, parse_words_file
from wordsearch.io.puzzle_config import (
    PuzzleConfig,
    generate_from_config,
    load_puzzle_config,
    time_limit_for,
)


class WordListTests(unittest.TestCase):
    def test_plain_words_are_uppercased(self) -> None:
        parsed = parse_word_entries(["cat", "dog"])
        self.assertEqual(parsed.words, ["CAT", "DOG"])
        self.assertEqual(parsed.concepts, {})

    def test_concept_format_splits_word_and_concept(self) -> None:
        parsed = parse_word_entries([" sol : Estrela central ", "LUA:", "TERRA"])
        self.assertEqual(parsed.words, ["SOL", "LUA", "TERRA"])
        self.assertEqual(parsed.concepts, {"SOL": "Estrela central"})

    def test_blank_entries_are_skipped(self) -> None:
        self.assertEqual(parse_word_entries(["CAT", "", "   "]).words, ["CAT"])

    def test_words_file_skips_comments(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text(
                "# planets\nmarte:Planeta vermelho\n\nvenus\n  # indented comment\n",
                encoding="utf-8",
            )
            parsed = parse_words_file(path)
        self.assertEqual(parsed.words, ["MARTE", "VENUS"])
        self.assertEqual(parsed.concepts, {"MARTE": "Planeta vermelho"})


class PuzzleConfigTests(unittest.TestCase):
    def test_from_dict_reads_stored_keys(self) -> None:
        config = PuzzleConfig.from_dict(
            {
                "words": ["gato", "CAO"],
                "grid_size": 12,
                "allowed_directions": ["right", "down"],
                "concepts": {"gato": "Felino"},
                "time_limit": 300,
                "hide_words": True,
            }
        )
        self.assertEqual(config.words, ["GATO", "CAO"])
        self.assertEqual(config.grid_size, 12)
        self.assertEqual(config.allowed_directions, ["right", "down"])
        self.assertEqual(config.concepts, {"GATO": "Felino"})
        self.assertEqual(config.time_limit, 300)
        self.assertTrue(config.hide_words)

    def test_from_dict_accepts_toggle_mapping_and_defaults(self) -> None:
        config = PuzzleConfig.from_dict(
            {"words": ["CAT"], "allowed_directions": {"up": True, "down": False}}
        )
        self.assertEqual(config.allowed_directions, ["up"])
        self.assertEqual(config.grid_size, DEFAULT_GRID_SIZE)
        self.assertIsNone(config.time_limit)
        self.assertFalse(config.hide_words)

    def test_stored_zero_grid_size_is_kept_and_rejected(self) -> None:
        config = PuzzleConfig.from_dict({"words": ["CAT"], "grid_size": 0})
        self.assertEqual(config.grid_size, 0)
        with self.assertRaises(ValueError):
            config.to_generator_config()

    def test_missing_directions_stay_unset(self) -> None:
        config = PuzzleConfig.from_dict({"words": ["CAT"]})
        self.assertIsNone(config.allowed_directions)
        self.assertIsNone(config.to_dict()["allowed_directions"])

    def test_to_dict_matches_from_dict(self) -> None:
        original = PuzzleConfig(
            words=["CAT"], grid_size=10, allowed_directions=["left"], concepts={"CAT": "Pet"}
        )
        self.assertEqual(PuzzleConfig.from_dict(original.to_dict()), original)

    def test_load_from_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "puzzle.json"
            path.write_text(json.dumps({"words": ["CAT"], "grid_size": 10}), encoding="utf-8")
            config = load_puzzle_config(path)
            self.assertEqual(config.words, ["CAT"])

            bad = Path(tmpdir) / "bad.json"
            bad.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_puzzle_config(bad)

    def test_time_limits_per_difficulty(self) -> None:
        self.assertEqual(time_limit_for(Difficulty.EASY), 600)
        self.assertEqual(time_limit_for("medium"), 300)
        self.assertEqual(time_limit_for("HARD"), 180)
        with self.assertRaises(ValueError):
            time_limit_for("extreme")


class RegenerationTests(unittest.TestCase):
    def test_shared_seed_reproduces_grid(self) -> None:
        config = PuzzleConfig(words=["PLANETA", "ESTRELA", "COMETA"], grid_size=12)
        first = generate_from_config(config, seed="room-7")
        second = generate_from_config(config, seed="room-7")
        self.assertEqual(first.grid.rows(), second.grid.rows())
        self.assertEqual(first.seed, "room-7")

    def test_respects_stored_directions(self) -> None:
        config = PuzzleConfig(words=["CAT", "DOG"], grid_size=10, allowed_directions=["up"])
        result = generate_from_config(config, seed=3)
        for placement in result.placements:
            self.assertEqual(placement.direction.value, "up")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
