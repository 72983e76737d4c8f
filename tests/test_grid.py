import random
import unittest
from dataclasses import FrozenInstanceError

from wordsearch.core.constants import ALPHABET, Direction
from wordsearch.core.exceptions import PlacementError
from wordsearch.core.models import Cell
from wordsearch.engine.grid import WordSearchGrid


class GridPlacementTests(unittest.TestCase):
    def test_rejects_out_of_bounds(self) -> None:
        grid = WordSearchGrid(5)
        self.assertFalse(grid.can_place("HORSE", 0, 1, Direction.RIGHT))
        self.assertFalse(grid.can_place("CAT", 1, 1, Direction.UP_LEFT))
        self.assertTrue(grid.can_place("HORSE", 0, 0, Direction.RIGHT))
        self.assertTrue(grid.can_place("CAT", 2, 2, Direction.UP_LEFT))

    def test_rejects_conflicting_letter(self) -> None:
        grid = WordSearchGrid(5)
        grid.place_word("CAT", 0, 0, Direction.RIGHT)
        self.assertFalse(grid.can_place("DOG", 0, 0, Direction.DOWN))

    def test_allows_crossing_on_same_letter(self) -> None:
        grid = WordSearchGrid(5)
        grid.place_word("CAT", 0, 0, Direction.RIGHT)
        self.assertTrue(grid.can_place("ARC", 0, 1, Direction.DOWN))
        placement = grid.place_word("ARC", 0, 1, Direction.DOWN)
        self.assertEqual(placement.cells, [(0, 1), (1, 1), (2, 1)])
        self.assertEqual(grid.letter(0, 1), "A")
        # Shared cell is only counted once.
        self.assertEqual(grid.occupied_count, 5)

    def test_place_word_marks_cells_occupied(self) -> None:
        grid = WordSearchGrid(4)
        placement = grid.place_word("DOG", 3, 3, Direction.UP_LEFT)
        self.assertEqual(placement.end, (1, 1))
        self.assertEqual(grid.read(placement.cells), "DOG")
        for r, c in placement.cells:
            self.assertTrue(grid.cell(r, c).occupied)
        self.assertFalse(grid.cell(0, 0).occupied)

    def test_place_word_raises_when_infeasible(self) -> None:
        grid = WordSearchGrid(4)
        with self.assertRaises(PlacementError):
            grid.place_word("HORSE", 0, 0, Direction.RIGHT)

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            WordSearchGrid(0)


class GridFillTests(unittest.TestCase):
    def test_fill_covers_every_cell_and_keeps_words(self) -> None:
        grid = WordSearchGrid(6)
        placement = grid.place_word("TIGER", 1, 0, Direction.RIGHT)
        filled = grid.fill_empty_cells(random.Random(3))
        self.assertEqual(filled, 36 - 5)
        for row in grid.snapshot():
            for letter in row:
                self.assertIn(letter, ALPHABET)
        self.assertEqual(grid.read(placement.cells), "TIGER")
        self.assertFalse(grid.cell(0, 0).occupied)

    def test_fill_seals_grid(self) -> None:
        grid = WordSearchGrid(5)
        grid.fill_empty_cells(random.Random(1))
        self.assertTrue(grid.sealed)
        with self.assertRaises(PlacementError):
            grid.place_word("CAT", 0, 0, Direction.RIGHT)
        with self.assertRaises(PlacementError):
            grid.fill_empty_cells(random.Random(1))

    def test_sealed_grid_rejects_cell_writes(self) -> None:
        grid = WordSearchGrid(4)
        grid.place_word("DOG", 0, 0, Direction.RIGHT)
        grid.fill_empty_cells(random.Random(2))
        with self.assertRaises(FrozenInstanceError):
            grid.cell(0, 0).letter = "Z"
        with self.assertRaises(FrozenInstanceError):
            grid.cell(0, 1).occupied = False
        with self.assertRaises(TypeError):
            grid.cells[0][0] = Cell(letter="Z", occupied=True)
        self.assertEqual(grid.read([(0, 0), (0, 1), (0, 2)]), "DOG")

    def test_snapshot_is_immutable_copy(self) -> None:
        grid = WordSearchGrid(3)
        grid.place_word("CAT", 0, 0, Direction.RIGHT)
        snapshot = grid.snapshot()
        self.assertIsInstance(snapshot, tuple)
        self.assertEqual(snapshot[0], ("C", "A", "T"))
        self.assertEqual(snapshot[1], ("", "", ""))
        self.assertEqual(grid.rows()[1], "...")

    def test_to_jsonable_reports_letters_and_occupancy(self) -> None:
        grid = WordSearchGrid(3)
        grid.place_word("CAT", 2, 0, Direction.RIGHT)
        payload = grid.to_jsonable()
        self.assertEqual(payload[2][1], {"letter": "A", "occupied": True})
        self.assertEqual(payload[0][0], {"letter": None, "occupied": False})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
