"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import Iterable, List, Sequence, Tuple

from ..core.constants import ALPHABET, Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import Cell, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordSearchGrid:
    """Square letter grid owned by a single generation call."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(size)
        self._cells: List[List[Cell]] = [[Cell() for _ in range(size)] for _ in range(size)]
        self._occupied_count = 0
        self._sealed = False

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check bounds and letter conflicts for ``word`` starting at (row, col)."""

        dr, dc = direction.step
        for index, letter in enumerate(word):
            r, c = row + index * dr, col + index * dc
            if not self.bounds.contains(r, c):
                return False
            existing = self.cells[r][c].letter
            if existing is not None and existing != letter:
                return False
        return True

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> Placement:
        if self._sealed:
            raise PlacementError("Grid is sealed; words can only be placed before the fill pass")
        if not self.can_place(word, row, col, direction):
            raise PlacementError(
                f"Cannot place {word!r} at {(row, col)} going {direction.value}"
            )

        placement = Placement(word=word, start_row=row, start_col=col, direction=direction)
        for letter, (r, c) in zip(word, placement.cells):
            if not self._cells[r][c].occupied:
                self._occupied_count += 1
            self._cells[r][c] = Cell(letter=letter, occupied=True)
        return placement

    def fill_empty_cells(self, rng: random.Random) -> int:
        """Give every unoccupied cell a random letter and seal the grid."""

        if self._sealed:
            raise PlacementError("Fill pass already ran on this grid")
        filled = 0
        for row in self._cells:
            for c, cell in enumerate(row):
                if not cell.occupied:
                    row[c] = Cell(letter=rng.choice(ALPHABET))
                    filled += 1
        self._cells = tuple(tuple(row) for row in self._cells)
        self._sealed = True
        LOGGER.debug("Filled %s empty cells with random letters", filled)
        return filled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def cells(self) -> Sequence[Sequence[Cell]]:
        """Row-major cells; read-only tuples once the grid is sealed."""

        return self._cells

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter(self, row: int, col: int) -> str:
        return self.cells[row][col].letter or ""

    def read(self, cells: Iterable[Tuple[int, int]]) -> str:
        return "".join(self.letter(r, c) for r, c in cells)

    def rows(self) -> List[str]:
        return ["".join(cell.letter or "." for cell in row) for row in self.cells]

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        """Immutable copy of the letters, row-major."""

        return tuple(tuple(cell.letter or "" for cell in row) for row in self.cells)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [{"letter": cell.letter, "occupied": cell.occupied} for cell in row]
            for row in self.cells
        ]
