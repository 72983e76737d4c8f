"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Cell:
    """A single grid square."""

    letter: Optional[str] = None
    occupied: bool = False


@dataclass
class Placement:
    """A word written into the grid from a start cell along a direction."""

    word: str
    start_row: int
    start_col: int
    direction: Direction
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            dr, dc = self.direction.step
            self._cells = [
                (self.start_row + i * dr, self.start_col + i * dc) for i in range(self.length)
            ]
        return self._cells

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.start_row, self.start_col],
            "end": list(self.end),
            "direction": self.direction.value,
        }
