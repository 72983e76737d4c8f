"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Difficulty(str, Enum):
    """Puzzle difficulty levels."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Direction(str, Enum):
    """Compass directions a word may run in.

    Values are the names stored in puzzle configurations.
    """

    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"
    DOWN_RIGHT = "downRight"
    UP_LEFT = "upLeft"
    DOWN_LEFT = "downLeft"
    UP_RIGHT = "upRight"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.UP_LEFT: (-1, -1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.UP_RIGHT: (-1, 1),
}

ALPHABET = string.ascii_uppercase

MAX_PLACEMENT_ATTEMPTS = 100

MIN_WORD_LENGTH = 3
MAX_WORDS = 20
MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 20
DEFAULT_GRID_SIZE = 15

TIME_LIMITS: Dict[Difficulty, int] = {
    Difficulty.EASY: 600,
    Difficulty.MEDIUM: 300,
    Difficulty.HARD: 180,
}


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
