"""Word-search generator orchestration.

One call runs a fixed pipeline:
  1. Resolve the enabled directions (fails fast when none are enabled).
  2. Order words longest first, keeping input order between equal lengths.
  3. Bounded random search for a feasible placement of each word.
  4. Fill every unoccupied cell with a random letter and seal the grid.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from ..core.constants import MAX_PLACEMENT_ATTEMPTS, Direction
from ..core.models import Placement
from .directions import DirectionSelection, resolve_directions
from .grid import WordSearchGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Seed = Union[int, str, None]


def rng_from_seed(seed: Seed = None) -> random.Random:
    """Build an independent random source; ``None`` seeds from system entropy."""

    return random.Random(seed)


@dataclass
class GeneratorConfig:
    grid_size: int
    allowed_directions: DirectionSelection = None
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    seed: Seed = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")


@dataclass
class GenerationResult:
    grid: WordSearchGrid
    placements: List[Placement]
    unplaced: List[str]
    directions: List[Direction] = field(default_factory=list)
    seed: Seed = None

    @property
    def placed(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def complete(self) -> bool:
        return not self.unplaced

    def placement_for(self, word: str) -> Optional[Placement]:
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None

    def to_jsonable(self) -> dict:
        return {
            "grid_size": self.grid.size,
            "grid": self.grid.rows(),
            "placed": [placement.to_jsonable() for placement in self.placements],
            "unplaced": list(self.unplaced),
            "directions": [direction.value for direction in self.directions],
            "seed": self.seed,
        }


def order_words(words: Sequence[str]) -> List[str]:
    """Longest first; ``sorted`` is stable so equal lengths keep input order."""

    return sorted(words, key=len, reverse=True)


def find_placement(
    grid: WordSearchGrid,
    word: str,
    directions: Sequence[Direction],
    rng: random.Random,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Optional[Placement]:
    """Try up to ``max_attempts`` random starts; commit and return the first fit."""

    for attempt in range(1, max_attempts + 1):
        direction = rng.choice(directions)
        row = rng.randrange(grid.size)
        col = rng.randrange(grid.size)
        if grid.can_place(word, row, col, direction):
            placement = grid.place_word(word, row, col, direction)
            LOGGER.debug(
                "Placed %s at (%s,%s) going %s after %s attempt(s)",
                word,
                row,
                col,
                direction.value,
                attempt,
            )
            return placement
    return None


def generate_word_search(
    words: Sequence[str],
    grid_size: int,
    allowed_directions: DirectionSelection = None,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> GenerationResult:
    """Build a filled ``grid_size`` square grid hiding as many ``words`` as fit.

    Raises :class:`NoDirectionsSelected` before any grid exists when the
    selection enables no direction. Words that do not fit within the
    attempt budget are reported in ``unplaced`` rather than raised.
    """

    directions = resolve_directions(allowed_directions)
    if rng is None:
        rng = rng_from_seed()
    started = time.perf_counter()

    grid = WordSearchGrid(grid_size)
    placements: List[Placement] = []
    unplaced: List[str] = []
    for word in order_words(words):
        placement = find_placement(grid, word, directions, rng, max_attempts)
        if placement is None:
            LOGGER.warning(
                "Could not place %s in a %sx%s grid after %s attempts",
                word,
                grid_size,
                grid_size,
                max_attempts,
            )
            unplaced.append(word)
            continue
        placements.append(placement)

    grid.fill_empty_cells(rng)
    LOGGER.info(
        "Word search %sx%s generated: %s/%s words placed in %.1f ms",
        grid_size,
        grid_size,
        len(placements),
        len(words),
        (time.perf_counter() - started) * 1000,
    )
    return GenerationResult(
        grid=grid,
        placements=placements,
        unplaced=unplaced,
        directions=directions,
    )


class WordSearchGenerator:
    """Configured entry point; keeps no state between :meth:`generate` calls."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    def generate(self, words: Sequence[str], rng: Optional[random.Random] = None) -> GenerationResult:
        """Generate a puzzle for ``words``.

        Without ``rng`` a fresh source is seeded from ``config.seed`` on every
        call, so a seeded generator reproduces the same grid each time.
        """

        LOGGER.info(
            "Generating %sx%s word search for %s words",
            self.config.grid_size,
            self.config.grid_size,
            len(words),
        )
        result = generate_word_search(
            words,
            self.config.grid_size,
            allowed_directions=self.config.allowed_directions,
            rng=rng if rng is not None else rng_from_seed(self.config.seed),
            max_attempts=self.config.max_attempts,
        )
        result.seed = self.config.seed
        return result
