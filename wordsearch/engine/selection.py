"""Play-time matching of a player's cell selection against placed words."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Set, Tuple

from ..core.models import Placement
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import GenerationResult


LOGGER = get_logger(__name__)

Coord = Tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def trace_selection(start: Coord, end: Coord) -> Optional[List[Coord]]:
    """Cells from ``start`` to ``end`` inclusive, or ``None`` if not a straight line.

    Horizontal, vertical and 45-degree diagonal lines are accepted.
    """

    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    if d_row and d_col and abs(d_row) != abs(d_col):
        return None
    step_r, step_c = _sign(d_row), _sign(d_col)
    length = max(abs(d_row), abs(d_col)) + 1
    return [(start[0] + i * step_r, start[1] + i * step_c) for i in range(length)]


def match_selection(result: "GenerationResult", cells: Sequence[Coord]) -> Optional[Placement]:
    """Return the placement covering exactly ``cells``, read in either direction."""

    if len(cells) < 2:
        return None
    selected = list(cells)
    for placement in result.placements:
        if placement.cells == selected or placement.cells == selected[::-1]:
            return placement
    return None


class FoundWords:
    """Tracks which placed words a player has found."""

    def __init__(self, result: "GenerationResult") -> None:
        self.result = result
        self.found: Set[str] = set()

    def select(self, start: Coord, end: Coord) -> Optional[Placement]:
        """Record the word between two cells; ``None`` if nothing new matched."""

        cells = trace_selection(start, end)
        if cells is None:
            return None
        placement = match_selection(self.result, cells)
        if placement is None or placement.word in self.found:
            return None
        self.found.add(placement.word)
        LOGGER.debug("Found %s (%s/%s)", placement.word, len(self.found), len(self.result.placements))
        return placement

    @property
    def remaining(self) -> List[str]:
        return [word for word in self.result.placed if word not in self.found]

    @property
    def finished(self) -> bool:
        return bool(self.result.placements) and not self.remaining
