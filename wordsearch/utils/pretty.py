"""Pretty-print helpers for word-search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult
    from ..engine.grid import WordSearchGrid


HIDDEN = "."


def format_grid(grid: WordSearchGrid, highlight: Optional[set] = None) -> str:
    """Render letters with row/column headers.

    Cells outside ``highlight`` (when given) are shown as ``.``.
    """

    header_cells = [f"{c:>2}" for c in range(grid.size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.size - 1))
    for r in range(grid.size):
        symbols = []
        for c in range(grid.size):
            if highlight is not None and (r, c) not in highlight:
                symbols.append(HIDDEN)
            else:
                symbols.append(grid.letter(r, c) or HIDDEN)
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_solution(result: GenerationResult) -> str:
    """Render only the letters belonging to placed words."""

    covered = {cell for placement in result.placements for cell in placement.cells}
    return format_grid(result.grid, highlight=covered)


def print_puzzle_stats(
    result: GenerationResult,
    concepts: Optional[Dict[str, str]] = None,
    *,
    stream=None,
) -> None:
    """Print grid + stats for a generated puzzle."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)

    total_cells = grid.size * grid.size
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(
        f"  Word letters:  {grid.occupied_count} ({grid.occupied_count / total_cells * 100:.0f}%)",
        file=stream,
    )
    print(f"  Random fill:   {total_cells - grid.occupied_count}", file=stream)

    total_words = len(result.placements) + len(result.unplaced)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placements)}/{total_words}", file=stream)
    lengths = [placement.length for placement in result.placements]
    if lengths:
        print(
            f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})",
            file=stream,
        )
    by_direction = Counter(placement.direction.value for placement in result.placements)
    if by_direction:
        parts = [f"{name}:{count}" for name, count in sorted(by_direction.items())]
        print(f"  Directions:    {' '.join(parts)}", file=stream)
    for placement in result.placements:
        concept = (concepts or {}).get(placement.word)
        suffix = f"  ({concept})" if concept else ""
        print(
            f"  {placement.word:<20} ({placement.start_row},{placement.start_col}) "
            f"{placement.direction.value}{suffix}",
            file=stream,
        )
    if result.unplaced:
        print(f"  Unplaced:      {', '.join(result.unplaced)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
