"""Stored puzzle configuration and play-time regeneration.

The configuration is what a host application persists for a puzzle; the
grid itself is never stored and is rebuilt from it whenever the puzzle is
previewed or played.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.constants import DEFAULT_GRID_SIZE, TIME_LIMITS, Difficulty
from ..engine.generator import GenerationResult, GeneratorConfig, Seed, WordSearchGenerator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def time_limit_for(difficulty: Union[Difficulty, str]) -> int:
    """Seconds allowed to solve a puzzle of the given difficulty."""

    if not isinstance(difficulty, Difficulty):
        difficulty = Difficulty(difficulty.upper())
    return TIME_LIMITS[difficulty]


@dataclass
class PuzzleConfig:
    words: List[str]
    grid_size: int = DEFAULT_GRID_SIZE
    allowed_directions: Optional[List[str]] = None
    concepts: Dict[str, str] = field(default_factory=dict)
    time_limit: Optional[int] = None
    hide_words: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleConfig":
        grid_size = data.get("grid_size")
        allowed = data.get("allowed_directions")
        if isinstance(allowed, dict):
            allowed = [name for name, enabled in allowed.items() if enabled]
        return cls(
            words=[str(word).upper() for word in data.get("words") or []],
            grid_size=int(grid_size) if grid_size is not None else DEFAULT_GRID_SIZE,
            allowed_directions=list(allowed) if allowed is not None else None,
            concepts={str(k).upper(): str(v) for k, v in (data.get("concepts") or {}).items()},
            time_limit=data.get("time_limit"),
            hide_words=bool(data.get("hide_words", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "words": list(self.words),
            "grid_size": self.grid_size,
            "allowed_directions": (
                list(self.allowed_directions) if self.allowed_directions is not None else None
            ),
            "concepts": dict(self.concepts),
            "time_limit": self.time_limit,
            "hide_words": self.hide_words,
        }

    def to_generator_config(self, seed: Seed = None) -> GeneratorConfig:
        return GeneratorConfig(
            grid_size=self.grid_size,
            allowed_directions=self.allowed_directions,
            seed=seed,
        )


def load_puzzle_config(path: Path | str) -> PuzzleConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Puzzle config {path} must contain a JSON object")
    return PuzzleConfig.from_dict(data)


def generate_from_config(config: PuzzleConfig, seed: Seed = None) -> GenerationResult:
    """Rebuild the puzzle grid; a shared ``seed`` gives every player the same grid."""

    LOGGER.info("Regenerating puzzle with %s words (seed=%r)", len(config.words), seed)
    generator = WordSearchGenerator(config.to_generator_config(seed))
    return generator.generate(config.words)
