"""Word-search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: hides words in a grid.
- ``wordsearch.engine.generator.generate_word_search``: functional entry point.
- ``wordsearch.engine.validator`` helpers: word-list and result validation.
- ``wordsearch.io.puzzle_config.PuzzleConfig``: stored puzzle definition.
"""

from .core.constants import Direction
from .core.exceptions import NoDirectionsSelected, WordSearchError
from .engine.generator import (
    GenerationResult,
    GeneratorConfig,
    WordSearchGenerator,
    generate_word_search,
)
from .io.puzzle_config import PuzzleConfig, generate_from_config

__all__ = [
    "Direction",
    "GenerationResult",
    "GeneratorConfig",
    "NoDirectionsSelected",
    "PuzzleConfig",
    "WordSearchError",
    "WordSearchGenerator",
    "generate_from_config",
    "generate_word_search",
]

__version__ = "0.1.0"
