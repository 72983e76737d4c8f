"""Input validation for word lists and integrity checks for generated puzzles."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Set

from ..core.constants import (
    ALPHABET,
    MAX_GRID_SIZE,
    MAX_WORDS,
    MIN_GRID_SIZE,
    MIN_WORD_LENGTH,
    Direction,
)
from ..core.exceptions import ValidationError, WordListError
from .directions import DirectionSelection, resolve_directions
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import GenerationResult


LOGGER = get_logger(__name__)

WORD_RE = re.compile(r"^[A-Z]+$")


# ----------------------------------------------------------------------
# Word lists
# ----------------------------------------------------------------------
def normalize_word(text: str) -> str:
    return (text or "").strip().upper()


def check_word(word: str, grid_size: int, existing: Iterable[str] = ()) -> str:
    """Return the normalized word or raise :class:`WordListError`."""

    cleaned = normalize_word(word)
    if not cleaned:
        raise WordListError("Enter a non-empty word")
    if len(cleaned) < MIN_WORD_LENGTH:
        raise WordListError(f"{cleaned!r} must have at least {MIN_WORD_LENGTH} letters")
    if len(cleaned) > grid_size:
        raise WordListError(f"{cleaned!r} cannot be longer than {grid_size} letters")
    if not WORD_RE.match(cleaned):
        raise WordListError(f"{cleaned!r} may only contain letters A-Z (no accents or digits)")
    if cleaned in existing:
        raise WordListError(f"{cleaned!r} was already added")
    return cleaned


def validate_grid_size(grid_size: int) -> int:
    if not MIN_GRID_SIZE <= grid_size <= MAX_GRID_SIZE:
        raise WordListError(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {grid_size}"
        )
    return grid_size


def validate_words(words: Iterable[str], grid_size: int) -> List[str]:
    """Normalize and check a whole word list, stopping at the first problem."""

    cleaned: List[str] = []
    seen: Set[str] = set()
    for word in words:
        value = check_word(word, grid_size, seen)
        seen.add(value)
        cleaned.append(value)
    if not cleaned:
        raise WordListError("Add at least one word")
    if len(cleaned) > MAX_WORDS:
        raise WordListError(f"At most {MAX_WORDS} words are allowed, got {len(cleaned)}")
    return cleaned


# ----------------------------------------------------------------------
# Generated puzzles
# ----------------------------------------------------------------------
@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class ResultValidator:
    """Runs deterministic integrity checks over a finished puzzle."""

    def validate(
        self,
        result: "GenerationResult",
        allowed_directions: DirectionSelection = None,
        words: Optional[Iterable[str]] = None,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters(result)
            self._check_placements(result)
            self._check_partition(result, words)
            self._check_directions(result, resolve_directions(allowed_directions))
            self._check_coverage(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters(self, result: "GenerationResult") -> None:
        grid = result.grid
        for r in range(grid.size):
            for c in range(grid.size):
                letter = grid.cell(r, c).letter
                if not letter or len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_placements(self, result: "GenerationResult") -> None:
        grid = result.grid
        for placement in result.placements:
            for r, c in placement.cells:
                if not grid.bounds.contains(r, c):
                    raise ValidationError(f"{placement.word} leaves the grid at ({r},{c})")
            text = grid.read(placement.cells)
            if text != placement.word:
                raise ValidationError(
                    f"{placement.word} reads back as {text} from "
                    f"({placement.start_row},{placement.start_col})"
                )

    def _check_partition(self, result: "GenerationResult", words: Optional[Iterable[str]]) -> None:
        if words is None:
            overlap = set(result.placed) & set(result.unplaced)
            if overlap:
                raise ValidationError(f"Words both placed and unplaced: {sorted(overlap)}")
            return
        # Duplicate input words are counted per occurrence.
        expected = Counter(words)
        actual = Counter(result.placed) + Counter(result.unplaced)
        if expected != actual:
            raise ValidationError(
                f"Placed and unplaced words {sorted(actual.elements())} do not match "
                f"input {sorted(expected.elements())}"
            )

    def _check_directions(self, result: "GenerationResult", allowed: List[Direction]) -> None:
        for placement in result.placements:
            if placement.direction not in allowed:
                raise ValidationError(
                    f"{placement.word} runs {placement.direction.value}, which is not allowed"
                )

    def _check_coverage(self, result: "GenerationResult") -> None:
        covered = {cell for placement in result.placements for cell in placement.cells}
        grid = result.grid
        for r in range(grid.size):
            for c in range(grid.size):
                if grid.cell(r, c).occupied and (r, c) not in covered:
                    raise ValidationError(f"Occupied cell ({r},{c}) belongs to no placed word")
