"""Reading word lists with optional per-word concepts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List


@dataclass
class WordList:
    """Words in entry order plus the concept (hint) attached to each, if any."""

    words: List[str] = field(default_factory=list)
    concepts: Dict[str, str] = field(default_factory=dict)


def parse_word_entries(entries: Iterable[str]) -> WordList:
    """Parse ``WORD`` or ``WORD:concept`` entries.

    Words are uppercased; validation is left to
    :func:`wordsearch.engine.validator.validate_words`.
    """

    result = WordList()
    for item in entries:
        item = item.strip()
        if not item:
            continue
        if ":" in item:
            word, _, concept = item.partition(":")
            word = word.strip().upper()
            concept = concept.strip()
            if concept:
                result.concepts[word] = concept
        else:
            word = item.upper()
        result.words.append(word)
    return result


def parse_words_file(path: Path) -> WordList:
    """Read entries from a file, one per line. Blank lines and # comments are skipped."""

    lines: List[str] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return parse_word_entries(lines)
