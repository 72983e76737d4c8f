"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from wordsearch.core.constants import DEFAULT_GRID_SIZE, Difficulty, Direction
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.wordlist import WordList, parse_word_entries, parse_words_file
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.engine.validator import ResultValidator, validate_grid_size, validate_words
from wordsearch.io.puzzle_config import PuzzleConfig, load_puzzle_config, time_limit_for
from wordsearch.utils.logger import configure_logging, get_logger, level_from_name
from wordsearch.utils.pretty import format_solution, print_puzzle_stats


LOGGER = get_logger("wordsearch.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word-search puzzles",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Grid size in cells (default {DEFAULT_GRID_SIZE}, or the config's grid_size)",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide (format: WORD or WORD:Concept)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Concept entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON puzzle configuration (words, grid_size, allowed_directions, concepts, ...)",
    )
    parser.add_argument(
        "--directions",
        nargs="+",
        metavar="DIR",
        choices=[d.value for d in Direction] + ["all"],
        help="Allowed directions (default: all eight)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=None,
        help="Sets the time limit (EASY 600s, MEDIUM 300s, HARD 180s)",
    )
    parser.add_argument("--seed", type=str, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and stats instead of JSON",
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="With --pretty, also print the answer key",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any word could not be placed",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip word-list validation (words are still uppercased)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_puzzle(args: argparse.Namespace, parser: argparse.ArgumentParser) -> PuzzleConfig:
    """Merge --config, --words and --words-file into one puzzle configuration."""

    puzzle = load_puzzle_config(args.config) if args.config else PuzzleConfig(words=[])

    entries = WordList()
    if args.words:
        parsed = parse_word_entries(args.words)
        entries.words.extend(parsed.words)
        entries.concepts.update(parsed.concepts)
    if args.words_file:
        parsed = parse_words_file(args.words_file)
        entries.words.extend(parsed.words)
        entries.concepts.update(parsed.concepts)
    puzzle.words.extend(entries.words)
    puzzle.concepts.update(entries.concepts)

    if not puzzle.words:
        parser.error("provide words with --words, --words-file or --config")

    if args.size is not None:
        puzzle.grid_size = args.size
    if args.directions:
        puzzle.allowed_directions = None if "all" in args.directions else list(args.directions)
    if args.difficulty:
        puzzle.time_limit = time_limit_for(args.difficulty)
    return puzzle


def build_payload(puzzle: PuzzleConfig, result) -> Dict[str, Any]:
    payload = result.to_jsonable()
    payload["concepts"] = {word: puzzle.concepts[word] for word in result.placed if word in puzzle.concepts}
    payload["time_limit"] = puzzle.time_limit
    payload["hide_words"] = puzzle.hide_words
    return payload


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level, logging.INFO))

    puzzle = collect_puzzle(args, parser)

    try:
        if not args.no_validate:
            validate_grid_size(puzzle.grid_size)
            puzzle.words = validate_words(puzzle.words, puzzle.grid_size)
        config = GeneratorConfig(
            grid_size=puzzle.grid_size,
            allowed_directions=puzzle.allowed_directions,
            seed=args.seed,
        )
        result = WordSearchGenerator(config).generate(puzzle.words)
    except (WordSearchError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 2

    validation = ResultValidator().validate(result, puzzle.allowed_directions, puzzle.words)
    if not validation.ok:
        LOGGER.error("Generated puzzle failed validation: %s", validation.messages)
        return 3

    if result.unplaced:
        LOGGER.warning(
            "Only %s of %s words were placed; try a larger grid or shorter words",
            len(result.placements),
            len(puzzle.words),
        )

    if args.pretty:
        print_puzzle_stats(result, puzzle.concepts)
        if args.solution:
            print()
            print(format_solution(result))
    else:
        output_text = json.dumps(build_payload(puzzle, result), ensure_ascii=False, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)

    if args.strict and result.unplaced:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
