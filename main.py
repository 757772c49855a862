"""CLI entrypoint for the crossword filler."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from crisscross.core.constants import DEFAULT_MAX_BACKTRACKS
from crisscross.core.exceptions import ConfigurationError, CrosswordError, VocabularyLoadError
from crisscross.data.vocabulary import VocabularyConfig, load_words
from crisscross.engine.board_store import BoardStore, board_to_document
from crisscross.engine.generator import CrosswordGenerator, GeneratorConfig
from crisscross.utils.logger import configure_logging
from crisscross.utils.pretty import print_board_summary

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interlock a list of words on a crossword grid",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=Path("vocabulary.csv"),
        help="CSV file with 'word' and optional 'hint' columns",
    )
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument("--height", type=int, help="Grid height in cells (defaults to width)")
    parser.add_argument(
        "--estimate",
        action="store_true",
        help="Estimate a square board size from the word lengths",
    )
    parser.add_argument(
        "--optimal",
        action="store_true",
        help="Binary search the smallest square board that fits every word",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=1,
        help="Search attempts per board size (default 1)",
    )
    parser.add_argument(
        "--max-backtracks",
        type=int,
        default=DEFAULT_MAX_BACKTRACKS,
        help="Abort a search after this many undo operations",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for retry shuffles")
    parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Lowercase words before placing them",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--store-dir",
        type=Path,
        help="Save the resulting board document into this directory",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.width is None and not (args.estimate or args.optimal):
        parser.error("provide --width or use --estimate / --optimal")

    try:
        words = load_words(VocabularyConfig(path=args.file, lowercase=args.lowercase))
        config = GeneratorConfig(
            width=args.width,
            height=args.height,
            max_retries=args.retries,
            max_backtracks=args.max_backtracks,
            estimate_size=args.estimate,
            find_optimal_size=args.optimal,
            seed=args.seed,
        )
        generation = CrosswordGenerator(config).generate(words)
    except (ConfigurationError, VocabularyLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except CrosswordError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARTIAL

    board = generation.board
    print_board_summary(board, generation.result)

    if args.store_dir:
        BoardStore(args.store_dir).save(board, generation.result)

    if args.output:
        payload = {
            "outcome": generation.result.outcome.value,
            "words": generation.words,
            "board": board_to_document(board),
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    return EXIT_OK if generation.success else EXIT_PARTIAL


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
