"""Pretty-print helpers for crossword boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from ..core.models import Cell
    from ..engine.board import Board, BoardSnapshot
    from ..engine.search import SearchResult


EMPTY_SYMBOL = "."
LOCK_SYMBOL = "#"


def cell_symbol(cell: "Cell", show_locks: bool = False) -> str:
    if cell.filled:
        return (cell.character or "?").upper()
    if show_locks and cell.lock_count > 0:
        return LOCK_SYMBOL
    return EMPTY_SYMBOL


def format_grid(grid: Union["Board", "BoardSnapshot"], *, show_locks: bool = False) -> str:
    width = grid.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.rows()):
        row_render = " ".join(f"{cell_symbol(cell, show_locks):>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid, *, label: str | None = None, show_locks: bool = False, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, show_locks=show_locks), file=stream)


def print_board_summary(
    board: "Board",
    result: Optional["SearchResult"] = None,
    *,
    stream=None,
) -> None:
    """Print the best grid found plus placement stats."""

    stream = stream or sys.stdout
    best = board.best
    if best is None:
        print("No words could be placed.", file=stream)
        return

    pretty_print_grid(best, label="--- Best board ---", show_locks=True, stream=stream)

    total_cells = best.width * best.height
    letter_cells = sum(1 for cell in best.cells if cell.filled)
    crossings = sum(1 for cell in best.cells if cell.usage_count > 1)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {best.width} x {best.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {crossings}", file=stream)

    lengths: List[int] = [placed.length for placed in best.placed_words]
    length_dist = Counter(lengths)
    print(file=stream)
    print("--- Words ---", file=stream)
    for placed in best.placed_words:
        print(
            f"  {placed.text} ({placed.start.x},{placed.start.y})-({placed.end.x},{placed.end.y})"
            f" {placed.direction.value}",
            file=stream,
        )
    print(f"  Placed:        {best.word_count}/{board.total_words}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if best.word_count < board.total_words:
        print("  WARNING: not all words were placed", file=stream)

    if result is not None:
        print(file=stream)
        print("--- Search ---", file=stream)
        print(f"  Outcome:       {result.outcome.value}", file=stream)
        print(f"  Backtracks:    {result.stats.backtracks}", file=stream)
        for msg in result.messages:
            print(f"  {msg}", file=stream)
