"""Pretty-print helpers for crossword grids and clue lists."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

from ..core.models import Cell, ClueListing, ClueLists

if TYPE_CHECKING:
    from ..engine.grid import CrosswordGrid
    from ..engine.session import CrosswordSession


BLOCK_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(cell: Cell, show_numbers: bool = False) -> str:
    if cell.blocked:
        return BLOCK_SYMBOL
    if show_numbers and cell.number:
        return str(cell.number)
    return cell.letter or EMPTY_SYMBOL


def format_grid(grid: CrosswordGrid, show_numbers: bool = False) -> str:
    width = grid.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.cells):
        row_render = " ".join(f"{cell_symbol(cell, show_numbers):>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def _format_listing(listings: List[ClueListing]) -> List[str]:
    return [f"  {item.number:>2}. {item.clue} ({item.length})" for item in listings]


def format_clue_lists(clue_lists: ClueLists) -> str:
    lines = ["Across"]
    lines.extend(_format_listing(clue_lists.across) or ["  (none)"])
    lines.append("Down")
    lines.extend(_format_listing(clue_lists.down) or ["  (none)"])
    return "\n".join(lines)


def print_puzzle(session: CrosswordSession, *, stream=None) -> None:
    """Print grid, numbering, clue lists and summary stats for a session."""

    stream = stream or sys.stdout
    grid = session.grid
    print(format_grid(grid), file=stream)
    print(file=stream)
    print(format_grid(grid, show_numbers=True), file=stream)
    print(file=stream)
    print(format_clue_lists(session.clue_lists()), file=stream)

    total_cells = grid.size * grid.size
    blocked = len(grid.blocked_cells())
    letters = grid.letter_count()
    lengths = Counter(placed.length for placed in session.placed_words)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letters} ({letters / total_cells * 100:.0f}%)", file=stream)
    print(f"  Blocks:        {blocked}", file=stream)
    print(f"  Symmetry:      {session.symmetry.value}", file=stream)
    print(f"  Words:         {len(session.placed_words)}", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
