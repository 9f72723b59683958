"""Symmetric block editing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..core.constants import SymmetryMode
from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


@dataclass
class BlockToggleResult:
    grid: CrosswordGrid
    placed_words: List[PlacedWord]
    invalidated_words: List[PlacedWord] = field(default_factory=list)


def symmetric_cells(size: int, row: int, col: int, mode: SymmetryMode) -> List[Tuple[int, int]]:
    """Return the clicked cell followed by its distinct symmetric partners."""

    cells = [(row, col)]
    sym_row = size - 1 - row
    sym_col = size - 1 - col
    if mode == SymmetryMode.ROTATIONAL:
        cells.append((sym_row, sym_col))
    elif mode == SymmetryMode.MIRROR:
        cells.extend([(row, sym_col), (sym_row, col), (sym_row, sym_col)])

    unique: List[Tuple[int, int]] = []
    for cell in cells:
        if cell not in unique:
            unique.append(cell)
    return unique


def toggle_block(
    grid: CrosswordGrid,
    placed_words: Sequence[PlacedWord],
    row: int,
    col: int,
    mode: SymmetryMode = SymmetryMode.NONE,
) -> BlockToggleResult:
    """Toggle the block at ``(row, col)`` and its symmetric partners.

    Every affected cell takes the opposite of the clicked cell's current
    state, so toggling twice restores partners only when they started out
    matching the clicked cell. Words whose footprint now touches a block are
    dropped and the grid is rebuilt from the survivors. The input grid is left
    untouched.
    """

    mode = SymmetryMode(mode)
    new_grid = grid.copy()
    make_blocked = not new_grid.cell_at(row, col).blocked
    targets = symmetric_cells(grid.size, row, col, mode)
    for r, c in targets:
        cell = new_grid.cell_at(r, c)
        if make_blocked:
            cell.block()
        else:
            cell.unblock()
    LOGGER.debug(
        "%s %s cell(s) from (%s,%s) with %s symmetry",
        "Blocked" if make_blocked else "Unblocked",
        len(targets),
        row,
        col,
        mode.value,
    )

    survivors: List[PlacedWord] = []
    invalidated: List[PlacedWord] = []
    for placed in placed_words:
        if new_grid.word_hits_block(placed):
            invalidated.append(placed)
        else:
            survivors.append(placed)
    if not invalidated:
        return BlockToggleResult(grid=new_grid, placed_words=list(placed_words))

    LOGGER.info(
        "Block toggle invalidated %s word(s): %s",
        len(invalidated),
        ", ".join(placed.word for placed in invalidated),
    )
    renumbered = [
        PlacedWord(
            word=placed.word,
            clue=placed.clue,
            row=placed.row,
            col=placed.col,
            direction=placed.direction,
            number=index,
        )
        for index, placed in enumerate(survivors, start=1)
    ]
    return BlockToggleResult(
        grid=new_grid.rebuild(renumbered),
        placed_words=renumbered,
        invalidated_words=invalidated,
    )
