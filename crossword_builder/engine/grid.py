"""Grid representation and helper utilities."""

from __future__ import annotations

import copy
from typing import Iterable, List, Sequence, Tuple

from ..core.constants import Bounds, Direction
from ..core.exceptions import GridSizeError, OutOfBoundsError
from ..core.models import Cell, PlacedWord, footprint
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class CrosswordGrid:
    """Square crossword surface holding letters, blocks and numbers."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise GridSizeError(f"Grid size must be positive, got {size}")
        self.bounds = Bounds(size=size)
        # One Cell object per coordinate; rows never share cells.
        self.cells: List[List[Cell]] = [[Cell() for _ in range(size)] for _ in range(size)]

    @classmethod
    def create_empty(cls, size: int) -> "CrosswordGrid":
        return cls(size)

    @property
    def size(self) -> int:
        return self.bounds.size

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(f"Cell {(row, col)} outside {self.size}x{self.size} grid")
        return self.cells[row][col]

    def iter_cells(self) -> Iterable[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def blocked_cells(self) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, cell in self.iter_cells() if cell.blocked]

    def letter_count(self) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if cell.letter)

    def word_hits_block(self, placed: PlacedWord) -> bool:
        """True when any footprint cell of ``placed`` is blocked or off-grid."""

        for row, col in placed.cells:
            if not self.contains(row, col) or self.cells[row][col].blocked:
                return True
        return False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def commit_placement(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction,
        number: int,
    ) -> None:
        """Write an already validated placement into the grid.

        The start cell keeps any number it already carries, so two words
        sharing a start cell never double-number it.
        """

        start = self.cell_at(row, col)
        if not start.number:
            start.number = number

        for letter, (r, c) in zip(word, footprint(row, col, direction, len(word))):
            self.cell_at(r, c).letter = letter
        LOGGER.debug("Committed %s #%s at (%s,%s) %s", word, number, row, col, direction.value)

    def rebuild(self, placed_words: Sequence[PlacedWord]) -> "CrosswordGrid":
        """Return a fresh grid with this grid's blocks and ``placed_words`` re-committed.

        Words are numbered ``1..n`` in the order given.
        """

        fresh = CrosswordGrid(self.size)
        for row, col in self.blocked_cells():
            fresh.cells[row][col].blocked = True
        for index, placed in enumerate(placed_words, start=1):
            fresh.commit_placement(placed.word, placed.row, placed.col, placed.direction, index)
        return fresh

    def copy(self) -> "CrosswordGrid":
        clone = CrosswordGrid.__new__(CrosswordGrid)
        clone.bounds = self.bounds
        clone.cells = copy.deepcopy(self.cells)
        return clone

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[dict]]:
        return [
            [{"letter": cell.letter, "blocked": cell.blocked, "number": cell.number} for cell in row]
            for row in self.cells
        ]
