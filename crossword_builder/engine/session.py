"""Interactive puzzle editing session.

A session owns the grid and the placed-word list and is the surface a UI or
CLI drives: adding words, editing blocks, running autofill, and stepping
through undo/redo history.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, Direction, SymmetryMode
from ..core.exceptions import GridSizeError, InvalidWordError
from ..core.models import ClueListing, ClueLists, Placement, PlacedWord, UserWord
from ..data.normalization import normalize_entry
from ..data.word_bank import WordBank
from ..data.word_source import WordSource
from ..utils.logger import get_logger
from .autofill import AutofillConfig, AutofillResult, ProgressCallback, run_autofill
from .grid import CrosswordGrid
from .placement import place_best_fit
from .symmetry import BlockToggleResult, toggle_block


LOGGER = get_logger(__name__)


@dataclass
class SessionConfig:
    """Configuration values for an editing session."""

    grid_size: int = DEFAULT_GRID_SIZE
    symmetry: SymmetryMode = SymmetryMode.ROTATIONAL
    history_limit: int = 100
    autofill: Optional[AutofillConfig] = None


@dataclass
class SessionSnapshot:
    grid: CrosswordGrid
    placed_words: List[PlacedWord]
    user_words: List[UserWord]


def validate_grid_size(size: int) -> int:
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise GridSizeError(f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {size}")
    return size


class CrosswordSession:
    """Holds the puzzle state and its edit history."""

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.symmetry = self.config.symmetry
        self._reset(validate_grid_size(self.config.grid_size))

    def _reset(self, size: int) -> None:
        self.grid = CrosswordGrid.create_empty(size)
        self.placed_words: List[PlacedWord] = []
        self.user_words: List[UserWord] = []
        self._history: List[SessionSnapshot] = [self._snapshot()]
        self._history_index = 0

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def symmetry(self) -> SymmetryMode:
        return self._symmetry

    @symmetry.setter
    def symmetry(self, mode: SymmetryMode) -> None:
        self._symmetry = SymmetryMode(mode)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def _snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            grid=self.grid.copy(),
            placed_words=copy.deepcopy(self.placed_words),
            user_words=copy.deepcopy(self.user_words),
        )

    def _restore(self, snapshot: SessionSnapshot) -> None:
        self.grid = snapshot.grid.copy()
        self.placed_words = copy.deepcopy(snapshot.placed_words)
        self.user_words = copy.deepcopy(snapshot.user_words)

    def _record(self) -> None:
        del self._history[self._history_index + 1:]
        self._history.append(self._snapshot())
        overflow = len(self._history) - max(1, self.config.history_limit)
        if overflow > 0:
            del self._history[:overflow]
        self._history_index = len(self._history) - 1

    @property
    def can_undo(self) -> bool:
        return self._history_index > 0

    @property
    def can_redo(self) -> bool:
        return self._history_index < len(self._history) - 1

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._history_index -= 1
        self._restore(self._history[self._history_index])
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._history_index += 1
        self._restore(self._history[self._history_index])
        return True

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def add_word(self, word: str, clue: str) -> Optional[PlacedWord]:
        """Place ``word`` at its best position, or return ``None`` if none exists."""

        cleaned = normalize_entry(word)
        clue = clue.strip()
        if not cleaned or not clue:
            raise InvalidWordError("Both a word and a clue are required")

        result = place_best_fit(cleaned, self.grid, self.placed_words)
        if not isinstance(result, Placement):
            LOGGER.info("Could not place %s", cleaned)
            return None

        number = len(self.placed_words) + 1
        self.grid.commit_placement(result.word, result.row, result.col, result.direction, number)
        placed = PlacedWord(
            word=result.word,
            clue=clue,
            row=result.row,
            col=result.col,
            direction=result.direction,
            number=number,
        )
        self.placed_words.append(placed)
        self.user_words.append(UserWord(word=cleaned, clue=clue))
        self._record()
        LOGGER.info("Placed %s #%s at (%s,%s) %s", placed.word, number, placed.row, placed.col, placed.direction.value)
        return placed

    def toggle_block(self, row: int, col: int) -> BlockToggleResult:
        result = toggle_block(self.grid, self.placed_words, row, col, self.symmetry)
        self.grid = result.grid
        self.placed_words = result.placed_words
        self._record()
        return result

    def autofill(
        self,
        word_source: WordSource,
        word_bank: Optional[WordBank] = None,
        max_words: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> AutofillResult:
        result = run_autofill(
            self.grid,
            self.placed_words,
            word_source,
            word_bank,
            max_words=max_words,
            progress_callback=progress_callback,
            config=self.config.autofill,
        )
        self.grid = result.grid
        self.placed_words = result.placed_words
        self._record()
        return result

    def clear(self) -> None:
        self._reset(self.size)

    def resize(self, size: int) -> None:
        self._reset(validate_grid_size(size))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def clue_lists(self) -> ClueLists:
        lists = ClueLists()
        for placed in self.placed_words:
            listing = ClueListing(number=placed.number, clue=placed.clue, length=placed.length, word=placed.word)
            if placed.direction == Direction.HORIZONTAL:
                lists.across.append(listing)
            else:
                lists.down.append(listing)
        return lists

    def to_jsonable(self) -> dict:
        lists = self.clue_lists()
        return {
            "size": self.size,
            "symmetry": self.symmetry.value,
            "grid": self.grid.to_jsonable(),
            "placed_words": [placed.to_jsonable() for placed in self.placed_words],
            "clues": {
                "across": [listing.__dict__ for listing in lists.across],
                "down": [listing.__dict__ for listing in lists.down],
            },
        }
