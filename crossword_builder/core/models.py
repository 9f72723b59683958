"""Data models supporting the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple, Union

from .constants import Direction


def footprint(row: int, col: int, direction: Direction, length: int) -> List[Tuple[int, int]]:
    """Return the cells covered by a word starting at ``(row, col)``."""

    dr, dc = direction.step
    return [(row + dr * i, col + dc * i) for i in range(length)]


@dataclass
class Cell:
    """Represents a grid cell."""

    letter: str = ""
    blocked: bool = False
    number: Optional[int] = None

    def block(self) -> None:
        self.blocked = True
        self.letter = ""
        self.number = None

    def unblock(self) -> None:
        self.blocked = False


@dataclass
class PlacedWord:
    """A word committed to the grid together with its clue."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction
    number: int

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return footprint(self.row, self.col, self.direction, len(self.word))

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "clue": self.clue,
            "row": self.row,
            "col": self.col,
            "direction": self.direction.value,
            "number": self.number,
        }


@dataclass
class UserWord:
    word: str
    clue: str


@dataclass(frozen=True)
class PlacementEvaluation:
    """Legality and desirability of a single candidate position."""

    valid: bool
    intersections: int
    centrality_score: int


@dataclass(frozen=True)
class Placement:
    """The best legal position found for a word."""

    found: ClassVar[bool] = True

    word: str
    row: int
    col: int
    direction: Direction
    intersections: int
    centrality_score: int


@dataclass(frozen=True)
class NoPlacement:
    """Signals that a word has no legal position on the current grid."""

    found: ClassVar[bool] = False

    word: str


PlacementResult = Union[Placement, NoPlacement]


@dataclass
class ClueListing:
    number: int
    clue: str
    length: int
    word: str


@dataclass
class ClueLists:
    """Across and down clue listings in placement order."""

    across: List[ClueListing] = field(default_factory=list)
    down: List[ClueListing] = field(default_factory=list)
