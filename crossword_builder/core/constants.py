"""Shared constants and enumerations for the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 21
DEFAULT_GRID_SIZE = 15


class Direction(str, Enum):
    """Word directions supported by the grid."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def step(self) -> Tuple[int, int]:
        """Row/column delta between consecutive letters."""
        if self is Direction.HORIZONTAL:
            return (0, 1)
        return (1, 0)


class SymmetryMode(str, Enum):
    """How a block toggle propagates to other cells."""

    NONE = "none"
    ROTATIONAL = "rotational"
    MIRROR = "mirror"


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    size: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
