"""Candidate evaluation and best-fit selection for single words.

Selection is greedy: every start position in both directions is scored
against the current grid, and the most connected, most central legal
candidate wins. Nothing here mutates the grid.
"""

from __future__ import annotations

from typing import List, Sequence

from ..core.constants import Direction
from ..core.exceptions import InvalidWordError
from ..core.models import NoPlacement, Placement, PlacementEvaluation, PlacementResult, PlacedWord
from ..data.normalization import is_placeable
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


def centrality_score(size: int, word_length: int, row: int, col: int, direction: Direction) -> int:
    """Manhattan distance from the word's midpoint cell to the grid center."""

    center = size // 2
    dr, dc = direction.step
    mid_row = row + dr * (word_length // 2)
    mid_col = col + dc * (word_length // 2)
    return abs(mid_row - center) + abs(mid_col - center)


def evaluate_placement(
    grid: CrosswordGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
) -> PlacementEvaluation:
    score = centrality_score(grid.size, len(word), row, col, direction)
    dr, dc = direction.step
    intersections = 0
    for index, letter in enumerate(word):
        r, c = row + dr * index, col + dc * index
        if not grid.contains(r, c):
            return PlacementEvaluation(valid=False, intersections=intersections, centrality_score=score)
        cell = grid.cells[r][c]
        if cell.blocked:
            return PlacementEvaluation(valid=False, intersections=intersections, centrality_score=score)
        if cell.letter:
            if cell.letter != letter:
                return PlacementEvaluation(valid=False, intersections=intersections, centrality_score=score)
            intersections += 1
    return PlacementEvaluation(valid=True, intersections=intersections, centrality_score=score)


def enumerate_candidates(grid: CrosswordGrid, word: str) -> List[Placement]:
    """Return every legal placement in scan order (horizontal rows, then vertical rows)."""

    size = grid.size
    length = len(word)
    starts = [
        (row, col, Direction.HORIZONTAL)
        for row in range(size)
        for col in range(size - length + 1)
    ]
    starts.extend(
        (row, col, Direction.VERTICAL)
        for row in range(size - length + 1)
        for col in range(size)
    )

    candidates: List[Placement] = []
    for row, col, direction in starts:
        evaluation = evaluate_placement(grid, word, row, col, direction)
        if evaluation.valid:
            candidates.append(
                Placement(
                    word=word,
                    row=row,
                    col=col,
                    direction=direction,
                    intersections=evaluation.intersections,
                    centrality_score=evaluation.centrality_score,
                )
            )
    return candidates


def place_best_fit(
    word: str,
    grid: CrosswordGrid,
    placed_words: Sequence[PlacedWord] = (),
) -> PlacementResult:
    """Find the single best legal placement for ``word``.

    ``placed_words`` is accepted for callers that track the puzzle as a
    (grid, words) pair; the grid alone determines legality.
    """

    word = word.upper()
    if not is_placeable(word):
        raise InvalidWordError(f"Word must be alphabetic, got {word!r}")

    candidates = enumerate_candidates(grid, word)
    if not candidates:
        LOGGER.debug("No legal placement for %s (%s words placed)", word, len(placed_words))
        return NoPlacement(word=word)

    # list.sort is stable, so ties keep scan order.
    candidates.sort(key=lambda item: (-item.intersections, item.centrality_score))
    best = candidates[0]
    LOGGER.debug(
        "Best fit for %s: (%s,%s) %s, %s intersections, centrality %s (of %s candidates)",
        word,
        best.row,
        best.col,
        best.direction.value,
        best.intersections,
        best.centrality_score,
        len(candidates),
    )
    return best
