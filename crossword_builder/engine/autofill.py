"""Greedy multi-word autofill.

Candidates are processed strictly in priority order and each one is either
fully committed or skipped; nothing placed is ever revisited. The loop is a
generator so the caller regains control after every candidate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generator, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.models import Placement, PlacedWord
from ..data.normalization import clean_word, is_placeable
from ..data.word_bank import WordBank
from ..data.word_source import WordSource
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .placement import place_best_fit


LOGGER = get_logger(__name__)


@dataclass
class AutofillConfig:
    """Configuration values driving an autofill pass."""

    max_words: int = 12
    min_bootstrap_words: int = 3
    # (word length, max candidates of that length), in processing order.
    length_buckets: Tuple[Tuple[int, int], ...] = ((5, 10), (4, 15), (3, 20))
    progress_window_factor: int = 2


@dataclass(frozen=True)
class AutofillCandidate:
    word: str
    from_word_bank: bool = False
    clue: Optional[str] = None


@dataclass(frozen=True)
class AutofillProgress:
    """Checkpoint emitted after each processed candidate."""

    processed: int
    total: int
    fraction: float
    placed_count: int
    word: str
    accepted: bool


@dataclass
class AutofillResult:
    grid: CrosswordGrid
    placed_words: List[PlacedWord]
    added: List[PlacedWord] = field(default_factory=list)
    error: Optional[str] = None


ProgressCallback = Callable[[AutofillProgress], None]


def build_candidate_list(
    word_source: WordSource,
    word_bank: Optional[WordBank] = None,
    config: Optional[AutofillConfig] = None,
    exclude: Iterable[str] = (),
) -> List[AutofillCandidate]:
    """Order candidate words by length bucket, word bank entries first."""

    config = config or AutofillConfig()
    seen: Set[str] = {clean_word(word) for word in exclude}
    candidates: List[AutofillCandidate] = []
    for length, limit in config.length_buckets:
        bucket: List[AutofillCandidate] = []
        if word_bank is not None:
            for entry in word_bank.entries_for_length(length):
                if entry.word in seen or not is_placeable(entry.word):
                    continue
                seen.add(entry.word)
                bucket.append(AutofillCandidate(word=entry.word, from_word_bank=True, clue=entry.clue or None))
        for raw in word_source.get_words(length=length):
            word = clean_word(raw)
            if len(word) != length or word in seen:
                continue
            seen.add(word)
            bucket.append(AutofillCandidate(word=word))
        candidates.extend(bucket[:limit])
    return candidates


def should_accept(placement: Placement, placed_count: int, min_bootstrap_words: int) -> bool:
    """Interlocking words are always accepted; floating ones only while bootstrapping."""

    return placement.intersections > 0 or placed_count < min_bootstrap_words


def iter_autofill(
    grid: CrosswordGrid,
    placed_words: List[PlacedWord],
    candidates: Sequence[AutofillCandidate],
    word_source: WordSource,
    word_bank: Optional[WordBank] = None,
    config: Optional[AutofillConfig] = None,
) -> Generator[AutofillProgress, None, List[PlacedWord]]:
    """Place candidates on ``grid`` in order, yielding after each one.

    ``grid`` and ``placed_words`` are mutated in place. The generator's
    return value is the list of words added during this pass. Exceptions
    from ``word_source.get_clue`` propagate after every earlier word has
    been committed.
    """

    config = config or AutofillConfig()
    window = min(len(candidates), config.progress_window_factor * config.max_words) or 1
    added: List[PlacedWord] = []

    for processed, candidate in enumerate(candidates, start=1):
        if len(added) >= config.max_words:
            break
        result = place_best_fit(candidate.word, grid, placed_words)
        accepted = isinstance(result, Placement) and should_accept(
            result, len(placed_words), config.min_bootstrap_words
        )
        if accepted:
            clue = candidate.clue or word_source.get_clue(candidate.word)
            number = len(placed_words) + 1
            grid.commit_placement(result.word, result.row, result.col, result.direction, number)
            placed = PlacedWord(
                word=result.word,
                clue=clue,
                row=result.row,
                col=result.col,
                direction=result.direction,
                number=number,
            )
            placed_words.append(placed)
            added.append(placed)
            if candidate.from_word_bank and word_bank is not None:
                word_bank.mark_used(candidate.word)
            LOGGER.info(
                "Autofill placed %s #%s at (%s,%s) %s with %s intersection(s)",
                placed.word,
                number,
                placed.row,
                placed.col,
                placed.direction.value,
                result.intersections,
            )
        else:
            LOGGER.debug("Autofill skipped %s", candidate.word)

        yield AutofillProgress(
            processed=processed,
            total=len(candidates),
            fraction=min(1.0, processed / window),
            placed_count=len(placed_words),
            word=candidate.word,
            accepted=accepted,
        )
    return added


def run_autofill(
    grid: CrosswordGrid,
    placed_words: Sequence[PlacedWord],
    word_source: WordSource,
    word_bank: Optional[WordBank] = None,
    max_words: Optional[int] = None,
    progress_callback: Optional[ProgressCallback] = None,
    config: Optional[AutofillConfig] = None,
) -> AutofillResult:
    """Run a full autofill pass on a copy of ``grid``.

    Failures from the word or clue source end the pass early; everything
    placed before the failure is kept and the failure is reported in
    :attr:`AutofillResult.error`.
    """

    config = config or AutofillConfig()
    if max_words is not None:
        config = AutofillConfig(
            max_words=max_words,
            min_bootstrap_words=config.min_bootstrap_words,
            length_buckets=config.length_buckets,
            progress_window_factor=config.progress_window_factor,
        )

    working_grid = grid.copy()
    working_words = list(placed_words)
    result = AutofillResult(grid=working_grid, placed_words=working_words)

    try:
        candidates = build_candidate_list(
            word_source,
            word_bank,
            config,
            exclude=[placed.word for placed in placed_words],
        )
    except Exception as exc:
        LOGGER.warning("Autofill could not load candidate words: %s", exc)
        result.error = f"Could not load candidate words: {exc}"
        return result
    LOGGER.info("Autofill starting with %s candidates (max %s words)", len(candidates), config.max_words)

    steps = iter_autofill(working_grid, working_words, candidates, word_source, word_bank, config)
    while True:
        try:
            progress = next(steps)
        except StopIteration:
            break
        except Exception as exc:
            LOGGER.warning("Autofill stopped after %s word(s): %s", len(result.added), exc)
            result.error = f"Autofill stopped early: {exc}"
            break
        if progress.accepted:
            result.added.append(working_words[-1])
        if progress_callback is not None:
            progress_callback(progress)

    LOGGER.info("Autofill finished: %s word(s) added, %s total", len(result.added), len(working_words))
    return result
