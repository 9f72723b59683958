"""Command-line interface for the crossword builder."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, SymmetryMode
from .core.exceptions import CrosswordError
from .data.word_bank import WordBank
from .data.word_source import BuiltinWordSource
from .engine.autofill import AutofillProgress
from .engine.session import CrosswordSession, SessionConfig
from .io.dictionary_api import DictionaryApiClient
from .io.word_bank_store import WordBankStore
from .utils.logger import configure_logging, get_logger
from .utils.pretty import print_puzzle


LOGGER = get_logger(__name__)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def parse_word_entry(entry: str) -> Tuple[str, str]:
    """Split ``WORD:Clue``; a bare word gets an empty clue."""
    word, _, clue = entry.partition(":")
    return word.strip(), clue.strip()


def parse_cell(text: str) -> Tuple[int, int]:
    try:
        row_text, col_text = text.split(",")
        return int(row_text), int(col_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a crossword by greedy word placement",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid side length ({MIN_GRID_SIZE}-{MAX_GRID_SIZE})",
    )
    parser.add_argument(
        "--symmetry",
        type=str,
        choices=[mode.value for mode in SymmetryMode],
        default=SymmetryMode.ROTATIONAL.value,
        help="How block toggles propagate",
    )
    parser.add_argument(
        "--block",
        type=parse_cell,
        action="append",
        default=[],
        metavar="ROW,COL",
        help="Toggle a block (repeatable, applied before words)",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--autofill", action="store_true", help="Fill remaining space from the word source")
    parser.add_argument("--max-words", type=int, default=None, help="Maximum words added by autofill")
    parser.add_argument("--word-bank", type=Path, help="Personal word bank JSON (read and updated)")
    parser.add_argument(
        "--online-clues",
        action="store_true",
        help="Look up clues for unknown words in the online dictionary",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _log_progress(progress: AutofillProgress) -> None:
    LOGGER.debug(
        "Autofill %3.0f%% (%s/%s) %s %s",
        progress.fraction * 100,
        progress.processed,
        progress.total,
        progress.word,
        "placed" if progress.accepted else "skipped",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO) if args.log_level else None
    configure_logging(level)

    if not MIN_GRID_SIZE <= args.size <= MAX_GRID_SIZE:
        parser.error(f"--size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}")
    if args.max_words is not None and args.max_words < 1:
        parser.error("--max-words must be positive")

    entries: List[str] = []
    if args.words:
        entries.extend(args.words)
    if args.words_file:
        entries.extend(parse_words_file(args.words_file))

    session = CrosswordSession(
        SessionConfig(grid_size=args.size, symmetry=SymmetryMode(args.symmetry))
    )
    for row, col in args.block:
        if not session.grid.contains(row, col):
            parser.error(f"--block {row},{col} is outside the {args.size}x{args.size} grid")
        session.toggle_block(row, col)

    clue_client = DictionaryApiClient() if args.online_clues else None
    word_source = BuiltinWordSource(clue_client=clue_client)

    failed: List[str] = []
    for entry in entries:
        word, clue = parse_word_entry(entry)
        try:
            placed = session.add_word(word, clue or word_source.get_clue(word))
        except CrosswordError as exc:
            LOGGER.warning("Skipping %r: %s", entry, exc)
            failed.append(word)
            continue
        if placed is None:
            LOGGER.warning("Couldn't place %s; try a different word or clear some space", word)
            failed.append(word)

    store: Optional[WordBankStore] = None
    bank: Optional[WordBank] = None
    if args.word_bank:
        store = WordBankStore(args.word_bank)
        bank = store.load()

    if args.autofill:
        result = session.autofill(word_source, bank, max_words=args.max_words, progress_callback=_log_progress)
        if result.error:
            LOGGER.warning("Autofill incomplete: %s", result.error)
        if store is not None and bank is not None:
            store.save(bank)

    if args.output:
        payload = session.to_jsonable()
        payload["unplaced"] = failed
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle written to %s", args.output)
    else:
        print_puzzle(session)
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
