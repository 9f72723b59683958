import io
import json
import tempfile
import unittest
from pathlib import Path

from crossword_builder.cli import main, parse_word_entry
from crossword_builder.core.constants import Direction, SymmetryMode
from crossword_builder.core.exceptions import GridSizeError, InvalidWordError
from crossword_builder.data.word_bank import WordBank
from crossword_builder.data.word_source import BuiltinWordSource
from crossword_builder.engine.session import CrosswordSession, SessionConfig
from crossword_builder.utils.pretty import format_clue_lists, format_grid, print_puzzle


class SessionEditingTests(unittest.TestCase):
    def test_grid_size_is_bounded(self) -> None:
        for size in (9, 22):
            with self.assertRaises(GridSizeError):
                CrosswordSession(SessionConfig(grid_size=size))
        session = CrosswordSession()
        with self.assertRaises(GridSizeError):
            session.resize(5)

    def test_add_word_numbers_by_commit_order(self) -> None:
        session = CrosswordSession()
        first = session.add_word("cat", "Pet")
        second = session.add_word("ACE", "Top card")
        self.assertEqual((first.row, first.col, first.direction), (7, 6, Direction.HORIZONTAL))
        self.assertEqual(first.number, 1)
        self.assertEqual(second.number, 2)
        self.assertEqual([w.word for w in session.user_words], ["CAT", "ACE"])

    def test_add_word_requires_word_and_clue(self) -> None:
        session = CrosswordSession()
        with self.assertRaises(InvalidWordError):
            session.add_word("CAT", "  ")
        with self.assertRaises(InvalidWordError):
            session.add_word("123", "Digits")

    def test_add_word_rejects_non_letters(self) -> None:
        session = CrosswordSession()
        with self.assertRaises(InvalidWordError):
            session.add_word("C4T", "Pet")
        self.assertEqual(session.placed_words, [])
        placed = session.add_word("ice-box", "Old fridge")
        self.assertEqual(placed.word, "ICEBOX")

    def test_string_symmetry_in_config(self) -> None:
        session = CrosswordSession(SessionConfig(grid_size=10, symmetry="mirror"))
        session.toggle_block(0, 0)
        self.assertEqual(session.symmetry, SymmetryMode.MIRROR)
        self.assertEqual(session.to_jsonable()["symmetry"], "mirror")
        stream = io.StringIO()
        print_puzzle(session, stream=stream)
        self.assertIn("Symmetry:      mirror", stream.getvalue())
        session.symmetry = "none"
        self.assertIs(session.symmetry, SymmetryMode.NONE)

    def test_unplaceable_word_returns_none(self) -> None:
        session = CrosswordSession(SessionConfig(grid_size=10))
        self.assertIsNone(session.add_word("ABCDEFGHIJKL", "Too long"))
        self.assertEqual(session.placed_words, [])
        self.assertFalse(session.can_undo)

    def test_toggle_block_uses_session_symmetry(self) -> None:
        session = CrosswordSession(SessionConfig(grid_size=10, symmetry=SymmetryMode.MIRROR))
        session.toggle_block(0, 0)
        self.assertEqual(sorted(session.grid.blocked_cells()), [(0, 0), (0, 9), (9, 0), (9, 9)])

    def test_blocked_word_is_dropped_from_clues(self) -> None:
        session = CrosswordSession()
        session.add_word("CAT", "Pet")
        session.add_word("ACE", "Top card")
        session.symmetry = SymmetryMode.NONE
        session.toggle_block(7, 7)
        self.assertEqual([w.word for w in session.placed_words], ["ACE"])
        self.assertEqual(session.grid.cell_at(7, 8).letter, "")
        self.assertEqual(session.grid.cell_at(7, 6).letter, "C")
        lists = session.clue_lists()
        self.assertEqual(lists.across, [])
        self.assertEqual([(c.number, c.clue) for c in lists.down], [(1, "Top card")])

    def test_undo_redo(self) -> None:
        session = CrosswordSession()
        session.add_word("CAT", "Pet")
        session.add_word("ACE", "Top card")
        self.assertTrue(session.undo())
        self.assertEqual([w.word for w in session.placed_words], ["CAT"])
        self.assertEqual(session.grid.letter_count(), 3)
        self.assertTrue(session.undo())
        self.assertEqual(session.placed_words, [])
        self.assertFalse(session.undo())
        self.assertTrue(session.redo())
        self.assertEqual([w.word for w in session.placed_words], ["CAT"])
        session.add_word("TOE", "Foot digit")
        self.assertFalse(session.redo())

    def test_history_limit(self) -> None:
        session = CrosswordSession(SessionConfig(history_limit=2))
        for word in ("CAT", "ACE", "TOE"):
            session.add_word(word, "clue")
        self.assertTrue(session.undo())
        self.assertFalse(session.undo())

    def test_clear_and_resize(self) -> None:
        session = CrosswordSession()
        session.add_word("CAT", "Pet")
        session.clear()
        self.assertEqual(session.placed_words, [])
        self.assertEqual(session.grid.letter_count(), 0)
        session.resize(12)
        self.assertEqual(session.size, 12)
        self.assertFalse(session.can_undo)

    def test_autofill_updates_state_and_bank(self) -> None:
        session = CrosswordSession()
        bank = WordBank()
        bank.add_entry("PIANO", "Keyboard instrument", weight=10)
        result = session.autofill(BuiltinWordSource(), bank, max_words=5)
        self.assertIsNone(result.error)
        self.assertEqual(session.placed_words[0].word, "PIANO")
        self.assertEqual(len(session.placed_words), 5)
        self.assertEqual(bank.find("PIANO").times_used, 1)
        self.assertTrue(session.undo())
        self.assertEqual(session.placed_words, [])


class RenderingTests(unittest.TestCase):
    def test_format_grid_and_clues(self) -> None:
        session = CrosswordSession(SessionConfig(grid_size=10, symmetry=SymmetryMode.NONE))
        session.add_word("CAT", "Pet")
        session.toggle_block(0, 0)
        rendered = format_grid(session.grid)
        self.assertIn(" C  A  T", rendered)
        self.assertIn("#", rendered)
        numbered = format_grid(session.grid, show_numbers=True)
        self.assertIn(" 1  A  T", numbered)
        clues = format_clue_lists(session.clue_lists())
        self.assertIn("1. Pet (3)", clues)
        self.assertIn("Down\n  (none)", clues)

    def test_print_puzzle_stats(self) -> None:
        session = CrosswordSession()
        session.add_word("CAT", "Pet")
        stream = io.StringIO()
        print_puzzle(session, stream=stream)
        output = stream.getvalue()
        self.assertIn("Size:          15 x 15", output)
        self.assertIn("Distribution:  3:1", output)


class CliTests(unittest.TestCase):
    def test_parse_word_entry(self) -> None:
        self.assertEqual(parse_word_entry("ZEUS:King of gods"), ("ZEUS", "King of gods"))
        self.assertEqual(parse_word_entry("ares"), ("ares", ""))

    def test_cli_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            bank_path = Path(tmpdir) / "bank.json"
            bank = WordBank()
            bank.add_entry("OCEAN", "Vast sea", weight=9)
            bank_path.write_text(json.dumps(bank.to_jsonable()), encoding="utf-8")

            code = main([
                "--size", "11",
                "--symmetry", "none",
                "--block", "0,0",
                "--words", "CAT:Pet", "ACE",
                "--autofill",
                "--max-words", "3",
                "--word-bank", str(bank_path),
                "--output", str(output),
                "--log-level", "WARNING",
            ])

            self.assertEqual(code, 0)
            doc = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(doc["size"], 11)
            self.assertTrue(doc["grid"][0][0]["blocked"])
            words = [w["word"] for w in doc["placed_words"]]
            self.assertEqual(words[:2], ["CAT", "ACE"])
            self.assertIn("OCEAN", words)
            self.assertEqual(doc["placed_words"][1]["clue"], "Top card")
            saved = json.loads(bank_path.read_text(encoding="utf-8"))
            self.assertEqual(saved["entries"][0]["times_used"], 1)

    def test_cli_reports_unplaced_words(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            code = main(["--size", "10", "--words", "ABCDEFGHIJKLM", "--output", str(output), "--log-level", "ERROR"])
            self.assertEqual(code, 1)
            doc = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual(doc["unplaced"], ["ABCDEFGHIJKLM"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
