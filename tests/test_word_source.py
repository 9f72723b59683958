import unittest
from unittest.mock import MagicMock

import requests

from crossword_builder.core.exceptions import DictionaryApiError, InvalidWordError
from crossword_builder.data.normalization import clean_word, is_placeable, normalize_entry
from crossword_builder.data.word_source import BuiltinWordSource
from crossword_builder.io.dictionary_api import DictionaryApiClient, simplify_clue


def _response(status: int, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return response


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_accents_and_symbols(self) -> None:
        self.assertEqual(clean_word("Crème-brûlée 2"), "CREMEBRULEE")
        self.assertEqual(clean_word(""), "")

    def test_is_placeable(self) -> None:
        self.assertTrue(is_placeable("CAT"))
        self.assertFalse(is_placeable("cat"))
        self.assertFalse(is_placeable("ÉTÉ"))

    def test_normalize_entry_rejects_digits_and_symbols(self) -> None:
        self.assertEqual(normalize_entry("Crème brûlée"), "CREMEBRULEE")
        self.assertEqual(normalize_entry("ice-box"), "ICEBOX")
        for text in ("C4T", "CAT!", "O'NEIL"):
            with self.assertRaises(InvalidWordError):
                normalize_entry(text)


class BuiltinWordSourceTests(unittest.TestCase):
    def test_words_filtered_by_length(self) -> None:
        source = BuiltinWordSource()
        threes = source.get_words(length=3)
        self.assertIn("ACE", threes)
        self.assertTrue(all(len(w) == 3 for w in threes))
        self.assertTrue(source.get_words(length=5))
        self.assertGreater(len(source.get_words()), len(threes))

    def test_clue_from_table(self) -> None:
        self.assertEqual(BuiltinWordSource().get_clue("ace"), "Top card")

    def test_unknown_word_gets_placeholder(self) -> None:
        self.assertEqual(BuiltinWordSource(clues={}).get_clue("QUASAR"), "Clue for QUASAR")

    def test_client_used_for_unknown_words_and_cached(self) -> None:
        client = MagicMock()
        client.lookup_clue.return_value = "Distant bright object"
        source = BuiltinWordSource(clues={"ACE": "Top card"}, clue_client=client)
        self.assertEqual(source.get_clue("QUASAR"), "Distant bright object")
        self.assertEqual(source.get_clue("QUASAR"), "Distant bright object")
        self.assertEqual(source.get_clue("ACE"), "Top card")
        client.lookup_clue.assert_called_once_with("QUASAR")

    def test_client_failure_falls_back_to_placeholder(self) -> None:
        client = MagicMock()
        client.lookup_clue.side_effect = DictionaryApiError("offline")
        source = BuiltinWordSource(clues={}, clue_client=client)
        self.assertEqual(source.get_clue("QUASAR"), "Clue for QUASAR")


class DictionaryApiClientTests(unittest.TestCase):
    PAYLOAD = [
        {
            "word": "oak",
            "meanings": [
                {"definitions": [{"definition": "A tree (genus Quercus), bearing acorns; hardwood."}]}
            ],
        }
    ]

    def test_simplify_clue(self) -> None:
        self.assertEqual(simplify_clue("A tree (genus Quercus), bearing acorns; hardwood."), "tree")
        self.assertEqual(simplify_clue("The act of leaping"), "act of leaping")
        self.assertEqual(len(simplify_clue("x" * 80)), 50)

    def test_lookup_clue_parses_first_definition(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(200, self.PAYLOAD)
        client = DictionaryApiClient(api_base="https://dict.example/en/", session=session)
        self.assertEqual(client.lookup_clue("OAK"), "tree")
        url = session.get.call_args.args[0]
        self.assertEqual(url, "https://dict.example/en/oak")

    def test_malformed_payload_returns_none(self) -> None:
        session = MagicMock()
        client = DictionaryApiClient(api_base="https://dict.example/en", session=session)
        for payload in (["oak"], [{"meanings": ["tree"]}], [{"meanings": [{"definitions": 3}]}], {"title": "x"}):
            session.get.return_value = _response(200, payload)
            self.assertIsNone(client.lookup_clue("OAK"))

    def test_not_found_returns_none(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(404)
        client = DictionaryApiClient(api_base="https://dict.example/en", session=session)
        self.assertIsNone(client.lookup_clue("ZZZ"))

    def test_network_failure_raises_api_error(self) -> None:
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("down")
        client = DictionaryApiClient(api_base="https://dict.example/en", session=session)
        with self.assertRaises(DictionaryApiError):
            client.lookup_definition("OAK")

    def test_server_error_raises_api_error(self) -> None:
        session = MagicMock()
        session.get.return_value = _response(500)
        client = DictionaryApiClient(api_base="https://dict.example/en", session=session)
        with self.assertRaises(DictionaryApiError):
            client.lookup_definition("OAK")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
