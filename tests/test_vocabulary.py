import tempfile
import unittest
from pathlib import Path

from crisscross.core.exceptions import VocabularyLoadError
from crisscross.data.vocabulary import (VocabularyConfig, VocabularyEntry, clean_words,
                                        load_words, read_vocabulary, sort_words_by_length)


class VocabularyTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, content: str) -> Path:
        path = self.tmpdir / "vocabulary.csv"
        path.write_text(content, encoding="utf-8")
        return path

    def test_reads_words_and_hints(self) -> None:
        path = self._write("word,hint\napple,Fruit\nsky,Blue\n")
        entries = read_vocabulary(VocabularyConfig(path=path))
        self.assertEqual(
            entries,
            [VocabularyEntry(word="apple", hint="Fruit"), VocabularyEntry(word="sky", hint="Blue")],
        )

    def test_hint_column_is_optional(self) -> None:
        path = self._write("Word\nÄrger\n")
        entries = read_vocabulary(VocabularyConfig(path=path))
        self.assertEqual(entries, [VocabularyEntry(word="Ärger", hint="")])

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(VocabularyLoadError):
            read_vocabulary(VocabularyConfig(path=self.tmpdir / "nonexistent.csv"))

    def test_malformed_row_raises(self) -> None:
        path = self._write("word,hint\napple,Fruit\nsky")
        with self.assertRaises(VocabularyLoadError):
            read_vocabulary(VocabularyConfig(path=path))

    def test_missing_word_column_raises(self) -> None:
        path = self._write("term,hint\napple,Fruit\n")
        with self.assertRaises(VocabularyLoadError):
            read_vocabulary(VocabularyConfig(path=path))

    def test_clean_words_strips_and_deduplicates(self) -> None:
        entries = [
            VocabularyEntry(word="  Apple "),
            VocabularyEntry(word="   "),
            VocabularyEntry(word="apple"),
            VocabularyEntry(word="Sky"),
        ]
        self.assertEqual(clean_words(entries), ["Apple", "apple", "Sky"])
        self.assertEqual(clean_words(entries, lowercase=True), ["apple", "sky"])

    def test_sort_words_by_length_counts_characters(self) -> None:
        words = ["zoo", "österreich", "ärger", "überraschung"]
        self.assertEqual(
            sort_words_by_length(words),
            ["überraschung", "österreich", "ärger", "zoo"],
        )
        self.assertEqual(words[0], "zoo")

    def test_sort_keeps_order_of_equal_lengths(self) -> None:
        self.assertEqual(sort_words_by_length(["cat", "planet", "car"]), ["planet", "cat", "car"])

    def test_load_words_prepares_search_order(self) -> None:
        path = self._write("word,hint\nsky,Blue\n apple ,Fruit\nsky,Again\n")
        self.assertEqual(load_words(VocabularyConfig(path=path)), ["apple", "sky"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
