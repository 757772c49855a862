import unittest

from crisscross.core.exceptions import ConfigurationError
from crisscross.data.pool import WordPool


class WordPoolTests(unittest.TestCase):
    def test_groups_words_by_character_length(self) -> None:
        pool = WordPool.load(["straße", "über", "zoo", "tür"])
        self.assertEqual(pool.words_of_length(4), ("über",))
        self.assertEqual(pool.words_of_length(3), ("zoo", "tür"))
        self.assertEqual(pool.words_of_length(6), ("straße",))
        self.assertEqual(pool.words_of_length(9), ())
        self.assertEqual(pool.lengths, [3, 4, 6])

    def test_keeps_input_order(self) -> None:
        words = ["planet", "axe", "tenor"]
        pool = WordPool(words)
        self.assertEqual(list(pool), words)
        self.assertEqual(pool[0], "planet")
        self.assertEqual(len(pool), 3)
        words.append("extra")
        self.assertEqual(len(pool), 3)

    def test_exists(self) -> None:
        pool = WordPool(["cat", "car"])
        self.assertTrue(pool.exists("cat"))
        self.assertFalse(pool.exists("dog"))
        self.assertIn("car", pool)

    def test_empty_pool_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            WordPool([])

    def test_empty_word_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            WordPool(["cat", ""])

    def test_duplicates_are_kept_and_logged(self) -> None:
        with self.assertLogs("crisscross.data.pool", level="WARNING"):
            pool = WordPool(["cat", "cat"])
        self.assertEqual(len(pool), 2)
        self.assertEqual(pool.words_of_length(3), ("cat", "cat"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
