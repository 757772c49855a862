import io
import unittest

from crisscross.core.models import Cell
from crisscross.engine.board import Board
from crisscross.engine.search import BacktrackingSearch
from crisscross.utils.pretty import (cell_symbol, format_grid, pretty_print_grid,
                                     print_board_summary)


class CellSymbolTests(unittest.TestCase):
    def test_symbols(self) -> None:
        self.assertEqual(cell_symbol(Cell(character="ä")), "Ä")
        self.assertEqual(cell_symbol(Cell()), ".")
        self.assertEqual(cell_symbol(Cell(lock_count=1)), ".")
        self.assertEqual(cell_symbol(Cell(lock_count=1), show_locks=True), "#")


class BoardRenderingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.from_size(9, 9, total_words=2)
        self.result = BacktrackingSearch(self.board, ["cat", "car"]).run()

    def test_format_grid_marks_locks_on_request(self) -> None:
        plain = format_grid(self.board).splitlines()
        locked = format_grid(self.board, show_locks=True).splitlines()
        self.assertEqual(len(plain), 2 + self.board.height)
        self.assertIn(" C  A  T", plain[2 + 4])
        self.assertNotIn("#", plain[2 + 4])
        self.assertEqual(locked[2 + 4].count("#"), 2)

    def test_pretty_print_grid_writes_label_first(self) -> None:
        stream = io.StringIO()
        pretty_print_grid(self.board, label="Board", stream=stream)
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "Board")
        self.assertEqual(lines[1:], format_grid(self.board).splitlines())

    def test_summary_lists_placed_words_with_extent(self) -> None:
        stream = io.StringIO()
        print_board_summary(self.board, self.result, stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Best board ---", output)
        self.assertIn("cat (3,4)-(5,4) ACROSS", output)
        self.assertIn("car (4,3)-(4,5) DOWN", output)
        self.assertIn("Placed:        2/2", output)
        self.assertIn("Distribution:  3:2", output)
        self.assertIn("Outcome:       COMPLETED", output)
        self.assertNotIn("WARNING", output)

    def test_summary_without_best_snapshot(self) -> None:
        stream = io.StringIO()
        print_board_summary(Board.from_size(3, 3, total_words=1), stream=stream)
        self.assertEqual(stream.getvalue(), "No words could be placed.\n")

    def test_summary_warns_on_partial_board(self) -> None:
        board = Board.from_size(5, 5, total_words=2)
        result = BacktrackingSearch(board, ["cat", "dog"]).run()
        stream = io.StringIO()
        print_board_summary(board, result, stream=stream)
        self.assertIn("WARNING: not all words were placed", stream.getvalue())
        self.assertIn("cat (1,2)-(3,2) ACROSS", stream.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
