import io
import unittest
from contextlib import redirect_stdout

from game import (
    EMPTY,
    MAX_HEIGHT,
    MAX_WIDTH,
    Board,
    BoardSizeError,
    Tile,
    board_to_string,
    create_tiles,
    print_board,
)


class TestBoardConstruction(unittest.TestCase):
    def test_given_valid_size_when_creating_tiles_then_all_empty(self):
        tiles = create_tiles(4, 3)
        self.assertEqual(len(tiles), 12)
        self.assertTrue(all(t.is_empty for t in tiles))
        self.assertEqual(len(create_tiles(MAX_WIDTH, MAX_HEIGHT)), MAX_WIDTH * MAX_HEIGHT)
        self.assertEqual(len(create_tiles(1, 1)), 1)

    def test_given_bad_size_when_creating_tiles_then_fails_fast(self):
        for w, h in ((0, 4), (4, 0), (MAX_WIDTH + 1, 4), (4, MAX_HEIGHT + 1), (-1, 2),
                     (2.0, 2), ("4", 4), (True, 1)):
            with self.assertRaises(BoardSizeError):
                create_tiles(w, h)
        with self.assertRaises(ValueError):
            Board.empty(MAX_WIDTH + 1, 1)

    def test_given_grid_of_wrong_length_when_constructing_then_rejected(self):
        with self.assertRaises(BoardSizeError):
            Board(width=2, height=2, grid=(EMPTY,) * 3)
        with self.assertRaises(TypeError):
            Board(width=1, height=1, grid=(2,))

    def test_given_non_int_dimensions_when_constructing_then_rejected(self):
        with self.assertRaises(BoardSizeError):
            Board(width=2.0, height=2, grid=(EMPTY,) * 4)
        with self.assertRaises(BoardSizeError):
            Board(width=2, height=None, grid=(EMPTY,) * 2)

    def test_given_rows_when_building_then_cells_addressed_by_column_and_row(self):
        board = Board.from_rows([
            [2, 0, 8],
            [None, 4, 0],
        ])
        self.assertEqual((board.width, board.height), (3, 2))
        self.assertEqual(board.at(0, 0), Tile.occupied(2))
        self.assertEqual(board.at(2, 0), Tile.occupied(8))
        self.assertEqual(board.at(1, 1), Tile.occupied(4))
        self.assertTrue(board.at(0, 1).is_empty)
        self.assertEqual(board.index(2, 1), 5)
        self.assertEqual(board.values(), [[2, 0, 8], [0, 4, 0]])
        with self.assertRaises(IndexError):
            board.at(3, 0)

    def test_given_ragged_rows_when_building_then_rejected(self):
        with self.assertRaises(BoardSizeError):
            Board.from_rows([[2, 0], [2]])
        with self.assertRaises(BoardSizeError):
            Board.from_rows([])


class TestBoardQueries(unittest.TestCase):
    def setUp(self):
        self.board = Board.from_rows([
            [2, 0],
            [0, 4],
        ])

    def test_given_board_when_setting_tile_then_new_board_returned(self):
        updated = self.board.set_value(1, 0, 8)
        self.assertEqual(updated.at(1, 0).value, 8)
        self.assertTrue(self.board.at(1, 0).is_empty)
        cleared = updated.set_value(1, 0, 0)
        self.assertEqual(cleared, self.board)
        with self.assertRaises(IndexError):
            self.board.with_tile(2, 2, Tile.occupied(2))

    def test_coordinate_queries_and_totals(self):
        self.assertEqual(self.board.occupied_coords(), [(0, 0), (1, 1)])
        self.assertEqual(self.board.empty_coords(), [(1, 0), (0, 1)])
        self.assertEqual(list(self.board.coords()), [(0, 0), (1, 0), (0, 1), (1, 1)])
        self.assertEqual(self.board.total_value(), 6)
        self.assertEqual(self.board.max_value(), 4)
        self.assertEqual(Board.empty(3, 3).max_value(), 0)

    def test_boards_with_same_tiles_are_equal(self):
        self.assertEqual(self.board, Board.from_rows([[2, None], [0, 4]]))
        self.assertEqual(hash(self.board), hash(Board.from_rows([[2, 0], [0, 4]])))


class TestBoardText(unittest.TestCase):
    def test_given_small_board_when_rendering_then_dots_mark_empty_cells(self):
        board = Board.from_rows([[2, 0], [0, 4]])
        self.assertEqual(board_to_string(board), "2 .\n. 4\n")
        self.assertEqual(str(board), board_to_string(board))

    def test_given_wide_values_when_rendering_then_columns_aligned(self):
        board = Board.from_rows([[128, 2], [0, 4]])
        self.assertEqual(board_to_string(board), "128   2\n  .   4\n")

    def test_given_board_when_printing_then_text_written_to_stdout(self):
        board = Board.from_rows([[2, 0], [0, 4]])
        buf = io.StringIO()
        with redirect_stdout(buf):
            print_board(board)
        self.assertEqual(buf.getvalue(), "2 .\n. 4\n")
        other = io.StringIO()
        print_board(board, file=other)
        self.assertEqual(other.getvalue(), buf.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
