import unittest

from game import (
    Board,
    Color,
    Direction,
    Tile,
    build_board,
    parse_level,
)


class TestFlowpaintBasics(unittest.TestCase):
    def test_new_board_is_empty_and_solved(self):
        board = Board(3, 3)
        self.assertTrue(all(t.is_empty() for row in board.grid.rows() for t in row))
        self.assertEqual(board.cursor, (0, 0))
        self.assertFalse(board.grabbed)
        self.assertTrue(board.is_solved())

    def test_level_round_trip_to_win(self):
        board = build_board(parse_level("4 1\n0 0 3 0\n"))
        board.grab()
        board.move(Direction.EAST)
        self.assertFalse(board.is_solved())
        board.move(Direction.EAST)
        board.move(Direction.EAST)
        self.assertEqual(board.tile_at(0, 1), Tile.flow(Color.RED))
        self.assertEqual(board.tile_at(0, 2), Tile.flow(Color.RED))
        self.assertFalse(board.grabbed)
        self.assertTrue(board.is_solved())

    def test_walls_do_not_count_toward_connection(self):
        board = build_board(parse_level("3 1\n0 0 2 0\n1 0\n"))
        self.assertFalse(board.is_solved())
        board.grab()
        board.move(Direction.EAST)
        self.assertEqual(board.cursor, (0, 0))
        self.assertTrue(board.grabbed)


if __name__ == '__main__':
    unittest.main(verbosity=2)
