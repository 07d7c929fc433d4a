import unittest

from game import (
    Board,
    Color,
    Direction,
    Tile,
    InvalidCoords,
    EmptyTile,
    NoMoreColors,
    TileNotEmpty,
)


def red_pair_board():
    # 3x3 with Red sources at (0,0) and (0,2)
    board = Board(3, 3)
    board.place_source(0, 0, 0, 2)
    return board


class TestCursorMovement(unittest.TestCase):
    def test_given_open_directions_when_moving_then_one_coordinate_changes_by_one(self):
        board = Board(3, 3)
        board.cursor = (1, 1)
        for d, expected in [
            (Direction.NORTH, (0, 1)),
            (Direction.SOUTH, (1, 1)),
            (Direction.WEST, (1, 0)),
            (Direction.EAST, (1, 1)),
        ]:
            board.move(d)
            self.assertEqual(board.cursor, expected)

    def test_given_cursor_at_edges_when_moving_outward_then_no_op(self):
        board = red_pair_board()
        board.grab()
        self.assertTrue(board.grabbed)
        board.move(Direction.NORTH)
        board.move(Direction.WEST)
        self.assertEqual(board.cursor, (0, 0))
        self.assertTrue(board.grabbed)

        board2 = Board(2, 2)
        board2.cursor = (1, 1)
        board2.move(Direction.SOUTH)
        board2.move(Direction.EAST)
        self.assertEqual(board2.cursor, (1, 1))
        self.assertFalse(board2.grabbed)

    def test_given_empty_or_wall_tile_when_grab_then_flag_unchanged(self):
        board = Board(3, 3)
        board.grab()
        self.assertFalse(board.grabbed)
        board.place_wall(0, 1)
        board.move(Direction.EAST)
        self.assertEqual(board.cursor, (0, 1))
        board.grab()
        self.assertFalse(board.grabbed)

    def test_given_colored_tile_when_grab_twice_then_flag_toggles_back(self):
        board = red_pair_board()
        board.grab()
        self.assertTrue(board.grabbed)
        board.grab()
        self.assertFalse(board.grabbed)


class TestPlacement(unittest.TestCase):
    def test_given_nine_pairs_when_placing_then_palette_order_and_ninth_fails(self):
        board = Board(2, 9)
        colors = [board.place_source(r, 0, r, 1) for r in range(8)]
        self.assertEqual(colors, [
            Color.RED, Color.ORANGE, Color.BLUE, Color.PINK,
            Color.YELLOW, Color.GREEN, Color.PURPLE, Color.GRAY,
        ])
        for r, color in enumerate(colors):
            self.assertEqual(board.tile_at(r, 0), Tile.source(color))
            self.assertEqual(board.tile_at(r, 1), Tile.source(color))
        with self.assertRaises(NoMoreColors):
            board.place_source(8, 0, 8, 1)
        self.assertTrue(board.tile_at(8, 0).is_empty())
        self.assertTrue(board.tile_at(8, 1).is_empty())

    def test_given_out_of_bounds_coords_when_placing_then_invalid_coords(self):
        board = Board(3, 2)
        with self.assertRaises(InvalidCoords):
            board.place_source(2, 0, 0, 1)  # row == height
        with self.assertRaises(InvalidCoords):
            board.place_source(0, 0, 0, 3)  # col == width
        with self.assertRaises(InvalidCoords):
            board.place_wall(0, 3)
        with self.assertRaises(InvalidCoords):
            board.place_wall(5, 0)
        self.assertEqual(board.next_color, Color.RED)

    def test_given_occupied_cell_when_placing_then_tile_not_empty_and_grid_unchanged(self):
        board = Board(3, 3)
        board.place_wall(1, 1)
        with self.assertRaises(TileNotEmpty):
            board.place_source(0, 0, 1, 1)
        self.assertTrue(board.tile_at(0, 0).is_empty())
        self.assertEqual(board.next_color, Color.RED)
        with self.assertRaises(TileNotEmpty):
            board.place_wall(1, 1)
        with self.assertRaises(TileNotEmpty):
            board.place_source(2, 2, 2, 2)

    def test_given_non_positive_size_when_constructing_then_invalid_coords(self):
        with self.assertRaises(InvalidCoords):
            Board(0, 3)
        with self.assertRaises(InvalidCoords):
            Board(3, -1)


class TestDragAndPaint(unittest.TestCase):
    def test_given_red_pair_when_dragging_across_then_flow_painted_and_solved(self):
        board = red_pair_board()
        self.assertFalse(board.is_solved())
        board.grab()
        board.move(Direction.EAST)
        self.assertEqual(board.tile_at(0, 1), Tile.flow(Color.RED))
        self.assertEqual(board.cursor, (0, 1))
        self.assertTrue(board.grabbed)

        board.move(Direction.EAST)
        self.assertEqual(board.cursor, (0, 2))
        self.assertFalse(board.grabbed)
        self.assertEqual(board.tile_at(0, 2), Tile.source(Color.RED))
        self.assertTrue(board.is_solved())

    def test_given_solved_path_when_reentering_own_flow_then_retracted_and_drag_ends(self):
        board = red_pair_board()
        board.grab()
        board.move(Direction.EAST)
        board.move(Direction.EAST)

        # Stationary double grab on the flow changes nothing
        board.move(Direction.WEST)
        board.grab()
        board.grab()
        self.assertFalse(board.grabbed)
        self.assertEqual(board.tile_at(0, 1), Tile.flow(Color.RED))

        board.move(Direction.EAST)
        board.grab()
        self.assertTrue(board.grabbed)
        board.move(Direction.WEST)
        self.assertFalse(board.grabbed)
        self.assertTrue(board.tile_at(0, 1).is_empty())
        self.assertEqual(board.tile_at(0, 0), Tile.source(Color.RED))
        self.assertEqual(board.tile_at(0, 2), Tile.source(Color.RED))
        self.assertFalse(board.is_solved())

    def test_given_other_color_flow_when_painting_over_then_that_color_retracted(self):
        board = Board(3, 3)
        board.place_source(0, 0, 2, 0)  # Red
        board.place_source(0, 2, 2, 2)  # Orange
        board.grab()
        board.move(Direction.EAST)
        board.move(Direction.SOUTH)
        self.assertEqual(board.tile_at(1, 1), Tile.flow(Color.RED))
        board.grab()
        board.move(Direction.NORTH)
        board.move(Direction.EAST)
        board.grab()
        self.assertTrue(board.grabbed)
        board.move(Direction.SOUTH)
        board.move(Direction.WEST)
        self.assertEqual(board.tile_at(1, 1), Tile.flow(Color.ORANGE))
        self.assertTrue(board.tile_at(0, 1).is_empty())
        self.assertEqual(board.tile_at(1, 2), Tile.flow(Color.ORANGE))
        self.assertTrue(board.grabbed)

    def test_given_drag_into_other_source_when_moving_then_tile_not_empty(self):
        board = Board(3, 3)
        board.place_source(0, 0, 0, 2)  # Red
        board.place_source(1, 0, 2, 2)  # Orange
        board.grab()
        with self.assertRaises(TileNotEmpty):
            board.move(Direction.SOUTH)
        self.assertEqual(board.cursor, (1, 0))
        self.assertEqual(board.tile_at(1, 0), Tile.source(Color.ORANGE))
        board.release()
        self.assertFalse(board.grabbed)

    def test_given_grabbed_on_empty_tile_when_moving_then_empty_tile_error(self):
        board = Board(3, 3)
        board.grabbed = True
        with self.assertRaises(EmptyTile):
            board.move(Direction.EAST)

    def test_given_wall_when_moving_with_and_without_drag_then_refused_only_while_dragging(self):
        board = Board(3, 3)
        board.place_wall(1, 1)
        board.place_source(1, 0, 2, 2)
        board.move(Direction.SOUTH)
        board.grab()
        self.assertTrue(board.grabbed)
        board.move(Direction.EAST)
        self.assertEqual(board.cursor, (1, 0))
        self.assertTrue(board.grabbed)
        self.assertTrue(board.tile_at(1, 1).is_wall())

        board.grab()
        board.move(Direction.EAST)
        self.assertEqual(board.cursor, (1, 1))
        self.assertTrue(board.tile_at(1, 1).is_wall())


class TestConnectivity(unittest.TestCase):
    def test_given_board_without_sources_when_checking_then_solved(self):
        self.assertTrue(Board(4, 4).is_solved())

    def test_given_uncolored_or_outside_cell_when_connected_then_errors(self):
        board = Board(3, 3)
        board.place_wall(1, 1)
        with self.assertRaises(EmptyTile):
            board.connected(0, 0)
        with self.assertRaises(EmptyTile):
            board.connected(1, 1)
        with self.assertRaises(InvalidCoords):
            board.connected(3, 0)

    def test_given_adjacent_sources_when_checking_then_locally_connected(self):
        # Adjacency only: touching endpoints count as connected
        board = Board(5, 1)
        board.place_source(0, 0, 0, 1)
        self.assertTrue(board.connected(0, 0))
        self.assertTrue(board.is_solved())

    def test_given_non_square_board_when_checking_edges_then_live_bounds_used(self):
        board = Board(6, 2)
        board.place_source(1, 5, 0, 0)
        self.assertFalse(board.connected(1, 5))
        board.cursor = (0, 0)
        board.grab()
        for _ in range(5):
            board.move(Direction.EAST)
        board.move(Direction.SOUTH)
        self.assertFalse(board.grabbed)
        self.assertTrue(board.connected(1, 5))
        self.assertTrue(board.is_solved())


if __name__ == '__main__':
    unittest.main(verbosity=2)
