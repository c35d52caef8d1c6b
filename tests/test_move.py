from unittest import TestCase, main

from merge2048.core import Board, Side, Tile, can_tilt, has_moves, illegal_sides, legal_sides


class TestGameMove(TestCase):
    def test_legal_sides(self):
        """
        A lone tile in the bottom-left corner can only go up or right.
        """
        board = Board(size=4)
        board.add_tile(Tile(2, 0, 0))

        self.assertEqual(legal_sides(board), [Side.NORTH, Side.EAST])
        self.assertEqual(illegal_sides(board), [Side.SOUTH, Side.WEST])

    def test_merge_makes_side_legal(self):
        board = Board(size=2)
        for tile in (Tile(2, 0, 0), Tile(2, 1, 0), Tile(4, 0, 1), Tile(8, 1, 1)):
            board.add_tile(tile)

        self.assertTrue(can_tilt(board, Side.WEST))
        self.assertTrue(can_tilt(board, Side.EAST))
        self.assertFalse(can_tilt(board, Side.NORTH))
        self.assertFalse(can_tilt(board, Side.SOUTH))

    def test_can_tilt_does_not_mutate(self):
        board = Board(size=4)
        board.add_tile(Tile(2, 0, 0))
        board.add_tile(Tile(2, 3, 0))
        before = board.values()

        for side in Side:
            can_tilt(board, side)

        self.assertTrue((board.values() == before).all())
        self.assertEqual(board.score, 0)

    def test_has_moves(self):
        """Empty cells keep every side open, even when the tilt itself would be blocked."""
        board = Board(size=4)
        self.assertTrue(all(has_moves(board, side) for side in Side))

        board.add_tile(Tile(2, 0, 0))
        self.assertTrue(has_moves(board, Side.WEST))
        self.assertFalse(can_tilt(board, Side.WEST))

    def test_blocked_board(self):
        board = Board(size=2)
        for tile in (Tile(2, 0, 0), Tile(4, 1, 0), Tile(4, 0, 1), Tile(2, 1, 1)):
            board.add_tile(tile)

        self.assertEqual(legal_sides(board), [])
        self.assertFalse(any(has_moves(board, side) for side in Side))


if __name__ == '__main__':
    main()
