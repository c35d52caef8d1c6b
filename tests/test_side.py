from unittest import TestCase, main

from merge2048.core import Side


class TestSide(TestCase):
    def test_projection_is_bijection(self):
        """Every side maps the virtual grid onto every real cell exactly once."""
        for size in (1, 2, 4, 5):
            all_cells = {(c, r) for c in range(size) for r in range(size)}
            for side in Side:
                projected = {side.project(c, r, size) for c in range(size) for r in range(size)}
                self.assertEqual(projected, all_cells, msg=f'{side} size={size}')

    def test_north_is_identity(self):
        self.assertEqual(Side.NORTH.project(1, 2, 4), (1, 2))

    def test_far_edge_faces_the_side(self):
        """Virtual row size - 1 lies on the edge named by the side."""
        size = 4
        far = size - 1
        # ##>: Top row, right column, bottom row, left column.
        self.assertEqual({Side.NORTH.row(c, far, size) for c in range(size)}, {3})
        self.assertEqual({Side.EAST.column(c, far, size) for c in range(size)}, {3})
        self.assertEqual({Side.SOUTH.row(c, far, size) for c in range(size)}, {0})
        self.assertEqual({Side.WEST.column(c, far, size) for c in range(size)}, {0})

    def test_known_projections(self):
        self.assertEqual(Side.EAST.project(0, 3, 4), (3, 3))
        self.assertEqual(Side.SOUTH.project(0, 0, 4), (3, 3))
        self.assertEqual(Side.WEST.project(1, 3, 4), (0, 1))

    def test_from_name(self):
        self.assertIs(Side.from_name('up'), Side.NORTH)
        self.assertIs(Side.from_name('Left'), Side.WEST)
        self.assertIs(Side.from_name('south'), Side.SOUTH)
        self.assertIs(Side.from_name(' EAST '), Side.EAST)
        with self.assertRaises(ValueError):
            Side.from_name('diagonal')


if __name__ == '__main__':
    main()
