"""
Directional projection used by the tilt algorithm.

Each side maps a virtual (column, row), seen with that side at the top of the board, to the real cell.
"""

from enum import Enum


class Side(Enum):
    """
    The four edges a board can be tilted toward.

    The value holds (col0, row0, dcol, drow): the real cell of virtual (c, r) on a board of size ``n`` is
    ``(col0 * (n - 1) + c * drow + r * dcol, row0 * (n - 1) - c * dcol + r * drow)``.
    """

    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0: int, row0: int, dcol: int, drow: int):
        self.col0 = col0
        self.row0 = row0
        self.dcol = dcol
        self.drow = drow

    def column(self, col: int, row: int, size: int) -> int:
        """Real column of virtual (col, row) on a board of the given size."""
        return self.col0 * (size - 1) + col * self.drow + row * self.dcol

    def row(self, col: int, row: int, size: int) -> int:
        """Real row of virtual (col, row) on a board of the given size."""
        return self.row0 * (size - 1) - col * self.dcol + row * self.drow

    def project(self, col: int, row: int, size: int) -> tuple[int, int]:
        """Real (column, row) of virtual (col, row)."""
        return self.column(col, row, size), self.row(col, row, size)

    @classmethod
    def from_name(cls, name: str) -> 'Side':
        """
        Look up a side by compass name or arrow name.

        Parameters
        ----------
        name : str
            One of ``north/east/south/west`` or ``up/right/down/left``, case-insensitive.

        Returns
        -------
        Side
            The matching side.

        Raises
        ------
        ValueError
            If the name is unknown.
        """
        key = name.strip().lower()
        if key in _ARROWS:
            return _ARROWS[key]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f'Unknown side: {name!r}') from None


# ##: Arrow key aliases.
_ARROWS = {'up': Side.NORTH, 'right': Side.EAST, 'down': Side.SOUTH, 'left': Side.WEST}
