"""Immutable tile placed on a 2048 board."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """
    A numbered piece sitting at (column, row).

    Column 0 is the leftmost column and row 0 the bottom row. Moving or merging never mutates a tile,
    a new one is created at the destination instead.

    Attributes
    ----------
    value : int
        Power of two, at least 2.
    column : int
        Column of the cell holding the tile.
    row : int
        Row of the cell holding the tile.
    """

    value: int
    column: int
    row: int

    def __post_init__(self):
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(f'Tile value must be a power of two >= 2, got {self.value}')
        if self.column < 0 or self.row < 0:
            raise ValueError(f'Tile coordinates must be non-negative, got ({self.column}, {self.row})')

    @property
    def position(self) -> tuple[int, int]:
        """Cell of the tile as (column, row)."""
        return self.column, self.row

    def move(self, column: int, row: int) -> 'Tile':
        """Return the same value placed at (column, row)."""
        return Tile(self.value, column, row)

    def merge(self, column: int, row: int, other: 'Tile') -> 'Tile':
        """
        Combine this tile with an equal one into a single tile at (column, row).

        Parameters
        ----------
        column : int
            Destination column.
        row : int
            Destination row.
        other : Tile
            Tile merged into this one.

        Returns
        -------
        Tile
            New tile carrying the summed value.

        Raises
        ------
        ValueError
            If both values differ.
        """
        if other.value != self.value:
            raise ValueError(f'Cannot merge tiles of values {self.value} and {other.value}')
        return Tile(self.value + other.value, column, row)
