"""
Move analysis for the 2048 board, providing read-only checks of which sides a board can be tilted toward.
"""

from typing import TYPE_CHECKING

from .side import Side

if TYPE_CHECKING:
    from .board import Board


def _virtual_values(board: 'Board', side: Side, col: int) -> list[int]:
    """
    Read one virtual column, near edge first.

    Parameters
    ----------
    board : Board
        The board to read.
    side : Side
        Side oriented toward the top.
    col : int
        Virtual column index.

    Returns
    -------
    list[int]
        Tile values, 0 for empty cells.
    """
    size = board.size
    values = []
    for row in range(size):
        tile = board.tile(*side.project(col, row, size))
        values.append(0 if tile is None else tile.value)
    return values


def has_moves(board: 'Board', side: Side) -> bool:
    """
    Check if the board is still open toward a side.

    Parameters
    ----------
    board : Board
        The board to check.
    side : Side
        Side oriented toward the top.

    Returns
    -------
    bool
        True if some virtual column holds an empty cell or two adjacent equal tiles.

    Notes
    -----
    - This is the game-over scan: an empty board is still open.
    - Use `can_tilt` to know if a tilt would really change the board.
    """
    for col in range(board.size):
        values = _virtual_values(board, side, col)
        if 0 in values:
            return True
        if any(near == far for near, far in zip(values[:-1], values[1:])):
            return True
    return False


def can_tilt(board: 'Board', side: Side) -> bool:
    """
    Check if tilting toward a side would change the board, without tilting.

    Parameters
    ----------
    board : Board
        The board to check.
    side : Side
        Side to tilt toward.

    Returns
    -------
    bool
        True if a tile has an empty cell ahead of it, or two adjacent tiles are equal.
    """
    for col in range(board.size):
        values = _virtual_values(board, side, col)
        for near, far in zip(values[:-1], values[1:]):
            # ##>: Slide into an empty cell, or merge with an equal neighbour.
            if near != 0 and (far == 0 or far == near):
                return True
    return False


def legal_sides(board: 'Board') -> list[Side]:
    """
    Sides the board can be tilted toward.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    list[Side]
        Sides whose tilt changes the board, in declaration order.
    """
    return [side for side in Side if can_tilt(board, side)]


def illegal_sides(board: 'Board') -> list[Side]:
    """Sides whose tilt would leave the board unchanged."""
    return [side for side in Side if not can_tilt(board, side)]
