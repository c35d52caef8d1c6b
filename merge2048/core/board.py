"""
Board state of a 2048 game: the grid of tiles, the score and game-over detection.

Coordinates are Cartesian: column 0 is the leftmost column and row 0 the bottom row. The tilt algorithm is
written once for a tilt toward the top and reused for every side through `Side.project`.
"""

import logging
import threading
from typing import Callable, Optional

from numpy import int64, ndarray, zeros

from .config import BoardConfig, GameOverPolicy
from .gamemove import has_moves
from .side import Side
from .tile import Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Change callbacks receive the board that changed.
Listener = Callable[['Board'], None]


class Board:
    """
    State of a game of 2048.

    Every mutator (`clear`, `add_tile`, `tilt`) runs to completion under a per-board lock, then notifies
    the registered listeners. Listeners carry no payload: they re-query the board.
    """

    def __init__(self, size: int = 4, config: Optional[BoardConfig] = None):
        """
        Create an empty board with score 0.

        Parameters
        ----------
        size : int, optional
            Number of cells on one side (default is 4).
        config : BoardConfig, optional
            Rules of the board (default is the classic 2048 rules).
        """
        if size < 1:
            raise ValueError(f'Board size must be >= 1, got {size}')
        self._size = size
        self._config = config or BoardConfig()
        self._grid: list[list[Optional[Tile]]] = [[None] * size for _ in range(size)]
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._size

    @property
    def config(self) -> BoardConfig:
        """Rules of the board."""
        return self._config

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Best score so far, updated when a game ends."""
        return self._max_score

    @property
    def game_over(self) -> bool:
        """True iff no tilt can change the board, or the max piece ends the game under the configured policy."""
        return self._game_over

    def _check_cell(self, col: int, row: int) -> None:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise IndexError(f'Cell ({col}, {row}) is outside a board of size {self._size}')

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """
        Get the tile at (col, row).

        Parameters
        ----------
        col : int
            Column, 0 <= col < size.
        row : int
            Row, 0 <= row < size.

        Returns
        -------
        Tile or None
            The tile at that cell, None if the cell is empty.
        """
        self._check_cell(col, row)
        return self._grid[col][row]

    def max_tile(self) -> int:
        """Largest tile value on the board, 0 when empty."""
        return max((tile.value for column in self._grid for tile in column if tile is not None), default=0)

    def empty_cells(self) -> list[tuple[int, int]]:
        """Empty cells as (column, row), column by column."""
        return [(col, row) for col in range(self._size) for row in range(self._size) if self._grid[col][row] is None]

    def values(self) -> ndarray:
        """
        Snapshot of the tile values in display orientation.

        Returns
        -------
        ndarray
            A (size, size) int64 array whose first line is the top row; empty cells are 0.
        """
        board = zeros((self._size, self._size), dtype=int64)
        for col, column in enumerate(self._grid):
            for row, tile in enumerate(column):
                if tile is not None:
                    board[self._size - 1 - row, col] = tile.value
        return board

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked after every mutation that changes the board."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unregister a callback previously added with `add_listener`."""
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def clear(self) -> None:
        """Clear the board to empty and reset the score. The max score is kept."""
        with self._lock:
            self._grid = [[None] * self._size for _ in range(self._size)]
            self._score = 0
            self._game_over = False
            self._notify()

    def add_tile(self, tile: Tile) -> None:
        """
        Add a tile to the board.

        Parameters
        ----------
        tile : Tile
            The tile to place; its cell must be empty.

        Raises
        ------
        IndexError
            If the tile lies outside the board.
        ValueError
            If the cell is already occupied.
        """
        with self._lock:
            self._check_cell(tile.column, tile.row)
            if self._grid[tile.column][tile.row] is not None:
                raise ValueError(f'Cell {tile.position} is already occupied')
            self._grid[tile.column][tile.row] = tile
            self._check_game_over()
            self._notify()

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board toward a side, sliding and merging every tile.

        Parameters
        ----------
        side : Side
            The edge tiles move toward.

        Returns
        -------
        bool
            True iff the tilt changed the board.

        Notes
        -----
        - Each tile moves or merges at most once, and a merged tile never merges again in the same tilt.
        - The score grows by the value of every merged tile.
        - Once the game is over the board is frozen and tilting returns False.
        """
        with self._lock:
            # ##>: A finished board is frozen, its game-over flag cannot change.
            if self._game_over:
                return False

            changed = False
            for col in range(self._size):
                changed = self._tilt_column(side, col) or changed

            self._check_game_over()
            _logger.debug('Tilt %s: changed=%s score=%d', side.name, changed, self._score)
            if changed:
                self._notify()
            return changed

    def _tilt_column(self, side: Side, col: int) -> bool:
        """
        Slide and merge one virtual column toward its far edge.

        Parameters
        ----------
        side : Side
            Side oriented toward the top.
        col : int
            Virtual column index.

        Returns
        -------
        bool
            True if the column changed.
        """
        size = self._size
        cells = [side.project(col, row, size) for row in range(size)]
        tiles = [self._grid[c][r] for c, r in cells]
        before = list(tiles)

        # ##: Compact, merge once, then close the gaps left by merges.
        self._compact(tiles, cells)
        self._slide_pass(tiles, cells, merge=True)
        self._compact(tiles, cells)

        if all(after is prior for after, prior in zip(tiles, before)):
            return False

        # ##: Write back, relocating every tile whose cell changed.
        for (c, r), tile in zip(cells, tiles):
            if tile is not None and tile.position != (c, r):
                tile = tile.move(c, r)
            self._grid[c][r] = tile
        return True

    def _compact(self, tiles: list[Optional[Tile]], cells: list[tuple[int, int]]) -> None:
        # ##>: size - 1 passes carry a tile across the whole column.
        for _ in range(len(tiles) - 1):
            if not self._slide_pass(tiles, cells, merge=False):
                break

    def _slide_pass(self, tiles: list[Optional[Tile]], cells: list[tuple[int, int]], merge: bool) -> bool:
        # ##>: Far edge inward.
        changed = False
        for far in range(len(tiles) - 1, 0, -1):
            changed = self._slide_step(tiles, cells, far, merge) or changed
        return changed

    def _slide_step(self, tiles: list[Optional[Tile]], cells: list[tuple[int, int]], far: int, merge: bool) -> bool:
        """
        Move the tile at virtual row ``far - 1`` one step toward the far edge.

        Parameters
        ----------
        tiles : list[Optional[Tile]]
            Virtual column, near edge first. Modified in-place.
        cells : list[tuple[int, int]]
            Real cell of each virtual row.
        far : int
            Virtual row receiving the tile.
        merge : bool
            If True only merge into an equal tile, otherwise only slide into an empty cell.

        Returns
        -------
        bool
            True if the column changed.
        """
        near_tile, far_tile = tiles[far - 1], tiles[far]
        if near_tile is None:
            return False

        if merge:
            if far_tile is None or far_tile.value != near_tile.value:
                return False
            tiles[far] = far_tile.merge(*cells[far], near_tile)
            self._score += tiles[far].value
        elif far_tile is None:
            tiles[far] = near_tile
        else:
            return False

        tiles[far - 1] = None
        return True

    def _check_game_over(self) -> None:
        """Recompute the game-over flag and update the max score when the game ends."""
        if (
            self._config.game_over_policy is GameOverPolicy.MAX_PIECE_ENDS_GAME
            and self.max_tile() >= self._config.max_piece
        ):
            over = True
        else:
            over = not any(has_moves(self, side) for side in Side)

        if over and not self._game_over:
            _logger.info('Game over: score=%d max tile=%d', self._score, self.max_tile())
        self._game_over = over
        if over and self._score > self._max_score:
            self._max_score = self._score

    def __str__(self) -> str:
        lines = ['[']
        for row in range(self._size - 1, -1, -1):
            cells = []
            for col in range(self._size):
                tile = self._grid[col][row]
                cells.append('    ' if tile is None else f'{tile.value:4d}')
            lines.append('|' + '|'.join(cells) + '|')
        lines.append(f'] {self._score} (max: {self._max_score})')
        return '\n'.join(lines)
