"""A game of 2048: a board driven by tilts, with a new random tile after every effective move."""

import logging
from typing import Optional

from merge2048.core import Board, BoardConfig, Side
from merge2048.spawn import TileSpawner

_logger = logging.getLogger(__name__)


class Game:
    """
    2048 game session.

    This class owns a `Board` and the spawning policy, and exposes the reset/move loop used by the input layer.
    """

    # ##: All Actions.
    ACTIONS = {'left': Side.WEST, 'up': Side.NORTH, 'right': Side.EAST, 'down': Side.SOUTH}

    def __init__(self, size: int = 4, config: Optional[BoardConfig] = None, seed: Optional[int] = None):
        """
        Initialize the game and place the two starting tiles.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        config : BoardConfig, optional
            Rules of the board.
        seed : int, optional
            Random seed for reproducibility.
        """
        self.board = Board(size=size, config=config)
        self._spawner = TileSpawner(seed)
        self.reset()

    @property
    def size(self) -> int:
        """Size of the board."""
        return self.board.size

    @property
    def is_finished(self) -> bool:
        """True if the game is over."""
        return self.board.game_over

    def reset(self, seed: Optional[int] = None) -> Board:
        """
        Clear the board and add two random tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility; the current stream continues if None.

        Returns
        -------
        Board
            The board of the new game.
        """
        if seed is not None:
            self._spawner.reseed(seed)
        self.board.clear()
        self._spawner.spawn(self.board)
        self._spawner.spawn(self.board)
        return self.board

    def move(self, side: Side) -> bool:
        """
        Tilt the board and spawn a tile if anything moved.

        Parameters
        ----------
        side : Side
            Side to tilt toward.

        Returns
        -------
        bool
            True if the tilt changed the board.
        """
        changed = self.board.tilt(side)
        if changed:
            self._spawner.spawn(self.board)
        else:
            _logger.debug('Move %s rejected: board unchanged', side.name)
        return changed
