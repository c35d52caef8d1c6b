"""
Random tile spawning policy: deposits new tiles on empty cells of a board.
"""

from typing import Optional

from numpy.random import PCG64DXSM, Generator, default_rng

from merge2048.core import Board, Tile

# ##: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class TileSpawner:
    """Place a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell."""

    def __init__(self, seed: Optional[int] = None):
        """
        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.
        """
        self._rng: Generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the random stream, from a fresh entropy source if seed is None."""
        self._rng = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def spawn(self, board: Board) -> Optional[Tile]:
        """
        Add one random tile to the board.

        Parameters
        ----------
        board : Board
            The board receiving the tile. **Modified in-place.**

        Returns
        -------
        Tile or None
            The tile added, None if the board is full.
        """
        cells = board.empty_cells()
        if not cells:
            return None

        value = int(self._rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        col, row = cells[int(self._rng.integers(len(cells)))]
        tile = Tile(value, col, row)
        board.add_tile(tile)
        return tile
