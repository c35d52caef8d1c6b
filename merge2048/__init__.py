# -*- coding: utf-8 -*-
"""
Rules engine for the 2048 sliding-tile merge puzzle.

The `Board` owns the grid, the score and the game-over flag; `Game` wires a board to a random tile spawner.
"""

from .core import Board, BoardConfig, GameOverPolicy, Side, Tile
from .game import Game
from .spawn import TileSpawner

__all__ = ["Board", "BoardConfig", "GameOverPolicy", "Side", "Tile", "Game", "TileSpawner"]
