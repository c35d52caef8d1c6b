# -*- coding: utf-8 -*-
"""
Core state of a 2048 game: tiles, board, directional projection and move analysis.
"""

from .board import Board
from .config import MAX_PIECE, BoardConfig, GameOverPolicy
from .gamemove import can_tilt, has_moves, illegal_sides, legal_sides
from .side import Side
from .tile import Tile

__all__ = [
    "Board",
    "BoardConfig",
    "GameOverPolicy",
    "MAX_PIECE",
    "Side",
    "Tile",
    "can_tilt",
    "has_moves",
    "legal_sides",
    "illegal_sides",
]
