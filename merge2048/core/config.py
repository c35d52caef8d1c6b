"""
Configuration of the 2048 rules engine.
"""

from dataclasses import dataclass
from enum import Enum

# ##>: Largest piece value of the classic game.
MAX_PIECE = 2048


class GameOverPolicy(str, Enum):
    """
    When does reaching the maximum piece end the game.

    MAX_PIECE_ENDS_GAME: a tile of value ``max_piece`` ends the game immediately (win).
    NO_MOVES_ONLY: the game only ends once no tilt can change the board.
    """

    MAX_PIECE_ENDS_GAME = 'max_piece_ends_game'
    NO_MOVES_ONLY = 'no_moves_only'


@dataclass(frozen=True)
class BoardConfig:
    """
    Rules of a board.

    Attributes
    ----------
    max_piece : int
        Winning tile value (default 2048).
    game_over_policy : GameOverPolicy
        Whether the winning tile ends the game on its own.
    """

    max_piece: int = MAX_PIECE
    game_over_policy: GameOverPolicy = GameOverPolicy.MAX_PIECE_ENDS_GAME

    def __post_init__(self):
        if self.max_piece < 4 or self.max_piece & (self.max_piece - 1):
            raise ValueError(f'max_piece must be a power of two >= 4, got {self.max_piece}')
        # ##: Accept plain strings coming from command line or files.
        object.__setattr__(self, 'game_over_policy', GameOverPolicy(self.game_over_policy))
