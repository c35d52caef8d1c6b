# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from merge2048 import Game
from merge2048.utils import WindowBoard


def key_handler(game: Game, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: Game
        The game session

    window: WindowBoard
        Window drawing the board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        game.reset()
        return None

    if event.key in game.ACTIONS:
        game.move(game.ACTIONS[event.key])
        if game.is_finished:
            print("terminated!")
        return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    game = Game()

    window_board = WindowBoard(title="2048 Game", size=game.size)
    window_board.attach(game.board)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))

    # Blocking event loop
    window_board.show(block=True)
