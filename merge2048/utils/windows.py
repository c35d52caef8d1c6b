# -*- coding: utf-8 -*-
"""
Graphical User Interface for a 2048 board.

This module provides a Matplotlib window that draws a `Board` and redraws it whenever the board
notifies a change. Keyboard events are forwarded to a registered handler.
"""
from math import log2
from typing import Callable, Optional

from matplotlib import colormaps
from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from matplotlib.colors import to_hex

from merge2048.core import Board

# ##: Empty cell and board background.
EMPTY_COLOR = "#CCC0B3"
BACKGROUND_COLOR = "#BBADA0"


def tile_color(value: int, max_piece: int) -> str:
    """
    Color of a cell, on a warm scale reaching its darkest shade at the winning tile.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.
    max_piece : int
        Winning tile value of the board.

    Returns
    -------
    str
        Hex color.
    """
    if value == 0:
        return EMPTY_COLOR
    level = min(log2(value) / log2(max_piece), 1.0)
    return to_hex(colormaps["YlOrRd"](0.1 + 0.9 * level))


class WindowBoard:
    """
    A class for rendering and managing a 2048 board using Matplotlib.

    Methods
    -------
    attach(board: Board)
        Draw the board and redraw it on every change notification.
    show_image(board: Board)
        Update the display with the current board state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.fig, grid = plt.subplots(size, size, squeeze=False, gridspec_kw={"wspace": 0.05, "hspace": 0.05})
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor(BACKGROUND_COLOR)
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.92)

        # ##>: Cells in display order, top row first, like `Board.values()`.
        self.axes = list(grid.flat)
        self.texts = [
            ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            for ax in self.axes
        ]
        for ax in self.axes:
            ax.set_xticks([])
            ax.set_yticks([])

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def attach(self, board: Board):
        """
        Draw a board and follow its changes.

        Parameters
        ----------
        board : Board
            The board to observe.
        """
        board.add_listener(self.show_image)
        self.show_image(board)

    def show_image(self, board: Board):
        """
        Show or update the game board.

        Parameters
        ----------
        board : Board
            The board to display; its values are re-queried on every call.
        """
        for ax, text, value in zip(self.axes, self.texts, board.values().flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(tile_color(value, board.config.max_piece))

        status = " - game over" if board.game_over else ""
        self.fig.suptitle(f"score {board.score} (max: {board.max_score}){status}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
