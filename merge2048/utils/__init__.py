# -*- coding: utf-8 -*-
"""
Display helpers for a 2048 board.
"""

from .windows import WindowBoard, tile_color

__all__ = ["WindowBoard", "tile_color"]
