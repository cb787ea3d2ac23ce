# -*- coding: utf-8 -*-
"""
Pure functions describing the rules of the 2048 board.

It includes the move directions, sliding and merging of lines, board rotation, random tile spawning,
legal move detection and game over detection.
"""

from .direction import KEY_BINDINGS, Direction, parse_direction
from .gameboard import (
    TILE_PROBS,
    TILE_VALUES,
    empty_cells,
    is_terminal,
    max_tile,
    merge_line,
    move_board,
    rotate,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import legal_moves, legal_moves_mask

__all__ = [
    "Direction",
    "KEY_BINDINGS",
    "parse_direction",
    "TILE_VALUES",
    "TILE_PROBS",
    "merge_line",
    "slide_and_merge",
    "rotate",
    "move_board",
    "empty_cells",
    "spawn_tile",
    "is_terminal",
    "max_tile",
    "legal_moves_mask",
    "legal_moves",
]
