# -*- coding: utf-8 -*-
"""
Rule engine of the 2048 sliding tile puzzle.

This package provides the `BoardEngine` class, which holds a game session and applies moves, together with the
pure board functions it is built on.
"""

from .config import GameConfig
from .core import Direction
from .engine import BoardEngine, MoveResult

__all__ = ["BoardEngine", "Direction", "GameConfig", "MoveResult"]
