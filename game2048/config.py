"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass
from math import isclose

from game2048.core.gameboard import TILE_PROBS, TILE_VALUES


@dataclass(frozen=True)
class GameConfig:
    """
    Parameters of a game session.

    Attributes
    ----------
    size : int
        Side length of the square grid.
    initial_tiles : int
        Number of random tiles placed on a new grid.
    tile_values : tuple[int, ...]
        Values a spawned tile can take.
    tile_probs : tuple[float, ...]
        Probability of each spawned value.
    """

    size: int = 4
    initial_tiles: int = 2
    tile_values: tuple[int, ...] = TILE_VALUES
    tile_probs: tuple[float, ...] = TILE_PROBS

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not 1 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f'initial_tiles must be in [1, {self.size * self.size}], got {self.initial_tiles}')
        if len(self.tile_values) == 0 or len(self.tile_values) != len(self.tile_probs):
            raise ValueError('tile_values and tile_probs must be non-empty and of the same length')
        for value in self.tile_values:
            # ##>: Power of two check.
            if not isinstance(value, int) or value < 2 or value & (value - 1):
                raise ValueError(f'tile values must be powers of two >= 2, got {value}')
        if any(prob < 0 for prob in self.tile_probs) or not isclose(sum(self.tile_probs), 1.0, abs_tol=1e-9):
            raise ValueError(f'tile_probs must be non-negative and sum to 1, got {self.tile_probs}')
