"""2048 board engine: owns the grid, the score and the random source of a game session."""

import logging
import threading
from typing import NamedTuple

from numpy import array_equal, asarray, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from game2048.config import GameConfig
from game2048.core.direction import Direction
from game2048.core.gameboard import is_terminal, max_tile, move_board, spawn_tile
from game2048.core.gamemove import legal_moves

logger = logging.getLogger(__name__)


class MoveResult(NamedTuple):
    """Outcome of a single move."""

    score_gain: int
    changed: bool


class BoardEngine:
    """
    2048 game session.

    This class keeps the board and the score private, applies moves, spawns tiles and reports whether the
    game is over. Every public method holds an internal lock, so a move and its spawn are observed as one step.
    """

    def __init__(self, config: GameConfig | None = None, rng: Generator | None = None, seed: int | None = None):
        """
        Initialize a new game session.

        Parameters
        ----------
        config : GameConfig, optional
            Game parameters (default is a 4x4 grid with two starting tiles).
        rng : Generator, optional
            Source of randomness. Takes precedence over ``seed``.
        seed : int, optional
            Seed used to build a generator when ``rng`` is not given.
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else default_rng(seed)
        self._lock = threading.RLock()
        self.initialize()

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def grid(self) -> ndarray:
        """
        Get a snapshot of the game board.

        Returns
        -------
        ndarray
            A copy of the board; changing it does not affect the session.
        """
        with self._lock:
            return self._grid.copy()

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    @property
    def max_tile(self) -> int:
        with self._lock:
            return max_tile(self._grid)

    def initialize(self) -> ndarray:
        """
        Start a fresh session: empty board, zero score, then the configured number of random tiles.

        Returns
        -------
        ndarray
            Snapshot of the new board.
        """
        with self._lock:
            self._grid = zeros((self.config.size, self.config.size), dtype=int64)
            self._score = 0
            for _ in range(self.config.initial_tiles):
                self.spawn_random_tile()
            logger.info('New %dx%d game started', self.config.size, self.config.size)
            return self._grid.copy()

    def restart(self) -> ndarray:
        """Discard the current session and start a new one."""
        with self._lock:
            logger.info('Restarting game (final score %d, max tile %d)', self._score, max_tile(self._grid))
            return self.initialize()

    def spawn_random_tile(self) -> tuple[tuple[int, int], int] | None:
        """
        Place one tile on a random empty cell.

        Returns
        -------
        tuple or None
            ``((row, col), value)`` of the new tile, None if the board is full.
        """
        with self._lock:
            spawned = spawn_tile(
                self._grid, self._rng, values=self.config.tile_values, probs=self.config.tile_probs
            )
            if spawned is not None:
                logger.debug('Spawned %d at %s', spawned[1], spawned[0])
            return spawned

    def move(self, direction: Direction | int) -> MoveResult:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction or int
            The move to apply (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        MoveResult
            The score gained and whether the board changed.

        Raises
        ------
        ValueError
            If ``direction`` is not a valid direction value.

        Notes
        -----
        - The score grows by the value of every tile created by a merge.
        - A new tile is spawned only when the move changed the board; a move without effect is silent.
        """
        direction = Direction(direction)
        with self._lock:
            new_grid, gain, changed = move_board(self._grid, direction)
            if changed:
                self._grid = new_grid
                self._score += gain
                self.spawn_random_tile()
            logger.debug('Move %s: gain=%d changed=%s', direction.name, gain, changed)
            return MoveResult(gain, changed)

    def is_terminal(self) -> bool:
        """True when the board is full and no two adjacent tiles are equal."""
        with self._lock:
            return is_terminal(self._grid)

    def legal_moves(self) -> list[Direction]:
        with self._lock:
            return legal_moves(self._grid)

    def load(self, grid: ndarray, score: int = 0) -> None:
        """
        Replace the session with a given board and score.

        Parameters
        ----------
        grid : ndarray
            Square board of the configured size; every cell is 0 or a power of two >= 2.
        score : int, optional
            Starting score (default is 0).

        Raises
        ------
        ValueError
            If the board shape, a tile value or the score is invalid.
        """
        values = asarray(grid)
        board = values.astype(int64)
        if not array_equal(board, values):
            raise ValueError('grid cells must be integers')
        if board.shape != (self.config.size, self.config.size):
            raise ValueError(f'grid must be {self.config.size}x{self.config.size}, got shape {board.shape}')
        tiles = board[board != 0]
        if (tiles < 2).any() or (tiles & (tiles - 1)).any():
            raise ValueError('grid cells must be 0 or powers of two >= 2')
        if score < 0:
            raise ValueError(f'score must be non-negative, got {score}')

        with self._lock:
            self._grid = board
            self._score = int(score)

    def render(self) -> str:
        """
        Render the game board as text, one tab separated row per line.
        """
        with self._lock:
            return '\n'.join(' \t'.join(map(str, row)) for row in self._grid.tolist())
