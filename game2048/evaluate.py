# -*- coding: utf-8 -*-
"""
Play 2048 games with uniformly random legal moves and collect their outcomes.
"""
import logging
from collections import Counter
from typing import NamedTuple

from numpy.random import Generator, default_rng
from tqdm import trange

from game2048.config import GameConfig
from game2048.engine import BoardEngine

logger = logging.getLogger(__name__)


class GameSummary(NamedTuple):
    """Final state of one played game."""

    score: int
    max_tile: int
    moves: int


def play_random_game(engine: BoardEngine, rng: Generator) -> GameSummary:
    """
    Play random legal moves until the game is over.

    Parameters
    ----------
    engine : BoardEngine
        The session to play. It is played from its current state.
    rng : Generator
        Source of randomness for move selection.

    Returns
    -------
    GameSummary
        Score, largest tile and number of moves of the finished game.
    """
    moves = 0
    while legal := engine.legal_moves():
        engine.move(legal[rng.integers(len(legal))])
        moves += 1
    return GameSummary(engine.score, engine.max_tile, moves)


def evaluate(
    length: int = 10, seed: int | None = None, config: GameConfig | None = None
) -> tuple[Counter, list[GameSummary]]:
    """
    Play several random games.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed for tile spawns and move selection.
    config : GameConfig, optional
        Game parameters.

    Returns
    -------
    tuple[Counter, list[GameSummary]]
        Count of games per largest tile, and the summary of every game.
    """
    rng = default_rng(seed)
    engine = BoardEngine(config=config, rng=rng)
    summaries = []

    with trange(length) as period:
        for num in period:
            if num > 0:
                engine.restart()
            summary = play_random_game(engine, rng)
            summaries.append(summary)

            # ##: Log.
            period.set_description(f'Game {num + 1}')
            period.set_postfix(score=summary.score, max_tile=summary.max_tile)
            logger.debug('Game %d finished: %s', num + 1, summary)

    return Counter(summary.max_tile for summary in summaries), summaries
