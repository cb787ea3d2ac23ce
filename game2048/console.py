# -*- coding: utf-8 -*-
"""
Play 2048 in a terminal, or benchmark random play.
"""
import argparse
import logging
import sys
from typing import TextIO

from game2048.config import GameConfig
from game2048.core.direction import parse_direction
from game2048.engine import BoardEngine
from game2048.evaluate import evaluate

logger = logging.getLogger(__name__)

INSTRUCTIONS = 'Use w/a/s/d (or up/left/down/right) to move, r to restart, q to quit.'
GAME_OVER = 'Game Over! Type r to restart or q to quit.'


def redraw(engine: BoardEngine, out: TextIO):
    """
    Redraw the game board.

    Parameters
    ----------
    engine: BoardEngine
        The game session

    out: TextIO
        Stream to draw on
    """
    print(f'Score: {engine.score}', file=out)
    print(engine.render(), file=out)


def key_handler(engine: BoardEngine, key: str, out: TextIO) -> bool:
    """
    Handle one typed command.

    Parameters
    ----------
    engine: BoardEngine
        The game session

    key: str
        Command typed by the player

    out: TextIO
        Stream to draw on

    Returns
    -------
    bool
        False when the player asked to quit.
    """
    key = key.strip().lower()
    if key == 'q':
        return False

    if key == 'r':
        engine.restart()
        redraw(engine, out)
        return True

    # ##: Only restart and quit are accepted once the game is over.
    if engine.is_terminal():
        print(GAME_OVER, file=out)
        return True

    try:
        direction = parse_direction(key)
    except ValueError as error:
        print(f'{error}. {INSTRUCTIONS}', file=out)
        return True

    result = engine.move(direction)
    if result.changed:
        redraw(engine, out)
    if engine.is_terminal():
        logger.info('Game over with score %d', engine.score)
        print(GAME_OVER, file=out)
    return True


def play(engine: BoardEngine, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout):
    """Read commands line by line until the player quits or the input ends."""
    print(INSTRUCTIONS, file=out)
    redraw(engine, out)
    for line in stdin:
        if not key_handler(engine, line, out):
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='game2048', description='2048 sliding tile puzzle.')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')
    subparsers = parser.add_subparsers(dest='command')

    play_parser = subparsers.add_parser('play', help='Play interactively.')
    play_parser.add_argument('--seed', type=int, default=None, help='Random seed.')
    play_parser.add_argument('--size', type=int, default=4, help='Grid size.')

    eval_parser = subparsers.add_parser('evaluate', help='Play random games and report the largest tiles.')
    eval_parser.add_argument('--games', type=int, default=10, help='Number of games.')
    eval_parser.add_argument('--seed', type=int, default=None, help='Random seed.')
    eval_parser.add_argument('--size', type=int, default=4, help='Grid size.')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = GameConfig(size=getattr(args, 'size', 4))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 2

    if args.command == 'evaluate':
        counts, summaries = evaluate(length=args.games, seed=args.seed, config=config)
        best = max(summary.score for summary in summaries) if summaries else 0
        print(f'Best score: {best}')
        for tile, count in sorted(counts.items()):
            print(f'{tile}\t{count}')
        return 0

    play(BoardEngine(config=config, seed=getattr(args, 'seed', None)))
    return 0
