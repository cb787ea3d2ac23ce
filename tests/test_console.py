"""
Tests for the terminal driver.
"""

from io import StringIO
from unittest import TestCase, main

import numpy as np

from game2048.console import GAME_OVER, key_handler, main as console_main, play
from game2048.core.direction import Direction
from game2048.engine import BoardEngine

TERMINAL_BOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestKeyHandler(TestCase):
    def setUp(self):
        self.engine = BoardEngine(seed=0)
        self.out = StringIO()

    def test_move_redraws(self):
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 3] = 2
        self.engine.load(board)

        self.assertTrue(key_handler(self.engine, 'a\n', self.out))
        self.assertEqual(self.engine.grid[0, 0], 2)
        self.assertIn('Score: 0', self.out.getvalue())

    def test_quit(self):
        self.assertFalse(key_handler(self.engine, 'q', self.out))

    def test_unknown_key_reports_error(self):
        grid = self.engine.grid
        self.assertTrue(key_handler(self.engine, 'x', self.out))
        self.assertIn('Unknown move key', self.out.getvalue())
        np.testing.assert_array_equal(self.engine.grid, grid)

    def test_game_over_blocks_moves(self):
        """Once terminal, moves are refused and only restart changes the board."""
        self.engine.load(TERMINAL_BOARD, score=100)

        key_handler(self.engine, 'w', self.out)
        self.assertIn(GAME_OVER, self.out.getvalue())
        np.testing.assert_array_equal(self.engine.grid, TERMINAL_BOARD)

        key_handler(self.engine, 'r', self.out)
        self.assertEqual(self.engine.score, 0)
        self.assertEqual(np.count_nonzero(self.engine.grid), 2)


class TestPlay(TestCase):
    def test_play_applies_moves_until_quit(self):
        """Typed moves update board and score, and nothing is read after q."""
        engine = BoardEngine(seed=4)
        expected = BoardEngine(seed=4)
        for session in (engine, expected):
            session.load(np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]))
        expected.move(Direction.LEFT)

        out = StringIO()
        play(engine, stdin=StringIO('a\nq\ns\n'), out=out)

        # ##>: The trailing s would have moved the 4 down from the top row.
        self.assertEqual(engine.score, 4)
        self.assertEqual(engine.grid[0, 0], 4)
        np.testing.assert_array_equal(engine.grid, expected.grid)
        self.assertIn('Use w/a/s/d', out.getvalue())
        self.assertIn('Score: 4', out.getvalue())

    def test_play_reports_game_over(self):
        engine = BoardEngine(seed=4)
        engine.load(TERMINAL_BOARD, score=60)
        out = StringIO()

        play(engine, stdin=StringIO('w\nd\nq\n'), out=out)

        self.assertEqual(out.getvalue().count(GAME_OVER), 2)
        np.testing.assert_array_equal(engine.grid, TERMINAL_BOARD)
        self.assertEqual(engine.score, 60)

    def test_main_evaluate(self):
        self.assertEqual(console_main(['evaluate', '--games', '2', '--seed', '1']), 0)

    def test_main_rejects_bad_size(self):
        self.assertEqual(console_main(['evaluate', '--size', '1']), 2)


if __name__ == '__main__':
    main()
