from unittest import TestCase, main

import numpy as np
from numpy import array

from game2048.core.direction import KEY_BINDINGS, Direction, parse_direction
from game2048.core.gameboard import is_terminal, move_board
from game2048.core.gamemove import legal_moves, legal_moves_mask


class TestGameMove(TestCase):
    def test_legal_moves(self):
        """
        Test if legal moves are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_moves(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_no_legal_moves_on_terminal_board(self):
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_moves(board), [])

    def test_mask_matches_applied_move(self):
        """A direction is legal exactly when applying it changes the board."""
        rng = np.random.default_rng(7)
        for _ in range(200):
            board = np.zeros(16, dtype=np.int64)
            num_tiles = rng.integers(1, 17)
            board[rng.choice(16, size=num_tiles, replace=False)] = rng.choice([2, 4, 8], size=num_tiles)
            board = board.reshape(4, 4)

            mask = legal_moves_mask(board)
            for direction in Direction:
                _, _, changed = move_board(board, direction)
                self.assertEqual(mask[direction], changed)

            # ##>: With at least one tile, the game is over exactly when no move is legal.
            self.assertEqual(is_terminal(board), not any(mask))


class TestDirection(TestCase):
    def test_parse_wasd_and_arrows(self):
        self.assertEqual(parse_direction('w'), Direction.UP)
        self.assertEqual(parse_direction('A'), Direction.LEFT)
        self.assertEqual(parse_direction(' down\n'), Direction.DOWN)
        self.assertEqual(parse_direction('right'), Direction.RIGHT)

    def test_every_direction_is_bound(self):
        self.assertEqual(set(KEY_BINDINGS.values()), set(Direction))

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            parse_direction('x')


if __name__ == '__main__':
    main()
