"""
Board transition functions for the 2048 game: sliding, merging, rotating, spawning and game over.
"""

from numpy import any as np_any
from numpy import argwhere, array, array_equal, ndarray, rot90, zeros_like
from numpy.random import Generator

from game2048.core.direction import Direction

# ##>: Tile spawn distribution (90% for 2, 10% for 4).
TILE_VALUES: tuple[int, ...] = (2, 4)
TILE_PROBS: tuple[float, ...] = (0.9, 0.1)


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Slide one line towards its start and merge adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, ordered in the direction of the move.

    Returns
    -------
    score : int
        Sum of the tiles created by merging.
    merged_line : ndarray
        The surviving tiles, in order, without padding.

    Notes
    -----
    - Zeros (empty cells) are dropped before merging.
    - Merging scans from the start of the line towards the end.
    - A merged tile never merges again in the same call: ``[2, 2, 4]`` gives ``[4, 4]``.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    # ##: Trailing tile left over after the last pair.
    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging, zero padded on the right.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def rotate(board: ndarray, k: int = 1) -> ndarray:
    """Rotate the board by ``k`` quarter turns counter-clockwise."""
    return rot90(board, k=k)


def move_board(board: ndarray, direction: Direction) -> tuple[ndarray, int, bool]:
    """
    Apply a move to a board, without spawning a new tile.

    Parameters
    ----------
    board : ndarray
        The current board. It is not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_board : ndarray
        The board after the move.
    score : int
        The score gained from merges.
    changed : bool
        Whether any cell differs from the input board.
    """
    turns = int(direction)
    score, updated = slide_and_merge(rotate(board, k=turns))
    new_board = rotate(updated, k=-turns).copy()
    return new_board, score, not array_equal(new_board, board)


def empty_cells(board: ndarray) -> ndarray:
    """Return the ``(row, col)`` coordinates of every empty cell."""
    return argwhere(board == 0)


def spawn_tile(
    board: ndarray,
    rng: Generator,
    values: tuple[int, ...] = TILE_VALUES,
    probs: tuple[float, ...] = TILE_PROBS,
) -> tuple[tuple[int, int], int] | None:
    """
    Place one new tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    rng : Generator
        Source of randomness.
    values : tuple[int, ...], optional
        Candidate tile values.
    probs : tuple[float, ...], optional
        Probability of each candidate value.

    Returns
    -------
    tuple or None
        ``((row, col), value)`` of the new tile, or None when the board has no empty cell.

    Notes
    -----
    The cell is drawn uniformly among empty cells, then the value from ``values`` with ``probs``.
    """
    available = empty_cells(board)
    if len(available) == 0:
        return None

    row, col = available[rng.integers(len(available))]
    value = int(rng.choice(values, p=probs))
    board[row, col] = value
    return (int(row), int(col)), value


def is_terminal(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if there is no empty cell and no two horizontally or vertically adjacent cells are equal.
    """
    if not board.all():
        return False
    return not (np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:]))


def max_tile(board: ndarray) -> int:
    """Return the largest tile on the board."""
    return int(board.max())
