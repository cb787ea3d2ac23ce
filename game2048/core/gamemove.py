"""
Move detection for the 2048 board: which directions would change the grid.
"""

from numpy import ndarray

from game2048.core.direction import Direction


def legal_moves_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask indexed by ``Direction`` (left, up, right, down), True where the move changes the board.

    Notes
    -----
    A move is legal when a tile can slide into an empty cell or two adjacent equal tiles can merge.
    Horizontal and vertical adjacencies are computed once and shared between opposite directions.
    """
    # ##>: Horizontal adjacency, shared by left and right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical adjacency, shared by up and down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_moves(board: ndarray) -> list[Direction]:
    """Directions that would change the board."""
    mask = legal_moves_mask(board)
    return [direction for direction in Direction if mask[direction]]

