"""Move intents for the 2048 board and the key names the console maps onto them."""

from enum import IntEnum


class Direction(IntEnum):
    """
    Direction of a move.

    The value is the number of counter-clockwise quarter turns that reduces the move to a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


# ##>: WASD and arrow names, both accepted by the console driver.
KEY_BINDINGS: dict[str, Direction] = {
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
}


def parse_direction(key: str) -> Direction:
    """
    Translate a key name into a move direction.

    Parameters
    ----------
    key : str
        Key name, case insensitive (``w``, ``a``, ``s``, ``d`` or an arrow name).

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    ValueError
        If the key is not bound to a direction.
    """
    try:
        return KEY_BINDINGS[key.strip().lower()]
    except KeyError:
        raise ValueError(f'Unknown move key: {key!r}') from None
