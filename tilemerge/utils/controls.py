"""
Translate raw inputs, key presses and swipe gestures, into move directions.
"""

from tilemerge.core.geometry import Direction, from_displacement

# ##: Browser key codes of the arrow keys.
KEY_CODES: dict[int, Direction] = {
    37: Direction.LEFT,
    38: Direction.UP,
    39: Direction.RIGHT,
    40: Direction.DOWN,
}

# ##: Key names, as reported by matplotlib, and WASD.
KEY_NAMES: dict[str, Direction] = {
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
}


def direction_from_key(key: int | str | None) -> Direction | None:
    """
    Map a key code or key name to a direction.

    Parameters
    ----------
    key : int or str
        Key code (37 to 40) or key name (arrow name or WASD, case insensitive).

    Returns
    -------
    Direction or None
        The matching direction, None for any other key.
    """
    if isinstance(key, int):
        return KEY_CODES.get(key)
    if isinstance(key, str):
        return KEY_NAMES.get(key.lower())
    return None


def direction_from_swipe(
    start: tuple[float, float] | None, end: tuple[float, float] | None
) -> Direction | None:
    """
    Map a swipe gesture to a direction.

    Parameters
    ----------
    start : tuple[float, float], optional
        (x, y) screen coordinates where the touch started.
    end : tuple[float, float], optional
        (x, y) screen coordinates where the touch ended.

    Returns
    -------
    Direction or None
        Direction of the displacement ``end - start``, None if either point is missing.
    """
    if start is None or end is None:
        return None
    return from_displacement(end[0] - start[0], end[1] - start[1])
