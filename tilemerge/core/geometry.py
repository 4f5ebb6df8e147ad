"""
Board geometry for the tile merge game: positions, directions and traversal order.

Every function in this module is pure. Positions are plain coordinates; whether they fall on the board is
checked with ``Position.is_out_of_bounds`` before any cell is indexed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ##: Side length of the standard board.
BOARD_SIZE = 4


class Direction(str, Enum):
    """
    Direction in which the tiles slide.

    The value is the lower-case name, so ``Direction('left')`` parses a key name.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def offset(self) -> tuple[int, int]:
        """Unit offset (d_row, d_col) of the direction."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Position:
    """A (row, col) coordinate on the board."""

    row: int
    col: int

    @classmethod
    def from_index(cls, index: int, size: int = BOARD_SIZE) -> Position:
        """
        Build the position of a linear, row-major slot.

        Parameters
        ----------
        index : int
            Slot id in [0, size * size).
        size : int, optional
            Side length of the board (default is 4).

        Returns
        -------
        Position
            The matching coordinate.

        Raises
        ------
        ValueError
            If the index does not address a cell of the board.
        """
        if not 0 <= index < size * size:
            raise ValueError(f'index must be in [0, {size * size}), got {index}')
        return cls(index // size, index % size)

    def index(self, size: int = BOARD_SIZE) -> int:
        """Linear, row-major slot id of the position."""
        return self.row * size + self.col

    def is_out_of_bounds(self, size: int = BOARD_SIZE) -> bool:
        """Check if the position falls outside a board of the given size."""
        return not (0 <= self.row < size and 0 <= self.col < size)

    def __add__(self, direction: Direction) -> Position:
        d_row, d_col = offset(direction)
        return Position(self.row + d_row, self.col + d_col)


def offset(direction: Direction) -> tuple[int, int]:
    """
    Unit offset of a direction.

    Parameters
    ----------
    direction : Direction
        The direction to convert.

    Returns
    -------
    tuple[int, int]
        (d_row, d_col): Up=(-1, 0), Down=(1, 0), Left=(0, -1), Right=(0, 1).
    """
    return Direction(direction).offset


def from_displacement(dx: float, dy: float) -> Direction:
    """
    Classify a 2D displacement, such as a swipe gesture, as a direction.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive to the right.
    dy : float
        Vertical displacement, positive downwards (screen coordinates).

    Returns
    -------
    Direction
        Horizontal direction if ``|dx| > |dy|``, vertical direction otherwise.

    Notes
    -----
    - Ties, including a zero displacement, resolve to the vertical branch.
    - A zero vertical displacement on that branch gives ``Direction.UP``.

    Examples
    --------
    >>> from_displacement(5, 1)
    <Direction.RIGHT: 'right'>
    >>> from_displacement(1, -5)
    <Direction.UP: 'up'>
    """
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def build_traversal(direction: Direction, size: int = BOARD_SIZE) -> list[Position]:
    """
    Order in which source cells are visited during a move.

    Parameters
    ----------
    direction : Direction
        The direction of the move.
    size : int, optional
        Side length of the board (default is 4).

    Returns
    -------
    list[Position]
        All ``size * size`` positions, rows outer and columns inner.

    Notes
    -----
    - Rows run from the bottom edge up when moving down.
    - Columns run from the right edge leftwards when moving right.
    - Otherwise both run in ascending order.
    - Cells nearest to the destination edge come first, so a tile is always processed after the tile in front of it.
    """
    direction = Direction(direction)
    rows = range(size - 1, -1, -1) if direction is Direction.DOWN else range(size)
    cols = range(size - 1, -1, -1) if direction is Direction.RIGHT else range(size)
    return [Position(row, col) for row in rows for col in cols]
