"""
Tile value object and its animation state tag.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from numbers import Integral

from tilemerge.core.geometry import Position


class TileState(str, Enum):
    """
    Animation state of a tile.

    NEW: spawned after the last move.
    STATIC: present before the last move, possibly slid.
    MERGED: absorbed another tile during the last move.
    """

    NEW = 'new'
    STATIC = 'static'
    MERGED = 'merged'


def is_power_of_two(number: int) -> bool:
    """Check if a number is a positive power of two. Booleans and non-integers never are."""
    if isinstance(number, bool) or not isinstance(number, Integral):
        return False
    return number > 0 and number & (number - 1) == 0


@dataclass(eq=False)
class Tile:
    """
    A numbered tile living in exactly one cell of a board.

    Two tiles are equal when they carry the same number. The state and the previous position are animation
    metadata and take no part in comparisons.
    """

    number: int
    state: TileState = TileState.NEW
    previous_position: Position | None = None

    def __post_init__(self):
        if not is_power_of_two(self.number):
            raise ValueError(f'Tile number must be a positive power of two, got {self.number}')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.number == other.number

    def ghost(self) -> Tile:
        """
        Build the pre-merge ghost of a merged tile.

        Returns
        -------
        Tile
            A static tile with half the number and the same previous position.
        """
        return Tile(self.number // 2, TileState.STATIC, self.previous_position)

    def snapshot(self) -> Tile:
        """Independent copy of the tile."""
        return replace(self)
