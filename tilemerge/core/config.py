"""
Configuration of a tile merge board.
"""

from dataclasses import dataclass

from tilemerge.core.geometry import BOARD_SIZE
from tilemerge.core.tile import is_power_of_two


@dataclass(frozen=True)
class BoardConfig:
    """
    Board configuration.

    A spawn draws a uniform value in [0, 1); values strictly above ``four_threshold`` spawn twice the base
    number, so the default gives the usual 90% twos and 10% fours.
    """

    size: int = BOARD_SIZE  # Side length of the square board
    start_tiles: int = 2  # Tiles spawned on a fresh board
    four_threshold: float = 0.9  # Spawn draw above this gives a 4
    base_number: int = 2  # Number carried by the common spawn

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be at least 2, got {self.size}')
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be in [0, {self.size * self.size}], got {self.start_tiles}')
        if not 0.0 <= self.four_threshold <= 1.0:
            raise ValueError(f'four_threshold must be in [0, 1], got {self.four_threshold}')
        if not is_power_of_two(self.base_number):
            raise ValueError(f'base_number must be a positive power of two, got {self.base_number}')

    @property
    def num_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size
