"""
Rules of the tile merge game.

It includes the board geometry (positions, directions and traversal order), the tile value object, the board
with its move, merge and spawn logic, and helpers for probing legal directions.
"""

from .board import Board
from .config import BoardConfig
from .gamemove import has_legal_move, illegal_directions, legal_directions
from .geometry import BOARD_SIZE, Direction, Position, build_traversal, from_displacement, offset
from .tile import Tile, TileState

__all__ = [
    "BOARD_SIZE",
    "Board",
    "BoardConfig",
    "Direction",
    "Position",
    "Tile",
    "TileState",
    "build_traversal",
    "from_displacement",
    "offset",
    "legal_directions",
    "illegal_directions",
    "has_legal_move",
]
