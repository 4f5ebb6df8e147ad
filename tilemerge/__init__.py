"""
Tile merge puzzle engine: a square board of power-of-two tiles that slide, merge and spawn.
"""

from .core import Board, BoardConfig, Direction, Position, Tile, TileState, from_displacement
from .envs import TileMergeGame

__all__ = ["Board", "BoardConfig", "Direction", "Position", "Tile", "TileState", "TileMergeGame", "from_displacement"]
