"""
Python implementation of a tile merge game session.

This module provides the `TileMergeGame` class, which drives a board through a game: reset, moves, and the
terminal declaration.
"""

from .tilemerge import TileMergeGame

__all__ = ["TileMergeGame"]
