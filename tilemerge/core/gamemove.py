"""
Move utilities for the tile merge game, providing functions for determining legal and illegal directions.
"""

from tilemerge.core.board import Board
from tilemerge.core.geometry import Direction


def legal_directions(board: Board) -> list[Direction]:
    """
    Determine legal directions for the current board.

    Parameters
    ----------
    board : Board
        The board to probe. It is not modified.

    Returns
    -------
    list[Direction]
        Directions whose move would change the board, in declaration order.
    """
    return [direction for direction in Direction if board.can_move(direction)]


def illegal_directions(board: Board) -> list[Direction]:
    """
    Determine illegal directions for the current board.

    Parameters
    ----------
    board : Board
        The board to probe. It is not modified.

    Returns
    -------
    list[Direction]
        Directions whose move would leave the board unchanged.

    Notes
    -----
    This function is the complement of `legal_directions`.
    """
    return [direction for direction in Direction if not board.can_move(direction)]


def has_legal_move(board: Board) -> bool:
    """Check if any direction would change the board."""
    return board.has_legal_move
