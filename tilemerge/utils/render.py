"""
Render helpers turning positioned tiles into labels and animation hints.
"""

from tilemerge.core.geometry import BOARD_SIZE, Position
from tilemerge.core.tile import Tile, TileState

# ##: Numbers above this share the "super" style.
LARGEST_STYLED_NUMBER = 2048


def tile_class_name(position: Position, tile: Tile, size: int = BOARD_SIZE) -> str:
    """
    Style classes of a positioned tile.

    Parameters
    ----------
    position : Position
        Cell the tile is drawn in.
    tile : Tile
        The tile to draw.
    size : int, optional
        Side length of the board (default is 4).

    Returns
    -------
    str
        Classes of the form ``tile tile-{number} tile-{col}-{row} tile-{state}``.

    Examples
    --------
    >>> tile_class_name(Position(1, 2), Tile(8))
    'tile tile-8 tile-2-1 tile-new'
    """
    number = str(tile.number) if tile.number <= LARGEST_STYLED_NUMBER else 'super'
    index = position.index(size)
    return f'tile tile-{number} tile-{index % size}-{index // size} tile-{tile.state.value}'


def animation_start(position: Position, tile: Tile) -> Position:
    """
    Position a tile's slide animation starts from.

    Merged tiles appear in place; tiles that remember a previous cell slide from it; new tiles appear in place.
    """
    if tile.state is TileState.MERGED or tile.previous_position is None:
        return position
    return tile.previous_position
