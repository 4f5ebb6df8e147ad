"""
This module provides helpers around the board: input translation and render labels.

The Matplotlib window lives in `tilemerge.utils.windows` and is imported on demand.
"""

from .controls import KEY_CODES, KEY_NAMES, direction_from_key, direction_from_swipe
from .render import animation_start, tile_class_name

__all__ = [
    "KEY_CODES",
    "KEY_NAMES",
    "direction_from_key",
    "direction_from_swipe",
    "animation_start",
    "tile_class_name",
]
