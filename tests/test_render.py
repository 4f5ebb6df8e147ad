"""
Tests for render labels and the Matplotlib window.
"""

from unittest import TestCase, main
from unittest.mock import patch

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402

from tilemerge.core.board import Board  # noqa: E402
from tilemerge.core.geometry import Direction, Position  # noqa: E402
from tilemerge.core.tile import Tile, TileState  # noqa: E402
from tilemerge.utils.render import animation_start, tile_class_name  # noqa: E402
from tilemerge.utils.windows import WindowBoard, cell_numbers  # noqa: E402


class TestClassName(TestCase):
    """Test the style classes of positioned tiles."""

    def test_class_name(self):
        self.assertEqual(tile_class_name(Position(1, 2), Tile(8)), "tile tile-8 tile-2-1 tile-new")
        self.assertEqual(
            tile_class_name(Position(3, 0), Tile(2048, TileState.MERGED)), "tile tile-2048 tile-0-3 tile-merged"
        )

    def test_super_tile(self):
        self.assertEqual(tile_class_name(Position(0, 0), Tile(4096, TileState.STATIC)), "tile tile-super tile-0-0 tile-static")


class TestAnimationStart(TestCase):
    """Test where slide animations start."""

    def test_new_tile_appears_in_place(self):
        self.assertEqual(animation_start(Position(2, 2), Tile(2)), Position(2, 2))

    def test_static_tile_slides_from_previous_position(self):
        tile = Tile(2, TileState.STATIC, Position(0, 0))
        self.assertEqual(animation_start(Position(0, 3), tile), Position(0, 0))

    def test_merged_tile_appears_in_place(self):
        tile = Tile(4, TileState.MERGED, Position(0, 1))
        self.assertEqual(animation_start(Position(0, 0), tile), Position(0, 0))

    def test_ghost_slides_from_moving_tile_origin(self):
        """The ghost of a merge slides in while the merged tile pops in place."""
        board = Board.from_array(np.array([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
        board.disable_spawning()
        board.move(Direction.LEFT)

        (position, merged), (_, ghost) = board.tiles_for_render()
        self.assertEqual(animation_start(position, merged), Position(0, 0))
        self.assertEqual(animation_start(position, ghost), Position(0, 1))


class TestWindowBoard(TestCase):
    """Test the window on a headless backend."""

    def test_cell_numbers_prefer_merged_number(self):
        tiles = [
            (Position(0, 0), Tile(4, TileState.MERGED)),
            (Position(0, 0), Tile(2, TileState.STATIC)),
            (Position(3, 3), Tile(8)),
        ]
        numbers = cell_numbers(tiles, size=4)
        self.assertEqual(numbers[0], 4)
        self.assertEqual(numbers[15], 8)
        self.assertEqual(sum(numbers), 12)

    def test_show_tiles(self):
        window = WindowBoard(title="Tile Merge", size=4)
        board = Board.from_array(np.array([[2, 0, 0, 0], [0] * 4, [0] * 4, [0, 0, 0, 4096]]))

        with patch("tilemerge.utils.windows.plt.pause"):
            window.show_tiles(board.tiles_for_render())

        self.assertEqual(window.texts[0].get_text(), "2")
        self.assertEqual(window.texts[1].get_text(), "")
        self.assertEqual(window.texts[15].get_text(), "4096")

        window.close()
        self.assertTrue(window.closed)


if __name__ == "__main__":
    main()
