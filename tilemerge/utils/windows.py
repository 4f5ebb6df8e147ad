"""
Graphical window for the tile merge game.

This module draws the positioned tiles of a board in a Matplotlib figure and forwards keyboard events to a
handler, so a game can be played by hand.
"""

from collections.abc import Callable, Iterable

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from tilemerge.core.geometry import Position
from tilemerge.core.tile import Tile


def cell_numbers(tiles: Iterable[tuple[Position, Tile]], size: int) -> list[int]:
    """
    Number to display in each cell, row-major, zero for empty cells.

    Parameters
    ----------
    tiles : Iterable[tuple[Position, Tile]]
        Positioned tiles, as returned by ``Board.tiles_for_render``.
    size : int
        Side length of the board.

    Returns
    -------
    list[int]
        ``size * size`` numbers. When a merged tile and its ghost share a cell, the merged number wins.
    """
    numbers = [0] * (size * size)
    for position, tile in tiles:
        index = position.index(size)
        numbers[index] = max(numbers[index], tile.number)
    return numbers


class WindowBoard:
    """
    A class for rendering the tile merge board using Matplotlib.

    Methods
    -------
    show_tiles(tiles: Iterable[tuple[Position, Tile]])
        Update the display with the current positioned tiles.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }
    SUPER_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        """
        Initialize the game window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The side length of the board.
        """
        self.size = size
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        # ##: One sub-axis and one text per cell.
        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Event | None = None):
        self.closed = True

    def show_tiles(self, tiles: Iterable[tuple[Position, Tile]]):
        """
        Show or update the board.

        Parameters
        ----------
        tiles : Iterable[tuple[Position, Tile]]
            Positioned tiles to display.
        """
        for ax, text, value in zip(self.axes, self.texts, cell_numbers(tiles, self.size)):
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, self.SUPER_COLOR))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with every key press event of the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
