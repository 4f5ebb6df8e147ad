"""
Play the tile merge game by hand.
"""
import logging
from typing import Any

from tilemerge.envs import TileMergeGame
from tilemerge.utils import direction_from_key
from tilemerge.utils.windows import WindowBoard


def redraw(window: WindowBoard, envs: TileMergeGame):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    envs: TileMergeGame
        The game whose tiles are drawn
    """
    window.show_tiles(envs.tiles)


def reset(envs: TileMergeGame, window: WindowBoard):
    """
    Reset and redraw the game board.
    """
    envs.reset()
    redraw(window, envs)


def step(envs: TileMergeGame, window: WindowBoard, key: str):
    """
    Apply the move bound to a key.

    Parameters
    ----------
    envs: TileMergeGame
        The game

    window: WindowBoard
        Class to draw the game board

    key: str
        Name of the pressed key
    """
    direction = direction_from_key(key)
    if direction is None:
        return

    _, moved, finished = envs.step(direction)
    print(f"{direction.value}: moved={moved}")

    redraw(window, envs)
    if finished:
        print("terminated!")


def key_handler(envs: TileMergeGame, window: WindowBoard, event: Any):
    """
    Handle the keyboard.
    """
    print("pressed", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window)
        return None

    step(envs, window, event.key)
    return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    env = TileMergeGame()

    window_board = WindowBoard(title="Tile Merge", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(window_board, env)

    # Blocking event loop
    window_board.show(block=True)
