"""Tile merge game session driving a single board."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.core.board import Board
from tilemerge.core.config import BoardConfig
from tilemerge.core.geometry import Direction, Position
from tilemerge.core.tile import Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TileMergeGame:
    """
    Tile merge game session.

    This class owns one board and plays the collaborator role around it: it seeds the random generator,
    forwards moves, and declares the board terminal once no direction can change it.
    """

    # ##: Current game state.
    _board: Board | None = None
    _moves: int = 0

    # ##: All Actions.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(self, config: BoardConfig | None = None, seed: int | None = None):
        """
        Initialize the game.

        Parameters
        ----------
        config : BoardConfig, optional
            Board configuration (default is a 4x4 board).
        seed : int, optional
            Random seed for reproducibility.
        """
        self._config = config or BoardConfig()
        self.reset(seed=seed)

    @property
    def board(self) -> Board:
        """Board of the current game."""
        return self._board

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self._config.size

    @property
    def moves(self) -> int:
        """Number of effective moves played since the last reset."""
        return self._moves

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True once the board has been declared terminal.
        """
        return self._board.is_terminal

    @property
    def observation(self) -> ndarray:
        """
        Get the current numbers of the board.

        Returns
        -------
        ndarray
            The board numbers as a 2D numpy array, zero for empty cells.
        """
        return self._board.to_array()

    @property
    def tiles(self) -> list[tuple[Position, Tile]]:
        """Positioned tiles for a renderer, see ``Board.tiles_for_render``."""
        return self._board.tiles_for_render()

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on a fresh board with its starting tiles.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility.

        Returns
        -------
        ndarray
            The new board numbers.

        Notes
        -----
        A fresh board that is already stuck is declared finished at once.
        """
        self._board = Board.default(rng=default_rng(seed), config=self._config)
        self._moves = 0
        _logger.info('New %dx%d game (seed=%s)', self.size, self.size, seed)
        self._finish_if_stuck()
        return self.observation

    def step(self, direction: Direction | str) -> tuple[ndarray, bool, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move, or its lower-case name.

        Returns
        -------
        tuple[ndarray, bool, bool]
            A tuple containing:
            - The board numbers after the move (ndarray)
            - Whether the move changed the board (bool)
            - Whether the game is finished (bool)

        Notes
        -----
        - Moves on a finished game still slide and merge tiles but never spawn.
        - When no direction can change the board any more, spawning is disabled and the game is finished.
        """
        moved = self._board.move(direction)
        if moved:
            self._moves += 1

        self._finish_if_stuck()
        return self.observation, moved, self.is_finished

    def _finish_if_stuck(self):
        """Disable spawning once no direction can change the board any more."""
        if not self._board.is_terminal and not self._board.has_legal_move:
            self._board.disable_spawning()
            _logger.info('No legal move left after %d moves, game over', self._moves)

    def render(self) -> None:
        """
        Render the game board. This method prints the current numbers of the board to the console.
        """
        print(self._board)
