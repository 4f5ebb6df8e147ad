"""
Board of the tile merge game.

The board owns its cells and the random generator used to spawn tiles. A move runs in three steps:

1. every tile is marked static and remembers the cell it starts from,
2. cells are visited in traversal order and each tile slides, merging at most once,
3. a new tile is spawned if anything moved and spawning is still enabled.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from numpy import asarray, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from tilemerge.core.config import BoardConfig
from tilemerge.core.geometry import Direction, Position, build_traversal
from tilemerge.core.tile import Tile, TileState

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Shared generator of the scratch boards used to test moves; they never spawn so it is never drawn from.
_SCRATCH_GENERATOR = default_rng()

Cell = Tile | None


def _can_absorb(tile: Tile, occupant: Tile) -> bool:
    """Check if a sliding tile may merge into the tile occupying the next cell."""
    if occupant.state is TileState.MERGED:
        return False
    return occupant == tile


class Board:
    """
    Square board of cells, each empty or holding one tile.

    Parameters
    ----------
    cells : Sequence[Tile | None], optional
        Row-major cell contents (default is an empty board).
    rng : Generator, optional
        Random generator used for spawning (default is a freshly seeded generator).
    config : BoardConfig, optional
        Board configuration (default is a 4x4 board).

    Raises
    ------
    ValueError
        If the number of cells does not match the configured size.
    """

    def __init__(
        self,
        cells: Sequence[Cell] | None = None,
        rng: Generator | None = None,
        config: BoardConfig | None = None,
    ):
        self._config = config or BoardConfig()
        if cells is None:
            cells = [None] * self._config.num_cells
        if len(cells) != self._config.num_cells:
            raise ValueError(f'Expected {self._config.num_cells} cells, got {len(cells)}')

        self._cells: list[Cell] = list(cells)
        self._rng = rng if rng is not None else default_rng()
        self._spawning_enabled = True

    @classmethod
    def default(cls, rng: Generator | None = None, config: BoardConfig | None = None) -> Board:
        """
        Create an empty board and spawn the starting tiles.

        Parameters
        ----------
        rng : Generator, optional
            Random generator used for spawning.
        config : BoardConfig, optional
            Board configuration (default is a 4x4 board with two starting tiles).

        Returns
        -------
        Board
            A board ready to play.
        """
        board = cls(rng=rng, config=config)
        for _ in range(board.config.start_tiles):
            board._spawn_tile()
        return board

    @classmethod
    def from_array(cls, array: ndarray, rng: Generator | None = None, config: BoardConfig | None = None) -> Board:
        """
        Create a board from a square array of numbers, zero meaning empty.

        Parameters
        ----------
        array : ndarray
            Square 2D array of tile numbers.
        rng : Generator, optional
            Random generator used for spawning.
        config : BoardConfig, optional
            Board configuration (default matches the array size).

        Returns
        -------
        Board
            A board holding new tiles with the given numbers.
        """
        array = asarray(array)
        config = config or BoardConfig(size=array.shape[0])
        cells = [Tile(int(value)) if value else None for value in array.flat]
        return cls(cells, rng=rng, config=config)

    @property
    def config(self) -> BoardConfig:
        """Configuration of the board."""
        return self._config

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self._config.size

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Row-major cell contents."""
        return tuple(self._cells)

    @property
    def num_tiles(self) -> int:
        """Number of occupied cells."""
        return sum(tile is not None for tile in self._cells)

    @property
    def spawning_enabled(self) -> bool:
        """Whether moves may still spawn new tiles."""
        return self._spawning_enabled

    @property
    def is_terminal(self) -> bool:
        """
        Check if the board has been frozen.

        Returns
        -------
        bool
            True once ``disable_spawning`` has been called. A board with no legal move left is not terminal
            until a collaborator declares it so.
        """
        return not self._spawning_enabled

    @property
    def has_legal_move(self) -> bool:
        """Check if at least one direction would change the board."""
        return any(self.can_move(direction) for direction in Direction)

    def get(self, position: Position) -> Cell:
        """
        Get the tile at a position.

        Raises
        ------
        ValueError
            If the position falls outside the board.
        """
        if position.is_out_of_bounds(self.size):
            raise ValueError(f'{position} is outside a {self.size}x{self.size} board')
        return self._cells[position.index(self.size)]

    def empty_positions(self) -> list[Position]:
        """Positions of all empty cells, in row-major order."""
        return [Position.from_index(index, self.size) for index, tile in enumerate(self._cells) if tile is None]

    def disable_spawning(self) -> None:
        """Freeze the board: later moves never spawn new tiles."""
        self._spawning_enabled = False

    def copy(self, rng: Generator | None = None) -> Board:
        """
        Copy the board with independent tiles.

        Parameters
        ----------
        rng : Generator, optional
            Random generator of the copy (default is a freshly seeded generator).

        Returns
        -------
        Board
            A board equal to this one, with the same spawning flag.
        """
        board = Board([tile.snapshot() if tile else None for tile in self._cells], rng=rng, config=self._config)
        board._spawning_enabled = self._spawning_enabled
        return board

    def can_move(self, direction: Direction | str) -> bool:
        """
        Check if a move in the given direction would change the board.

        The move is played on a scratch copy with spawning disabled; this board is left untouched.
        """
        scratch = self.copy(rng=_SCRATCH_GENERATOR)
        scratch.disable_spawning()
        return scratch.move(direction)

    def move(self, direction: Direction | str) -> bool:
        """
        Slide every tile in the given direction, merging equal neighbours.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move, or its lower-case name.

        Returns
        -------
        bool
            True if at least one tile moved or merged.

        Raises
        ------
        ValueError
            If the direction name is unknown.

        Notes
        -----
        - A tile absorbs at most one other tile per move and stops in the cell it merged into.
        - A move that changes nothing spawns nothing.
        """
        direction = Direction(direction)
        self._prepare_for_move()

        moved = False
        for start_position in build_traversal(direction, self.size):
            moved |= self._traverse_from(start_position, direction)

        spawned = moved and self._spawn_tile()
        _logger.debug('Move %s: moved=%s, spawned=%s', direction.value, moved, spawned)
        return moved

    def tiles_for_render(self) -> list[tuple[Position, Tile]]:
        """
        Positioned tiles for a renderer.

        Returns
        -------
        list[tuple[Position, Tile]]
            One entry per occupied cell in row-major order. A merged tile is followed by a static ghost holding
            half its number at the same position, so the merge can be drawn as two overlapping tiles.

        Notes
        -----
        Entries are copies; the board is not modified.
        """
        entries = []
        for index, tile in enumerate(self._cells):
            if tile is None:
                continue
            position = Position.from_index(index, self.size)
            entries.append((position, tile.snapshot()))
            if tile.state is TileState.MERGED:
                entries.append((position, tile.ghost()))
        return entries

    def to_array(self) -> ndarray:
        """Numbers of the board as a 2D array, zero for empty cells."""
        array = zeros((self.size, self.size), dtype=int64)
        for index, tile in enumerate(self._cells):
            if tile is not None:
                array.flat[index] = tile.number
        return array

    def _prepare_for_move(self) -> None:
        for index, tile in enumerate(self._cells):
            if tile is not None:
                tile.state = TileState.STATIC
                tile.previous_position = Position.from_index(index, self.size)

    def _traverse_from(self, start_position: Position, direction: Direction) -> bool:
        tile = self._cells[start_position.index(self.size)]
        if tile is None:
            return False

        # ##: Slide one cell at a time until blocked.
        new_position = start_position
        while True:
            next_position = new_position + direction
            if next_position.is_out_of_bounds(self.size):
                break

            occupant = self._cells[next_position.index(self.size)]
            if occupant is None:
                new_position = next_position
                continue

            if _can_absorb(tile, occupant):
                tile.number *= 2
                tile.state = TileState.MERGED
                new_position = next_position
            break

        if new_position == start_position:
            return False

        self._cells[start_position.index(self.size)] = None
        self._cells[new_position.index(self.size)] = tile
        return True

    def _spawn_tile(self) -> bool:
        """
        Place a new tile in a random empty cell.

        Returns
        -------
        bool
            True if a tile was placed, False if spawning is disabled or the board is full.
        """
        if not self._spawning_enabled:
            return False

        empty = self.empty_positions()
        if not empty:
            return False

        # ##: One draw for the cell, one for the number.
        position = empty[self._rng.integers(len(empty))]
        if self._rng.random() > self._config.four_threshold:
            number = self._config.base_number * 2
        else:
            number = self._config.base_number

        self._cells[position.index(self.size)] = Tile(number)
        _logger.debug('Spawned %d at (%d, %d)', number, position.row, position.col)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f'Board(cells={self._cells!r}, spawning_enabled={self._spawning_enabled})'

    def __str__(self) -> str:
        return '\n'.join(' \t'.join(map(str, row)) for row in self.to_array().tolist())
