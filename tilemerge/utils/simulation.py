"""
Random-play simulation of the tile merge game, used to check spawn statistics and game length.
"""

from dataclasses import dataclass

from numpy.random import default_rng
from tqdm import tqdm

from tilemerge.core import TileState, legal_directions
from tilemerge.envs import TileMergeGame


@dataclass
class GameStatistics:
    """Container for simulation results."""

    games: int
    total_moves: int
    max_tile: int
    spawned_tiles: int
    spawned_fours: int

    @property
    def four_fraction(self) -> float:
        """Share of spawned tiles that were a 4."""
        if self.spawned_tiles == 0:
            return 0.0
        return self.spawned_fours / self.spawned_tiles

    @property
    def moves_per_game(self) -> float:
        """Average number of effective moves per game."""
        if self.games == 0:
            return 0.0
        return self.total_moves / self.games


def _count_spawns(stats: GameStatistics, game: TileMergeGame):
    # ##: Tiles still tagged new were placed by the last reset or move.
    for _, tile in game.tiles:
        if tile.state is TileState.NEW:
            stats.spawned_tiles += 1
            stats.spawned_fours += tile.number == 2 * game.board.config.base_number


def play_random_games(num_games: int, seed: int | None = None, progress: bool = False) -> GameStatistics:
    """
    Play games with uniformly random legal moves until each one is finished.

    Parameters
    ----------
    num_games : int
        Number of games to play.
    seed : int, optional
        Seed of both the move choices and the games.
    progress : bool, optional
        Whether to show a progress bar (default is False).

    Returns
    -------
    GameStatistics
        Aggregated results over all games.
    """
    rng = default_rng(seed)
    stats = GameStatistics(games=0, total_moves=0, max_tile=0, spawned_tiles=0, spawned_fours=0)

    for _ in tqdm(range(num_games), desc='Simulating', unit='game', disable=not progress):
        game = TileMergeGame(seed=int(rng.integers(2**32)))
        _count_spawns(stats, game)
        while not game.is_finished:
            directions = legal_directions(game.board)
            direction = directions[rng.integers(len(directions))]
            game.step(direction)
            _count_spawns(stats, game)

        stats.games += 1
        stats.total_moves += game.moves
        stats.max_tile = max(stats.max_tile, int(game.observation.max()))

    return stats
