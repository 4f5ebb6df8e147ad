"""
Tests for the tile merge game session.

Tests cover the session interface, seeding, and the terminal declaration once the board is stuck.
"""

from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from tilemerge.core.board import Board
from tilemerge.core.config import BoardConfig
from tilemerge.core.gamemove import legal_directions
from tilemerge.core.geometry import Direction
from tilemerge.envs.tilemerge import TileMergeGame


class TestGameInterface(TestCase):
    """Test TileMergeGame API and state management."""

    def setUp(self):
        """Initialize a fresh game before each test."""
        self.game = TileMergeGame(seed=3)

    def test_reset_state_initialization(self):
        """Reset starts a board with exactly 2 tiles."""
        obs = self.game.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(obs), 2)
        self.assertEqual(obs.shape, (4, 4))

        # ##>: Nothing played yet.
        self.assertEqual(self.game.moves, 0)
        self.assertFalse(self.game.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.game.reset(seed=42)
        board2 = self.game.reset(seed=42)

        np.testing.assert_array_equal(board1, board2)

    def test_step_return_signature(self):
        """Step returns tuple of (observation, moved, finished)."""
        self.game._board = Board.from_array(np.array([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]), rng=default_rng(0))
        obs, moved, finished = self.game.step(Direction.LEFT)

        self.assertIsInstance(obs, np.ndarray)
        self.assertEqual(obs[0, 0], 4)
        self.assertTrue(moved)
        self.assertFalse(finished)
        self.assertEqual(self.game.moves, 1)

    def test_step_accepts_names(self):
        self.game._board = Board.from_array(np.array([[0, 0, 0, 2], [0] * 4, [0] * 4, [0] * 4]), rng=default_rng(0))
        _, moved, _ = self.game.step(TileMergeGame.ACTIONS['left'])
        self.assertTrue(moved)

    def test_no_op_step_is_not_counted(self):
        self.game._board = Board.from_array(np.array([[2, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4]), rng=default_rng(0))
        _, moved, _ = self.game.step('left')
        self.assertFalse(moved)
        self.assertEqual(self.game.moves, 0)

    def test_tiles_match_board(self):
        self.assertEqual(len(self.game.tiles), 2)

    def test_config_size(self):
        game = TileMergeGame(config=BoardConfig(size=5), seed=1)
        self.assertEqual(game.observation.shape, (5, 5))
        self.assertEqual(game.size, 5)


class TestGameTermination(TestCase):
    """Test the terminal declaration."""

    def test_stuck_board_is_declared_terminal(self):
        """When the last move leaves no legal move, spawning is disabled and the game ends."""
        game = TileMergeGame(seed=0)

        # ##>: Right frees the bottom-left cell; the spawned 2 there has no equal neighbour.
        rows = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4], [8, 16, 32, 0]])
        game._board = Board.from_array(rows, config=BoardConfig(four_threshold=1.0), rng=default_rng(0))
        _, moved, finished = game.step(Direction.RIGHT)

        self.assertTrue(moved)
        self.assertEqual(game.board.num_tiles, 16)
        self.assertTrue(finished)
        self.assertTrue(game.board.is_terminal)

    def test_stuck_fresh_board_is_finished_at_reset(self):
        """A full starting board without equal neighbours ends the game before any step."""
        game = TileMergeGame(config=BoardConfig(size=2, start_tiles=4), seed=91)

        np.testing.assert_array_equal(game.observation, np.array([[2, 4], [4, 2]]))
        self.assertTrue(game.is_finished)
        self.assertTrue(game.board.is_terminal)
        self.assertEqual(legal_directions(game.board), [])

    def test_reset_declares_terminal_for_every_seed(self):
        """Full 2x2 starting boards are finished exactly when they have no legal move."""
        game = TileMergeGame(config=BoardConfig(size=2, start_tiles=4), seed=0)
        for seed in range(100):
            game.reset(seed=seed)
            self.assertEqual(game.is_finished, not legal_directions(game.board))

    def test_finished_game_never_spawns(self):
        game = TileMergeGame(seed=5)
        game.board.disable_spawning()
        count = game.board.num_tiles
        for direction in Direction:
            game.step(direction)
        self.assertLessEqual(game.board.num_tiles, count)
        self.assertTrue(game.is_finished)

    def test_random_play_terminates(self):
        """A game played with random legal moves always ends."""
        game = TileMergeGame(seed=11)
        rng = default_rng(11)
        for _ in range(5000):
            if game.is_finished:
                break
            directions = [direction for direction in Direction if game.board.can_move(direction)]
            game.step(directions[rng.integers(len(directions))])

        self.assertTrue(game.is_finished)
        self.assertFalse(game.board.has_legal_move)


if __name__ == "__main__":
    main()
