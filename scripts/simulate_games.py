"""
Random-play simulation of the tile merge game.

Measures:
1. Moves per game
2. Largest tile reached
3. Share of spawned tiles carrying the larger number

Usage:
    python scripts/simulate_games.py --games 100 --seed 7
"""

import argparse
import logging

from tilemerge.utils.simulation import play_random_games


def main():
    parser = argparse.ArgumentParser(description='Simulate random tile merge games')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)
    stats = play_random_games(args.games, seed=args.seed, progress=True)

    print(f'Games:            {stats.games}')
    print(f'Moves per game:   {stats.moves_per_game:.1f}')
    print(f'Largest tile:     {stats.max_tile}')
    print(f'Spawned tiles:    {stats.spawned_tiles}')
    print(f'Share of fours:   {stats.four_fraction:.3%}')


if __name__ == '__main__':
    main()
