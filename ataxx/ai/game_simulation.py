#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Run matches between two Minimax players.

Player A plays Red in the first game and the colors are swapped after every
game. Moves are logged, the standings are printed at the end, and the
material curve of every game can be saved as a chart.
"""
import argparse
import logging
import time

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ataxx.config import LOG_LEVELS, get_log_level, get_search_depth  # noqa: E402

from .game import Game  # noqa: E402
from .minimax_player import AI  # noqa: E402
from .piece import PieceColor  # noqa: E402

logger = logging.getLogger(__name__)


def main(number_games=2, depth_a=None, depth_b=None, max_moves=None, blocks=(), plot=None):
    """Run a simulation between two Minimax players.

    Args:
        number_games: Number of games to play
        depth_a: Search depth for player A (default: configured depth)
        depth_b: Search depth for player B (default: configured depth)
        max_moves: Maximum number of plies per game (default: no limit)
        blocks: Square names to block (with their reflections) before each game
        plot: Path of a PNG chart of the material curves, or None

    Returns:
        dict: standings and the GameResult of every game
    """
    depth_a = depth_a or get_search_depth()
    depth_b = depth_b or get_search_depth()

    print("\n=== Ataxx Game Simulation ===")
    print(f"- Player A depth: {depth_a}")
    print(f"- Player B depth: {depth_b}")
    print(f"- Number of games: {number_games}")
    if blocks:
        print(f"- Blocks: {', '.join(blocks)}")

    stats = {"a_wins": 0, "b_wins": 0, "draws": 0, "games": []}
    a_is_red = True

    for i in range(number_games):
        game = Game()
        game.add_blocks(blocks)
        red_depth, blue_depth = (depth_a, depth_b) if a_is_red else (depth_b, depth_a)
        red = AI(game, PieceColor.RED, red_depth)
        blue = AI(game, PieceColor.BLUE, blue_depth)

        logger.info("Game %d: A plays %s", i + 1, "Red" if a_is_red else "Blue")
        begin = time.time()
        result = game.play(red, blue, max_moves=max_moves)
        elapsed = time.time() - begin

        if result.winner == PieceColor.EMPTY:
            stats["draws"] += 1
        elif (result.winner == PieceColor.RED) == a_is_red:
            stats["a_wins"] += 1
        else:
            stats["b_wins"] += 1
        stats["games"].append(result)

        print(f"\nGame {i + 1}/{number_games}: {result.outcome} "
              f"({result.red_pieces}-{result.blue_pieces} in {result.plies} moves, {elapsed:.2f}s)")
        print(game.board().to_string(True))

        # Switch colors for next game
        a_is_red = not a_is_red

    print("\n=== Final Results ===")
    print(f"Player A wins: {stats['a_wins']}")
    print(f"Player B wins: {stats['b_wins']}")
    print(f"Draws: {stats['draws']}")

    if plot:
        create_material_visualization(stats["games"], plot)
    return stats


def create_material_visualization(results, path):
    """Save a line chart of red-minus-blue pieces per ply for every game."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for i, result in enumerate(results):
        ax.plot(range(len(result.material)), result.material, label=f"Game {i + 1}: {result.outcome}")
    ax.axhline(0, color='grey', linewidth=0.8)
    ax.set_title('Material Difference per Ply')
    ax.set_xlabel('Ply')
    ax.set_ylabel('Red pieces - Blue pieces')
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    print(f"\nMaterial chart saved as '{path}'")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run Ataxx games between two Minimax players')
    parser.add_argument('--number-games', type=int, default=2,
                        help='Number of games to play')
    parser.add_argument('--depth-a', type=int, default=None,
                        help='Search depth for player A (default: ATAXX_SEARCH_DEPTH or 4)')
    parser.add_argument('--depth-b', type=int, default=None,
                        help='Search depth for player B (default: ATAXX_SEARCH_DEPTH or 4)')
    parser.add_argument('--max-moves', type=int, default=None,
                        help='Maximum number of moves per game')
    parser.add_argument('--block', action='append', default=[], metavar='SQUARE',
                        help='Block SQUARE and its reflections (repeatable)')
    parser.add_argument('--plot', default=None, metavar='PATH',
                        help='Save a chart of the material curves to PATH')
    parser.add_argument('--log-file', default=None, metavar='PATH',
                        help='Write the log to PATH instead of the console')
    parser.add_argument('--log-level', default=None, type=str.upper, choices=LOG_LEVELS,
                        help='Logging level (default: ATAXX_LOG_LEVEL or INFO)')
    return parser.parse_args(argv)


def cli(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        filename=args.log_file,
        filemode='w',
        level=(args.log_level or get_log_level()).upper(),
        format='%(asctime)s %(message)s'
    )
    main(args.number_games, args.depth_a, args.depth_b,
         args.max_moves, args.block, args.plot)


if __name__ == "__main__":
    cli()
