#!/usr/bin/env python3
"""
run.py - Main entry point for the multi-player tic-tac-toe game
"""

import argparse
import sys
from collections import Counter

import numpy as np

from tictactoe.debug import debug, DebugLevel

# --- Utility Functions ---

def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.configure(level=getattr(DebugLevel, args.debug_level.upper()))

    if args.log_file:
        debug.configure(log_file=args.log_file)

def build_bot_game(args, rng):
    """Create a game where every seat is a bot."""
    from tictactoe.game.board import Board
    from tictactoe.game.rules import TicTacToeGame, default_markers
    from tictactoe.players import Player
    from tictactoe.utils import GameMode

    mode = GameMode[args.mode.upper()]
    grid_size = args.grid_size if mode == GameMode.FRENZY else None
    players = [Player.bot(number, marker)
               for number, marker in enumerate(default_markers(args.players), start=1)]
    return TicTacToeGame(Board(players, mode, grid_size), rng=rng)

# --- Command Handlers ---

def handle_play(args):
    """Handle the 'play' command."""
    from tictactoe.interfaces.cli import GameSession

    session = GameSession(rng=np.random.default_rng(args.seed))
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")

def handle_simulate(args):
    """Handle the 'simulate' command: bot-only games with a summary."""
    rng = np.random.default_rng(args.seed)
    game = build_bot_game(args, rng)
    outcomes = Counter()

    for index in range(args.games):
        if index:
            game.rematch()
        game.play_until_complete()

        winner = game.board.winner()
        outcomes[winner.label if winner else "Draw"] += 1
        if args.verbose:
            print(game.history_text() + game.board.score_text() + "\n" + game.board.grid_layout_text())
            print(game.board.result_text())

    print(f"Played {args.games} {game.board.mode.title} games on a "
          f"{game.board.grid_size}x{game.board.grid_size} grid:")
    for label, count in outcomes.most_common():
        print(f"  {label}: {count}")

def handle_benchmark(args):
    """Handle the 'benchmark' command."""
    rng = np.random.default_rng(args.seed)
    game = build_bot_game(args, rng)

    debug.start_timer("bot_games")
    total_moves = 0
    for index in range(args.iterations):
        if index:
            game.rematch()
        game.play_until_complete()
        total_moves += len(game.history)
    elapsed = debug.end_timer("bot_games")

    print(f"Played {args.iterations} games with {total_moves} total moves: "
          f"{elapsed:.6f} seconds total, "
          f"{elapsed / args.iterations * 1000:.6f} ms per game, "
          f"{elapsed / max(total_moves, 1) * 1000:.6f} ms per move")

def main():
    parser = argparse.ArgumentParser(
        description='Multi-player tic-tac-toe with Classic and Frenzy modes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py play
  python run.py simulate --mode frenzy --players 3 --grid-size 6 --games 20
  python run.py benchmark --iterations 200 --debug_level info
    """
    )
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    parser.add_argument('--log_file',
        type=str,
        help='Also write log records to this file')
    parser.add_argument('--seed',
        type=int,
        help='Random seed for turn order and bot fallback moves')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play interactively in the terminal')

    game_options = argparse.ArgumentParser(add_help=False)
    game_options.add_argument('--mode',
        choices=['classic', 'frenzy'],
        default='frenzy',
        help='Game mode')
    game_options.add_argument('--players',
        type=int,
        default=2,
        help='Number of bot players (min 2)')
    game_options.add_argument('--grid-size',
        type=int,
        default=5,
        help='Grid size for Frenzy games (Classic uses players + 1)')

    simulate_parser = subparsers.add_parser('simulate', parents=[game_options],
        help='Let bots play each other and summarize the results')
    simulate_parser.add_argument('--games',
        type=int,
        default=10,
        help='Number of games to play')
    simulate_parser.add_argument('--verbose',
        action='store_true',
        help='Print the final board of every game')

    benchmark_parser = subparsers.add_parser('benchmark', parents=[game_options],
        help='Benchmark bot game performance')
    benchmark_parser.add_argument('--iterations',
        type=int,
        default=100,
        help='Number of games to play')

    args = parser.parse_args()
    configure_debug(args)

    if args.command == 'play':
        handle_play(args)
    elif args.command == 'simulate':
        handle_simulate(args)
    elif args.command == 'benchmark':
        handle_benchmark(args)
    else:
        parser.print_help()
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
