#!/usr/bin/env python3
# main.py - Entry point: read config, wire components, run one seeded simulation

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from bank import Bank
from board import Board
from config import load_config
from dice import two_six_sided
from game import Game
from logging_config import configure_logging
from production import ResourceProduction


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a seeded four-player hex board simulation.")
    parser.add_argument("config", nargs="?", help="Config file containing a 'turns: N' line")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default 42)")
    parser.add_argument("--delay", type=float, default=None, help="Seconds to pause between turns")
    parser.add_argument("--show-board", action="store_true", help="Print the board before and after")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_game(max_rounds: int, seed: int, turn_delay: float = 0.0) -> Game:
    rng = random.Random(seed)
    board = Board()
    bank = Bank.default()
    production = ResourceProduction(two_six_sided(rng), bank, board, rng)
    return Game(board, bank, production, max_rounds, rng, turn_delay=turn_delay)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)
    config = load_config(args.config, seed=args.seed, turn_delay=args.delay)

    game = build_game(config.max_rounds, config.seed, config.turn_delay)
    if args.show_board:
        game.board.print_board()
    game.start()
    game.print_status()
    if args.show_board:
        game.board.print_board()
    return 0


if __name__ == "__main__":
    sys.exit(main())
