"""Command-line entry point for running Monty Hall simulations."""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import load_config
from .exceptions import MontyHallError
from .reporting import format_proportions, summarize_strategies, win_proportions
from .simulator import MontyHallSimulator, SimulationConfig

LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='monty-hall',
        description="Simulate the Monty Hall game and compare stay vs switch."
    )
    parser.add_argument('--games', '-n', type=int, default=None,
                        help="Number of games to play (default: from config, else 100)")
    parser.add_argument('--seed', type=int, default=None,
                        help="Random seed for reproducible runs")
    parser.add_argument('--config', default=None,
                        help="Path to a YAML config file with a monty_hall section")
    parser.add_argument('--summary', action='store_true',
                        help="Also print win rates with confidence intervals")
    parser.add_argument('--log-level', default='WARNING', type=str.upper,
                        choices=LOG_LEVELS,
                        help="Log level for messages written to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simulator."""
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    try:
        config = load_config(args.config)
        config = SimulationConfig(
            n_games=config.n_games if args.games is None else args.games,
            random_seed=config.random_seed if args.seed is None else args.seed
        )
        simulator = MontyHallSimulator.from_config(config)
        results = simulator.play_n_games()
    except MontyHallError as e:
        logger.error(f"Simulation failed: {e}")
        return 2

    print(format_proportions(win_proportions(results)))
    if args.summary:
        print()
        print(summarize_strategies(results).round(4).to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
