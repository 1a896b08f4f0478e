"""
Monty Hall usage example.

Plays one game step by step, then a batch of games, and prints the win
proportion table and strategy comparison.
"""

import sys
from pathlib import Path

import numpy as np
from loguru import logger

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from monty_hall import (
    MontyHallSimulator,
    change_door,
    create_game,
    determine_winner,
    format_proportions,
    open_goat_door,
    select_door,
    win_proportions,
)


def walk_through_one_game(rng: np.random.Generator) -> None:
    game = create_game(rng)
    pick = select_door(rng)
    opened = open_goat_door(game, pick, rng)

    print(f"Doors: {game}")
    print(f"Contestant picks door {pick}, host opens door {opened}")
    for stay in (True, False):
        final = change_door(stay, opened, pick)
        label = "stay" if stay else "switch"
        print(f"  {label:>6}: door {final} -> {determine_winner(final, game).value}")


def main():
    logger.info("Running Monty Hall example")

    walk_through_one_game(np.random.default_rng(2024))

    simulator = MontyHallSimulator(n_games=10000, random_seed=42)
    results = simulator.play_n_games()

    print("\nWin proportions:")
    print(format_proportions(win_proportions(results)))

    print("\nStrategy comparison:")
    print(simulator.compare_strategies().round(4).to_string())


if __name__ == "__main__":
    main()
