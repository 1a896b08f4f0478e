"""
Monte Carlo simulation engine for the Monty Hall problem.

This module plays complete games and batches of games. Each game is scored for
both strategies against the same arrangement, initial pick and opened door, so
the stay and switch results of one game form a matched pair.

Features:
    - Single-game orchestration producing one STAY and one SWITCH record
    - Batch runs returning a tidy pandas DataFrame (two rows per game)
    - Seeded numpy Generator for reproducible batches
    - Strategy comparison with win rates and confidence intervals

Example:
    >>> from monty_hall.simulator import MontyHallSimulator
    >>>
    >>> simulator = MontyHallSimulator(n_games=10000, random_seed=42)
    >>> results = simulator.play_n_games()
    >>> len(results)
    20000
    >>> comparison = simulator.compare_strategies()
"""

from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional

import numpy as np
import pandas as pd
from loguru import logger

from .exceptions import InvalidArgumentError
from .game import (
    Trial,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from .reporting import summarize_strategies

RESULT_COLUMNS = ['strategy', 'outcome']
DEFAULT_N_GAMES = 100


def validate_n_games(n) -> int:
    """Return ``n`` as an int, raising if it is not a positive integer."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgumentError(f"Number of games must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgumentError(f"Number of games must be positive, got {n}")
    return int(n)


def validate_random_seed(seed) -> Optional[int]:
    """Return ``seed`` as an int (or None), raising if it is not a non-negative integer."""
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, Integral):
        raise InvalidArgumentError(f"Random seed must be an integer, got {seed!r}")
    if seed < 0:
        raise InvalidArgumentError(f"Random seed must be non-negative, got {seed}")
    return int(seed)


@dataclass
class SimulationConfig:
    """Configuration for Monty Hall simulations."""
    n_games: int = DEFAULT_N_GAMES
    random_seed: Optional[int] = None

    def __post_init__(self):
        self.n_games = validate_n_games(self.n_games)
        self.random_seed = validate_random_seed(self.random_seed)


def play_trial(rng: Optional[np.random.Generator] = None) -> Trial:
    """Play one game and score it for both strategies."""
    rng = rng if rng is not None else np.random.default_rng()

    new_game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(new_game, first_pick, rng)

    final_pick_stay = change_door(stay=True, opened_door=opened_door, a_pick=first_pick)
    final_pick_switch = change_door(stay=False, opened_door=opened_door, a_pick=first_pick)

    trial = Trial(
        game=new_game,
        first_pick=first_pick,
        opened_door=opened_door,
        final_pick_stay=final_pick_stay,
        final_pick_switch=final_pick_switch,
        outcome_stay=determine_winner(final_pick_stay, new_game),
        outcome_switch=determine_winner(final_pick_switch, new_game)
    )
    logger.debug(
        "Game {}: pick={}, opened={}, stay={}, switch={}",
        trial.game, first_pick, opened_door,
        trial.outcome_stay.value, trial.outcome_switch.value
    )
    return trial


def trials_to_frame(trials: List[Trial]) -> pd.DataFrame:
    """Flatten trials into a result set with two rows per trial."""
    rows = [record.as_row() for trial in trials for record in trial.records()]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def play_game(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    """
    Play one full game.

    Args:
        rng: Random number generator

    Returns:
        DataFrame with columns ``strategy`` and ``outcome`` and two rows,
        ``stay`` then ``switch``
    """
    return trials_to_frame([play_trial(rng)])


def play_n_games(
    n: int = DEFAULT_N_GAMES,
    rng: Optional[np.random.Generator] = None
) -> pd.DataFrame:
    """
    Play ``n`` games and collect every outcome.

    Args:
        n: Number of games to play
        rng: Random number generator shared by all games

    Returns:
        DataFrame with ``2 * n`` rows in game order

    Raises:
        InvalidArgumentError: If ``n`` is not a positive integer
    """
    n = validate_n_games(n)
    rng = rng if rng is not None else np.random.default_rng()

    logger.info(f"Starting Monty Hall simulation: n_games={n:,}")
    results_df = trials_to_frame([play_trial(rng) for _ in range(n)])

    wins = results_df[results_df['outcome'] == 'WIN'].groupby('strategy').size()
    logger.info(
        f"Simulation complete: stay_win_rate={wins.get('stay', 0) / n:.2%}, "
        f"switch_win_rate={wins.get('switch', 0) / n:.2%}"
    )
    return results_df


class MontyHallSimulator:
    """
    Monty Hall simulation engine.

    Holds a single seeded random number generator that every game played by
    the instance draws from, so two simulators built with the same seed play
    identical sequences of games.

    Attributes:
        config (SimulationConfig): Configuration parameters for simulations
        rng (np.random.Generator): Random number generator

    Example:
        >>> simulator = MontyHallSimulator(n_games=1000, random_seed=7)
        >>> results = simulator.play_n_games()
        >>> results['strategy'].value_counts().sort_index().to_dict()
        {'stay': 1000, 'switch': 1000}
    """

    def __init__(
        self,
        n_games: int = DEFAULT_N_GAMES,
        random_seed: Optional[int] = None
    ):
        """
        Initialize Monty Hall simulator.

        Args:
            n_games: Default number of games per batch
            random_seed: Seed for reproducibility
        """
        self.config = SimulationConfig(n_games=n_games, random_seed=random_seed)
        self.rng = np.random.default_rng(self.config.random_seed)

        logger.info(
            f"Initialized MontyHallSimulator with n_games={self.config.n_games:,}, "
            f"random_seed={self.config.random_seed}"
        )

    @classmethod
    def from_config(cls, config: SimulationConfig) -> 'MontyHallSimulator':
        return cls(n_games=config.n_games, random_seed=config.random_seed)

    def play_trial(self) -> Trial:
        return play_trial(self.rng)

    def play_game(self) -> pd.DataFrame:
        """Play one game; see :func:`play_game`."""
        return play_game(self.rng)

    def play_n_games(self, n: Optional[int] = None) -> pd.DataFrame:
        """
        Play a batch of games.

        Args:
            n: Number of games, defaults to ``config.n_games``

        Returns:
            Result set with ``2 * n`` rows
        """
        return play_n_games(self.config.n_games if n is None else n, self.rng)

    def compare_strategies(
        self,
        n: Optional[int] = None,
        confidence: float = 0.95
    ) -> pd.DataFrame:
        """
        Play a fresh batch and summarize both strategies side-by-side.

        Args:
            n: Number of games, defaults to ``config.n_games``
            confidence: Confidence level for the win-rate interval

        Returns:
            DataFrame indexed by strategy; see
            :func:`monty_hall.reporting.summarize_strategies`
        """
        results = self.play_n_games(n)
        return summarize_strategies(results, confidence=confidence)
