"""
Monty Hall problem simulation package.

This package plays the Monty Hall game many times and tabulates how often the
stay and switch strategies win:
- Game primitives: arrangement, initial pick, host reveal, final pick, scoring
- Monte Carlo batches returning a pandas result set
- Reporting tables for win proportions and strategy comparison

Classes:
    MontyHallSimulator: Seeded simulation engine
    SimulationConfig: Simulation parameters
"""

from .exceptions import (
    ContractViolationError,
    InvalidArgumentError,
    MontyHallError
)

from .game import (
    CAR,
    GOAT,
    DOORS,
    Outcome,
    OutcomeRecord,
    Strategy,
    Trial,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door
)

from .simulator import (
    MontyHallSimulator,
    SimulationConfig,
    play_game,
    play_n_games,
    play_trial
)

from .reporting import (
    format_proportions,
    summarize_strategies,
    win_proportions
)

from .config import load_config

__version__ = "0.1.0"

__all__ = [
    # Errors
    'MontyHallError',
    'InvalidArgumentError',
    'ContractViolationError',

    # Game
    'CAR',
    'GOAT',
    'DOORS',
    'Strategy',
    'Outcome',
    'OutcomeRecord',
    'Trial',
    'create_game',
    'select_door',
    'open_goat_door',
    'change_door',
    'determine_winner',

    # Simulation
    'MontyHallSimulator',
    'SimulationConfig',
    'play_trial',
    'play_game',
    'play_n_games',

    # Reporting
    'win_proportions',
    'summarize_strategies',
    'format_proportions',

    # Config
    'load_config',
]
