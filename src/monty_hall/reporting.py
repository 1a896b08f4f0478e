"""
Reporting utilities for Monty Hall result sets.

The simulator returns raw outcomes; this module turns them into tables. It
never prints: callers decide where the tables go.

Example:
    >>> from monty_hall import play_n_games, win_proportions, format_proportions
    >>> results = play_n_games(1000)
    >>> print(format_proportions(win_proportions(results)))
"""

from typing import Dict

import numpy as np
import pandas as pd
from scipy import stats

from .exceptions import InvalidArgumentError
from .game import Outcome, Strategy

OUTCOME_ORDER = [Outcome.LOSE.value, Outcome.WIN.value]

THEORETICAL_WIN_RATES: Dict[str, float] = {
    Strategy.STAY.value: 1 / 3,
    Strategy.SWITCH.value: 2 / 3,
}


def _check_results(results: pd.DataFrame) -> None:
    if not isinstance(results, pd.DataFrame):
        raise InvalidArgumentError(
            f"Results must be a pandas DataFrame, got {type(results).__name__}"
        )
    missing = {'strategy', 'outcome'} - set(results.columns)
    if missing:
        raise InvalidArgumentError(f"Results missing columns: {sorted(missing)}")
    if results.empty:
        raise InvalidArgumentError("Results are empty")


def win_proportions(results: pd.DataFrame) -> pd.DataFrame:
    """
    Row proportions of outcomes per strategy, rounded to 2 decimals.

    Args:
        results: Result set from ``play_n_games``

    Returns:
        DataFrame indexed by strategy with ``LOSE`` and ``WIN`` columns

    Example:
        >>> win_proportions(results)
        outcome   LOSE   WIN
        strategy
        stay      0.66  0.34
        switch    0.34  0.66
    """
    _check_results(results)

    table = pd.crosstab(results['strategy'], results['outcome'], normalize='index')
    table = table.reindex(columns=OUTCOME_ORDER, fill_value=0.0).round(2)
    table.index.name = 'strategy'
    table.columns.name = 'outcome'
    return table


def summarize_strategies(
    results: pd.DataFrame,
    confidence: float = 0.95
) -> pd.DataFrame:
    """
    Summarize win rates per strategy with normal-approximation intervals.

    Args:
        results: Result set from ``play_n_games``
        confidence: Confidence level for the interval, in (0, 1)

    Returns:
        DataFrame indexed by strategy with columns ``n_games``, ``wins``,
        ``win_rate``, ``std_error``, ``ci_lower``, ``ci_upper`` and
        ``theoretical_win_rate``
    """
    _check_results(results)
    if not 0 < confidence < 1:
        raise InvalidArgumentError(f"confidence must be in (0, 1), got {confidence}")

    is_win = results['outcome'] == Outcome.WIN.value
    grouped = is_win.groupby(results['strategy'])

    summary = pd.DataFrame({
        'n_games': grouped.size(),
        'wins': grouped.sum(),
    })
    summary['win_rate'] = summary['wins'] / summary['n_games']
    summary['std_error'] = np.sqrt(
        summary['win_rate'] * (1 - summary['win_rate']) / summary['n_games']
    )

    z = stats.norm.ppf(0.5 + confidence / 2)
    summary['ci_lower'] = np.clip(summary['win_rate'] - z * summary['std_error'], 0, 1)
    summary['ci_upper'] = np.clip(summary['win_rate'] + z * summary['std_error'], 0, 1)
    summary['theoretical_win_rate'] = summary.index.map(THEORETICAL_WIN_RATES)

    summary.index.name = 'strategy'
    return summary


def format_proportions(table: pd.DataFrame) -> str:
    """Render a proportion table as fixed-width text."""
    return table.to_string(float_format=lambda value: f"{value:.2f}")
