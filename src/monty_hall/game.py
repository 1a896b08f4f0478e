"""
Game primitives for the Monty Hall problem.

A single game is played with three doors numbered 1..3. One door hides a car
and the other two hide goats. The contestant picks a door, the host opens a
goat door the contestant did not pick, and the contestant either stays or
switches to the last closed door.

Every function that draws random numbers takes an optional
``numpy.random.Generator`` so a seeded generator gives repeatable games.

Example:
    >>> import numpy as np
    >>> from monty_hall.game import (
    ...     create_game, select_door, open_goat_door, change_door, determine_winner
    ... )
    >>>
    >>> rng = np.random.default_rng(42)
    >>> game = create_game(rng)
    >>> pick = select_door(rng)
    >>> opened = open_goat_door(game, pick, rng)
    >>> final = change_door(stay=False, opened_door=opened, a_pick=pick)
    >>> outcome = determine_winner(final, game)
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .exceptions import ContractViolationError, InvalidArgumentError


CAR = "car"
GOAT = "goat"
DOORS: Tuple[int, int, int] = (1, 2, 3)

Arrangement = Tuple[str, str, str]


class Strategy(Enum):
    """Contestant strategy after the host opens a door."""
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    """Result of a finished game."""
    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class OutcomeRecord:
    """One labeled result: the strategy played and whether it won."""
    strategy: Strategy
    outcome: Outcome

    def as_row(self) -> dict:
        return {'strategy': self.strategy.value, 'outcome': self.outcome.value}


@dataclass(frozen=True)
class Trial:
    """Full state of one playthrough, shared by both strategies."""
    game: Arrangement
    first_pick: int
    opened_door: int
    final_pick_stay: int
    final_pick_switch: int
    outcome_stay: Outcome
    outcome_switch: Outcome

    def records(self) -> Iterator[OutcomeRecord]:
        """Yield the STAY record followed by the SWITCH record."""
        yield OutcomeRecord(Strategy.STAY, self.outcome_stay)
        yield OutcomeRecord(Strategy.SWITCH, self.outcome_switch)


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _validate_door(door, name: str) -> int:
    if isinstance(door, bool) or not isinstance(door, Integral) or door not in DOORS:
        raise InvalidArgumentError(f"{name} must be one of {DOORS}, got {door!r}")
    return int(door)


def _validate_game(game: Sequence[str]) -> None:
    if len(game) != len(DOORS) or any(label not in (CAR, GOAT) for label in game):
        raise InvalidArgumentError(
            f"game must hold {len(DOORS)} labels from {(CAR, GOAT)}, got {game!r}"
        )


def _check_one_car(game: Sequence[str]) -> None:
    n_cars = sum(1 for label in game if label == CAR)
    if n_cars != 1:
        raise ContractViolationError(f"Game must hide exactly one car, found {n_cars}")


def create_game(rng: Optional[np.random.Generator] = None) -> Arrangement:
    """
    Create a new game with two goats and one car behind three doors.

    Args:
        rng: Random number generator

    Returns:
        Tuple of door labels; position ``i`` holds the label behind door ``i + 1``
    """
    rng = _default_rng(rng)
    a_game = rng.permutation([GOAT, GOAT, CAR])
    return tuple(str(label) for label in a_game)


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Return the contestant's initial pick, uniform over doors 1..3."""
    rng = _default_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(
    game: Sequence[str],
    a_pick: int,
    rng: Optional[np.random.Generator] = None
) -> int:
    """
    Pick the goat door the host opens.

    If the contestant is standing on the car, both other doors hide goats and
    the host opens one of them at random. Otherwise exactly one other door
    hides a goat and the host opens that one.

    Args:
        game: Door arrangement from ``create_game``
        a_pick: Contestant's initial pick
        rng: Random number generator, only used when the pick is the car

    Returns:
        Number of the opened door

    Raises:
        InvalidArgumentError: If the game or pick is malformed
        ContractViolationError: If the game does not hide exactly one car, or
            the chosen door is the pick or the car
    """
    _validate_game(game)
    a_pick = _validate_door(a_pick, 'a_pick')
    _check_one_car(game)

    if game[a_pick - 1] == CAR:
        goat_doors = [door for door in DOORS if game[door - 1] != CAR]
        opened_door = int(_default_rng(rng).choice(goat_doors))
    else:
        opened_door = next(
            door for door in DOORS
            if game[door - 1] != CAR and door != a_pick
        )

    if opened_door == a_pick or game[opened_door - 1] == CAR:
        raise ContractViolationError(
            f"Host opened door {opened_door} for game {game} and pick {a_pick}"
        )
    return opened_door


def change_door(stay: bool, opened_door: int, a_pick: int) -> int:
    """
    Resolve the contestant's final pick.

    Args:
        stay: Keep the initial pick if True, switch otherwise
        opened_door: Door opened by the host
        a_pick: Contestant's initial pick

    Returns:
        Final door number
    """
    opened_door = _validate_door(opened_door, 'opened_door')
    a_pick = _validate_door(a_pick, 'a_pick')

    if stay:
        return a_pick

    if opened_door == a_pick:
        raise InvalidArgumentError(
            f"Cannot switch when the opened door equals the pick ({a_pick})"
        )
    return next(door for door in DOORS if door not in (opened_door, a_pick))


def determine_winner(final_pick: int, game: Sequence[str]) -> Outcome:
    """Return ``Outcome.WIN`` if the car is behind ``final_pick``."""
    _validate_game(game)
    final_pick = _validate_door(final_pick, 'final_pick')
    _check_one_car(game)

    return Outcome.WIN if game[final_pick - 1] == CAR else Outcome.LOSE
