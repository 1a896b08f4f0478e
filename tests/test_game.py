"""
Tests for the game primitives.

Covers arrangement generation, the contestant's pick, the host's reveal,
strategy resolution and scoring.
"""

from collections import Counter

import numpy as np
import pytest

from monty_hall.exceptions import ContractViolationError, InvalidArgumentError
from monty_hall.game import (
    CAR,
    DOORS,
    GOAT,
    Outcome,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)


class TestCreateGame:
    """Test arrangement generation."""

    def test_shape_and_labels(self, rng):
        game = create_game(rng)
        assert isinstance(game, tuple)
        assert len(game) == 3
        assert all(isinstance(label, str) for label in game)
        assert sorted(game) == [CAR, GOAT, GOAT]

    def test_exactly_one_car(self, rng):
        for _ in range(1000):
            assert create_game(rng).count(CAR) == 1

    def test_car_position_uniform(self, rng):
        n = 30000
        positions = Counter(create_game(rng).index(CAR) + 1 for _ in range(n))
        assert set(positions) == set(DOORS)
        for door in DOORS:
            assert positions[door] / n == pytest.approx(1 / 3, abs=0.02)

    def test_works_without_rng(self):
        assert create_game().count(CAR) == 1


class TestSelectDoor:
    """Test the contestant's initial pick."""

    def test_returns_valid_door(self, rng):
        for _ in range(500):
            pick = select_door(rng)
            assert type(pick) is int
            assert pick in DOORS

    def test_uniform(self, rng):
        n = 30000
        picks = Counter(select_door(rng) for _ in range(n))
        for door in DOORS:
            assert picks[door] / n == pytest.approx(1 / 3, abs=0.02)


class TestOpenGoatDoor:
    """Test the host's reveal."""

    def test_never_pick_never_car(self, rng, all_games):
        for game in all_games:
            for pick in DOORS:
                for _ in range(50):
                    opened = open_goat_door(game, pick, rng)
                    assert opened in DOORS
                    assert opened != pick
                    assert game[opened - 1] == GOAT

    def test_pick_on_goat_is_deterministic(self, rng):
        game = ('goat', 'car', 'goat')
        assert {open_goat_door(game, 1, rng) for _ in range(100)} == {3}
        assert {open_goat_door(game, 3, rng) for _ in range(100)} == {1}

    def test_pick_on_car_splits_evenly(self, rng):
        game = ('car', 'goat', 'goat')
        n = 4000
        opened = Counter(open_goat_door(game, 1, rng) for _ in range(n))
        assert set(opened) == {2, 3}
        assert opened[2] / n == pytest.approx(0.5, abs=0.03)

    @pytest.mark.parametrize("pick", [0, 4, -1, True, None, 2.0, np.float64(1.0)])
    def test_invalid_pick(self, rng, pick):
        with pytest.raises(InvalidArgumentError):
            open_goat_door(('car', 'goat', 'goat'), pick, rng)

    def test_malformed_game(self, rng):
        with pytest.raises(InvalidArgumentError):
            open_goat_door(('car', 'goat'), 1, rng)
        with pytest.raises(InvalidArgumentError):
            open_goat_door(('car', 'goat', 'sheep'), 1, rng)

    def test_two_cars_is_contract_violation(self, rng):
        with pytest.raises(ContractViolationError):
            open_goat_door(('car', 'car', 'goat'), 3, rng)


class TestChangeDoor:
    """Test strategy resolution."""

    def test_stay_keeps_pick(self):
        for opened in DOORS:
            for pick in DOORS:
                assert change_door(stay=True, opened_door=opened, a_pick=pick) == pick

    def test_switch_takes_remaining_door(self):
        for opened in DOORS:
            for pick in DOORS:
                if opened == pick:
                    continue
                final = change_door(stay=False, opened_door=opened, a_pick=pick)
                assert final not in (opened, pick)
                assert {final, opened, pick} == set(DOORS)

    def test_switch_rejects_opened_equal_to_pick(self):
        with pytest.raises(InvalidArgumentError):
            change_door(stay=False, opened_door=2, a_pick=2)

    @pytest.mark.parametrize("opened,pick", [
        (0, 1), (1, 4), (5, 5), (3.0, 1), (3, 1.0), (np.float64(2.0), 1)
    ])
    def test_invalid_doors(self, opened, pick):
        with pytest.raises(InvalidArgumentError):
            change_door(stay=True, opened_door=opened, a_pick=pick)

    def test_switch_rejects_float_doors(self):
        with pytest.raises(InvalidArgumentError):
            change_door(stay=False, opened_door=3.0, a_pick=1.0)

    def test_accepts_numpy_integers(self):
        assert change_door(stay=False, opened_door=np.int64(3), a_pick=np.int64(1)) == 2


class TestDetermineWinner:
    """Test scoring of a final pick."""

    def test_win_and_lose(self, all_games):
        for game in all_games:
            for door in DOORS:
                expected = Outcome.WIN if game[door - 1] == CAR else Outcome.LOSE
                assert determine_winner(door, game) is expected

    def test_pure(self):
        game = ('goat', 'goat', 'car')
        assert {determine_winner(3, game) for _ in range(20)} == {Outcome.WIN}

    def test_no_car_is_contract_violation(self):
        with pytest.raises(ContractViolationError):
            determine_winner(1, ('goat', 'goat', 'goat'))

    @pytest.mark.parametrize("door", [4, 2.0, np.float64(3.0)])
    def test_invalid_door(self, door):
        with pytest.raises(InvalidArgumentError):
            determine_winner(door, ('goat', 'car', 'goat'))


class TestEndToEnd:
    """Worked examples of a full game."""

    def test_pick_on_goat(self, rng):
        game = ('goat', 'car', 'goat')
        opened = open_goat_door(game, 1, rng)
        assert opened == 3

        stay = change_door(stay=True, opened_door=opened, a_pick=1)
        switch = change_door(stay=False, opened_door=opened, a_pick=1)
        assert stay == 1
        assert switch == 2
        assert determine_winner(stay, game) is Outcome.LOSE
        assert determine_winner(switch, game) is Outcome.WIN

    def test_pick_on_car(self, rng):
        game = ('car', 'goat', 'goat')
        opened = open_goat_door(game, 1, rng)
        assert opened in (2, 3)

        stay = change_door(stay=True, opened_door=opened, a_pick=1)
        switch = change_door(stay=False, opened_door=opened, a_pick=1)
        assert stay == 1
        assert switch == ({2, 3} - {opened}).pop()
        assert determine_winner(stay, game) is Outcome.WIN
        assert determine_winner(switch, game) is Outcome.LOSE
