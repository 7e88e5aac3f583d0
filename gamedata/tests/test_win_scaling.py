from types import SimpleNamespace

import pytest

from gamedata.domain import Bet, OutcomeRecord
from gamedata.exceptions import InvalidStateException
from gamedata.utils.win_scaling import bet_multiplier, descale_total_win, scale_outcome, scale_total_win


def game_config(total_bet, is_linear=True):
    return SimpleNamespace(id=7, total_bet=total_bet, is_linear=is_linear)


def bet(total_bet):
    return Bet(total_bet=total_bet, sub_bet=25, bet_per_sub_bet=total_bet // 25)


def test_bet_multiplier():
    assert bet_multiplier(bet(100), game_config(25)) == 4
    assert bet_multiplier(bet(25), game_config(25)) == 1


def test_bet_multiplier_rejects_non_positive_stored_total_bet():
    with pytest.raises(InvalidStateException):
        bet_multiplier(bet(25), game_config(0))


def test_scale_linear_win():
    assert scale_total_win(30, bet(100), game_config(25)) == 120


def test_scale_at_stored_bet_is_unchanged_even_when_not_linear():
    assert scale_total_win(30, bet(25), game_config(25, is_linear=False)) == 30


def test_scale_non_linear_configuration_raises():
    with pytest.raises(InvalidStateException) as excinfo:
        scale_total_win(30, bet(50), game_config(25, is_linear=False))
    assert "not linear" in str(excinfo.value)


def test_scale_outcome_returns_copy_and_leaves_stored_record():
    stored = OutcomeRecord(id=1, game_configuration_id=7, total_win=30, game_section_mask=1, occurrences=2)
    scaled = scale_outcome(stored, bet(75), game_config(25))
    assert scaled.total_win == 90
    assert scaled.occurrences == 2
    assert stored.total_win == 30


def test_scale_outcome_without_change_returns_same_record():
    stored = OutcomeRecord(id=1, game_configuration_id=7, total_win=30, game_section_mask=1, occurrences=2)
    assert scale_outcome(stored, bet(25), game_config(25)) is stored


def test_descale_linear_win():
    assert descale_total_win(120, bet(100), game_config(25)) == 30


def test_descale_non_linear_is_identity():
    assert descale_total_win(123, bet(100), game_config(25, is_linear=False)) == 123


def test_descale_uneven_win_raises():
    with pytest.raises(InvalidStateException) as excinfo:
        descale_total_win(121, bet(100), game_config(25))
    assert str(excinfo.value) == "121 does not scale evenly with a divisor of 4."


def test_descale_below_stored_bet_raises():
    with pytest.raises(InvalidStateException):
        descale_total_win(10, bet(10), game_config(25))
