# gamedata/utils/converters.py
"""Conversions between request-side values and stored records."""
from gamedata.domain import (
    Bet, EvaluationData, GameData, StoredBetConfiguration, WinData
)
from gamedata.exceptions import require
from gamedata.utils import custom_bet_encoding, progressive_win_groups
from gamedata.utils.random_numbers import decode_random_numbers

# SQLite data sources do not store a denomination.
STORED_DENOMINATION = 1


def bet_to_configuration(bet: Bet) -> StoredBetConfiguration:
    """Request-side shape of `bet`, in the stored record's terms. The id is unknown (0)."""
    require(bet, 'bet')
    return StoredBetConfiguration(
        id=0,
        lines=int(bet.sub_bet),
        bet_per_line=int(bet.bet_per_sub_bet),
        side_bet=int(bet.side_bet),
        extra_bet=int(bet.extra_bet),
        custom_bet_info=custom_bet_encoding.encode(bet.custom_bets),
        total_bet=int(bet.total_bet),
        persistence_id=int(bet.persistence_id),
    )


def configuration_to_bet(bet_config: StoredBetConfiguration) -> Bet:
    require(bet_config, 'bet_config')
    return Bet(
        bet_id=str(bet_config.id),
        total_bet=bet_config.total_bet,
        sub_bet=bet_config.lines,
        bet_per_sub_bet=bet_config.bet_per_line,
        extra_bet=bet_config.extra_bet,
        side_bet=bet_config.side_bet,
        persistence_id=bet_config.persistence_id,
        custom_bet_data=custom_bet_encoding.decode(bet_config.custom_bet_info),
    )


def outcome_to_win_data(outcome) -> WinData:
    return WinData(
        total_win=outcome.total_win,
        game_section_mask=outcome.game_section_mask,
        progressives=progressive_win_groups.decode(outcome.progressive_info or ''),
        outcome_id=str(outcome.id),
    )


def outcome_to_game_data(outcome) -> GameData:
    return GameData(
        random_numbers=decode_random_numbers(outcome.raw_random_numbers),
        outcome_id=str(outcome.id),
    )


def outcome_to_evaluation_data(outcome) -> EvaluationData:
    return EvaluationData(
        win_data=outcome_to_win_data(outcome),
        game_data=outcome_to_game_data(outcome),
    )
