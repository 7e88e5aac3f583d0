# gamedata/utils/win_scaling.py
"""
Proportional scaling of win amounts between the stored denomination of a game
configuration and the requested bet.

Linear configurations scale by the integer ratio of requested to stored total
bet. Non-linear configurations only serve their own total bet.
"""
from gamedata.exceptions import InvalidStateException


def bet_multiplier(bet, game_config) -> int:
    """Integer ratio of the requested total bet to the configuration's stored total bet."""
    if game_config.total_bet <= 0:
        raise InvalidStateException(
            f"Game configuration {game_config.id} has a non-positive total bet of {game_config.total_bet}.",
            details={'game_configuration_id': game_config.id}
        )
    return bet.total_bet // game_config.total_bet


def scale_total_win(total_win: int, bet, game_config) -> int:
    multiplier = bet_multiplier(bet, game_config)
    if multiplier == 1:
        return total_win

    if not game_config.is_linear:
        raise InvalidStateException(
            "Cannot scale games for a game configuration that is not linear.",
            details={'game_configuration_id': game_config.id, 'multiplier': multiplier}
        )
    return total_win * multiplier


def scale_outcome(outcome, bet, game_config):
    """Returns a copy of `outcome` with its total win scaled to `bet`. The stored record is untouched."""
    scaled_win = scale_total_win(outcome.total_win, bet, game_config)
    if scaled_win == outcome.total_win:
        return outcome
    return outcome.with_total_win(scaled_win)


def descale_total_win(requested_win: int, bet, game_config) -> int:
    """Converts a win at the requested bet back to the win stored for `game_config`."""
    if not game_config.is_linear:
        return requested_win

    multiplier = bet_multiplier(bet, game_config)
    if multiplier == 0:
        raise InvalidStateException(
            f"Total bet {bet.total_bet} is below the stored total bet {game_config.total_bet}.",
            details={'game_configuration_id': game_config.id}
        )

    stored_win = requested_win // multiplier
    if stored_win * multiplier != requested_win:
        raise InvalidStateException(
            f"{requested_win} does not scale evenly with a divisor of {multiplier}.",
            details={'requested_win': requested_win, 'multiplier': multiplier}
        )
    return stored_win
