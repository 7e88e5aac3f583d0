import logging

from gamedata.domain import Bet, PaytableConfiguration, StoredBetConfiguration
from gamedata.exceptions import (
    AmbiguousConfigurationException, InvalidStateException, NotFoundException, require
)
from gamedata.utils.converters import bet_to_configuration

logger = logging.getLogger(__name__)


def _linear_multiplier(requested: StoredBetConfiguration, candidate: StoredBetConfiguration):
    """Integer m with requested == candidate * m for both total bet and bet per line, else None."""
    if candidate.total_bet <= 0:
        return None
    multiplier = requested.total_bet // candidate.total_bet
    if (requested.total_bet == candidate.total_bet * multiplier and
            requested.bet_per_line == candidate.bet_per_line * multiplier):
        return multiplier
    return None


class ConfigurationResolver:
    """
    Finds the stored bet and game configuration that generated outcomes for a request.

    A stored bet matches either exactly, or linearly: same lines and custom bet
    text, with total bet and bet per line both an integer multiple of the stored
    values on a linear game configuration.
    """

    def __init__(self, store):
        self.store = require(store, 'store')

    def find_bet_configuration(self, bet: Bet) -> StoredBetConfiguration:
        requested = bet_to_configuration(bet)

        exact = self.store.find_exact_bet_configuration(requested)
        if exact is not None:
            logger.debug(f"Exact bet configuration {exact.id} matches total bet {requested.total_bet}")
            return exact

        return self._find_linear_bet_configuration(requested)

    def _find_linear_bet_configuration(self, requested: StoredBetConfiguration) -> StoredBetConfiguration:
        candidates = self.store.find_linear_bet_configurations(requested.lines, requested.custom_bet_info)

        matches = {}
        for candidate in candidates:
            if _linear_multiplier(requested, candidate) is not None:
                # A bet shared by several linear game configurations is one candidate per total bet.
                matches.setdefault((candidate.id, candidate.total_bet), candidate)

        if not matches:
            raise NotFoundException(
                "No matching bet configuration found in data source.",
                details={
                    'lines': requested.lines,
                    'bet_per_line': requested.bet_per_line,
                    'total_bet': requested.total_bet,
                    'custom_bet_info': requested.custom_bet_info,
                }
            )
        if len(matches) > 1:
            raise AmbiguousConfigurationException(
                f"{len(matches)} linear bet configurations match total bet {requested.total_bet}.",
                details={'bet_configuration_ids': sorted(key[0] for key in matches)}
            )

        match = next(iter(matches.values()))
        logger.debug(
            f"Linear bet configuration {match.id} (total bet {match.total_bet}) "
            f"matches total bet {requested.total_bet}"
        )
        return match

    def get_game_configuration(self, paytable: PaytableConfiguration, bet: Bet):
        require(paytable, 'paytable')
        require(bet, 'bet')

        bet_config = self.find_bet_configuration(bet)

        game_config = self.store.find_game_configuration(
            bet_configuration_id=bet_config.id,
            total_bet=bet_config.total_bet,
            persistence_id=int(bet.persistence_id),
            paytable_index=paytable.paytable_id,
        )
        if game_config is None:
            raise NotFoundException(
                "No matching game configuration found in data source.",
                details={
                    'paytable_id': paytable.paytable_id,
                    'bet_configuration_id': bet_config.id,
                    'persistence_id': bet.persistence_id,
                }
            )

        # A non-linear configuration is only valid at the exact bet it was simulated with.
        if not game_config.is_linear and bet_config.bet_per_line != bet.bet_per_sub_bet:
            raise InvalidStateException(
                "No matching non-linear game configuration found in data source.",
                details={'game_configuration_id': game_config.id}
            )

        logger.info(
            f"Resolved paytable {paytable.paytable_id} total bet {bet.total_bet} "
            f"to game configuration {game_config.id}"
        )
        return game_config
