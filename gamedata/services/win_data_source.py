import logging
from typing import List

from gamedata.domain import Bet, PaytableConfiguration, WinData
from gamedata.exceptions import NotFoundException, require
from gamedata.services.game_data_source import list_bets, list_paytable_configurations
from gamedata.utils.converters import outcome_to_win_data
from gamedata.utils.outcome_sampler import sample_random
from gamedata.utils.win_scaling import scale_outcome

logger = logging.getLogger(__name__)


class WinDataSource:
    """Draws win results without loading random number payloads for the whole outcome set."""

    def __init__(self, store, resolver, rng):
        self.store = require(store, 'store')
        self.resolver = require(resolver, 'resolver')
        self.rng = require(rng, 'rng')

    def get_random_win_data(self, paytable: PaytableConfiguration, bet: Bet) -> WinData:
        game_config = self.resolver.get_game_configuration(require(paytable, 'paytable'), require(bet, 'bet'))

        outcomes = self.store.list_outcomes(game_config, include_raw_rng=False)
        if not outcomes:
            raise NotFoundException(
                f"No games stored for game configuration {game_config.id}.",
                details={'game_configuration_id': game_config.id}
            )

        chosen = sample_random(outcomes, self.rng)
        outcome = scale_outcome(self.store.get_outcome_by_id(chosen.id), bet, game_config)
        logger.debug(f"Drew outcome {outcome.id} with win {outcome.total_win} for game configuration {game_config.id}")
        return outcome_to_win_data(outcome)

    def get_all_bets(self, paytable: PaytableConfiguration) -> List[Bet]:
        return list_bets(self.store, paytable)

    def get_all_paytable_configurations(self) -> List[PaytableConfiguration]:
        return list_paytable_configurations(self.store)
