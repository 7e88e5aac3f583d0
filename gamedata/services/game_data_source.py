import logging
from typing import Dict, List, Optional

from gamedata.domain import Bet, EvaluationData, GameData, OutcomeQuery, PaytableConfiguration, WinData
from gamedata.exceptions import NotFoundException, require
from gamedata.services.query_cache import QueryResultCache
from gamedata.utils import progressive_win_groups
from gamedata.utils.converters import (
    STORED_DENOMINATION, configuration_to_bet, outcome_to_evaluation_data, outcome_to_game_data
)
from gamedata.utils.outcome_sampler import EXHAUSTED, sample_random, sample_sequential
from gamedata.utils.win_scaling import descale_total_win, scale_outcome

logger = logging.getLogger(__name__)


def list_bets(store, paytable: PaytableConfiguration) -> List[Bet]:
    """Every stored bet available on `paytable`'s game configurations."""
    require(paytable, 'paytable')
    store.find_game_configuration_by_paytable(paytable.paytable_id)
    return [configuration_to_bet(bet_config) for bet_config in store.list_bet_configurations(paytable.paytable_id)]


def list_paytable_configurations(store) -> List[PaytableConfiguration]:
    return [
        PaytableConfiguration(paytable_id=paytable_index, denomination=STORED_DENOMINATION)
        for paytable_index in store.list_paytable_indexes()
    ]


class GameDataSource:
    """
    Read-only access to evaluation data: outcome wins plus the random numbers that produced them.

    Resolved outcome sets are kept in `cache` for the lifetime of this instance,
    so repeated requests for one paytable and bet hit the store once. An
    instance is not thread-safe.
    """

    def __init__(self, store, resolver, rng, cache: Optional[QueryResultCache] = None):
        self.store = require(store, 'store')
        self.resolver = require(resolver, 'resolver')
        self.rng = require(rng, 'rng')
        self.cache = cache if cache is not None else QueryResultCache()

    def _scaled_outcomes(self, query: OutcomeQuery):
        def load():
            game_config = self.resolver.get_game_configuration(query.paytable, query.bet)
            outcomes = self.store.list_outcomes(game_config)
            if not outcomes:
                raise NotFoundException(
                    f"No games stored for game configuration {game_config.id}.",
                    details={'game_configuration_id': game_config.id}
                )
            return [scale_outcome(outcome, query.bet, game_config) for outcome in outcomes]

        return self.cache.outcomes(query, load)

    def get_random_evaluation_data(self, paytable: PaytableConfiguration, bet: Bet) -> EvaluationData:
        query = OutcomeQuery(paytable=require(paytable, 'paytable'), bet=require(bet, 'bet'))
        outcome = sample_random(self._scaled_outcomes(query), self.rng)
        return outcome_to_evaluation_data(outcome)

    def get_incremental_evaluation_data(self, paytable: PaytableConfiguration, bet: Bet) -> Optional[EvaluationData]:
        """
        Next outcome in stored order for this paytable and bet.

        Returns None once every outcome has been handed out. Later calls keep
        returning None.
        """
        query = OutcomeQuery(paytable=require(paytable, 'paytable'), bet=require(bet, 'bet'))
        outcome = sample_sequential(self.cache, query, self._scaled_outcomes(query))
        if outcome is EXHAUSTED:
            logger.info(f"Sequential outcomes exhausted for paytable {paytable.paytable_id} total bet {bet.total_bet}")
            return None
        return outcome_to_evaluation_data(outcome)

    def get_random_game_data(self, paytable: PaytableConfiguration, bet: Bet, win_data: WinData) -> GameData:
        """Random numbers for a stored outcome that produces `win_data` at `bet`."""
        require(paytable, 'paytable')
        require(bet, 'bet')
        require(win_data, 'win_data')

        game_config = self.resolver.get_game_configuration(paytable, bet)
        stored_win = descale_total_win(win_data.total_win, bet, game_config)
        candidates = self.store.list_outcomes(
            game_config,
            total_win=stored_win,
            progressive_info=progressive_win_groups.encode(win_data.progressives),
            include_raw_rng=False,
        )
        if not candidates:
            raise NotFoundException(
                f"No stored game produces a win of {win_data.total_win} for game configuration {game_config.id}.",
                details={'game_configuration_id': game_config.id, 'stored_win': stored_win}
            )

        chosen = sample_random(candidates, self.rng)
        return outcome_to_game_data(self.store.get_outcome_by_id(chosen.id))

    def get_all_bets(self, paytable: PaytableConfiguration) -> List[Bet]:
        return list_bets(self.store, paytable)

    def get_all_paytable_configurations(self) -> List[PaytableConfiguration]:
        return list_paytable_configurations(self.store)

    def get_number_of_games(self, paytable: PaytableConfiguration, bet: Bet) -> int:
        game_config = self.resolver.get_game_configuration(paytable, bet)
        return self.store.count_outcomes(game_config)

    def get_custom_property(self, key: str) -> str:
        return self.store.get_custom_property(require(key, 'key'))

    def get_custom_properties(self) -> Dict[str, str]:
        return self.store.list_custom_properties()
