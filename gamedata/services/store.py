"""
SQLAlchemy access to a pre-simulated outcome data source.

Every public method opens its own session and closes it before returning,
whether the query succeeds or raises. Returned objects are detached values;
nothing here writes to the store.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select

from gamedata.domain import OutcomeRecord, StoredBetConfiguration
from gamedata.exceptions import NotFoundException, require
from gamedata.models import BetConfiguration, GameConfiguration, GameDataProperty, GameInformation

logger = logging.getLogger(__name__)

_OUTCOME_COLUMNS_WITHOUT_RNG = (
    GameInformation.id.label("id"),
    GameInformation.game_configuration_id.label("game_configuration_id"),
    GameInformation.total_win.label("total_win"),
    GameInformation.game_section_mask.label("game_section_mask"),
    GameInformation.occurrences.label("occurrences"),
    GameInformation.progressive_info.label("progressive_info"),
)


def _stored_bet(bet_config, total_bet, persistence_id=0) -> StoredBetConfiguration:
    return StoredBetConfiguration(
        id=bet_config.id,
        lines=bet_config.lines,
        bet_per_line=bet_config.bet_per_line,
        side_bet=bet_config.side_bet,
        extra_bet=bet_config.extra_bet,
        custom_bet_info=bet_config.custom_bet_info or '',
        total_bet=total_bet,
        persistence_id=persistence_id,
    )


def _outcome(row, raw_random_numbers=None) -> OutcomeRecord:
    return OutcomeRecord(
        id=row.id,
        game_configuration_id=row.game_configuration_id,
        total_win=row.total_win,
        game_section_mask=row.game_section_mask,
        occurrences=row.occurrences,
        progressive_info=row.progressive_info or '',
        raw_random_numbers=raw_random_numbers,
    )


def _bet_join():
    return (
        select(
            BetConfiguration,
            GameConfiguration.total_bet.label("total_bet"),
            GameConfiguration.persistence_id.label("persistence_id"),
        )
        .join(GameConfiguration, BetConfiguration.id == GameConfiguration.bet_configuration_id)
    )


class GameDataStore:

    def __init__(self, session_factory):
        self._session_factory = require(session_factory, 'session_factory')

    def find_exact_bet_configuration(self, bet_config: StoredBetConfiguration) -> Optional[StoredBetConfiguration]:
        """Stored bet whose full shape, custom bet text and total bet equal `bet_config`."""
        require(bet_config, 'bet_config')
        query = (
            _bet_join()
            .where(
                BetConfiguration.lines == bet_config.lines,
                BetConfiguration.bet_per_line == bet_config.bet_per_line,
                BetConfiguration.side_bet == bet_config.side_bet,
                BetConfiguration.extra_bet == bet_config.extra_bet,
                BetConfiguration.custom_bet_info == bet_config.custom_bet_info,
                GameConfiguration.total_bet == bet_config.total_bet,
            )
            .limit(1)
        )
        with self._session_factory() as session:
            row = session.execute(query).first()
        if row is None:
            return None
        return _stored_bet(row[0], row.total_bet, row.persistence_id)

    def find_linear_bet_configurations(self, lines: int, custom_bet_info: str) -> List[StoredBetConfiguration]:
        """Stored bets with matching lines and custom bet text whose game configuration is linear."""
        query = (
            _bet_join()
            .where(
                BetConfiguration.lines == lines,
                BetConfiguration.custom_bet_info == custom_bet_info,
                GameConfiguration.is_linear.is_(True),
            )
            .order_by(BetConfiguration.id, GameConfiguration.id)
        )
        with self._session_factory() as session:
            rows = session.execute(query).all()
        return [_stored_bet(row[0], row.total_bet, row.persistence_id) for row in rows]

    def find_game_configuration_by_paytable(self, paytable_index: int) -> GameConfiguration:
        query = (
            select(GameConfiguration)
            .where(GameConfiguration.paytable_index == paytable_index)
            .order_by(GameConfiguration.id)
            .limit(1)
        )
        with self._session_factory() as session:
            game_config = session.scalars(query).first()
        if game_config is None:
            raise NotFoundException(
                f"No game configuration found for paytable {paytable_index}.",
                details={'paytable_index': paytable_index}
            )
        return game_config

    def find_game_configuration(self, bet_configuration_id: int, total_bet: int,
                                persistence_id: int, paytable_index: int) -> Optional[GameConfiguration]:
        query = (
            select(GameConfiguration)
            .where(
                GameConfiguration.bet_configuration_id == bet_configuration_id,
                GameConfiguration.total_bet == total_bet,
                GameConfiguration.persistence_id == persistence_id,
                GameConfiguration.paytable_index == paytable_index,
            )
            .limit(1)
        )
        with self._session_factory() as session:
            return session.scalars(query).first()

    def list_game_configurations(self) -> List[GameConfiguration]:
        with self._session_factory() as session:
            return list(session.scalars(select(GameConfiguration).order_by(GameConfiguration.id)))

    def list_paytable_indexes(self) -> List[int]:
        query = select(GameConfiguration.paytable_index).distinct().order_by(GameConfiguration.paytable_index)
        with self._session_factory() as session:
            return list(session.scalars(query))

    def list_bet_configurations(self, paytable_index: int) -> List[StoredBetConfiguration]:
        query = (
            _bet_join()
            .where(GameConfiguration.paytable_index == paytable_index)
            .order_by(GameConfiguration.id)
        )
        with self._session_factory() as session:
            rows = session.execute(query).all()
        return [_stored_bet(row[0], row.total_bet, row.persistence_id) for row in rows]

    def list_outcomes(self, game_config: GameConfiguration, total_win: Optional[int] = None,
                      progressive_info: Optional[str] = None, include_raw_rng: bool = True) -> List[OutcomeRecord]:
        """
        Outcomes stored for `game_config`, in id order.

        When `total_win` is given, only outcomes with that stored win and
        `progressive_info` text are returned.
        """
        require(game_config, 'game_config')
        columns = _OUTCOME_COLUMNS_WITHOUT_RNG
        if include_raw_rng:
            columns = columns + (GameInformation.raw_random_numbers.label("raw_random_numbers"),)

        query = select(*columns).where(GameInformation.game_configuration_id == game_config.id)
        if total_win is not None:
            query = query.where(
                GameInformation.total_win == total_win,
                GameInformation.progressive_info == (progressive_info or ''),
            )
        query = query.order_by(GameInformation.id)

        with self._session_factory() as session:
            rows = session.execute(query).all()

        logger.debug(f"Loaded {len(rows)} outcomes for game configuration {game_config.id}")
        if include_raw_rng:
            return [_outcome(row, row.raw_random_numbers) for row in rows]
        return [_outcome(row) for row in rows]

    def get_outcome_by_id(self, outcome_id: int) -> OutcomeRecord:
        with self._session_factory() as session:
            game = session.get(GameInformation, outcome_id)
        if game is None:
            raise NotFoundException(f"Outcome {outcome_id} not found.", details={'outcome_id': outcome_id})
        return _outcome(game, game.raw_random_numbers)

    def count_outcomes(self, game_config: GameConfiguration) -> int:
        require(game_config, 'game_config')
        query = select(func.count()).select_from(GameInformation).where(
            GameInformation.game_configuration_id == game_config.id
        )
        with self._session_factory() as session:
            return session.scalar(query)

    def get_custom_property(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            prop = session.get(GameDataProperty, key)
        if prop is None:
            raise NotFoundException(f"Custom data property '{key}' not found.", details={'key': key})
        return prop.value

    def list_custom_properties(self) -> Dict[str, str]:
        with self._session_factory() as session:
            return {prop.key: prop.value for prop in session.scalars(select(GameDataProperty))}
