import pytest

from gamedata.database import create_data_source_file, create_read_only_engine, create_session_factory
from gamedata.models import BetConfiguration, GameConfiguration, GameDataProperty, GameInformation
from gamedata.services.store import GameDataStore
from gamedata.utils.random_numbers import RandomNumberGenerator, encode_random_numbers

# (total_win, occurrences, progressive_info) for the linear 25-line configuration
LINEAR_GAMES = [
    (0, 2, ''),
    (10, 1, ''),
    (0, 6, ''),
    (50, 1, ''),
    (100, 1, '1:1'),
    (5, 4, ''),
    (1000, 1, ''),
]


class ScriptedRng(RandomNumberGenerator):
    """Returns pre-set numbers in order and records each requested range."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def draw_uniform(self, count, minimum, maximum):
        self.calls.append((count, minimum, maximum))
        drawn, self.values = self.values[:count], self.values[count:]
        return drawn


def _populate(session):
    session.add_all([
        BetConfiguration(id=1, lines=25, bet_per_line=1, side_bet=0, extra_bet=0, custom_bet_info=''),
        BetConfiguration(id=2, lines=10, bet_per_line=5, side_bet=0, extra_bet=0, custom_bet_info='{bonus:1}'),
        BetConfiguration(id=3, lines=20, bet_per_line=1, side_bet=0, extra_bet=0, custom_bet_info=''),
        BetConfiguration(id=4, lines=5, bet_per_line=1, side_bet=0, extra_bet=0, custom_bet_info=''),
        BetConfiguration(id=5, lines=30, bet_per_line=1, side_bet=0, extra_bet=0, custom_bet_info=''),
        BetConfiguration(id=6, lines=30, bet_per_line=2, side_bet=0, extra_bet=0, custom_bet_info=''),
    ])
    session.add_all([
        GameConfiguration(id=1, paytable_index=0, persistence_id=0, bet_configuration_id=1, total_bet=25, is_linear=True),
        GameConfiguration(id=2, paytable_index=0, persistence_id=0, bet_configuration_id=2, total_bet=50, is_linear=False),
        GameConfiguration(id=3, paytable_index=1, persistence_id=0, bet_configuration_id=3, total_bet=20, is_linear=True),
        GameConfiguration(id=4, paytable_index=1, persistence_id=0, bet_configuration_id=4, total_bet=5, is_linear=True),
        GameConfiguration(id=5, paytable_index=2, persistence_id=0, bet_configuration_id=5, total_bet=30, is_linear=True),
        GameConfiguration(id=6, paytable_index=2, persistence_id=0, bet_configuration_id=6, total_bet=60, is_linear=True),
    ])

    game_id = 1
    for total_win, occurrences, progressive_info in LINEAR_GAMES:
        session.add(GameInformation(
            id=game_id, game_configuration_id=1, total_win=total_win, game_section_mask=1,
            occurrences=occurrences, progressive_info=progressive_info,
            raw_random_numbers=encode_random_numbers([game_id, game_id + 1, -game_id]),
        ))
        game_id += 1

    session.add_all([
        GameInformation(id=8, game_configuration_id=2, total_win=0, game_section_mask=1, occurrences=3,
                        raw_random_numbers=encode_random_numbers([80, 81])),
        GameInformation(id=9, game_configuration_id=2, total_win=20, game_section_mask=3, occurrences=1,
                        raw_random_numbers=encode_random_numbers([90, 91])),
        # Truncated payload: not a whole number of 32-bit integers.
        GameInformation(id=10, game_configuration_id=3, total_win=40, game_section_mask=1, occurrences=1,
                        raw_random_numbers=b'\x01\x02\x03'),
        GameInformation(id=11, game_configuration_id=5, total_win=15, game_section_mask=1, occurrences=1,
                        raw_random_numbers=encode_random_numbers([110])),
        GameInformation(id=12, game_configuration_id=6, total_win=30, game_section_mask=1, occurrences=1,
                        raw_random_numbers=encode_random_numbers([120])),
    ])
    session.add_all([
        GameDataProperty(key='GameName', value='Example Slots'),
        GameDataProperty(key='Version', value='3'),
    ])


@pytest.fixture
def source_path(tmp_path):
    path = str(tmp_path / 'games.db')
    engine = create_data_source_file(path)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        _populate(session)
        session.commit()
    engine.dispose()
    return path


@pytest.fixture
def store(source_path):
    engine = create_read_only_engine(source_path)
    yield GameDataStore(create_session_factory(engine))
    engine.dispose()


@pytest.fixture
def scripted_rng():
    return ScriptedRng
