import logging
from dataclasses import dataclass

from pythonjsonlogger import jsonlogger

from gamedata.database import create_read_only_engine, create_session_factory
from gamedata.exceptions import ArgumentException
from gamedata.services.configuration_resolver import ConfigurationResolver
from gamedata.services.game_data_source import GameDataSource
from gamedata.services.query_cache import QueryResultCache
from gamedata.services.store import GameDataStore
from gamedata.services.win_data_source import WinDataSource
from gamedata.utils.random_numbers import create_random_number_generator

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s %(funcName)s %(lineno)d %(message)s'


def configure_logging(level='INFO', json_format=True):
    """Routes the `gamedata` loggers to stderr, as JSON lines unless `json_format` is off."""
    package_logger = logging.getLogger('gamedata')
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if package_logger.hasHandlers():
        package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


@dataclass
class DataSources:
    engine: object
    store: GameDataStore
    game_data_source: GameDataSource
    win_data_source: WinDataSource

    def dispose(self):
        self.engine.dispose()


def create_data_sources(config, source_path=None, seed=None) -> DataSources:
    """
    Wires a read-only store and both data sources for one data source file.

    `source_path` and `seed` override the matching config values.
    """
    path = source_path or config.SOURCE_PATH
    if not path:
        raise ArgumentException("No data source path configured. Set GAMEDATA_SOURCE_PATH or pass a path.")
    if seed is None:
        seed = config.RNG_SEED

    engine = create_read_only_engine(path, cache_size=config.CACHE_SIZE)
    store = GameDataStore(create_session_factory(engine))
    resolver = ConfigurationResolver(store)
    rng = create_random_number_generator(seed)
    if seed is not None:
        logger.info(f"Using seeded random numbers (seed {seed})")

    return DataSources(
        engine=engine,
        store=store,
        game_data_source=GameDataSource(store, resolver, rng, cache=QueryResultCache()),
        win_data_source=WinDataSource(store, resolver, rng),
    )
