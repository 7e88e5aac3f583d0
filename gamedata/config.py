"""
Data source configuration, loaded from the environment (and a .env file) and
validated at import.
"""
from dotenv import load_dotenv

from gamedata.config_validator import validate_config

load_dotenv()


class Config:
    _validated_config = validate_config()

    # Data source file opened read-only by the data sources
    SOURCE_PATH = _validated_config['SOURCE_PATH']

    # SQLite tuning
    CACHE_SIZE = _validated_config['CACHE_SIZE']
    PAGE_SIZE = _validated_config['PAGE_SIZE']

    # Logging
    LOG_LEVEL = _validated_config['LOG_LEVEL']
    LOG_JSON = _validated_config['LOG_JSON']

    # Fixed seed for reproducible verification runs; None draws from the OS
    RNG_SEED = _validated_config['RNG_SEED']


class TestingConfig(Config):
    TESTING = True
    SOURCE_PATH = None
    LOG_LEVEL = 'DEBUG'
    LOG_JSON = False
    RNG_SEED = 1234
