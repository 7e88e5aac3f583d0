import pytest

from gamedata.config_validator import ConfigValidationError, ConfigValidator
from gamedata.database import DEFAULT_CACHE_SIZE, DEFAULT_PAGE_SIZE


def validate(environ):
    return ConfigValidator(environ=environ).validate_all()


def test_defaults_with_missing_source_warns():
    with pytest.warns(UserWarning, match="GAMEDATA_SOURCE_PATH is not set"):
        config = validate({})

    assert config == {
        'SOURCE_PATH': None,
        'CACHE_SIZE': DEFAULT_CACHE_SIZE,
        'PAGE_SIZE': DEFAULT_PAGE_SIZE,
        'LOG_LEVEL': 'INFO',
        'LOG_JSON': True,
        'RNG_SEED': None,
    }


def test_explicit_values(tmp_path):
    source = tmp_path / 'games.db'
    source.write_bytes(b'')
    config = validate({
        'GAMEDATA_SOURCE_PATH': str(source),
        'GAMEDATA_CACHE_SIZE': '-2000',
        'GAMEDATA_PAGE_SIZE': '8192',
        'GAMEDATA_LOG_LEVEL': 'debug',
        'GAMEDATA_LOG_JSON': 'false',
        'GAMEDATA_RNG_SEED': '42',
    })
    assert config['SOURCE_PATH'] == str(source)
    # Negative cache sizes are KiB in SQLite and are accepted.
    assert config['CACHE_SIZE'] == -2000
    assert config['PAGE_SIZE'] == 8192
    assert config['LOG_LEVEL'] == 'DEBUG'
    assert config['LOG_JSON'] is False
    assert config['RNG_SEED'] == 42


def test_missing_source_file_warns(tmp_path):
    with pytest.warns(UserWarning, match="missing file"):
        validate({'GAMEDATA_SOURCE_PATH': str(tmp_path / 'missing.db')})


@pytest.mark.parametrize("name, value", [
    ('GAMEDATA_CACHE_SIZE', 'lots'),
    ('GAMEDATA_PAGE_SIZE', '1000'),
    ('GAMEDATA_PAGE_SIZE', '256'),
    ('GAMEDATA_LOG_LEVEL', 'LOUD'),
    ('GAMEDATA_LOG_JSON', 'maybe'),
    ('GAMEDATA_RNG_SEED', '4.2'),
])
def test_malformed_values_fail(tmp_path, name, value):
    source = tmp_path / 'games.db'
    source.write_bytes(b'')
    with pytest.raises(ConfigValidationError) as excinfo:
        validate({'GAMEDATA_SOURCE_PATH': str(source), name: value})
    assert name in str(excinfo.value)


def test_errors_are_collected_together():
    validator = ConfigValidator(environ={'GAMEDATA_CACHE_SIZE': 'x', 'GAMEDATA_LOG_LEVEL': 'LOUD'})
    with pytest.raises(ConfigValidationError) as excinfo:
        validator.validate_all()
    assert len(validator.errors) == 2
    assert "Warnings:" in str(excinfo.value)
