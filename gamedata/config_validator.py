"""
Configuration validation for data source access.

Settings come from GAMEDATA_* environment variables. Malformed values fail
fast at startup; a missing optional value only produces a warning.
"""

import logging
import os
import sys
import warnings
from typing import List, Optional

from gamedata.database import DEFAULT_CACHE_SIZE, DEFAULT_PAGE_SIZE

VALID_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')
# SQLite accepts page sizes that are powers of two in this range.
MIN_PAGE_SIZE = 512
MAX_PAGE_SIZE = 65536


class ConfigValidationError(Exception):
    """Raised when a configuration value is malformed."""
    pass


class ConfigValidator:
    """Validates GAMEDATA_* settings and collects errors and warnings."""

    def __init__(self, environ=None):
        self.environ = environ if environ is not None else os.environ
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def _get(self, var_name: str) -> Optional[str]:
        value = self.environ.get(var_name)
        if value is None or not value.strip():
            return None
        return value.strip()

    def validate_int_env_var(self, var_name: str, default: Optional[int], minimum: int = None) -> Optional[int]:
        """
        Parse an integer environment variable.

        Args:
            var_name: Name of the environment variable
            default: Value used when the variable is unset
            minimum: Smallest accepted value, if any

        Returns:
            The parsed value, or `default` when unset or invalid
        """
        raw = self._get(var_name)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            self.errors.append(f"{var_name} must be an integer, got '{raw}'")
            return default
        if minimum is not None and value < minimum:
            self.errors.append(f"{var_name} must be at least {minimum}, got {value}")
            return default
        return value

    def validate_bool_env_var(self, var_name: str, default: bool) -> bool:
        raw = self._get(var_name)
        if raw is None:
            return default
        lowered = raw.lower()
        if lowered in ('true', '1', 't', 'yes'):
            return True
        if lowered in ('false', '0', 'f', 'no'):
            return False
        self.errors.append(f"{var_name} must be a boolean (true/false), got '{raw}'")
        return default

    def validate_source_config(self) -> Optional[str]:
        source_path = self._get('GAMEDATA_SOURCE_PATH')
        if source_path is None:
            self.warnings.append(
                "GAMEDATA_SOURCE_PATH is not set. "
                "Pass a data source path explicitly (for example with --source)."
            )
            return None
        if not os.path.isfile(source_path):
            self.warnings.append(f"GAMEDATA_SOURCE_PATH points to a missing file: {source_path}")
        return source_path

    def validate_page_size(self) -> int:
        page_size = self.validate_int_env_var('GAMEDATA_PAGE_SIZE', DEFAULT_PAGE_SIZE, minimum=MIN_PAGE_SIZE)
        if page_size > MAX_PAGE_SIZE or page_size & (page_size - 1):
            self.errors.append(
                f"GAMEDATA_PAGE_SIZE must be a power of two between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}, got {page_size}"
            )
            return DEFAULT_PAGE_SIZE
        return page_size

    def validate_logging_config(self) -> str:
        log_level = (self._get('GAMEDATA_LOG_LEVEL') or 'INFO').upper()
        if log_level not in VALID_LOG_LEVELS:
            self.errors.append(
                f"GAMEDATA_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got '{log_level}'"
            )
            return 'INFO'
        return log_level

    def validate_all(self) -> dict:
        """
        Validate all configuration settings.

        Returns:
            Dictionary containing validated configuration values

        Raises:
            ConfigValidationError: If any value is malformed
        """
        config = {}

        config['SOURCE_PATH'] = self.validate_source_config()
        config['CACHE_SIZE'] = self.validate_int_env_var('GAMEDATA_CACHE_SIZE', DEFAULT_CACHE_SIZE)
        config['PAGE_SIZE'] = self.validate_page_size()
        config['LOG_LEVEL'] = self.validate_logging_config()
        config['LOG_JSON'] = self.validate_bool_env_var('GAMEDATA_LOG_JSON', True)
        config['RNG_SEED'] = self.validate_int_env_var('GAMEDATA_RNG_SEED', None)

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in self.errors)
            if self.warnings:
                error_msg += "\n\nWarnings:\n" + "\n".join(f"  - {warning}" for warning in self.warnings)
            raise ConfigValidationError(error_msg)

        for warning in self.warnings:
            warnings.warn(warning, UserWarning)

        return config


def validate_config() -> dict:
    """
    Validate configuration with fail-fast behavior.

    Raises:
        SystemExit: If any configuration value is malformed
    """
    try:
        return ConfigValidator().validate_all()
    except ConfigValidationError as e:
        logging.getLogger(__name__).critical("Configuration validation failed")
        print(str(e), file=sys.stderr)
        print("\nSet valid GAMEDATA_* environment variables (or a .env file) and retry.", file=sys.stderr)
        sys.exit(1)
