import logging
import os
import pathlib

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL
from sqlalchemy.orm import sessionmaker

from gamedata.exceptions import ArgumentException, NotFoundException
from gamedata.models import Base

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 10000
DEFAULT_PAGE_SIZE = 4096


def _apply_pragmas(engine, pragmas):
    @event.listens_for(engine, "connect")
    def set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        for name, value in pragmas:
            cursor.execute(f"PRAGMA {name}={value}")
        cursor.close()


def create_read_only_engine(path, cache_size=DEFAULT_CACHE_SIZE):
    """
    Opens an existing data source file for reading.

    The file must already exist; a read-only SQLite URI never creates one.
    """
    if not path:
        raise ArgumentException("A data source path is required.")
    if not os.path.isfile(path):
        raise NotFoundException(f"Data source file not found: {path}", details={'path': path})

    absolute_path = os.path.abspath(path)
    # SQLite decodes the file URI, so the path must be percent-encoded.
    url = URL.create("sqlite", database=pathlib.Path(absolute_path).as_uri(), query={"mode": "ro", "uri": "true"})
    engine = create_engine(url)
    _apply_pragmas(engine, [
        ('cache_size', int(cache_size)),
        ('synchronous', 'OFF'),
        ('query_only', 'ON'),
    ])
    logger.info(f"Opened read-only data source {absolute_path}")
    return engine


def create_writable_engine(path, cache_size=DEFAULT_CACHE_SIZE, page_size=DEFAULT_PAGE_SIZE):
    if not path:
        raise ArgumentException("A data source path is required.")
    engine = create_engine(URL.create("sqlite", database=os.path.abspath(path)))
    _apply_pragmas(engine, [
        ('page_size', int(page_size)),
        ('cache_size', int(cache_size)),
        ('synchronous', 'NORMAL'),
    ])
    return engine


def create_data_source_file(path, cache_size=DEFAULT_CACHE_SIZE, page_size=DEFAULT_PAGE_SIZE):
    """Creates (or completes) the data source schema at `path` and returns a writable engine."""
    engine = create_writable_engine(path, cache_size=cache_size, page_size=page_size)
    Base.metadata.create_all(engine)
    logger.info(f"Created data source schema at {os.path.abspath(path)}")
    return engine


def create_session_factory(engine):
    # Read paths never commit; rows stay usable after their session closes.
    return sessionmaker(bind=engine, expire_on_commit=False)
