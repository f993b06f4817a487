"""Database connection management using SQLAlchemy."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Connection, Engine, create_engine

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("vocabulary.db")

_engine_cache: dict[Path, Engine] = {}


def get_engine(db_path: Path | str = DEFAULT_DB_PATH) -> Engine:
    """Get or create a SQLAlchemy engine for the given database file.

    Engines are cached by resolved path, so "vocabulary.db" and
    "./vocabulary.db" share one engine.
    """
    key = Path(db_path).resolve()

    engine = _engine_cache.get(key)
    if engine is None:
        logger.debug("Creating engine for %s", key)
        engine = create_engine(f"sqlite:///{key}", echo=False)
        _engine_cache[key] = engine

    return engine


def dispose_engines() -> None:
    """Close and forget every cached engine (e.g. before deleting a database file)."""
    for engine in _engine_cache.values():
        engine.dispose()
    _engine_cache.clear()


@contextmanager
def get_connection(
    db_path: Path | str = DEFAULT_DB_PATH,
) -> Generator[Connection]:
    """Open a connection that commits on success and rolls back on exception.

    Example:
        with get_connection("vocabulary.db") as conn:
            save_words(conn, words)
    """
    engine = get_engine(db_path)
    with engine.connect() as conn:
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
