"""Database modules for the German vocabulary store."""

from german_vocab.db.connection import (
    DEFAULT_DB_PATH,
    dispose_engines,
    get_connection,
    get_engine,
)
from german_vocab.db.schema import init_db, metadata, words
from german_vocab.db.store import count_by_type, export_corpus, load_words, save_words

__all__ = [
    "DEFAULT_DB_PATH",
    "count_by_type",
    "dispose_engines",
    "export_corpus",
    "get_connection",
    "get_engine",
    "init_db",
    "load_words",
    "metadata",
    "save_words",
    "words",
]
