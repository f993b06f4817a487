"""Store and export word records in the SQLite vocabulary database."""

import logging
from collections.abc import Iterable

from sqlalchemy import Connection, func, select

from german_vocab.cascade import cascade
from german_vocab.codec import ROW_SEPARATOR, decode_row, encode_word
from german_vocab.db.schema import words
from german_vocab.models import WordRecord

logger = logging.getLogger(__name__)

BATCH_SIZE = 1000


def save_words(conn: Connection, records: Iterable[WordRecord]) -> int:
    """Insert word records, replacing existing entries with the same type and lemma.

    Returns the number of words written.
    """
    batch: list[dict[str, str | float | None]] = []
    count = 0

    def flush() -> None:
        if batch:
            conn.execute(words.insert().prefix_with("OR REPLACE"), batch)
            batch.clear()

    for word in records:
        batch.append(
            {
                "lemma": word.lemma,
                "type": str(word.type),
                "level": None if word.level is None else str(word.level),
                "frequency": word.frequency,
                "serialized": encode_word(word),
            }
        )
        count += 1
        if len(batch) >= BATCH_SIZE:
            flush()

    flush()
    logger.debug("Saved %d words", count)
    return count


def load_words(conn: Connection) -> list[WordRecord]:
    """Load every stored word, in insertion order."""
    result = conn.execute(select(words.c.serialized).order_by(words.c.id))
    return [decode_row(row.serialized) for row in result]


def export_corpus(conn: Connection) -> str:
    """Build the compressed corpus from the stored rows, in insertion order."""
    result = conn.execute(select(words.c.serialized).order_by(words.c.id))
    return cascade(ROW_SEPARATOR.join(row.serialized for row in result))


def count_by_type(conn: Connection) -> dict[str, int]:
    """Return the number of stored words per word type."""
    result = conn.execute(select(words.c.type, func.count()).group_by(words.c.type))
    return {row[0]: row[1] for row in result}
