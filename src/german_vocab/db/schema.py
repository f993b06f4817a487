"""Database schema definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

# One row per word. The inflection data is kept in its serialized row form
# (stem-elided, before the cascade), so exporting the corpus is a join plus
# the cascade.
words = Table(
    "words",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("lemma", Text, nullable=False),
    Column("type", String(20), nullable=False),  # noun, verb, adjective
    Column("level", String(2)),  # A1..C2, NULL if unknown
    Column("frequency", Float),  # type: ignore[arg-type]
    Column("serialized", Text, nullable=False),  # tab-separated row, before the cascade
    UniqueConstraint("type", "lemma", name="uq_words_type_lemma"),
)


def init_db(engine: Engine) -> None:
    """Initialize the database schema.

    Creates all tables if they don't exist.
    Safe to call multiple times (uses checkfirst=True by default).
    """
    metadata.create_all(engine)
