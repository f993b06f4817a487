"""Row codec and corpus compression for word records.

Each record becomes one tab-separated row. Rows carry no field names: a
field's position is its meaning, so the layouts below are shared by the
encoder and the decoder and are the only place the order is defined.

Row format:
    type, lemma, level, translations, frequency, <type-specific fields>

Within a field, lists and flattened tables are joined with "|", booleans are
"t"/"f", and missing values are empty strings. Inflected forms go through
stem elision (see german_vocab.stem) before being written.

Usage:
    from german_vocab.codec import compress, decompress

    blob = compress(words)
    assert decompress(blob) == words
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from german_vocab.cascade import cascade, uncascade
from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun, WordType
from german_vocab.models import Adjective, Imperative, Noun, Verb, WordRecord
from german_vocab.stem import Elision, elision_for

logger = logging.getLogger(__name__)

ROW_SEPARATOR = "\n"
FIELD_SEPARATOR = "\t"
LIST_SEPARATOR = "|"
TRUE = "t"
FALSE = "f"

# type, lemma, level, translations, frequency
HEADER_LENGTH = 5


class CodecError(Exception):
    """Base class for codec failures."""


class UnknownWordTypeError(CodecError):
    """Raised for a record or row whose word type is not noun/verb/adjective."""


class FieldKind(Enum):
    """How a single row field is written and read back."""

    FLAG = "flag"  # bool as t/f
    GENDER = "gender"  # Gender or empty
    FORM = "form"  # stem-elided inflected form
    WORDS = "words"  # plain list of strings
    CASES = "cases"  # Case x Form table
    DECLENSION = "declension"  # Case x GenderedForm table
    CONJUGATION = "conjugation"  # Pronoun table
    IMPERATIVE = "imperative"  # one attribute of Verb.imperative


@dataclass(frozen=True)
class FieldSpec:
    """One positional field of a row: the record attribute and its kind."""

    attr: str
    kind: FieldKind


# =============================================================================
# Field layouts (single source of truth for both directions)
# =============================================================================

NOUN_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("gender", FieldKind.GENDER),
    FieldSpec("no_article", FieldKind.FLAG),
    FieldSpec("singular_only", FieldKind.FLAG),
    FieldSpec("plural_only", FieldKind.FLAG),
    FieldSpec("cases", FieldKind.CASES),
)

VERB_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("separable", FieldKind.FLAG),
    FieldSpec("present", FieldKind.CONJUGATION),
    FieldSpec("simple", FieldKind.CONJUGATION),
    FieldSpec("conjunctive1", FieldKind.CONJUGATION),
    FieldSpec("conjunctive2", FieldKind.CONJUGATION),
    FieldSpec("du", FieldKind.IMPERATIVE),
    FieldSpec("ihr", FieldKind.IMPERATIVE),
    FieldSpec("Sie", FieldKind.IMPERATIVE),
    FieldSpec("perfect", FieldKind.FORM),
    FieldSpec("gerund", FieldKind.FORM),
    FieldSpec("zuinfinitive", FieldKind.FORM),
)

ADJECTIVE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("singular_only", FieldKind.FLAG),
    FieldSpec("plural_only", FieldKind.FLAG),
    FieldSpec("predicative_only", FieldKind.FLAG),
    FieldSpec("absolute", FieldKind.FLAG),
    FieldSpec("not_declinable", FieldKind.FLAG),
    FieldSpec("no_mixed", FieldKind.FLAG),
    FieldSpec("strong", FieldKind.DECLENSION),
    FieldSpec("weak", FieldKind.DECLENSION),
    FieldSpec("mixed", FieldKind.DECLENSION),
    FieldSpec("comparative", FieldKind.FORM),
    FieldSpec("is_comparative", FieldKind.FLAG),
    FieldSpec("no_comparative", FieldKind.FLAG),
    FieldSpec("superlative", FieldKind.FORM),
    FieldSpec("is_superlative", FieldKind.FLAG),
    FieldSpec("superlative_only", FieldKind.FLAG),
    FieldSpec("common_nouns", FieldKind.WORDS),
)

FIELD_LAYOUTS: dict[WordType, tuple[FieldSpec, ...]] = {
    WordType.NOUN: NOUN_FIELDS,
    WordType.VERB: VERB_FIELDS,
    WordType.ADJECTIVE: ADJECTIVE_FIELDS,
}

RECORD_CLASSES: dict[WordType, type[WordRecord]] = {
    WordType.NOUN: Noun,
    WordType.VERB: Verb,
    WordType.ADJECTIVE: Adjective,
}

_TABLE_COLUMNS: dict[FieldKind, tuple[Any, ...]] = {
    FieldKind.CASES: tuple(Form),
    FieldKind.DECLENSION: tuple(GenderedForm),
}


def row_length(word_type: WordType) -> int:
    """Return the number of fields in a row of the given word type."""
    return HEADER_LENGTH + len(FIELD_LAYOUTS[word_type])


# =============================================================================
# Scalar helpers
# =============================================================================


def format_frequency(frequency: float | None) -> str:
    """Format a frequency without a trailing '.0' for integral values.

    Examples:
        >>> format_frequency(100.0)
        '100'
        >>> format_frequency(0.25)
        '0.25'
        >>> format_frequency(None)
        ''
    """
    if frequency is None:
        return ""
    value = float(frequency)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _parse_frequency(raw: str, lemma: str) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid frequency %r for '%s'", raw, lemma)
        return None


def _parse_level(raw: str, lemma: str) -> Level | None:
    if not raw:
        return None
    try:
        return Level(raw)
    except ValueError:
        logger.warning("Unknown level %r for '%s'", raw, lemma)
        return None


def _parse_gender(raw: str, lemma: str) -> Gender | None:
    if not raw:
        return None
    try:
        return Gender(raw)
    except ValueError:
        logger.warning("Unknown gender %r for '%s'", raw, lemma)
        return None


def _split_cells(raw: str, count: int) -> list[str]:
    """Split a "|"-joined table into exactly `count` cells, padding with empties."""
    cells = raw.split(LIST_SEPARATOR)
    if len(cells) < count:
        cells.extend([""] * (count - len(cells)))
    return cells[:count]


# =============================================================================
# Encoding
# =============================================================================


def _elision_for_word(word: WordRecord) -> Elision:
    match word:
        case Verb():
            return elision_for(WordType.VERB, word.lemma, separable=word.separable)
        case Noun():
            return elision_for(WordType.NOUN, word.lemma)
        case Adjective():
            return elision_for(WordType.ADJECTIVE, word.lemma)
        case _:
            raise UnknownWordTypeError(f"Cannot serialize {type(word).__name__}: {word!r}")


def _encode_field(word: WordRecord, spec: FieldSpec, elision: Elision) -> str:
    match spec.kind:
        case FieldKind.FLAG:
            return TRUE if getattr(word, spec.attr) else FALSE
        case FieldKind.GENDER:
            gender = getattr(word, spec.attr)
            return "" if gender is None else str(gender)
        case FieldKind.FORM:
            return elision.elide(getattr(word, spec.attr))
        case FieldKind.WORDS:
            return LIST_SEPARATOR.join(getattr(word, spec.attr))
        case FieldKind.CASES | FieldKind.DECLENSION:
            table = getattr(word, spec.attr)
            return LIST_SEPARATOR.join(
                elision.elide(table[case_][column])
                for case_ in Case
                for column in _TABLE_COLUMNS[spec.kind]
            )
        case FieldKind.CONJUGATION:
            conjugation = getattr(word, spec.attr)
            return LIST_SEPARATOR.join(elision.elide(conjugation[p]) for p in Pronoun)
        case FieldKind.IMPERATIVE:
            imperative = getattr(word, "imperative")
            return elision.elide(None if imperative is None else getattr(imperative, spec.attr))


def encode_fields(word: WordRecord) -> list[str]:
    """Flatten a word record into its ordered list of row fields.

    Raises:
        UnknownWordTypeError: If `word` is not a Noun, Verb or Adjective.
    """
    elision = _elision_for_word(word)

    fields = [
        str(word.type),
        word.lemma,
        "" if word.level is None else str(word.level),
        LIST_SEPARATOR.join(word.translations),
        format_frequency(word.frequency),
    ]
    fields.extend(_encode_field(word, spec, elision) for spec in FIELD_LAYOUTS[word.type])
    return fields


def encode_word(word: WordRecord) -> str:
    """Serialize one word record into a tab-separated row (before the cascade)."""
    return FIELD_SEPARATOR.join(encode_fields(word))


# =============================================================================
# Decoding
# =============================================================================


def _decode_field(spec: FieldSpec, raw: str, elision: Elision, lemma: str) -> Any:
    match spec.kind:
        case FieldKind.FLAG:
            return raw == TRUE
        case FieldKind.GENDER:
            return _parse_gender(raw, lemma)
        case FieldKind.FORM | FieldKind.IMPERATIVE:
            return elision.expand(raw)
        case FieldKind.WORDS:
            return raw.split(LIST_SEPARATOR) if raw else []
        case FieldKind.CASES | FieldKind.DECLENSION:
            columns = _TABLE_COLUMNS[spec.kind]
            cells = iter(_split_cells(raw, len(Case) * len(columns)))
            return {
                case_: {column: elision.expand(next(cells)) for column in columns}
                for case_ in Case
            }
        case FieldKind.CONJUGATION:
            cells = _split_cells(raw, len(Pronoun))
            return {p: elision.expand(cell) for p, cell in zip(Pronoun, cells, strict=True)}


def decode_row(row: str) -> WordRecord:
    """Reconstruct a word record from one row (after the cascade is undone).

    Rows with missing trailing fields are decoded leniently: the missing
    fields come back empty (None, False or []) and a warning is logged.
    Structural validation is left to german_vocab.validation.

    Raises:
        UnknownWordTypeError: If the row's type tag is not a known word type.
    """
    raw = row.split(FIELD_SEPARATOR)

    try:
        word_type = WordType(raw[0])
    except ValueError:
        raise UnknownWordTypeError(f"Unknown word type {raw[0]!r} in row: {row[:80]!r}") from None

    expected = row_length(word_type)
    if len(raw) != expected:
        logger.warning(
            "Row for '%s' has %d fields, expected %d for %s",
            raw[1] if len(raw) > 1 else "",
            len(raw),
            expected,
            word_type,
        )
        raw = (raw + [""] * expected)[:expected]

    _, lemma, level, translations, frequency = raw[:HEADER_LENGTH]
    layout = FIELD_LAYOUTS[word_type]
    values = list(zip(layout, raw[HEADER_LENGTH:], strict=True))

    # Flags first: a verb's elision depends on whether it is separable
    flags = {spec.attr: value == TRUE for spec, value in values if spec.kind is FieldKind.FLAG}
    elision = elision_for(word_type, lemma, separable=flags.get("separable", False))

    kwargs: dict[str, Any] = {
        "lemma": lemma,
        "level": _parse_level(level, lemma),
        "translations": translations.split(LIST_SEPARATOR) if translations else [],
        "frequency": _parse_frequency(frequency, lemma),
    }
    imperative: dict[str, str | None] = {}

    for spec, value in values:
        decoded = _decode_field(spec, value, elision, lemma)
        if spec.kind is FieldKind.IMPERATIVE:
            imperative[spec.attr] = decoded
        else:
            kwargs[spec.attr] = decoded

    if imperative:
        has_imperative = any(form is not None for form in imperative.values())
        kwargs["imperative"] = Imperative(**imperative) if has_imperative else None

    return RECORD_CLASSES[word_type](**kwargs)


# =============================================================================
# Corpus
# =============================================================================


def compress(words: Iterable[WordRecord]) -> str:
    """Serialize word records into a single compressed corpus string."""
    rows = [encode_word(word) for word in words]
    logger.debug("Compressing %d rows", len(rows))
    return cascade(ROW_SEPARATOR.join(rows))


def decompress(compressed: str) -> list[WordRecord]:
    """Reconstruct word records from a corpus produced by compress()."""
    text = uncascade(compressed)
    words = [decode_row(row) for row in text.split(ROW_SEPARATOR) if row]
    logger.debug("Decompressed %d words", len(words))
    return words
