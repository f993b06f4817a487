"""JSON import/export of word records.

Curated vocabulary data is kept as JSON objects with camelCase keys
(``noArticle``, ``commonNouns``, ...). This module converts between that
shape and the dataclasses in german_vocab.models.

Example (abbreviated):
    {"type": "noun", "lemma": "Haus", "level": "A1", "translations": ["house"],
     "gender": "n", "noArticle": false, "singularOnly": false, "pluralOnly": false,
     "cases": {"nominative": {"singular": "Haus", "plural": "Häuser"}, ...}}
"""

import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

from german_vocab.codec import RECORD_CLASSES, UnknownWordTypeError
from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun, WordType
from german_vocab.models import (
    CaseTable,
    Conjugation,
    Declension,
    Imperative,
    WordRecord,
    empty_cases,
    empty_conjugation,
    empty_declension,
)

logger = logging.getLogger(__name__)


def _camel(name: str) -> str:
    """Convert a snake_case attribute name to its JSON key (no_article -> noArticle)."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _to_json(value: Any) -> Any:
    if isinstance(value, Imperative):
        return asdict(value)
    return value


def word_to_dict(word: WordRecord) -> dict[str, Any]:
    """Convert a word record into its JSON object."""
    result: dict[str, Any] = {"type": str(word.type)}
    for f in fields(word):
        result[_camel(f.name)] = _to_json(getattr(word, f.name))
    return result


# =============================================================================
# Parsing
# =============================================================================


def _cases(data: dict[str, Any]) -> CaseTable:
    table = empty_cases()
    for case in Case:
        row = data.get(case, {}) or {}
        for form in Form:
            table[case][form] = row.get(form)
    return table


def _declension(data: dict[str, Any]) -> Declension:
    table = empty_declension()
    for case in Case:
        row = data.get(case, {}) or {}
        for form in GenderedForm:
            table[case][form] = row.get(form)
    return table


def _conjugation(data: dict[str, Any]) -> Conjugation:
    conjugation = empty_conjugation()
    for pronoun in Pronoun:
        conjugation[pronoun] = data.get(pronoun)
    return conjugation


def _imperative(data: dict[str, Any] | None) -> Imperative | None:
    if not data:
        return None
    # "wir" is part of the upstream shape but not of the stored record
    return Imperative(du=data.get("du"), ihr=data.get("ihr"), Sie=data.get("Sie"))


def _optional(parse: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: None if value is None or value == "" else parse(value)


_PARSERS: dict[str, Callable[[Any], Any]] = {
    "level": _optional(Level),
    "gender": _optional(Gender),
    "frequency": _optional(float),
    "cases": _cases,
    "strong": _declension,
    "weak": _declension,
    "mixed": _declension,
    "present": _conjugation,
    "simple": _conjugation,
    "conjunctive1": _conjugation,
    "conjunctive2": _conjugation,
    "imperative": _imperative,
    "translations": lambda value: list(value or []),
    "common_nouns": lambda value: list(value or []),
}


def word_from_dict(data: dict[str, Any]) -> WordRecord:
    """Build a word record from its JSON object.

    Keys that are missing fall back to the dataclass defaults; unknown keys
    are ignored.

    Raises:
        UnknownWordTypeError: If ``data["type"]`` is not a known word type.
    """
    try:
        word_type = WordType(data.get("type"))
    except ValueError:
        raise UnknownWordTypeError(f"Unknown word type {data.get('type')!r}") from None

    cls = RECORD_CLASSES[word_type]
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        key = _camel(f.name)
        if key not in data:
            continue
        parse = _PARSERS.get(f.name)
        kwargs[f.name] = parse(data[key]) if parse else data[key]

    return cls(**kwargs)


# =============================================================================
# Files
# =============================================================================


def load_words(path: Path) -> list[WordRecord]:
    """Load word records from a JSON array file or a JSONL file."""
    with path.open(encoding="utf-8") as f:
        if path.suffix == ".jsonl":
            entries = [json.loads(line) for line in f if line.strip()]
        else:
            entries = json.load(f)

    words = [word_from_dict(entry) for entry in entries]
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def dump_words(words: Iterable[WordRecord], path: Path) -> int:
    """Write word records to a JSON array file. Returns the number written."""
    entries = [word_to_dict(word) for word in words]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(entries, f, ensure_ascii=False, indent=2)
        f.write("\n")
    return len(entries)
