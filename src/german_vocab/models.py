"""Word record types consumed and produced by the corpus codec.

A word record is one of three concrete dataclasses. The part of speech is a
class-level tag rather than an instance field, so a record's shape and its
tag can never disagree.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun, WordType

# Table aliases: every key is always present, a missing form is None
CaseTable = dict[Case, dict[Form, str | None]]
Declension = dict[Case, dict[GenderedForm, str | None]]
Conjugation = dict[Pronoun, str | None]


def empty_cases() -> CaseTable:
    """Return a fully keyed noun case table with every cell set to None."""
    return {case: dict.fromkeys(Form) for case in Case}


def empty_declension() -> Declension:
    """Return a fully keyed adjective declension with every cell set to None."""
    return {case: dict.fromkeys(GenderedForm) for case in Case}


def empty_conjugation() -> Conjugation:
    """Return a conjugation table with every pronoun set to None."""
    return dict.fromkeys(Pronoun)


@dataclass(kw_only=True)
class WordBase:
    """Fields shared by all word types."""

    type: ClassVar[WordType]

    lemma: str
    level: Level | None = None
    translations: list[str] = field(default_factory=lambda: list[str]())
    frequency: float | None = None


@dataclass(kw_only=True)
class Noun(WordBase):
    type: ClassVar[WordType] = WordType.NOUN

    gender: Gender | None = None
    no_article: bool = False
    singular_only: bool = False
    plural_only: bool = False
    cases: CaseTable = field(default_factory=empty_cases)


@dataclass
class Imperative:
    """Imperative forms of a verb (du/ihr/Sie)."""

    du: str | None
    ihr: str | None
    Sie: str | None


@dataclass(kw_only=True)
class Verb(WordBase):
    type: ClassVar[WordType] = WordType.VERB

    separable: bool = False
    present: Conjugation = field(default_factory=empty_conjugation)
    simple: Conjugation = field(default_factory=empty_conjugation)
    conjunctive1: Conjugation = field(default_factory=empty_conjugation)
    conjunctive2: Conjugation = field(default_factory=empty_conjugation)
    imperative: Imperative | None = None
    perfect: str | None = None
    gerund: str | None = None
    zuinfinitive: str | None = None


@dataclass(kw_only=True)
class Adjective(WordBase):
    type: ClassVar[WordType] = WordType.ADJECTIVE

    singular_only: bool = False
    plural_only: bool = False
    predicative_only: bool = False
    absolute: bool = False
    not_declinable: bool = False
    no_mixed: bool = False
    strong: Declension = field(default_factory=empty_declension)
    weak: Declension = field(default_factory=empty_declension)
    mixed: Declension = field(default_factory=empty_declension)
    comparative: str | None = None
    is_comparative: bool = False
    no_comparative: bool = False
    superlative: str | None = None
    is_superlative: bool = False
    superlative_only: bool = False
    common_nouns: list[str] = field(default_factory=lambda: list[str]())


WordRecord = Noun | Verb | Adjective
