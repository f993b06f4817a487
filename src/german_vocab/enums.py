"""Enumeration types for German vocabulary data.

These StrEnum classes double as the serialization order of the compressed
corpus: iterating an enum yields its members in declaration order, and the
row codec walks tables in exactly that order.
"""

from enum import StrEnum


class WordType(StrEnum):
    """Part of speech tag stored as the first field of every row."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"

    @property
    def plural(self) -> str:
        """Return the plural form for display (e.g., 'verbs')."""
        return {
            WordType.NOUN: "nouns",
            WordType.VERB: "verbs",
            WordType.ADJECTIVE: "adjectives",
        }[self]


class Level(StrEnum):
    """CEFR proficiency level."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class Gender(StrEnum):
    """Grammatical gender of a noun."""

    M = "m"
    F = "f"
    N = "n"


class Case(StrEnum):
    """Grammatical case, in table order."""

    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    DATIVE = "dative"
    GENITIVE = "genitive"


class Form(StrEnum):
    """Number column of a noun case table."""

    SINGULAR = "singular"
    PLURAL = "plural"


class GenderedForm(StrEnum):
    """Column of an adjective declension table.

    - M/F/N: singular forms agreeing with the noun's gender
    - P: plural (all genders)
    """

    M = "m"
    F = "f"
    N = "n"
    P = "p"


class Pronoun(StrEnum):
    """Person column of a conjugation table."""

    ICH = "ich"
    DU = "du"
    ES = "es"
    WIR = "wir"
    IHR = "ihr"
    SIE = "Sie"
