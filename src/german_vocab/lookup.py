"""Lookup tables mapping inflected forms back to their dictionary entries."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from german_vocab.enums import Case, Form, GenderedForm, Pronoun
from german_vocab.models import Adjective, Noun, Verb, WordRecord
from german_vocab.stem import SEPARABLE_DELIMITER

# Finite verb forms that are looked up (wir/Sie share the infinitive's shape)
VERB_LOOKUP_PRONOUNS = (Pronoun.ICH, Pronoun.DU, Pronoun.ES, Pronoun.IHR, Pronoun.SIE)

# Adjective cells that are looked up; the remaining cells repeat these forms
ADJECTIVE_LOOKUP_CELLS: dict[str, tuple[tuple[Case, GenderedForm], ...]] = {
    "strong": (
        (Case.ACCUSATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.F),
        (Case.DATIVE, GenderedForm.P),
        (Case.GENITIVE, GenderedForm.M),
        (Case.GENITIVE, GenderedForm.P),
        (Case.NOMINATIVE, GenderedForm.M),
        (Case.NOMINATIVE, GenderedForm.N),
        (Case.NOMINATIVE, GenderedForm.F),
        (Case.NOMINATIVE, GenderedForm.P),
    ),
    "mixed": (
        (Case.ACCUSATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.P),
        (Case.GENITIVE, GenderedForm.P),
        (Case.NOMINATIVE, GenderedForm.M),
        (Case.NOMINATIVE, GenderedForm.N),
        (Case.NOMINATIVE, GenderedForm.F),
        (Case.NOMINATIVE, GenderedForm.P),
    ),
    "weak": (
        (Case.ACCUSATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.M),
        (Case.DATIVE, GenderedForm.F),
        (Case.GENITIVE, GenderedForm.M),
        (Case.NOMINATIVE, GenderedForm.M),
    ),
}


def join_separable(form: str | None) -> str | None:
    """Join a detached separable form into one word ("steht auf" -> "aufsteht").

    Examples:
        >>> join_separable("steht auf")
        'aufsteht'
        >>> join_separable("lernt")
        'lernt'
    """
    if form is None:
        return None
    parts = form.split(" ")
    if len(parts) == 1:
        return form
    return parts[1] + parts[0]


def noun_lookups(noun: Noun) -> list[str | None]:
    """Return every case form of a noun."""
    return [noun.cases[case][form] for form in Form for case in Case]


def verb_lookups(verb: Verb) -> list[str | None]:
    """Return the verb forms a sentence token may take."""
    lookups = [join_separable(verb.present[p]) for p in VERB_LOOKUP_PRONOUNS]
    lookups.extend(join_separable(verb.simple[p]) for p in VERB_LOOKUP_PRONOUNS)
    lookups.append(verb.imperative.du if verb.imperative else None)
    lookups.append(verb.perfect)
    lookups.append(verb.zuinfinitive)
    lookups.append(verb.lemma.replace(SEPARABLE_DELIMITER, "").replace("·", ""))
    return lookups


def adjective_lookups(adjective: Adjective) -> list[str | None]:
    """Return the lemma and the distinct declined forms of an adjective."""
    lookups: list[str | None] = [adjective.lemma]
    for declension, cells in ADJECTIVE_LOOKUP_CELLS.items():
        table = getattr(adjective, declension)
        lookups.extend(table[case][form] for case, form in cells)
    return lookups


@dataclass
class LookupTables:
    """Form -> word maps, one per part of speech."""

    nouns: dict[str, Noun] = field(default_factory=lambda: dict[str, Noun]())
    verbs: dict[str, Verb] = field(default_factory=lambda: dict[str, Verb]())
    adjectives: dict[str, Adjective] = field(default_factory=lambda: dict[str, Adjective]())


def build_lookup_tables(words: Iterable[WordRecord]) -> LookupTables:
    """Index every word by its inflected forms.

    Noun keys are lowercased; when two words share a form, the later one wins.
    """
    tables = LookupTables()

    for word in words:
        match word:
            case Noun():
                for form in noun_lookups(word):
                    if form is not None:
                        tables.nouns[form.lower()] = word
            case Verb():
                for form in verb_lookups(word):
                    if form is not None:
                        tables.verbs[form] = word
            case Adjective():
                for form in adjective_lookups(word):
                    if form is not None:
                        tables.adjectives[form] = word

    return tables
