"""Shared sample words for the test suite."""

import pytest

from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun
from german_vocab.models import Adjective, Imperative, Noun, Verb


def _cases(rows: list[tuple[str | None, str | None]]) -> dict[Case, dict[Form, str | None]]:
    """Build a case table from (singular, plural) pairs in Case order."""
    return {
        case: {Form.SINGULAR: singular, Form.PLURAL: plural}
        for case, (singular, plural) in zip(Case, rows, strict=True)
    }


def _conjugation(forms: list[str | None]) -> dict[Pronoun, str | None]:
    return dict(zip(Pronoun, forms, strict=True))


def _declension(rows: list[list[str | None]]) -> dict[Case, dict[GenderedForm, str | None]]:
    """Build a declension from [m, f, n, p] rows in Case order."""
    return {
        case: dict(zip(GenderedForm, row, strict=True))
        for case, row in zip(Case, rows, strict=True)
    }


def make_tisch() -> Noun:
    return Noun(
        lemma="Tisch",
        level=Level.A1,
        translations=["table"],
        frequency=250,
        gender=Gender.M,
        cases=_cases(
            [
                ("Tisch", "Tische"),
                ("Tisch", "Tische"),
                ("Tisch", "Tischen"),
                ("Tisches", "Tische"),
            ]
        ),
    )


def make_haus() -> Noun:
    return Noun(
        lemma="Haus",
        level=Level.A1,
        translations=["house", "home"],
        frequency=1432.5,
        gender=Gender.N,
        cases=_cases(
            [
                ("Haus", "Häuser"),
                ("Haus", "Häuser"),
                ("Haus", "Häusern"),
                ("Hauses", "Häuser"),
            ]
        ),
    )


def make_eltern() -> Noun:
    return Noun(
        lemma="Eltern",
        level=Level.A1,
        translations=["parents"],
        plural_only=True,
        cases=_cases(
            [
                (None, "Eltern"),
                (None, "Eltern"),
                (None, "Eltern"),
                (None, "Eltern"),
            ]
        ),
    )


def make_lernen() -> Verb:
    return Verb(
        lemma="lernen",
        level=Level.A1,
        translations=["to learn", "to study"],
        frequency=812,
        present=_conjugation(["lerne", "lernst", "lernt", "lernen", "lernt", "lernen"]),
        simple=_conjugation(["lernte", "lerntest", "lernte", "lernten", "lerntet", "lernten"]),
        conjunctive1=_conjugation(["lerne", "lernest", "lerne", "lernen", "lernet", "lernen"]),
        conjunctive2=_conjugation(
            ["lernte", "lerntest", "lernte", "lernten", "lerntet", "lernten"]
        ),
        imperative=Imperative(du="lern", ihr="lernt", Sie="lernen Sie"),
        perfect="gelernt",
        gerund="lernend",
        zuinfinitive="zu lernen",
    )


def make_aufstehen() -> Verb:
    return Verb(
        lemma="auf_stehen",
        level=Level.A1,
        translations=["to get up", "to stand up"],
        separable=True,
        present=_conjugation(
            ["stehe auf", "stehst auf", "steht auf", "stehen auf", "steht auf", "stehen auf"]
        ),
        simple=_conjugation(
            ["stand auf", "standst auf", "stand auf", "standen auf", "standet auf", "standen auf"]
        ),
        conjunctive1=_conjugation(
            ["stehe auf", "stehest auf", "stehe auf", "stehen auf", "stehet auf", "stehen auf"]
        ),
        conjunctive2=_conjugation(
            [
                "stände auf",
                "ständest auf",
                "stände auf",
                "ständen auf",
                "ständet auf",
                "ständen auf",
            ]
        ),
        imperative=Imperative(du="steh auf", ihr="steht auf", Sie="stehen Sie auf"),
        perfect="aufgestanden",
        gerund="aufstehend",
        zuinfinitive="aufzustehen",
    )


def make_koennen() -> Verb:
    """A modal verb: no imperative."""
    return Verb(
        lemma="können",
        level=Level.A1,
        translations=["can", "to be able to"],
        present=_conjugation(["kann", "kannst", "kann", "können", "könnt", "können"]),
        simple=_conjugation(["konnte", "konntest", "konnte", "konnten", "konntet", "konnten"]),
        conjunctive1=_conjugation(["könne", "könnest", "könne", "können", "könnet", "können"]),
        conjunctive2=_conjugation(
            ["könnte", "könntest", "könnte", "könnten", "könntet", "könnten"]
        ),
        perfect="gekonnt",
        gerund="könnend",
        zuinfinitive="zu können",
    )


def make_schnell() -> Adjective:
    return Adjective(
        lemma="schnell",
        level=Level.A1,
        translations=["fast", "quick"],
        strong=_declension(
            [
                ["schneller", "schnelle", "schnelles", "schnelle"],
                ["schnellen", "schnelle", "schnelles", "schnelle"],
                ["schnellem", "schneller", "schnellem", "schnellen"],
                ["schnellen", "schneller", "schnellen", "schneller"],
            ]
        ),
        weak=_declension(
            [
                ["schnelle", "schnelle", "schnelle", "schnellen"],
                ["schnellen", "schnelle", "schnelle", "schnellen"],
                ["schnellen", "schnellen", "schnellen", "schnellen"],
                ["schnellen", "schnellen", "schnellen", "schnellen"],
            ]
        ),
        mixed=_declension(
            [
                ["schneller", "schnelle", "schnelles", "schnellen"],
                ["schnellen", "schnelle", "schnelles", "schnellen"],
                ["schnellen", "schnellen", "schnellen", "schnellen"],
                ["schnellen", "schnellen", "schnellen", "schnellen"],
            ]
        ),
        comparative="schneller",
        superlative="am schnellsten",
        common_nouns=["Auto", "Zug"],
    )


def make_lila() -> Adjective:
    """An indeclinable adjective."""
    row = ["lila", "lila", "lila", "lila"]
    return Adjective(
        lemma="lila",
        translations=["purple"],
        not_declinable=True,
        no_comparative=True,
        strong=_declension([row, row, row, row]),
        weak=_declension([row, row, row, row]),
        mixed=_declension([row, row, row, row]),
    )


@pytest.fixture
def tisch() -> Noun:
    return make_tisch()


@pytest.fixture
def haus() -> Noun:
    return make_haus()


@pytest.fixture
def eltern() -> Noun:
    return make_eltern()


@pytest.fixture
def lernen() -> Verb:
    return make_lernen()


@pytest.fixture
def aufstehen() -> Verb:
    return make_aufstehen()


@pytest.fixture
def koennen() -> Verb:
    return make_koennen()


@pytest.fixture
def schnell() -> Adjective:
    return make_schnell()


@pytest.fixture
def lila() -> Adjective:
    return make_lila()


@pytest.fixture
def vocabulary() -> list[Noun | Verb | Adjective]:
    """A mixed corpus covering every word type."""
    return [
        make_tisch(),
        make_haus(),
        make_lernen(),
        make_schnell(),
        make_eltern(),
        make_aufstehen(),
        make_koennen(),
        make_lila(),
    ]
