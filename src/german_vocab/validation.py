"""Structural validation of word records.

The codec trusts its own format and never rejects a record, so curated data
and decoded corpora are checked here instead.

Usage:
    from german_vocab.validation import validate_word, WordValidationError

    try:
        validate_word(word)
    except WordValidationError as e:
        print(e.errors)
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun
from german_vocab.models import Adjective, Noun, Verb, WordBase, WordRecord
from german_vocab.stem import SEPARABLE_DELIMITER

GERMAN_LETTERS = "a-zA-ZäöüÄÖÜßé"

# Extra characters allowed in English translations
TRANSLATION_CHARS = " \\-'éè”&"

SEPARABLE_ZU_PATTERNS = (
    re.compile(r"[a-zäöüß]zu[a-zäöü]"),
    re.compile(r"[a-zäöüß] zu [a-zäöü]"),
)


class WordValidationError(ValueError):
    """Raised when a word record fails validation."""

    def __init__(self, lemma: str, errors: dict[str, str]) -> None:
        self.lemma = lemma
        self.errors = errors
        details = "\n".join(f"  {name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid word '{lemma}':\n{details}")


class Validator:
    """Accumulates field errors for a single record."""

    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    def assert_valid(self, word: WordBase) -> None:
        if self.errors:
            raise WordValidationError(word.lemma, self.errors)

    def validate_word(
        self,
        name: str,
        value: str | None,
        allowed_chars: str = "",
        *,
        numbers_allowed: bool = False,
        null_allowed: bool = False,
    ) -> bool:
        """Check that a value is made only of German letters plus `allowed_chars`."""
        if value is None and null_allowed:
            return True

        digits = "0-9" if numbers_allowed else ""
        pattern = f"[{GERMAN_LETTERS}{allowed_chars}{digits}]+"
        if not value or not re.fullmatch(pattern, value):
            self.errors[name] = f"Invalid {value!r}"
            return False
        return True

    def validate_one_of(self, name: str, value: Any, valid: Iterable[Any]) -> None:
        valid = list(valid)
        if value not in valid:
            self.errors[name] = f"{value!r} must be one of {', '.join(map(str, valid))}"

    def validate_is_null(self, name: str, value: Any) -> None:
        if value is not None:
            self.errors[name] = f"{value!r} must be empty"

    def validate_word_count(self, name: str, value: str | None, count: int) -> None:
        if value is not None and len(value.split(" ")) != count:
            self.errors[name] = f"{value!r} must have {count} word(s)"

    def validate_equal(self, name: str, a: str | None, b: str | None) -> None:
        if a != b:
            self.errors[name] = f"{a!r} must be equal to {b!r}"

    def validate_condition(self, name: str, condition: Callable[[], bool], message: str) -> None:
        if not condition():
            self.errors[name] = message


# =============================================================================
# Per-type validation
# =============================================================================


def _validate_base(validator: Validator, word: WordBase) -> None:
    validator.validate_word("lemma", word.lemma, f"·{SEPARABLE_DELIMITER}")
    validator.validate_condition(
        "lemma",
        lambda: word.lemma.count("·") <= 1,
        "Lemma must have at most one '·'",
    )
    if word.level is not None:
        validator.validate_one_of("level", word.level, Level)

    for i, translation in enumerate(word.translations):
        validator.validate_word(
            f"translations[{i}]", translation, TRANSLATION_CHARS, numbers_allowed=True
        )


def validate_word_base(word: WordBase) -> None:
    """Validate the fields shared by every word type."""
    validator = Validator()
    _validate_base(validator, word)
    validator.assert_valid(word)


def validate_noun(noun: Noun) -> None:
    """Validate a noun.

    - singular_only and plural_only are mutually exclusive
    - nouns without an article have no gender
    - singular-only nouns have no plural forms and vice versa
    """
    validator = Validator()
    _validate_base(validator, noun)

    validator.validate_condition(
        "singular_only/plural_only",
        lambda: not (noun.singular_only and noun.plural_only),
        "Can't be singular_only and plural_only at the same time",
    )

    if noun.no_article:
        validator.validate_is_null("gender", noun.gender)
    elif noun.gender is not None:
        validator.validate_one_of("gender", noun.gender, Gender)

    for case in Case:
        for form in Form:
            name = f"cases.{case}.{form}"
            value = noun.cases[case][form]
            if (form is Form.PLURAL and noun.singular_only) or (
                form is Form.SINGULAR and noun.plural_only
            ):
                validator.validate_is_null(name, value)
            else:
                validator.validate_word(name, value)

    validator.assert_valid(noun)


def validate_verb(verb: Verb) -> None:
    """Validate a verb.

    Separable verbs must sandwich "zu" in the zu-infinitive (aufzustehen) and
    have two-word finite forms (steht auf).
    """
    validator = Validator()
    _validate_base(validator, verb)

    zuinfinitive = verb.zuinfinitive or ""
    if verb.separable:
        validator.validate_condition(
            "zuinfinitive",
            lambda: any(p.search(zuinfinitive) for p in SEPARABLE_ZU_PATTERNS),
            "'zu' must be sandwiched",
        )
    else:
        validator.validate_condition(
            "lemma",
            lambda: SEPARABLE_DELIMITER not in verb.lemma,
            f"Only separable verbs may contain '{SEPARABLE_DELIMITER}'",
        )
        validator.validate_condition(
            "zuinfinitive", lambda: "zu" in zuinfinitive, "Must include 'zu'"
        )

    separable_chars = " " if verb.separable else ""
    word_count = 2 if verb.separable else 1

    for tense in ("present", "simple"):
        conjugation = getattr(verb, tense)
        for pronoun in Pronoun:
            name = f"{tense}.{pronoun}"
            validator.validate_word(name, conjugation[pronoun], "/" + separable_chars)
            validator.validate_word_count(name, conjugation[pronoun], word_count)

    # Modal verbs have no imperative
    if verb.imperative is not None:
        for attr in ("du", "ihr"):
            value = getattr(verb.imperative, attr)
            validator.validate_word(f"imperative.{attr}", value, " ")
            validator.validate_word_count(f"imperative.{attr}", value, word_count)

    validator.validate_word("perfect", verb.perfect, " ")
    validator.validate_word("gerund", verb.gerund, " ")
    validator.validate_word("zuinfinitive", verb.zuinfinitive, " ")

    validator.assert_valid(verb)


def validate_adjective(adjective: Adjective) -> None:
    """Validate an adjective's declension tables."""
    validator = Validator()
    _validate_base(validator, adjective)

    validator.validate_condition(
        "singular_only/plural_only",
        lambda: not (adjective.singular_only and adjective.plural_only),
        "Can't be singular_only and plural_only at the same time",
    )

    if adjective.not_declinable:
        validator.validate_equal(
            "not_declinable",
            adjective.strong[Case.NOMINATIVE][GenderedForm.P],
            adjective.weak[Case.GENITIVE][GenderedForm.P],
        )
    else:
        for case in Case:
            for form in GenderedForm:
                empty = adjective.predicative_only or (
                    adjective.singular_only and form is GenderedForm.P
                )
                for name in ("strong", "weak", "mixed"):
                    value = getattr(adjective, name)[case][form]
                    if empty:
                        validator.validate_is_null(f"{name}.{case}.{form}", value)
                    else:
                        validator.validate_word(f"{name}.{case}.{form}", value)

    validator.assert_valid(adjective)


def validate_word(word: WordRecord) -> None:
    """Validate a record of any word type.

    Raises:
        WordValidationError: With every failing field of the record.
    """
    match word:
        case Noun():
            validate_noun(word)
        case Verb():
            validate_verb(word)
        case Adjective():
            validate_adjective(word)
        case _:
            raise TypeError(f"Not a word record: {word!r}")


# =============================================================================
# Corpus validation
# =============================================================================


@dataclass
class ValidationReport:
    """Validation results for a whole corpus."""

    checked: int = 0
    failures: list[WordValidationError] = field(
        default_factory=lambda: list[WordValidationError]()
    )

    @property
    def all_passed(self) -> bool:
        return not self.failures

    def summary(self, *, verbose: bool = False) -> str:
        lines: list[str] = []
        if verbose:
            for failure in self.failures[:20]:
                lines.append(str(failure))
            if len(self.failures) > 20:
                lines.append(f"... and {len(self.failures) - 20} more")
        if self.all_passed:
            lines.append(f"Result: All {self.checked:,} words valid")
        else:
            lines.append(f"Result: FAILED ({len(self.failures):,} of {self.checked:,} invalid)")
        return "\n".join(lines)


def validate_corpus(words: Iterable[WordRecord]) -> ValidationReport:
    """Validate every record, collecting failures instead of raising."""
    report = ValidationReport()
    for word in words:
        report.checked += 1
        try:
            validate_word(word)
        except WordValidationError as e:
            report.failures.append(e)
    return report
