"""Stem elision for inflected word forms.

Almost every inflected form of a word contains its lexical stem literally
(lernen -> lerne, lernst, gelernt). Before the corpus is compressed, the
stem inside each form is replaced by a single marker character, and the
detachable prefix of a separable verb by a second one:

    lemma "lernen",     form "lernt"     -> "=t"
    lemma "auf_stehen", form "steht auf" -> "=t ~"

Only the first occurrence is replaced. Forms that do not contain the stem
(irregular forms such as "aufgestanden") are stored verbatim.
"""

from dataclasses import dataclass

from german_vocab.enums import WordType

STEM_MARKER = "="
PREFIX_MARKER = "~"

# Delimiter between the detachable prefix and the base verb in a lemma
SEPARABLE_DELIMITER = "_"

# Superlative lemmas (e.g. "besten") keep this suffix literally in their forms
SUPERLATIVE_SUFFIXES = ("sten",)

# Infinitive ending dropped from the base verb ("stehen" -> "steh")
INFINITIVE_ENDING_LENGTH = 2


@dataclass(frozen=True)
class Elision:
    """Stem (and optional separable prefix) substituted out of a word's forms."""

    stem: str
    prefix: str | None = None

    def elide(self, form: str | None) -> str:
        """Replace the stem and prefix in a form with their markers.

        None becomes the empty string.
        """
        if form is None:
            return ""

        result = form
        if self.stem:
            result = result.replace(self.stem, STEM_MARKER, 1)
        if self.prefix:
            result = result.replace(self.prefix, PREFIX_MARKER, 1)
        return result

    def expand(self, raw: str) -> str | None:
        """Reverse elide(): re-insert prefix and stem.

        The empty string becomes None.
        """
        if raw == "":
            return None

        result = raw
        if self.prefix:
            result = result.replace(PREFIX_MARKER, self.prefix, 1)
        if self.stem:
            result = result.replace(STEM_MARKER, self.stem, 1)
        return result


def adjective_stem(lemma: str) -> str:
    """Return the matching stem of an adjective lemma.

    Examples:
        >>> adjective_stem("schnell")
        'schnell'
        >>> adjective_stem("besten")
        'be'
    """
    for suffix in SUPERLATIVE_SUFFIXES:
        if lemma.endswith(suffix):
            return lemma[: -len(suffix)]
    return lemma


def verb_stem(lemma: str) -> str:
    """Return the matching stem of a verb lemma.

    Examples:
        >>> verb_stem("lernen")
        'lern'
        >>> verb_stem("auf_stehen")
        'steh'
    """
    base = lemma.split(SEPARABLE_DELIMITER)[-1]
    return base[:-INFINITIVE_ENDING_LENGTH]


def verb_prefix(lemma: str) -> str:
    """Return the detachable prefix of a separable verb lemma ("auf_stehen" -> "auf")."""
    return lemma.split(SEPARABLE_DELIMITER)[0]


def elision_for(word_type: WordType, lemma: str, *, separable: bool = False) -> Elision:
    """Build the elision used for every form of one word."""
    match word_type:
        case WordType.NOUN:
            return Elision(stem=lemma)
        case WordType.ADJECTIVE:
            return Elision(stem=adjective_stem(lemma))
        case WordType.VERB:
            prefix = verb_prefix(lemma) if separable else None
            return Elision(stem=verb_stem(lemma), prefix=prefix)
