"""Part-of-speech tagging client and sentence-to-vocabulary matcher.

Sentences are tagged by a remote HTTP service returning STTS tags (the
German tag set used by spaCy's German models). Tagged tokens are then
matched against lookup tables built from the vocabulary.

Service response format (one object per sentence):
    {"text": "Er steht früh auf.",
     "tokens": [{"id": 0, "start": 0, "end": 2, "tag": "PPER"}, ...]}
"""

import logging
import os
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import requests

from german_vocab.lookup import LookupTables
from german_vocab.models import WordRecord

logger = logging.getLogger(__name__)

DEFAULT_TAG_API = os.environ.get("GERMAN_VOCAB_TAG_API", "http://localhost:8000/tag")
REQUEST_TIMEOUT = 30

PUNCTUATION_RE = re.compile(r"[.,/#!?$%^&*;:{}=\-_`~()]")


class Tag(StrEnum):
    """STTS part-of-speech tags."""

    INTERNAL_PUNCT = "$("
    COMMA = "$,"
    SENTENCE_FINAL_PUNCT = "$."
    WORD_REMNANT = "TRUNC"
    NON_WORD = "XY"
    WHITESPACE = "_SP"
    NUMBER = "CARD"

    ATTRIBUTIVE_ADJECTIVE = "ADJA"
    ADVERBIAL_PREDICATE_ADJECTIVE = "ADJD"

    ADVERB = "ADV"
    PRONOMINAL_ADVERB = "PROAV"

    POSTPOSITION = "APPO"
    PREPOSITION_LEFT = "APPR"
    PREPOSITION_ARTICLE = "APPRART"
    PREPOSITION_RIGHT = "APZR"

    ARTICLE = "ART"
    FOREIGN = "FM"
    INTERJECTION = "ITJ"

    COMPARATIVE_CONJUNCTION = "KOKOM"
    COORDINATE_CONJUNCTION = "KON"
    SUBORDINATE_ZU_INF_CONJUNCTION = "KOUI"
    SUBORDINATE_SENTENCE_CONJUNCTION = "KOUS"

    PROPER_NOUN = "NE"
    NOUN = "NN"
    PROPER_NOUN_2 = "NNE"

    ATTRIBUTIVE_DEMONSTRATIVE_PRONOUN = "PDAT"
    SUBSTITUTING_DEMONSTRATIVE_PRONOUN = "PDS"
    INDEFINITE_PRONOUN_WITHOUT_DETERMINER = "PIAT"
    SUBSTITUTING_INDEFINITE_PRONOUN = "PIS"
    NON_REFLEXIVE_PERSONAL_PRONOUN = "PPER"
    ATTRIBUTIVE_POSSESSIVE_PRONOUN = "PPOSAT"
    SUBSTITUTING_POSSESSIVE_PRONOUN = "PPOSS"
    ATTRIBUTIVE_RELATIVE_PRONOUN = "PRELAT"
    SUBSTITUTING_RELATIVE_PRONOUN = "PRELS"
    REFLEXIVE_PERSONAL_PRONOUN = "PRF"
    ATTRIBUTIVE_INTERROGATIVE_PRONOUN = "PWAT"
    ADVERBIAL_INTERROGATIVE_OR_RELATIVE_PRONOUN = "PWAV"
    SUBSTITUTING_INTERROGATIVE_PRONOUN = "PWS"

    PARTICLE_WITH_ADJECTIVE_OR_ADVERB = "PTKA"
    ANSWER_PARTICLE = "PTKANT"
    NEGATIVE_PARTICLE = "PTKNEG"
    SEPARABLE_VERBAL_PARTICLE = "PTKVZ"
    ZU_BEFORE_INF = "PTKZU"

    FINITE_AUXILIARY_VERB = "VAFIN"
    IMPERATIVE_AUXILIARY_VERB = "VAIMP"
    INFINITIVE_AUXILIARY_VERB = "VAINF"
    PERFECT_AUXILIARY_VERB = "VAPP"
    FINITE_MODAL_VERB = "VMFIN"
    INFINITIVE_MODAL_VERB = "VMINF"
    PERFECT_MODAL_VERB = "VMPP"
    FINITE_FULL_VERB = "VVFIN"
    IMPERATIVE_FULL_VERB = "VVIMP"
    INFINITIVE_FULL_VERB = "VVINF"
    ZU_INFINITIVE_FULL_VERB = "VVIZU"
    PERFECT_FULL_VERB = "VVPP"


PUNCTUATION_TAGS = frozenset({Tag.INTERNAL_PUNCT, Tag.SENTENCE_FINAL_PUNCT, Tag.COMMA})
NOUN_TAGS = frozenset({Tag.NOUN})
ADJECTIVE_TAGS = frozenset({Tag.ATTRIBUTIVE_ADJECTIVE, Tag.ADVERBIAL_PREDICATE_ADJECTIVE})
VERB_TAGS = frozenset(
    {
        Tag.FINITE_AUXILIARY_VERB,
        Tag.IMPERATIVE_AUXILIARY_VERB,
        Tag.INFINITIVE_AUXILIARY_VERB,
        Tag.PERFECT_AUXILIARY_VERB,
        Tag.FINITE_MODAL_VERB,
        Tag.INFINITIVE_MODAL_VERB,
        Tag.PERFECT_MODAL_VERB,
        Tag.FINITE_FULL_VERB,
        Tag.IMPERATIVE_FULL_VERB,
        Tag.INFINITIVE_FULL_VERB,
        Tag.ZU_INFINITIVE_FULL_VERB,
        Tag.PERFECT_FULL_VERB,
    }
)


@dataclass
class SentenceToken:
    """One tagged token with its surface text."""

    id: int
    start: int
    end: int
    tag: str
    token: str


def remove_punctuation(word: str) -> str:
    """Strip punctuation characters from a token."""
    return PUNCTUATION_RE.sub("", word).strip()


def _parse_tokens(data: dict[str, Any]) -> list[SentenceToken]:
    text = data["text"]
    return [
        SentenceToken(
            id=t["id"],
            start=t["start"],
            end=t["end"],
            tag=t["tag"],
            token=remove_punctuation(text[t["start"] : t["end"]]),
        )
        for t in data.get("tokens") or []
    ]


def tag_sentence(api_url: str, sentence: str) -> list[SentenceToken]:
    """Tag a single sentence with the remote tagging service."""
    response = requests.get(api_url, params={"s": sentence}, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return _parse_tokens(response.json())


def tag_sentences(
    api_url: str, sentences: list[str], batch_size: int = 1
) -> list[list[SentenceToken]]:
    """Tag many sentences, posting `batch_size` sentences per request."""
    tagged: list[list[SentenceToken]] = []

    for i in range(0, len(sentences), batch_size):
        batch = sentences[i : i + batch_size]
        response = requests.post(api_url, json={"s": batch}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        tagged.extend(_parse_tokens(data) for data in response.json())
        logger.debug("Tagged %d/%d sentences", len(tagged), len(sentences))

    return tagged


def match_sentence(
    sentence: list[SentenceToken], tables: LookupTables
) -> list[WordRecord | None]:
    """Match each token of a tagged sentence to a vocabulary word.

    A separable particle (or a clause-final adjective/adverb) is joined with
    the first verb of the clause, so "steht ... auf" matches "auf_stehen".
    The joined token itself matches nothing. Punctuation starts a new clause.
    """
    matched: list[WordRecord | None] = []
    first_verb_matched_idx = -1
    first_verb_sentence_idx = -1

    def rematch_verb(particle: str) -> None:
        joined = particle + sentence[first_verb_sentence_idx].token
        verb = tables.verbs.get(joined)
        if verb is not None:
            matched[first_verb_matched_idx] = verb

    def at_clause_end(i: int) -> bool:
        return i == len(sentence) - 1 or sentence[i + 1].tag in PUNCTUATION_TAGS

    for i, token in enumerate(sentence):
        if token.tag in PUNCTUATION_TAGS:
            first_verb_matched_idx = -1
            first_verb_sentence_idx = -1
            continue

        if token.tag in NOUN_TAGS:
            matched.append(tables.nouns.get(token.token.lower()))
        elif token.tag in ADJECTIVE_TAGS:
            if first_verb_matched_idx != -1 and at_clause_end(i):
                rematch_verb(token.token)
                matched.append(None)
            else:
                matched.append(tables.adjectives.get(token.token))
        elif token.tag in VERB_TAGS:
            if first_verb_matched_idx == -1:
                first_verb_matched_idx = len(matched)
                first_verb_sentence_idx = i
            matched.append(tables.verbs.get(token.token))
        elif first_verb_matched_idx != -1 and token.tag == Tag.SEPARABLE_VERBAL_PARTICLE:
            rematch_verb(token.token)
            matched.append(None)
        elif token.tag == Tag.ADVERB:
            if first_verb_matched_idx != -1 and at_clause_end(i):
                rematch_verb(token.token)
            matched.append(None)
        else:
            matched.append(None)

    return matched


def find_vocabulary(
    sentence: str, tables: LookupTables, api_url: str = DEFAULT_TAG_API
) -> list[WordRecord | None]:
    """Tag a sentence and match its tokens against the vocabulary."""
    return match_sentence(tag_sentence(api_url, sentence), tables)
