"""Tests for the row codec and corpus compression."""

import logging

import pytest

from german_vocab.codec import (
    FIELD_LAYOUTS,
    UnknownWordTypeError,
    compress,
    decode_row,
    decompress,
    encode_fields,
    encode_word,
    format_frequency,
    row_length,
)
from german_vocab.enums import Case, Form, Gender, GenderedForm, Level, Pronoun, WordType
from german_vocab.models import Adjective, Imperative, Noun, Verb, empty_cases


class TestRoundTrip:
    """decompress(compress([word])) reproduces the word exactly."""

    def test_noun(self, tisch: Noun) -> None:
        assert decompress(compress([tisch])) == [tisch]

    def test_noun_with_umlaut_plural(self, haus: Noun) -> None:
        assert decompress(compress([haus])) == [haus]

    def test_plural_only_noun(self, eltern: Noun) -> None:
        assert decompress(compress([eltern])) == [eltern]

    def test_verb(self, lernen: Verb) -> None:
        assert decompress(compress([lernen])) == [lernen]

    def test_separable_verb(self, aufstehen: Verb) -> None:
        assert decompress(compress([aufstehen])) == [aufstehen]

    def test_verb_without_imperative(self, koennen: Verb) -> None:
        [decoded] = decompress(compress([koennen]))
        assert decoded == koennen
        assert isinstance(decoded, Verb)
        assert decoded.imperative is None

    def test_adjective(self, schnell: Adjective) -> None:
        assert decompress(compress([schnell])) == [schnell]

    def test_indeclinable_adjective(self, lila: Adjective) -> None:
        assert decompress(compress([lila])) == [lila]

    def test_superlative_lemma(self) -> None:
        """Superlative lemmas keep 'sten' literally in their forms."""
        word = Adjective(
            lemma="besten",
            is_superlative=True,
            superlative_only=True,
            superlative="am besten",
        )
        word.weak[Case.NOMINATIVE][GenderedForm.M] = "beste"
        word.weak[Case.DATIVE][GenderedForm.P] = "besten"

        assert decompress(compress([word])) == [word]

    def test_minimal_record(self) -> None:
        """No level, translations, frequency, gender or forms."""
        word = Noun(lemma="Ding")
        [decoded] = decompress(compress([word]))
        assert decoded == word
        assert decoded.level is None
        assert decoded.translations == []
        assert decoded.frequency is None
        assert decoded.gender is None

    def test_form_without_stem_is_kept_verbatim(self) -> None:
        word = Noun(lemma="Mann", gender=Gender.M)
        word.cases[Case.NOMINATIVE][Form.PLURAL] = "Männer"

        fields = encode_fields(word)

        assert fields[-1].split("|")[1] == "Männer"
        assert decompress(compress([word])) == [word]

    def test_stem_occurring_twice(self) -> None:
        word = Noun(lemma="Ei")
        word.cases[Case.NOMINATIVE][Form.SINGULAR] = "Eiei"
        assert decompress(compress([word])) == [word]


class TestCorpusRoundTrip:
    """Round trips over whole corpora."""

    def test_mixed_corpus(self, vocabulary: list[Noun | Verb | Adjective]) -> None:
        assert decompress(compress(vocabulary)) == vocabulary

    def test_preserves_order(self, vocabulary: list[Noun | Verb | Adjective]) -> None:
        reversed_words = list(reversed(vocabulary))
        decoded = decompress(compress(reversed_words))
        assert [w.lemma for w in decoded] == [w.lemma for w in reversed_words]

    def test_empty_corpus(self) -> None:
        assert compress([]) == ""
        assert decompress("") == []

    def test_compression_shrinks_corpus(self, vocabulary: list[Noun | Verb | Adjective]) -> None:
        plain = "\n".join(encode_word(w) for w in vocabulary)
        assert len(compress(vocabulary)) < len(plain)

    def test_regular_adjective_uses_tokens(self, schnell: Adjective) -> None:
        compressed = compress([schnell])
        assert "$g%" in compressed
        assert "=er|=e|=es" not in compressed

    def test_accepts_generator(self, tisch: Noun, haus: Noun) -> None:
        assert decompress(compress(w for w in [tisch, haus])) == [tisch, haus]


class TestStemElision:
    """Stem and prefix markers in serialized rows."""

    def test_verb_stem_replaced(self, lernen: Verb) -> None:
        fields = encode_fields(lernen)
        present = fields[6].split("|")
        assert present[2] == "=t"
        assert fields[6] == "=e|=st|=t|=en|=t|=en"

    def test_verb_stem_restored(self) -> None:
        row = "\t".join(
            ["verb", "lernen", "", "", "", "f", "||=t|||", "|||||", "|||||", "|||||"]
            + ["", "", "", "", "", ""]
        )
        word = decode_row(row)
        assert isinstance(word, Verb)
        assert word.present[Pronoun.ES] == "lernt"
        assert word.present[Pronoun.ICH] is None

    def test_separable_verb_uses_both_markers(self, aufstehen: Verb) -> None:
        fields = encode_fields(aufstehen)
        present = fields[6].split("|")
        assert present[2] == "=t ~"

    def test_separable_scalar_forms(self, aufstehen: Verb) -> None:
        fields = encode_fields(aufstehen)
        perfect, gerund, zuinfinitive = fields[-3:]
        assert perfect == "~gestanden"
        assert gerund == "~=end"
        assert zuinfinitive == "~zu=en"

    def test_noun_stem_is_lemma(self, tisch: Noun) -> None:
        fields = encode_fields(tisch)
        assert fields[-1] == "=|=e|=|=e|=|=en|=es|=e"

    def test_adjective_comparative_and_superlative(self, schnell: Adjective) -> None:
        fields = encode_fields(schnell)
        layout = [spec.attr for spec in FIELD_LAYOUTS[WordType.ADJECTIVE]]
        values = dict(zip(layout, fields[5:], strict=True))
        assert values["comparative"] == "=er"
        assert values["superlative"] == "am =sten"
        assert values["common_nouns"] == "Auto|Zug"


class TestRowLayout:
    """Field order and literal encodings."""

    def test_row_lengths(self) -> None:
        assert row_length(WordType.NOUN) == 10
        assert row_length(WordType.VERB) == 16
        assert row_length(WordType.ADJECTIVE) == 21

    def test_header_fields(self, haus: Noun) -> None:
        fields = encode_fields(haus)
        assert fields[:6] == ["noun", "Haus", "A1", "house|home", "1432.5", "n"]

    def test_no_article_true_is_t(self) -> None:
        word = Noun(lemma="Berlin", no_article=True)
        assert encode_fields(word)[6] == "t"
        [decoded] = decompress(compress([word]))
        assert isinstance(decoded, Noun)
        assert decoded.no_article is True

    def test_no_article_false_is_f(self) -> None:
        word = Noun(lemma="Tür", gender=Gender.F, no_article=False)
        assert encode_fields(word)[6] == "f"
        [decoded] = decompress(compress([word]))
        assert isinstance(decoded, Noun)
        assert decoded.no_article is False

    def test_plural_only_noun_has_empty_singular_cells(self, eltern: Noun) -> None:
        cells = encode_fields(eltern)[-1].split("|")
        assert cells[0::2] == ["", "", "", ""]
        assert cells[1::2] == ["=", "=", "=", "="]

    def test_empty_cells_decode_to_none(self, eltern: Noun) -> None:
        [decoded] = decompress(compress([eltern]))
        assert isinstance(decoded, Noun)
        for case in Case:
            assert decoded.cases[case][Form.SINGULAR] is None
            assert decoded.cases[case][Form.PLURAL] == "Eltern"

    def test_verb_imperative_and_scalars(self, lernen: Verb) -> None:
        fields = encode_fields(lernen)
        assert fields[5] == "f"
        assert fields[10:] == ["=", "=t", "=en Sie", "ge=t", "=end", "zu =en"]

    def test_partial_imperative_is_kept(self) -> None:
        word = Verb(lemma="sein", imperative=Imperative(du=None, ihr="seid", Sie="seien Sie"))
        assert decompress(compress([word])) == [word]


class TestFrequency:
    """Tests for frequency formatting."""

    def test_integral_value_has_no_decimal(self) -> None:
        assert format_frequency(100.0) == "100"
        assert format_frequency(7) == "7"

    def test_fraction(self) -> None:
        assert format_frequency(0.25) == "0.25"

    def test_none(self) -> None:
        assert format_frequency(None) == ""

    def test_round_trip(self) -> None:
        word = Noun(lemma="Zeit", frequency=0.1 + 0.2)
        [decoded] = decompress(compress([word]))
        assert decoded.frequency == word.frequency


class TestMalformedInput:
    """Lenient decoding of damaged rows and fatal unknown types."""

    def test_missing_fields_decode_as_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="german_vocab.codec"):
            word = decode_row("noun\tHaus")

        assert word == Noun(lemma="Haus", cases=empty_cases())
        assert "expected 10" in caplog.text

    def test_extra_fields_are_ignored(self, tisch: Noun, caplog: pytest.LogCaptureFixture) -> None:
        row = encode_word(tisch) + "\textra"
        with caplog.at_level(logging.WARNING, logger="german_vocab.codec"):
            assert decode_row(row) == tisch
        assert "Tisch" in caplog.text

    def test_short_table_pads_with_none(self) -> None:
        row = "\t".join(["noun", "Haus", "", "", "", "n", "f", "f", "f", "=|=er"])
        word = decode_row(row)
        assert isinstance(word, Noun)
        assert word.cases[Case.NOMINATIVE] == {Form.SINGULAR: "Haus", Form.PLURAL: "Hauser"}
        assert word.cases[Case.GENITIVE] == {Form.SINGULAR: None, Form.PLURAL: None}

    def test_invalid_level_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        row = encode_word(Noun(lemma="Haus")).replace("\t\t", "\tZ9\t", 1)
        with caplog.at_level(logging.WARNING, logger="german_vocab.codec"):
            word = decode_row(row)
        assert word.level is None
        assert "Z9" in caplog.text

    def test_unknown_type_on_decode_raises(self) -> None:
        with pytest.raises(UnknownWordTypeError):
            decompress("pronoun\tich\t\t\t")

    def test_unknown_type_on_encode_raises(self) -> None:
        with pytest.raises(UnknownWordTypeError):
            compress([object()])  # type: ignore[list-item]

    def test_blank_lines_are_skipped(self, tisch: Noun, haus: Noun) -> None:
        blob = encode_word(tisch) + "\n\n" + encode_word(haus) + "\n"
        assert decompress(blob) == [tisch, haus]

    def test_level_enum_decoded(self, tisch: Noun) -> None:
        [decoded] = decompress(compress([tisch]))
        assert decoded.level is Level.A1
