"""
Tests for the lexicon sentiment engine.

Tests cover:
- Tokenizer and phrase matching (overlap removal in isolation)
- Word scoring: intensifiers, negation window, phrase coverage
- Punctuation and compound normalization
- Classification thresholds
- End-to-end properties and the regression corpus
"""

import pytest

from checkin_sentiment.features.lexicon import DEFAULT_LEXICON, Lexicon
from checkin_sentiment.features.result import Sentiment
from checkin_sentiment.features.sentiment import (
    NEGATION_FACTOR,
    PhraseMatch,
    analyze_sentiment,
    classify,
    find_phrases,
    normalize,
    punctuation_modifier,
    remove_overlaps,
    score_units,
    tokenize,
)


POSITIVE_CORPUS = [
    "I'm so excited and hopeful about this journey!",
    "Feeling really grateful for all the support today",
    "This is going amazing! Best news ever!",
    "Blessed and thankful for this miracle",
    "Having the most wonderful day, so happy!",
    "Great progress, feeling confident and strong",
    "Absolutely thrilled with how things are going",
    "Perfect timing, everything is falling into place",
    "Feeling optimistic and empowered today",
    "Such positive energy, love this journey",
]

NEGATIVE_CORPUS = [
    "Feeling overwhelmed and exhausted today",
    "So disappointed with this setback",
    "Failed cycle, feeling defeated",
    "Can't handle this stress anymore",
    "Losing hope, everything is going wrong",
    "Terrible news, feeling heartbroken",
    "Exhausted and drained, can't continue",
    "Disappointed and frustrated with delays",
    "Feeling hopeless about this process",
    "So hard to stay positive, giving up",
]


def _units(text, lexicon=DEFAULT_LEXICON):
    return score_units(text, tokenize(text), find_phrases(text, lexicon), lexicon)


# =============================================================
# TEST: Tokenizer
# =============================================================

class TestTokenize:
    """Test tokenization."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("I'm SO excited!!") == ["i", "m", "so", "excited"]

    def test_collapses_whitespace(self):
        assert tokenize("  good \t\n day  ") == ["good", "day"]

    def test_empty_and_punctuation_only(self):
        assert tokenize("") == []
        assert tokenize("?!... ,,") == []

    def test_emoji_are_separators(self):
        assert tokenize("great🎉day") == ["great", "day"]


# =============================================================
# TEST: Phrase matching
# =============================================================

class TestRemoveOverlaps:
    """Overlap filter works on plain interval lists."""

    def test_contained_span_dropped(self):
        short = PhraseMatch("a b", 1.0, 0, 3)
        long = PhraseMatch("a b c", 2.0, 0, 5)
        assert remove_overlaps([short, long]) == [long]

    def test_inner_span_dropped(self):
        outer = PhraseMatch("x a b y", 2.0, 10, 17)
        inner = PhraseMatch("a b", 1.0, 12, 15)
        assert remove_overlaps([inner, outer]) == [outer]

    def test_partial_overlap_keeps_both(self):
        first = PhraseMatch("feeling good", 2.0, 0, 12)
        second = PhraseMatch("good vibes", 1.8, 8, 18)
        assert remove_overlaps([second, first]) == [first, second]

    def test_identical_spans_keep_first(self):
        a = PhraseMatch("same", 1.0, 4, 8)
        b = PhraseMatch("same", -1.0, 4, 8)
        assert remove_overlaps([a, b]) == [a]

    def test_span_inside_earlier_kept_span_dropped(self):
        outer = PhraseMatch("o", 1.0, 0, 20)
        overlap = PhraseMatch("p", 1.0, 15, 25)
        inner = PhraseMatch("i", 1.0, 16, 19)
        late = PhraseMatch("l", 1.0, 21, 24)
        assert remove_overlaps([late, inner, overlap, outer]) == [outer, overlap]

    def test_empty(self):
        assert remove_overlaps([]) == []


class TestFindPhrases:
    """Test phrase detection against the lexicon."""

    def test_finds_phrase_with_offsets(self):
        matches = find_phrases("Today: GREAT NEWS from the clinic")
        assert [(m.phrase, m.score, m.start, m.end) for m in matches] == [("great news", 2.3, 7, 17)]

    def test_repeated_occurrences(self):
        matches = find_phrases("so confusing, so confusing")
        assert [m.start for m in matches] == [0, 14]
        assert all(m.score == -2.4 for m in matches)

    def test_longer_phrase_wins(self):
        lex = Lexicon.build({"really happy": 2.5, "so really happy today": 3.0}, {})
        matches = find_phrases("so really happy today", lex)
        assert [m.phrase for m in matches] == ["so really happy today"]

    def test_matches_both_polarities(self):
        phrases = {m.phrase for m in find_phrases("feeling good but too much going on")}
        assert phrases == {"feeling good", "too much"}

    def test_no_phrases(self):
        assert find_phrases("just a regular day") == []


# =============================================================
# TEST: Word scoring
# =============================================================

class TestScoreUnits:
    """Test per-unit scoring."""

    def test_single_words(self):
        assert _units("happy but sad") == pytest.approx([2.2, -1.8])

    def test_unknown_words_contribute_nothing(self):
        assert _units("checking in on a tuesday") == []

    def test_intensifier_multiplies(self):
        assert _units("very happy") == pytest.approx([2.2 * 1.2])
        assert _units("extremely tired sad") == pytest.approx([-1.8])

    def test_intensifier_must_be_adjacent(self):
        assert _units("very much happy") == pytest.approx([2.2])

    def test_negation_flips_and_dampens(self):
        assert _units("not happy") == pytest.approx([2.2 * NEGATION_FACTOR])
        assert _units("not sad") == pytest.approx([-1.8 * NEGATION_FACTOR])

    def test_negation_after_intensifier(self):
        assert _units("not very happy") == pytest.approx([2.2 * 1.2 * NEGATION_FACTOR])

    def test_negation_window_is_three_tokens(self):
        assert _units("never been this happy") == pytest.approx([2.2 * NEGATION_FACTOR])
        assert _units("not at all very happy") == pytest.approx([2.2 * 1.2])

    def test_negation_applied_once(self):
        assert _units("no not never happy") == pytest.approx([2.2 * NEGATION_FACTOR])

    def test_phrase_scored_as_unit(self):
        assert _units("really happy") == pytest.approx([2.5])

    def test_phrase_words_not_rescored(self):
        assert _units("feeling good, good day") == pytest.approx([2.0])

    def test_negated_phrase(self):
        assert _units("not feeling good") == pytest.approx([2.0 * NEGATION_FACTOR])

    def test_phrase_position_counts_split_contractions(self):
        # "i'm" tokenizes to two words, so the phrase starts at token 3
        assert _units("i'm not feeling good") == pytest.approx([2.0 * NEGATION_FACTOR])

    def test_phrase_outside_negation_window(self):
        assert _units("not today, i am well and feeling good") == pytest.approx([2.0])

    def test_each_phrase_occurrence_negated_on_its_own(self):
        text = "feeling good. not feeling good. then later on, feeling good"
        assert _units(text) == pytest.approx([2.0, 2.0 * NEGATION_FACTOR, 2.0])


# =============================================================
# TEST: Punctuation and normalization
# =============================================================

class TestPunctuation:
    """Test punctuation modifiers."""

    def test_exclamation_boosts_positive(self):
        assert punctuation_modifier("wow!!", 0.3) == pytest.approx(0.584)

    def test_exclamation_ignored_for_negative(self):
        assert punctuation_modifier("wow!!", -0.3) == 0

    def test_exclamation_capped(self):
        assert punctuation_modifier("!!!!!!", 0.3) == pytest.approx(1.0)

    def test_question_always_reduces(self):
        assert punctuation_modifier("hm??", 0.3) == pytest.approx(-0.36)
        assert punctuation_modifier("hm??", -0.3) == pytest.approx(-0.36)


class TestNormalize:
    """Test compound normalization."""

    def test_square_root_normalization(self):
        assert normalize([2.2]) == pytest.approx(2.2 / (2.2 ** 2 + 15) ** 0.5)

    def test_exclamation_on_positive(self):
        assert normalize([2.2], "!") == pytest.approx(0.49391 + 0.292, abs=1e-4)

    def test_negative_with_exclamation_and_question(self):
        assert normalize([-2.2], "!") == pytest.approx(-0.49391, abs=1e-4)
        assert normalize([-2.2], "?") == pytest.approx(-0.67391, abs=1e-4)

    def test_clamped(self):
        assert normalize([10.0, 10.0], "!!!") == 1.0
        assert normalize([-10.0, -10.0], "???????????") == -1.0

    def test_zero_sum_ignores_punctuation(self):
        assert normalize([2.0, -2.0], "!!??") == 0.0


# =============================================================
# TEST: Classification
# =============================================================

class TestClassify:
    """Test label thresholds and confidence."""

    def test_positive_threshold_inclusive(self):
        assert classify(0.5) == (Sentiment.POSITIVE, 1.0)

    def test_just_below_positive_is_neutral(self):
        label, conf = classify(0.49)
        assert label == Sentiment.NEUTRAL
        assert conf == pytest.approx(0.02)

    def test_negative_threshold_inclusive(self):
        label, conf = classify(-0.05)
        assert label == Sentiment.NEGATIVE
        assert conf == pytest.approx(1.0)

    def test_mild_negative(self):
        label, conf = classify(-0.04)
        assert label == Sentiment.NEUTRAL
        assert conf == pytest.approx(0.92)

    def test_neutral_zero(self):
        assert classify(0.0) == (Sentiment.NEUTRAL, 1.0)


# =============================================================
# TEST: analyze_sentiment
# =============================================================

class TestAnalyzeSentiment:
    """End-to-end engine behavior."""

    @pytest.mark.parametrize("text", ["", "   \n\t", None])
    def test_empty_input(self, text):
        result = analyze_sentiment(text)
        assert result.sentiment == "neutral"
        assert result.confidence == 0
        assert result.scores.to_dict() == {"positive": 0, "neutral": 1, "negative": 0, "compound": 0}
        assert result.processing_time < 10

    @pytest.mark.parametrize("text", ["?!?!", "🎉❤️🙏", "...", 42, "qwerty asdf"])
    def test_no_signal_is_neutral(self, text):
        result = analyze_sentiment(text)
        assert result.sentiment == Sentiment.NEUTRAL
        assert result.confidence == 0

    def test_negation(self):
        assert analyze_sentiment("not feeling good about this").sentiment == "negative"
        assert analyze_sentiment("Not feeling good about this at all").sentiment == "negative"

    def test_intensifier_increases_magnitude(self):
        plain = analyze_sentiment("happy").scores.compound
        boosted = analyze_sentiment("really happy").scores.compound
        assert abs(boosted) >= abs(plain)
        assert plain == 0.494
        assert boosted == 0.542

    def test_determinism(self):
        text = "Feeling really great today!"
        a, b = analyze_sentiment(text), analyze_sentiment(text)
        assert a.sentiment == b.sentiment
        assert a.scores.compound == b.scores.compound

    @pytest.mark.parametrize("text", POSITIVE_CORPUS + NEGATIVE_CORPUS + [
        "Happy about progress but worried about costs",
        "Feeling okay today, nothing special",
        "so so so happy!!!!!!!!",
        "worst worst worst terrible awful???",
    ])
    def test_invariants(self, text):
        result = analyze_sentiment(text)
        s = result.scores
        assert abs(s.positive + s.neutral + s.negative - 1) < 0.01
        assert -1 <= s.compound <= 1
        assert 0 <= result.confidence <= 1
        assert result.sentiment in set(Sentiment)

    def test_latency(self):
        text = ("I'm feeling really excited and hopeful about this amazing journey, "
                "but not so sure about the costs? Honestly so grateful!!")
        assert len(text) <= 200
        assert analyze_sentiment(text).processing_time < 150
        long_text = "I'm feeling really excited and hopeful about this amazing journey. " * 10
        assert analyze_sentiment(long_text).processing_time < 150

    @pytest.mark.parametrize("repeats", [2000, 5000])
    def test_latency_with_many_phrase_matches(self, repeats):
        result = analyze_sentiment("feeling good " * repeats)
        assert result.sentiment == "positive"
        assert result.processing_time < 150

    def test_negation_without_apostrophe(self):
        assert analyze_sentiment("I dont feel good").sentiment == "negative"

    def test_does_not_mutate_input(self):
        text = "So happy!"
        analyze_sentiment(text)
        assert text == "So happy!"

    def test_exclamation_pushes_over_threshold(self):
        assert analyze_sentiment("Feeling amazing today").sentiment == "neutral"
        assert analyze_sentiment("FEELING AMAZING TODAY!").sentiment == "positive"

    def test_mixed_text_stays_in_contract(self):
        result = analyze_sentiment("Happy about progress but worried about costs")
        assert result.sentiment == "neutral"
        assert result.confidence > 0

    def test_emoji_and_special_characters(self):
        assert analyze_sentiment("Feeling great today! 🎉 So excited! ❤️").sentiment == "positive"

    def test_custom_lexicon(self):
        lex = Lexicon.build({"sunny": 2.0}, {"rainy": -2.0})
        assert analyze_sentiment("rainy", lex).sentiment == "negative"
        assert analyze_sentiment("happy", lex).sentiment == "neutral"

    def test_critical_concerns_reported(self):
        result = analyze_sentiment("The protocol is so confusing and I can't afford it")
        assert result.sentiment == "negative"
        assert result.critical_concerns == ("medication", "financial")

    def test_to_dict(self):
        d = analyze_sentiment("Great day!").to_dict()
        assert d["sentiment"] == "positive"
        assert set(d["scores"]) == {"positive", "neutral", "negative", "compound"}
        assert isinstance(d["processing_time"], float)


class TestRegressionCorpus:
    """Precision on the check-in fixtures (>= 85% per class)."""

    def test_positive_precision(self):
        hits = sum(analyze_sentiment(t).sentiment == "positive" for t in POSITIVE_CORPUS)
        assert hits / len(POSITIVE_CORPUS) >= 0.85

    def test_negative_precision(self):
        hits = sum(analyze_sentiment(t).sentiment == "negative" for t in NEGATIVE_CORPUS)
        assert hits / len(NEGATIVE_CORPUS) >= 0.85

    def test_high_confidence_positive(self):
        result = analyze_sentiment("I'm so excited and hopeful about this journey!")
        assert result.sentiment == "positive"
        assert result.confidence > 0.7

    def test_negative_confidence(self):
        result = analyze_sentiment("Feeling overwhelmed and exhausted today")
        assert result.sentiment == "negative"
        assert result.confidence > 0.5

    @pytest.mark.parametrize("text", [
        "Having a regular day, checking in",
        "Regular check-in, feeling alright",
        "Having an okay day, nothing special",
    ])
    def test_neutral_fixtures(self, text):
        assert analyze_sentiment(text).sentiment == "neutral"
