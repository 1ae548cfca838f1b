# features/sentiment.py
# Lexicon + windowed modifiers sentiment for check-in text (compound in [-1, 1])
from __future__ import annotations
import math
import re
import time
from bisect import bisect_left
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from . import concerns
from .lexicon import DEFAULT_LEXICON, Lexicon
from .result import Sentiment, SentimentResult, SentimentScores, neutral_result

NEGATION_WINDOW = 3
NEGATION_FACTOR = -0.74         # flips sign and dampens magnitude

EXCLAMATION_BOOST = 0.292
EXCLAMATION_CAP = 1.0
QUESTION_REDUCTION = -0.18

ALPHA = 15                      # saturation constant of the compound normalization

POSITIVE_THRESHOLD = 0.5
NEGATIVE_THRESHOLD = -0.05

_NON_WORD = re.compile(r"[^\w\s]")
_WORD = re.compile(r"\w+")


@dataclass(frozen=True)
class PhraseMatch:
    phrase: str
    score: float
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def tokenize(text: str) -> List[str]:
    """Lowercase words with punctuation replaced by spaces."""
    return _NON_WORD.sub(" ", (text or "").lower()).split()


def _scan(lower: str, phrases: Sequence[str], terms) -> List[PhraseMatch]:
    out: List[PhraseMatch] = []
    for phrase in phrases:
        idx = lower.find(phrase)
        while idx != -1:
            out.append(PhraseMatch(phrase, terms[phrase], idx, idx + len(phrase)))
            idx = lower.find(phrase, idx + len(phrase))
    return out


def remove_overlaps(matches: Sequence[PhraseMatch]) -> List[PhraseMatch]:
    """
    Drop every match whose span lies inside another match's span.
    Works on any list of intervals; identical spans keep the first one given.
    Result is ordered by start offset.
    """
    # start asc, longer first, then original position
    ordered = sorted(enumerate(matches), key=lambda im: (im[1].start, -im[1].length, im[0]))
    kept: List[PhraseMatch] = []
    reach = -1                  # furthest end among kept spans, all of which start at or before m
    for _, m in ordered:
        if m.end <= reach:
            continue
        kept.append(m)
        reach = m.end
    return kept


def find_phrases(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[PhraseMatch]:
    """Multi-word lexicon phrases in text, longest phrase first, overlaps removed."""
    lower = (text or "").lower()
    found = _scan(lower, lexicon.positive_phrases, lexicon.positive)
    found += _scan(lower, lexicon.negative_phrases, lexicon.negative)
    return remove_overlaps(found)


def _negated(tokens: Sequence[str], i: int, lexicon: Lexicon) -> bool:
    return any(lexicon.is_negation(t) for t in tokens[max(0, i - NEGATION_WINDOW):i])


def score_units(text: str, tokens: Sequence[str], matches: Sequence[PhraseMatch],
                lexicon: Lexicon = DEFAULT_LEXICON) -> List[float]:
    """One score per counted unit: each phrase occurrence, then each scored word."""
    lower = (text or "").lower()
    units: List[float] = []
    # Token start offsets; same tokens tokenize() yields
    offsets = [w.start() for w in _WORD.finditer(lower)]

    for m in matches:
        score = m.score
        # Phrase position in token space = tokens starting before its first character
        pos = bisect_left(offsets, m.start)
        if _negated(tokens, pos, lexicon):
            score *= NEGATION_FACTOR
        units.append(score)

    covered = {w for m in matches for w in tokenize(m.phrase)}

    for i, word in enumerate(tokens):
        if word in covered:
            continue
        score = lexicon.polarity(word)
        if score == 0.0:
            continue
        if i > 0 and tokens[i - 1] in lexicon.intensifiers:
            score *= lexicon.intensity(tokens[i - 1])
        if _negated(tokens, i, lexicon):
            score *= NEGATION_FACTOR
        units.append(score)

    return units


def punctuation_modifier(text: str, compound: float) -> float:
    """'?' always pulls down; '!' boosts only a positive-leaning compound."""
    text = text or ""
    mod = text.count("?") * QUESTION_REDUCTION
    if compound > 0:
        mod += min(text.count("!") * EXCLAMATION_BOOST, EXCLAMATION_CAP)
    return mod


def normalize(units: Sequence[float], text: str = "") -> float:
    """Squash the summed unit scores into [-1, 1], then apply punctuation."""
    total = sum(units)
    compound = total / math.sqrt(total * total + ALPHA)
    if compound > 0:
        compound = min(compound + punctuation_modifier(text, compound), 1.0)
    elif compound < 0:
        compound = max(compound + punctuation_modifier(text, compound), -1.0)
    return compound


def classify(compound: float) -> Tuple[Sentiment, float]:
    """Label and confidence for a compound score."""
    if compound >= POSITIVE_THRESHOLD:
        return Sentiment.POSITIVE, min(compound * 2, 1.0)
    if compound <= NEGATIVE_THRESHOLD:
        return Sentiment.NEGATIVE, min(abs(compound) * 20, 1.0)
    return Sentiment.NEUTRAL, max(0.0, min(1.0, 1 - abs(compound) * 2))


def score_triple(compound: float) -> SentimentScores:
    positive = max(0.0, compound)
    negative = max(0.0, -compound)
    neutral = 1 - positive - negative
    return SentimentScores(
        positive=round(positive, 3),
        neutral=round(neutral, 3),
        negative=round(negative, 3),
        compound=round(compound, 3),
    )


def analyze_sentiment(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> SentimentResult:
    """
    Classify one piece of free text.

    Never raises: None is treated as empty, other non-strings by their str().
    Text without any lexicon hit is a neutral result with confidence 0.
    """
    start = time.perf_counter()
    if text is None:
        text = ""
    elif not isinstance(text, str):
        text = str(text)

    if not text.strip():
        return neutral_result((time.perf_counter() - start) * 1000)

    tokens = tokenize(text)
    found = concerns.detect(text)
    matches = find_phrases(text, lexicon)
    units = score_units(text, tokens, matches, lexicon)

    if not units:
        return neutral_result((time.perf_counter() - start) * 1000, found)

    compound = normalize(units, text)
    label, confidence = classify(compound)
    scores = score_triple(compound)

    return SentimentResult(
        sentiment=label,
        confidence=confidence,
        scores=scores,
        processing_time=(time.perf_counter() - start) * 1000,
        critical_concerns=found,
    )
