# features/lexicon.py
# Hand-tuned polarity lexicon for check-in text (read-only, built once)
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple

from .frozen import FrozenMap

# Positive terms: core polarity words + caregiving/fertility journey terms
POSITIVE_TERMS: Dict[str, float] = {
    # core
    "amazing": 2.2, "awesome": 2.2, "brilliant": 2.2, "excellent": 2.5, "fantastic": 2.5,
    "good": 1.9, "great": 2.0, "happy": 2.2, "love": 2.4, "wonderful": 2.5,
    "excited": 2.0, "hopeful": 2.0, "grateful": 2.1, "proud": 2.0, "confident": 1.8,
    "perfect": 2.3, "beautiful": 1.9, "best": 2.1, "success": 2.0, "positive": 1.5,
    "thankful": 2.1, "thrilled": 2.3, "joy": 2.2, "relieved": 1.8, "calm": 1.4,

    # journey
    "blessed": 2.2, "miracle": 2.4, "journey": 1.2, "progress": 1.8, "support": 1.6,
    "strong": 1.7, "brave": 1.9, "determined": 1.8, "resilient": 1.9, "empowered": 2.0,
    "healing": 1.8, "growth": 1.5, "breakthrough": 2.1, "achievement": 2.0, "milestone": 1.8,
    "clarity": 1.6, "peaceful": 1.8, "optimistic": 2.0, "encouraged": 1.9, "motivated": 1.8,
    "celebration": 2.2, "victory": 2.1, "triumph": 2.2, "accomplishment": 2.0,

    # phrases
    "feeling good": 2.0, "going well": 1.8, "positive energy": 2.1,
    "great news": 2.3, "so grateful": 2.4, "really happy": 2.5,
    "feeling hopeful": 2.2, "things looking up": 1.9, "on track": 1.7,
    "feeling strong": 2.0, "good vibes": 1.8, "blessed day": 2.3,
    "amazing support": 2.4, "perfect timing": 2.1, "wonderful news": 2.5,
    "falling into place": 2.0,
}

NEGATIVE_TERMS: Dict[str, float] = {
    # core
    "awful": -2.2, "terrible": -2.4, "horrible": -2.3, "bad": -1.9, "worst": -2.6,
    "hate": -2.4, "angry": -2.1, "sad": -1.8, "frustrated": -2.0, "stressed": -2.1,
    "worried": -1.8, "anxious": -1.9, "overwhelmed": -2.2, "depressed": -2.4,
    "disappointed": -2.1, "heartbroken": -2.5, "stress": -1.8, "scared": -2.0,
    "struggling": -1.9, "difficult": -1.8, "challenging": -1.5, "wrong": -1.6,

    # journey
    "failed": -2.3, "disappointment": -2.1, "setback": -1.9, "canceled": -2.0,
    "delayed": -1.6, "unsuccessful": -2.2, "rejected": -2.1, "denied": -2.0,
    "exhausted": -2.0, "drained": -1.9, "hopeless": -2.5, "defeated": -2.3,

    # medication / treatment confusion
    "confusing": -2.1, "confused": -2.0, "unclear": -1.8,
    "complicated": -1.7, "uncertain": -1.8, "no idea": -2.1,
    "can't figure": -2.2, "scary": -2.1,

    # phrases
    "not working": -2.1, "so hard": -1.8, "giving up": -2.4,
    "too much": -1.9, "can't handle": -2.2, "feeling lost": -2.1,
    "broken down": -2.3, "no hope": -2.6, "waste of time": -2.2,
    "losing hope": -2.4, "going wrong": -2.0,
    "so confusing": -2.4, "don't understand": -2.3, "makes no sense": -2.5,
    "too complicated": -2.1, "overwhelming protocol": -2.6, "lost with meds": -2.7,
}

# Multipliers for the word right after an intensifier
INTENSIFIERS: Dict[str, float] = {
    "absolutely": 1.5, "completely": 1.4, "extremely": 1.6, "incredibly": 1.6,
    "really": 1.3, "very": 1.2, "quite": 1.1, "pretty": 1.1, "so": 1.3,
    "totally": 1.4, "utterly": 1.5, "highly": 1.2, "truly": 1.3, "deeply": 1.4,
}

# Single tokens only: tokenize splits "don't" into "don" + "t", so contractions
# count only when typed without the apostrophe
NEGATIONS = frozenset({
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nowhere",
    "hardly", "barely", "seldom", "rarely", "cannot",
    "dont", "wont", "cant", "shouldnt", "wouldnt", "couldnt",
    "isnt", "arent", "wasnt", "werent",
})


def _phrases_longest_first(terms: Mapping[str, float]) -> Tuple[str, ...]:
    # sorted() is stable, so equal lengths keep lexicon order
    return tuple(sorted((k for k in terms if " " in k), key=len, reverse=True))


@dataclass(frozen=True)
class Lexicon:
    """Immutable polarity lexicon. Build once and pass it to the engine."""
    positive: Mapping[str, float]
    negative: Mapping[str, float]
    intensifiers: Mapping[str, float]
    negations: frozenset
    positive_phrases: Tuple[str, ...] = field(init=False)
    negative_phrases: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        # Freeze caller-supplied dicts so nothing can write through them
        for name in ("positive", "negative", "intensifiers"):
            object.__setattr__(self, name, FrozenMap(getattr(self, name)))
        object.__setattr__(self, "negations", frozenset(self.negations))
        object.__setattr__(self, "positive_phrases", _phrases_longest_first(self.positive))
        object.__setattr__(self, "negative_phrases", _phrases_longest_first(self.negative))

    def polarity(self, word: str) -> float:
        """Single-word weight: positive map first, then negative; 0.0 if unknown."""
        if word in self.positive:
            return self.positive[word]
        return self.negative.get(word, 0.0)

    def is_negation(self, word: str) -> bool:
        return word in self.negations

    def intensity(self, word: str) -> float:
        return self.intensifiers.get(word, 1.0)

    @classmethod
    def build(cls, positive: Mapping[str, float], negative: Mapping[str, float],
              intensifiers: Mapping[str, float] | None = None,
              negations: Iterable[str] | None = None) -> "Lexicon":
        return cls(
            positive=positive,
            negative=negative,
            intensifiers=intensifiers if intensifiers is not None else INTENSIFIERS,
            negations=frozenset(negations if negations is not None else NEGATIONS),
        )


DEFAULT_LEXICON = Lexicon.build(POSITIVE_TERMS, NEGATIVE_TERMS)
