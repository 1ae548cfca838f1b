# features/result.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from .frozen import FrozenMap


class Sentiment(str, Enum):
    """Discrete classification. Compares equal to its plain string value."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class SentimentScores:
    positive: float = 0.0
    neutral: float = 1.0
    negative: float = 0.0
    compound: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
            "compound": self.compound,
        }


@dataclass(frozen=True)
class SentimentResult:
    """
    Outcome of one analysis call.

    confidence is certainty of the label in [0, 1], not a probability.
    processing_time is measured wall-clock milliseconds for the call.
    critical_concerns / confidence_factors are informational and never
    change the label.
    """
    sentiment: Sentiment
    confidence: float
    scores: SentimentScores
    processing_time: float
    critical_concerns: Tuple[str, ...] = ()
    confidence_factors: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence_factors", FrozenMap(self.confidence_factors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
            "scores": self.scores.to_dict(),
            "processing_time": self.processing_time,
            "critical_concerns": list(self.critical_concerns),
            "confidence_factors": dict(self.confidence_factors),
        }


def neutral_result(processing_time: float, critical_concerns: Tuple[str, ...] = ()) -> SentimentResult:
    """No-signal outcome: neutral, zero confidence, {0, 1, 0, 0}."""
    return SentimentResult(
        sentiment=Sentiment.NEUTRAL,
        confidence=0.0,
        scores=SentimentScores(),
        processing_time=processing_time,
        critical_concerns=critical_concerns,
    )
