# features/checkin.py — builds the analyzable text from a structured check-in
from __future__ import annotations
import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .lexicon import DEFAULT_LEXICON, Lexicon
from .result import SentimentResult
from .sentiment import analyze_sentiment

# Free-text fields in concatenation order
TEXT_FIELDS = (
    "journey_reflection_today",
    "user_note",
    "primary_concern_today",
    "medication_concern_today",
    "financial_concern_today",
    "medication_preparation_concern",
)

# Slider field → confidence_factors key; critical sliders also carry a concern tag
SLIDER_FACTORS = {
    "confidence_today": ("overall", None),
    "medication_confidence_today": ("medication", "medication"),
    "medication_readiness_today": ("medication_readiness", "medication_preparation"),
    "financial_confidence_today": ("financial", "financial"),
}
CRITICAL_SLIDER_MAX = 3

# Synthetic text for a check-in that only has the overall confidence slider
FALLBACK_HIGH = "feeling really good confident positive"
FALLBACK_LOW = "struggling difficult challenging"
FALLBACK_MID = "okay neutral managing"


def _as_number(v: Any) -> Optional[float]:
    """Slider value as float; None for anything unusable (bools, junk strings, NaN, inf)."""
    if v is None or isinstance(v, bool):
        return None
    try:
        n = float(v)
    except (TypeError, ValueError):
        return None
    return n if math.isfinite(n) else None


def _as_text(v: Any) -> str:
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


def _mood_tags(v: Any) -> Tuple[str, ...]:
    """Normalize mood_today (comma string or list) to an ordered tuple of trimmed tags."""
    if v is None:
        return ()
    if isinstance(v, str):
        parts = v.split(",")
    elif isinstance(v, (list, tuple)):
        parts = [_as_text(p) for p in v]
    else:
        parts = [_as_text(v)]
    return tuple(p.strip() for p in parts if p and p.strip())


@dataclass(frozen=True)
class CheckinInput:
    mood_today: Tuple[str, ...] = ()
    texts: Tuple[str, ...] = ()                     # TEXT_FIELDS values, in order, non-empty only
    sliders: Mapping[str, float] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "CheckinInput":
        """Boundary normalization of a raw payload; tolerant of missing/garbage fields."""
        d = data if isinstance(data, Mapping) else {}
        texts = tuple(t for t in (_as_text(d.get(k)) for k in TEXT_FIELDS) if t)
        sliders: Dict[str, float] = {}
        for key in SLIDER_FACTORS:
            n = _as_number(d.get(key))
            if n is not None:
                sliders[key] = n
        return cls(mood_today=_mood_tags(d.get("mood_today")), texts=texts, sliders=sliders)

    def text(self) -> str:
        pieces = list(self.texts)
        if self.mood_today:
            pieces.append(" ".join(self.mood_today))
        return " ".join(pieces).strip()

    def fallback_text(self) -> Optional[str]:
        """Text synthesized from confidence_today, or None when that slider is absent."""
        c = self.sliders.get("confidence_today")
        if c is None:
            return None
        if c >= 8:
            return FALLBACK_HIGH
        if c <= 3:
            return FALLBACK_LOW
        return FALLBACK_MID

    def factors(self) -> Tuple[Dict[str, float], Tuple[str, ...]]:
        out: Dict[str, float] = {}
        flagged = []
        for key, (name, concern) in SLIDER_FACTORS.items():
            if key not in self.sliders:
                continue
            out[name] = self.sliders[key]
            if concern and self.sliders[key] <= CRITICAL_SLIDER_MAX:
                flagged.append(concern)
        return out, tuple(flagged)


def analyze_checkin_sentiment(data: Union[Mapping[str, Any], CheckinInput, None],
                              lexicon: Lexicon = DEFAULT_LEXICON) -> SentimentResult:
    """
    Sentiment of a daily check-in.

    Free text and mood tags are joined and analyzed; with no text at all the
    overall confidence slider picks a synthetic phrase so the result still
    has a direction. Slider values land in confidence_factors; low critical
    sliders add concern tags. The label itself comes only from the text.
    """
    checkin = data if isinstance(data, CheckinInput) else CheckinInput.from_mapping(data)

    text = checkin.text()
    if not text:
        text = checkin.fallback_text() or ""

    result = analyze_sentiment(text, lexicon)

    factors, flagged = checkin.factors()
    found = result.critical_concerns + tuple(c for c in flagged if c not in result.critical_concerns)
    return dataclasses.replace(result, critical_concerns=found, confidence_factors=factors)
