# core/router.py — request router for free-text and check-in sentiment
from __future__ import annotations
from typing import Dict, Any

from .. import config
from ..features import tone
from ..features.checkin import analyze_checkin_sentiment
from ..features.result import SentimentResult
from ..features.sentiment import analyze_sentiment
from ..backends import analytics_client

class PayloadError(ValueError):
    """Request body has the wrong shape; the app answers 400."""

def route_sentiment(payload: Any) -> Dict[str, Any]:
    """Analyze {"text": ...} and return the result record."""
    if not isinstance(payload, dict):
        raise PayloadError("request body must be a JSON object")
    text = payload.get("text")
    if text is not None and not isinstance(text, str):
        raise PayloadError("'text' must be a string")

    result = analyze_sentiment(text or "")
    _report("text", result)
    analytics_client.track_sentiment(
        analytics_client.SENTIMENT_ANALYZED, result,
        source="text", user_id=payload.get("user_id"),
    )
    return result.to_dict()

def route_checkin(payload: Any) -> Dict[str, Any]:
    """
    Analyze a submitted check-in and pick the confirmation copy.
    The analytics event goes out after the result is final; its outcome is not
    reflected in the response.
    """
    if not isinstance(payload, dict):
        raise PayloadError("check-in body must be a JSON object")

    result = analyze_checkin_sentiment(payload)
    _report("checkin", result)
    copy = tone.for_result(result)

    analysis = result.to_dict()
    analysis["celebration_triggered"] = copy["celebration_triggered"]

    analytics_client.track_sentiment(
        analytics_client.CHECKIN_SUBMITTED, result,
        user_id=payload.get("user_id"),
        mood_score=result.confidence_factors.get("overall"),
        has_note=bool(payload.get("user_note")),
    )
    return {
        "success": True,
        "sentiment_analysis": analysis,
        "tone": copy["tone"],
        "concern_focus": copy["concern_focus"],
        "message": copy["message"],
    }

# -------------------------
# Helpers
# -------------------------

def _report(source: str, result: SentimentResult) -> None:
    ms = result.processing_time
    if ms > config.LATENCY_BUDGET_MS:
        print(f"[SENTIMENT] Slow {source} analysis: {ms:.1f}ms (budget {config.LATENCY_BUDGET_MS:.0f}ms)")
    if config.VERBOSE_SENTIMENT:
        print(f"[SENTIMENT][{source}] {result.sentiment.value} "
              f"compound={result.scores.compound:.3f} conf={result.confidence:.2f} {ms:.2f}ms")
