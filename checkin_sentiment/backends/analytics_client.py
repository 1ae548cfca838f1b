# backends/analytics_client.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict
import requests

from .. import config
from ..features.result import SentimentResult

# Event names the check-in flow emits
CHECKIN_SUBMITTED = "checkin_submitted"
SENTIMENT_ANALYZED = "sentiment_analyzed"

def _enrich(properties: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(properties or {})
    out["environment"] = config.APP_ENV
    out["timestamp"] = datetime.now(timezone.utc).isoformat()
    return out

def track(event: str, properties: Dict[str, Any] | None = None) -> bool:
    """
    Fire-and-forget capture call. Returns True if the endpoint accepted it.
    Never raises: a failed dispatch is printed and dropped.
    """
    payload = _enrich(properties or {})
    if not config.ANALYTICS_ENABLED:
        if config.VERBOSE_SENTIMENT:
            print(f"[ANALYTICS][dev] {event}: {payload}")
        return False
    try:
        r = requests.post(
            config.ANALYTICS_URL,
            headers={"Content-Type": "application/json"},
            json={"api_key": config.ANALYTICS_API_KEY, "event": event, "properties": payload},
            timeout=config.REQUEST_TIMEOUT_S,
        )
        r.raise_for_status()
        return True
    except requests.RequestException as e:
        print(f"[ANALYTICS] Failed to track event '{event}':", e)
        return False

def sentiment_properties(result: SentimentResult, **extra: Any) -> Dict[str, Any]:
    """Fields downstream dashboards key on, plus caller context."""
    props = {
        "sentiment": result.sentiment.value,
        "compound": result.scores.compound,
        "confidence": result.confidence,
        "processing_time_ms": round(result.processing_time, 3),
    }
    if result.critical_concerns:
        props["critical_concerns"] = list(result.critical_concerns)
    props.update({k: v for k, v in extra.items() if v is not None})
    return props

def track_sentiment(event: str, result: SentimentResult, **extra: Any) -> bool:
    return track(event, sentiment_properties(result, **extra))
