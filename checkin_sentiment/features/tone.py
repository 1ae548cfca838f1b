# features/tone.py
from typing import Dict, Any

from .result import SentimentResult, Sentiment

CELEBRATORY_MESSAGE = "Daily check-in completed successfully! We love your positive energy today! 🎉"
DEFAULT_MESSAGE = "Daily check-in completed successfully! 🌟"

def for_result(result: SentimentResult) -> Dict[str, Any]:
    """Copy family the UI keys on after a check-in: celebratory only on positive, else supportive."""
    celebrate = result.sentiment == Sentiment.POSITIVE
    return {
        "tone": "celebratory" if celebrate else "supportive",
        "celebration_triggered": celebrate,
        # first flagged concern lets the UI pick a targeted supportive variant
        "concern_focus": result.critical_concerns[0] if result.critical_concerns else None,
        "message": CELEBRATORY_MESSAGE if celebrate else DEFAULT_MESSAGE,
    }
