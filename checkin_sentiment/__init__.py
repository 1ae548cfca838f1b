# checkin_sentiment — lexicon sentiment for daily check-ins
from .features.sentiment import analyze_sentiment
from .features.checkin import analyze_checkin_sentiment, CheckinInput
from .features.lexicon import DEFAULT_LEXICON, Lexicon
from .features.result import Sentiment, SentimentResult, SentimentScores

__all__ = [
    "analyze_sentiment",
    "analyze_checkin_sentiment",
    "CheckinInput",
    "DEFAULT_LEXICON",
    "Lexicon",
    "Sentiment",
    "SentimentResult",
    "SentimentScores",
]

__version__ = "1.0.0"
