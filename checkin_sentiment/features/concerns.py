# features/concerns.py
from typing import Tuple
import re

# Critical concern families (category → patterns); order is report order
CONCERN_PATTERNS = {
    "medication": [
        r"confus(?:ed|ing)", r"don'?t understand", r"unclear", r"complicated",
        r"overwhelming.*med", r"med.*overwhelming", r"protocol.*confus",
        r"lost.*med", r"scared.*med", r"worried.*med",
    ],
    "financial": [
        r"can'?t afford", r"too expensive", r"financial.*stress", r"money.*worry",
        r"cost.*overwhelming", r"\bbroke\b", r"\bdebts?\b",
    ],
    "emotional": [
        r"can'?t handle", r"breaking down", r"losing hope", r"giving up",
        r"too much.*bear", r"emotionally.*drained",
    ],
}
CONCERN_PATS = {cat: re.compile("|".join(pats), re.I) for cat, pats in CONCERN_PATTERNS.items()}

def detect(text: str) -> Tuple[str, ...]:
    """Categories whose patterns appear in text, each reported once."""
    if not text:
        return ()
    return tuple(cat for cat, pat in CONCERN_PATS.items() if pat.search(text))
