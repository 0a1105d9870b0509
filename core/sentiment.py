# =============================================================================
# core/sentiment.py  —  Keyword Sentiment "Analysis"
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Labels a piece of text as very positive / positive / negative /
#   very negative / neutral by looking for keywords.
#
# HOW THE KEYWORD GROUPS ARE CHECKED:
#   In order, first match wins.  That ordering matters: "I don't like it,
#   it's terrible" hits "like" before "terrible" and comes back positive.
#   It's a demo heuristic, not NLP, and the fixed confidence says as much.
#
#   Matching is substring-based on the lower-cased text, so "unlikely"
#   contains "like".  Again: demo.
# =============================================================================

import json
from dataclasses import asdict

from core.models import SentimentResult

CONFIDENCE = 0.85

_KEYWORD_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("very positive", ("great", "happy", "excellent", "amazing")),
    ("positive", ("good", "nice", "like")),
    ("negative", ("bad", "poor", "dislike")),
    ("very negative", ("terrible", "awful", "hate")),
)

NEUTRAL = "neutral"


def classify(text: str) -> str:
    """Return the sentiment label for ``text``."""
    lowered = text.lower()
    for label, keywords in _KEYWORD_GROUPS:
        if any(keyword in lowered for keyword in keywords):
            return label
    return NEUTRAL


def analyze_sentiment(text: str) -> SentimentResult:
    return SentimentResult(text=text, sentiment=classify(text), confidence=CONFIDENCE)


def sentiment_to_json(result: SentimentResult) -> str:
    return json.dumps(asdict(result), indent=2, ensure_ascii=False)
