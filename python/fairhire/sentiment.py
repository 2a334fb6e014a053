"""
Keyword-based sentiment classifier and confidence aggregator.

Both functions are pure and total: every input, including an empty
answer or an unrecognized sentiment value, produces a result.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Iterable

from .models import SentimentState


logger = logging.getLogger(__name__)


# =============================================================================
# Keyword Tables
# =============================================================================

CONFUSED_KEYWORDS: Final[tuple[str, ...]] = (
    "confused",
    "unclear",
    "don't understand",
    "what do you mean",
    "could you clarify",
    "repeat",
    "explain",
    "huh",
    "sorry",
)

ANXIOUS_KEYWORDS: Final[tuple[str, ...]] = (
    "nervous",
    "anxious",
    "worried",
    "stressed",
    "unsure",
    "scared",
    "don't know",
    "not sure",
    "maybe",
    "struggling",
)

CONFIDENT_KEYWORDS: Final[tuple[str, ...]] = (
    "confident",
    "excited",
    "great",
    "excellent",
    "sure",
    "definitely",
    "absolutely",
    "successful",
    "achieved",
    "proud",
)

# Answers longer than this count as confident even without keywords
DETAILED_RESPONSE_WORDS: Final[int] = 20

_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"\s+")

BASE_CONFIDENCE: Final[int] = 50
CONFIDENT_BOOST: Final[int] = 15
ANXIOUS_PENALTY: Final[int] = 10


# =============================================================================
# Classification
# =============================================================================

def _count_matches(text_lower: str, keywords: Iterable[str]) -> int:
    return sum(text_lower.count(keyword) for keyword in keywords)


def keyword_counts(utterance: str) -> dict[str, int]:
    """
    Count keyword occurrences for each sentiment table.

    Every occurrence counts, and overlapping phrases ("not sure" and
    "sure") each contribute to their own table.

    Example:
        >>> keyword_counts("I am not sure and nervous")
        {'confused': 0, 'anxious': 2, 'confident': 1}
    """
    text_lower = (utterance or "").lower()
    return {
        "confused": _count_matches(text_lower, CONFUSED_KEYWORDS),
        "anxious": _count_matches(text_lower, ANXIOUS_KEYWORDS),
        "confident": _count_matches(text_lower, CONFIDENT_KEYWORDS),
    }


def word_count(utterance: str) -> int:
    """
    Number of tokens between runs of whitespace in an answer.

    The text is not trimmed first, so leading or trailing whitespace adds
    an empty token: "a b\\n" counts as 3.
    """
    return len(_WHITESPACE_RUN.split(utterance or ""))


def classify(utterance: str) -> SentimentState:
    """
    Classify one candidate answer into a sentiment state.

    Priority order, first match wins:
        1. Any confusion keyword -> CONFUSED
        2. More anxious than confident keywords -> ANXIOUS
        3. Any confident keyword, or more than 20 words -> CONFIDENT
        4. Otherwise -> NEUTRAL

    Args:
        utterance: Raw answer text. Empty text is valid.

    Returns:
        The detected SentimentState.

    Example:
        >>> classify("I am absolutely sure and proud")
        <SentimentState.CONFIDENT: 'CONFIDENT'>
        >>> classify("")
        <SentimentState.NEUTRAL: 'NEUTRAL'>
    """
    counts = keyword_counts(utterance)

    # Clarification comes before anything else
    if counts["confused"] > 0:
        sentiment = SentimentState.CONFUSED
    elif counts["anxious"] > counts["confident"]:
        sentiment = SentimentState.ANXIOUS
    elif counts["confident"] > 0 or word_count(utterance) > DETAILED_RESPONSE_WORDS:
        sentiment = SentimentState.CONFIDENT
    else:
        sentiment = SentimentState.NEUTRAL

    logger.debug(
        "Classified answer as %s (confused=%d, anxious=%d, confident=%d)",
        sentiment.value,
        counts["confused"],
        counts["anxious"],
        counts["confident"],
    )
    return sentiment


# =============================================================================
# Confidence Aggregation
# =============================================================================

def aggregate_confidence(history: Iterable[SentimentState | str]) -> int:
    """
    Summarize a sentiment history as a confidence score in [0, 100].

    Starts at 50, adds 15 per CONFIDENT turn and subtracts 10 per ANXIOUS
    turn. Other states, including unrecognized values, contribute nothing.
    The result saturates at both ends.

    Example:
        >>> aggregate_confidence([])
        50
        >>> aggregate_confidence(["ANXIOUS"] * 6)
        0
    """
    states = [SentimentState.coerce(entry) for entry in history]
    confident_count = states.count(SentimentState.CONFIDENT)
    anxious_count = states.count(SentimentState.ANXIOUS)

    score = BASE_CONFIDENCE + confident_count * CONFIDENT_BOOST - anxious_count * ANXIOUS_PENALTY
    return min(100, max(0, score))


def confidence_label(score: int) -> str:
    """Short verdict shown next to the confidence score."""
    if score >= 75:
        return "Excellent performance!"
    if score >= 50:
        return "Good solid responses"
    return "Room for growth"
