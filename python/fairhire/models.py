"""
Pydantic models for the FairHire adaptive interviewer.

Defines sentiment states, the question script records, chat messages,
interview sessions and the reflection report produced at the end.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class SentimentState(str, Enum):
    """
    Discrete emotional-tone label attached to one candidate answer.

    NEUTRAL is the fallback for anything that cannot be recognized.
    """

    ANXIOUS = "ANXIOUS"
    CONFIDENT = "CONFIDENT"
    NEUTRAL = "NEUTRAL"
    CONFUSED = "CONFUSED"

    @classmethod
    def coerce(cls, value: object) -> "SentimentState":
        """
        Map any value onto a sentiment state, falling back to NEUTRAL.

        Example:
            >>> SentimentState.coerce("anxious")
            <SentimentState.ANXIOUS: 'ANXIOUS'>
            >>> SentimentState.coerce(None)
            <SentimentState.NEUTRAL: 'NEUTRAL'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                return cls.NEUTRAL
        return cls.NEUTRAL

    @property
    def label(self) -> str:
        """Human-readable label used by the reflection portal."""
        return _SENTIMENT_LABELS[self]


_SENTIMENT_LABELS: dict[SentimentState, str] = {
    SentimentState.ANXIOUS: "Anxious",
    SentimentState.CONFIDENT: "Confident",
    SentimentState.NEUTRAL: "Neutral",
    SentimentState.CONFUSED: "Seeking Clarity",
}


class QuestionVariantSet(BaseModel):
    """
    Three alternate phrasings of a single interview topic slot.

    Example:
        >>> slot = QuestionVariantSet(
        ...     standard="What are your key strengths?",
        ...     encouraging="What do you do really well?",
        ...     simplified="What are you good at?",
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    standard: str = Field(..., min_length=1, description="Default professional phrasing")
    encouraging: str = Field(..., min_length=1, description="Warm phrasing for anxious candidates")
    simplified: str = Field(..., min_length=1, description="Plain phrasing for confused candidates")


class TimelineEntry(BaseModel):
    """One (question, sentiment, confidence) point on the emotional timeline."""

    model_config = ConfigDict(frozen=True)

    question: int = Field(..., ge=0, description="0-based index of the question answered")
    sentiment: SentimentState
    confidence: int = Field(..., ge=0, le=100, description="Aggregate confidence after this turn")


MessageKind = Literal["welcome", "question", "aside", "answer", "closing"]


class ChatMessage(BaseModel):
    """
    A single message in the interview chat.

    Only candidate ("user") messages carry a sentiment.
    """

    id: str = Field(..., description="Unique message identifier")
    role: Literal["user", "assistant"]
    content: str
    kind: MessageKind = "question"
    sentiment: Optional[SentimentState] = None
    timestamp_utc: str = Field(default_factory=_utc_now)


class InterviewSession(BaseModel):
    """
    State of one interview, alive for a single UI session.

    Example:
        >>> session = InterviewSession(
        ...     session_id="fh_20261019_103000_a1b2c3",
        ...     candidate_name="Jordan Lee",
        ...     started_at="2026-10-19T10:30:00.000Z",
        ... )
    """

    session_id: str = Field(..., description="Unique session identifier")
    candidate_name: str = Field(default="Candidate")
    started_at: str = Field(..., description="ISO 8601 UTC timestamp when session started")
    ended_at: Optional[str] = Field(default=None)
    current_question: int = Field(default=0, ge=0, description="Index of the question awaiting an answer")
    complete: bool = Field(default=False)
    messages: list[ChatMessage] = Field(default_factory=list)
    sentiment_history: list[SentimentState] = Field(default_factory=list)
    timeline: list[TimelineEntry] = Field(default_factory=list)

    @property
    def answers(self) -> list[ChatMessage]:
        """Candidate messages in turn order."""
        return [m for m in self.messages if m.role == "user"]

    @property
    def questions(self) -> list[ChatMessage]:
        """Interviewer questions in the order they were asked."""
        return [m for m in self.messages if m.kind == "question"]


class TurnResult(BaseModel):
    """Everything one submitted answer produced."""

    sentiment: SentimentState
    confidence: int = Field(..., ge=0, le=100)
    timeline_entry: TimelineEntry
    replies: list[ChatMessage] = Field(
        default_factory=list,
        description="Assistant messages appended after the answer (aside, next question, closing)",
    )
    next_question_index: Optional[int] = Field(
        default=None,
        description="Index of the question now awaiting an answer, None once complete",
    )
    is_complete: bool = False


class QuestionBreakdown(BaseModel):
    """Question-by-question row of the reflection report."""

    number: int = Field(..., ge=1)
    question: str
    answer: Optional[str] = None
    sentiment: Optional[SentimentState] = None
    sentiment_label: Optional[str] = None
    word_count: int = 0


class ReflectionReport(BaseModel):
    """
    Aggregated results shown in the reflection portal and offered for download.

    Example:
        >>> report = build_reflection_report(session)
        >>> report.confidence_score
        80
    """

    session_id: str
    candidate_name: str
    confidence_score: int = Field(..., ge=0, le=100)
    confidence_label: str
    total_questions: int = Field(default=0, ge=0)
    sentiment_breakdown: list[SentimentState] = Field(default_factory=list)
    sentiment_counts: dict[str, int] = Field(default_factory=dict)
    avg_response_length: int = 0
    total_words: int = 0
    adjustments: int = Field(default=0, description="Turns where the interviewer adapted its approach")
    anxious_moments: int = 0
    starting_confidence: int = Field(default=50, ge=0, le=100)
    final_confidence: int = Field(default=50, ge=0, le=100)
    timeline: list[TimelineEntry] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    growth_opportunities: list[str] = Field(default_factory=list)
    breakdown: list[QuestionBreakdown] = Field(default_factory=list)
    timestamp: str = Field(default_factory=_utc_now)

    def to_json(self) -> str:
        """Render the downloadable JSON artifact."""
        return json.dumps(self.model_dump(mode="json"), indent=2, ensure_ascii=False)
