"""
FairHire Adaptive Interviewer Package.

A mock interview that adapts its next question to the candidate's mood.
Answers are classified with keyword matching, a confidence score is
aggregated from the sentiment history, and a reflection report summarizes
the interview at the end.

Components:
    - classify / aggregate_confidence: Keyword sentiment classifier and score
    - next_question / encouraging_reply: Sentiment-driven question selection
    - InterviewSessionManager: Five-question interview state machine
    - build_reflection_report / ReportWriter: Results and JSON export
    - QuestionGenerator: Optional LLM phrasing of the next question

Example:
    >>> from fairhire import InterviewSessionManager
    >>>
    >>> manager = InterviewSessionManager()
    >>> manager.start_session("Jordan Lee")
    >>> result = manager.submit_answer("Honestly I'm a bit nervous and not sure")
    >>> result.sentiment, result.confidence
    (<SentimentState.ANXIOUS: 'ANXIOUS'>, 40)

Last Grunted: 10/19/2026
"""

from .config import load_environment

# Seed os.environ from .env before any caller reads its settings
load_environment()

from .models import (
    SentimentState,
    QuestionVariantSet,
    TimelineEntry,
    ChatMessage,
    InterviewSession,
    TurnResult,
    QuestionBreakdown,
    ReflectionReport,
)

from .sentiment import (
    classify,
    aggregate_confidence,
    confidence_label,
    keyword_counts,
    CONFUSED_KEYWORDS,
    ANXIOUS_KEYWORDS,
    CONFIDENT_KEYWORDS,
)

from .questions import (
    INTERVIEW_QUESTIONS,
    MAX_QUESTIONS,
    COMPLETION_MESSAGE,
    next_question,
    encouraging_reply,
    empathetic_aside,
)

from .session import InterviewSessionManager, QuestionProvider

from .report import (
    build_reflection_report,
    ReportWriter,
    ReportWriteError,
    ReportReadError,
)


__all__ = [
    # Config
    "load_environment",
    # Models
    "SentimentState",
    "QuestionVariantSet",
    "TimelineEntry",
    "ChatMessage",
    "InterviewSession",
    "TurnResult",
    "QuestionBreakdown",
    "ReflectionReport",
    # Sentiment
    "classify",
    "aggregate_confidence",
    "confidence_label",
    "keyword_counts",
    "CONFUSED_KEYWORDS",
    "ANXIOUS_KEYWORDS",
    "CONFIDENT_KEYWORDS",
    # Questions
    "INTERVIEW_QUESTIONS",
    "MAX_QUESTIONS",
    "COMPLETION_MESSAGE",
    "next_question",
    "encouraging_reply",
    "empathetic_aside",
    # Session
    "InterviewSessionManager",
    "QuestionProvider",
    # Report
    "build_reflection_report",
    "ReportWriter",
    "ReportWriteError",
    "ReportReadError",
]

__version__ = "0.1.0"
