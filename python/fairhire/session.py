"""
Interview Session Manager.

Drives the five-question interview: records every answer, classifies it,
keeps the sentiment history and emotional timeline, and decides what the
interviewer says next.

Thread Safety:
    This class is NOT thread-safe. Use a single instance per UI session,
    or wrap access with appropriate synchronization primitives if sharing
    across threads.

Last Grunted: 10/19/2026
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from .models import (
    ChatMessage,
    InterviewSession,
    MessageKind,
    SentimentState,
    TimelineEntry,
    TurnResult,
)
from .questions import (
    CLOSING_NOTE,
    MAX_QUESTIONS,
    WELCOME_MESSAGE,
    empathetic_aside,
    next_question,
)
from .sentiment import aggregate_confidence, classify


__all__ = ["InterviewSessionManager", "QuestionProvider"]


logger = logging.getLogger(__name__)


# (question_index, sentiment, messages so far) -> alternative phrasing or None
QuestionProvider = Callable[[int, SentimentState, list[ChatMessage]], Optional[str]]


def _format_utc_timestamp(dt: datetime) -> str:
    """
    Format a datetime as ISO 8601 UTC string with 'Z' suffix.

    Args:
        dt: A datetime object (should be timezone-aware UTC).

    Returns:
        ISO 8601 formatted string ending with 'Z'.
    """
    return dt.isoformat().replace("+00:00", "Z")


class InterviewSessionManager:
    """
    Manages one interview's state machine and transcript.

    States are the question index 0..4 plus COMPLETE. Each submitted
    answer is classified once and moves the interview forward; there is
    no going back and no re-scoring of an answered question.

    Example:
        >>> manager = InterviewSessionManager()
        >>> manager.start_session("Jordan Lee")
        >>> result = manager.submit_answer("I'm excited to be here!")
        >>> result.sentiment
        <SentimentState.CONFIDENT: 'CONFIDENT'>
        >>> manager.confidence_score
        65
    """

    def __init__(self) -> None:
        """Initialize the session manager without an active session."""
        self._session: Optional[InterviewSession] = None
        logger.debug("InterviewSessionManager initialized")

    @property
    def session(self) -> Optional[InterviewSession]:
        """Get the current session, if any."""
        return self._session

    @property
    def is_active(self) -> bool:
        """Check if there is a session that has not been ended."""
        return self._session is not None and self._session.ended_at is None

    @property
    def is_complete(self) -> bool:
        """Check if every question has been answered."""
        return self._session is not None and self._session.complete

    @property
    def confidence_score(self) -> int:
        """Aggregate confidence over the answers so far (50 with no answers)."""
        if self._session is None:
            return aggregate_confidence([])
        return aggregate_confidence(self._session.sentiment_history)

    def start_session(self, candidate_name: str = "Candidate") -> InterviewSession:
        """
        Begin a new interview.

        Any existing session is implicitly ended. The new session opens
        with the welcome message followed by the first question in its
        standard phrasing.

        Args:
            candidate_name: Name shown in the report.

        Returns:
            The newly created InterviewSession.
        """
        if self._session is not None and self._session.ended_at is None:
            logger.info("Ending existing session before starting new one")
            self.end_session()

        timestamp = datetime.now(timezone.utc)
        session_id = f"fh_{timestamp.strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:6]}"

        session = InterviewSession(
            session_id=session_id,
            candidate_name=candidate_name or "Candidate",
            started_at=_format_utc_timestamp(timestamp),
        )
        self._append_assistant(session, WELCOME_MESSAGE, kind="welcome", message_id="welcome")
        self._append_assistant(
            session,
            next_question(0, SentimentState.NEUTRAL),
            kind="question",
            message_id="q0",
        )
        self._session = session

        logger.info("Started session %s for candidate '%s'", session_id, candidate_name)
        return self._session

    def end_session(self) -> Optional[InterviewSession]:
        """
        End the current session.

        The ended session stays available for reporting.

        Returns:
            The ended session, or None if no session was active.
        """
        if self._session is None:
            logger.debug("end_session called but no active session")
            return None

        if self._session.ended_at is None:
            self._session.ended_at = _format_utc_timestamp(datetime.now(timezone.utc))

        logger.info(
            "Ended session %s (answers: %d, confidence: %d)",
            self._session.session_id,
            len(self._session.sentiment_history),
            self.confidence_score,
        )
        return self._session

    def submit_answer(
        self,
        text: str,
        question_provider: Optional[QuestionProvider] = None,
    ) -> TurnResult:
        """
        Record the candidate's answer to the current question.

        Classifies the answer, appends it to the sentiment history and the
        timeline, optionally adds an empathetic aside, and then either asks
        the next question or closes the interview after the fifth answer.

        Args:
            text: The candidate's answer.
            question_provider: Optional source of alternative phrasing for
                the next question (e.g. an LLM). Returning None or an empty
                string keeps the scripted phrasing.

        Returns:
            TurnResult describing what this answer produced.

        Raises:
            ValueError: If no session is active, the interview is already
                complete, or the answer is blank.
        """
        if self._session is None or self._session.ended_at is not None:
            raise ValueError("No active session. Call start_session() first.")
        if self._session.complete:
            raise ValueError("Interview is already complete. Start a new session to continue.")
        if not text or not text.strip():
            raise ValueError("Answer text is empty.")

        session = self._session
        question_index = session.current_question

        sentiment = classify(text)
        session.messages.append(
            ChatMessage(
                id=f"user-{uuid.uuid4().hex[:8]}",
                role="user",
                content=text.strip(),
                kind="answer",
                sentiment=sentiment,
            )
        )
        session.sentiment_history.append(sentiment)

        confidence = aggregate_confidence(session.sentiment_history)
        entry = TimelineEntry(question=question_index, sentiment=sentiment, confidence=confidence)
        session.timeline.append(entry)

        replies: list[ChatMessage] = []
        aside = empathetic_aside(sentiment)
        if aside:
            replies.append(self._append_assistant(session, aside, kind="aside"))

        next_index = question_index + 1
        if next_index < MAX_QUESTIONS:
            question_text = self._resolve_question(session, next_index, sentiment, question_provider)
            replies.append(
                self._append_assistant(session, question_text, kind="question", message_id=f"q{next_index}")
            )
            session.current_question = next_index
        else:
            replies.append(self._append_assistant(session, next_question(next_index, sentiment), kind="closing"))
            replies.append(self._append_assistant(session, CLOSING_NOTE, kind="closing", message_id="complete"))
            session.complete = True
            logger.info(
                "Session %s complete with confidence %d",
                session.session_id,
                confidence,
            )

        logger.debug(
            "Turn %d: sentiment=%s confidence=%d replies=%d",
            question_index,
            sentiment.value,
            confidence,
            len(replies),
        )

        return TurnResult(
            sentiment=sentiment,
            confidence=confidence,
            timeline_entry=entry,
            replies=replies,
            next_question_index=None if session.complete else session.current_question,
            is_complete=session.complete,
        )

    def get_conversation(self) -> list[dict[str, str]]:
        """
        Conversation so far as role/text pairs, suitable for prompting.

        Returns:
            List of {"role": "user" | "assistant", "text": ...} dicts.
        """
        if self._session is None:
            return []
        return [{"role": m.role, "text": m.content} for m in self._session.messages]

    def _resolve_question(
        self,
        session: InterviewSession,
        index: int,
        sentiment: SentimentState,
        question_provider: Optional[QuestionProvider],
    ) -> str:
        """
        Phrasing for the next question.

        The answer is already scored when this runs, so a failing provider
        must not abort the turn; it falls back to the scripted phrasing.
        """
        scripted = next_question(index, sentiment)
        if question_provider is None:
            return scripted

        try:
            generated = question_provider(index, sentiment, list(session.messages))
        except Exception as e:
            logger.error("Question provider failed for slot %d: %s", index, e, exc_info=True)
            return scripted

        if generated and generated.strip():
            return generated.strip()

        logger.debug("Question provider returned nothing for slot %d, using script", index)
        return scripted

    def _append_assistant(
        self,
        session: InterviewSession,
        content: str,
        kind: MessageKind,
        message_id: Optional[str] = None,
    ) -> ChatMessage:
        message = ChatMessage(
            id=message_id or f"{kind}-{uuid.uuid4().hex[:8]}",
            role="assistant",
            content=content,
            kind=kind,
        )
        session.messages.append(message)
        return message
