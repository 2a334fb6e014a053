"""
Reflection Report builder and writer.

Turns a finished (or partially finished) interview session into the
aggregated results shown in the reflection portal, and saves the
downloadable JSON artifact.

Thread Safety:
    Writes are atomic at the file level only. For concurrent writes to the
    same report file, external locking is required.

Last Grunted: 10/19/2026
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import (
    InterviewSession,
    QuestionBreakdown,
    ReflectionReport,
    SentimentState,
)
from .sentiment import BASE_CONFIDENCE, aggregate_confidence, confidence_label, word_count


__all__ = [
    "build_reflection_report",
    "ReportWriter",
    "ReportWriteError",
    "ReportReadError",
]


logger = logging.getLogger(__name__)


# Thresholds for strengths and growth opportunities
DETAILED_AVG_LENGTH = 100
BRIEF_AVG_LENGTH = 80
ENGAGED_TOTAL_WORDS = 50


class ReportWriteError(Exception):
    """Raised when writing a report fails."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write to {path}: {cause}")


class ReportReadError(Exception):
    """Raised when reading a report fails."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read from {path}: {cause}")


def build_reflection_report(session: InterviewSession) -> ReflectionReport:
    """
    Aggregate a session into a ReflectionReport.

    The confidence score is recomputed from the full sentiment history.
    Timeline entries are carried through unchanged and only feed the
    trajectory fields.

    Args:
        session: The interview session to summarize.

    Returns:
        The populated ReflectionReport.
    """
    answers = session.answers
    sentiments = [m.sentiment or SentimentState.NEUTRAL for m in answers]
    score = aggregate_confidence(sentiments)

    avg_length = round(sum(len(m.content) for m in answers) / len(answers)) if answers else 0
    total_words = sum(word_count(m.content) for m in answers)
    confident_answers = sentiments.count(SentimentState.CONFIDENT)
    anxious_answers = sentiments.count(SentimentState.ANXIOUS)

    counts: dict[str, int] = {}
    for sentiment in sentiments:
        counts[sentiment.value] = counts.get(sentiment.value, 0) + 1

    strengths: list[str] = []
    if confident_answers > 0:
        plural = "s" if confident_answers > 1 else ""
        strengths.append(
            f"Showed confidence in {confident_answers} response{plural}, "
            "demonstrating strong subject knowledge"
        )
    if avg_length > DETAILED_AVG_LENGTH:
        strengths.append(
            f"Provided detailed, thoughtful responses (avg. {avg_length} characters)"
        )
    if total_words > ENGAGED_TOTAL_WORDS:
        strengths.append(f"Engaged meaningfully with {total_words} words across all responses")

    growth: list[str] = []
    if anxious_answers > 1:
        growth.append(
            "Practice managing interview anxiety through mock interviews and breathing techniques"
        )
    if avg_length < BRIEF_AVG_LENGTH:
        growth.append("Consider elaborating more on your experiences with specific examples")
    growth.append("Continue building confidence by reflecting on past achievements and successes")

    breakdown: list[QuestionBreakdown] = []
    for idx, question in enumerate(session.questions):
        answer = answers[idx] if idx < len(answers) else None
        answer_sentiment = (answer.sentiment or SentimentState.NEUTRAL) if answer else None
        breakdown.append(
            QuestionBreakdown(
                number=idx + 1,
                question=question.content,
                answer=answer.content if answer else None,
                sentiment=answer_sentiment,
                sentiment_label=answer_sentiment.label if answer_sentiment else None,
                word_count=word_count(answer.content) if answer else 0,
            )
        )

    timeline = list(session.timeline)
    report = ReflectionReport(
        session_id=session.session_id,
        candidate_name=session.candidate_name,
        confidence_score=score,
        confidence_label=confidence_label(score),
        total_questions=len(timeline),
        sentiment_breakdown=sentiments,
        sentiment_counts=counts,
        avg_response_length=avg_length,
        total_words=total_words,
        adjustments=sum(1 for t in timeline if t.sentiment != SentimentState.NEUTRAL),
        anxious_moments=sum(1 for t in timeline if t.sentiment == SentimentState.ANXIOUS),
        starting_confidence=timeline[0].confidence if timeline else BASE_CONFIDENCE,
        final_confidence=timeline[-1].confidence if timeline else BASE_CONFIDENCE,
        timeline=timeline,
        strengths=strengths,
        growth_opportunities=growth,
        breakdown=breakdown,
    )

    logger.debug(
        "Built report for %s: score=%d answers=%d",
        session.session_id,
        score,
        len(answers),
    )
    return report


class ReportWriter:
    """
    Writes reflection reports to JSON files.

    Output files are named: fairhire-report-{session_id}.json

    Example:
        >>> writer = ReportWriter(Path("./output"))
        >>> path = writer.write(report)
        >>> writer.load(report.session_id).confidence_score
        80
    """

    def __init__(self, output_dir: Path) -> None:
        """
        Initialize the report writer.

        Args:
            output_dir: Directory where report files are written.
                        Created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)
        self._ensure_output_dir()

    def _ensure_output_dir(self) -> None:
        """
        Create output directory if it doesn't exist.

        Raises:
            ReportWriteError: If directory creation fails.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Output directory ready: %s", self.output_dir)
        except OSError as e:
            raise ReportWriteError(self.output_dir, e) from e

    def get_output_path(self, session_id: str) -> Path:
        """Get the report file path for a session."""
        return self.output_dir / f"fairhire-report-{session_id}.json"

    def write(self, report: ReflectionReport) -> Path:
        """
        Write a report, overwriting any previous file for the session.

        Args:
            report: The ReflectionReport to save.

        Returns:
            Path to the written file.

        Raises:
            ReportWriteError: If the file write fails.
        """
        output_path = self.get_output_path(report.session_id)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(report.to_json())
        except OSError as e:
            raise ReportWriteError(output_path, e) from e

        logger.info("Wrote report to %s", output_path)
        return output_path

    def load(self, session_id: str) -> Optional[ReflectionReport]:
        """
        Load a previously written report.

        Args:
            session_id: The session identifier.

        Returns:
            ReflectionReport if the file exists, None otherwise.

        Raises:
            ReportReadError: If the file cannot be read or holds invalid data.
        """
        output_path = self.get_output_path(session_id)

        if not output_path.exists():
            logger.debug("No report file found for session %s", session_id)
            return None

        try:
            with open(output_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ReportReadError(output_path, e) from e
        except OSError as e:
            raise ReportReadError(output_path, e) from e

        try:
            return ReflectionReport.model_validate(data)
        except ValidationError as e:
            raise ReportReadError(output_path, e) from e
