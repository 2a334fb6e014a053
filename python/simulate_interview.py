#!/usr/bin/env python3
"""
Scripted Interview Simulator.

Replays a candidate persona's answers through an interview session,
logging how the interviewer adapts each question, and optionally saves
the reflection report as JSON.

Usage:
    uv run python simulate_interview.py

    # With custom options:
    uv run python simulate_interview.py --persona anxious --candidate "Jane Doe" --output-dir ./output
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Final, Optional

from fairhire.models import InterviewSession
from fairhire.report import ReportWriteError, ReportWriter, build_reflection_report
from fairhire.session import InterviewSessionManager, QuestionProvider

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_REPORT_ERROR: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130  # Standard SIGINT exit code


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CANDIDATE_NAME: Final[str] = "Jordan Lee"
DEFAULT_PERSONA: Final[str] = "mixed"


# =============================================================================
# Candidate Personas (5 answers each)
# =============================================================================

PERSONA_SCRIPTS: Final[dict[str, tuple[str, ...]]] = {
    "confident": (
        "I'm excited to be here. I have six years of backend experience and I'm proud of the teams I've helped grow.",
        "I led a migration that was definitely the hardest project of my career, and we achieved zero downtime.",
        "I break problems down, test assumptions quickly, and I'm confident asking for help early.",
        "My key strengths are clear communication and an excellent eye for detail.",
        "I absolutely want to lead a platform team and mentor other engineers.",
    ),
    "anxious": (
        "Honestly I'm nervous, I don't know where to start.",
        "Maybe the data migration last year, but I was worried the whole time.",
        "I'm not sure, I usually ask a teammate when I'm stressed.",
        "I'm unsure, maybe being organized?",
        "I'm scared to say, maybe something in design.",
    ),
    "confused": (
        "Sorry, what do you mean by that?",
        "Could you clarify which project you mean?",
        "Huh, I don't understand the question.",
        "Can you repeat that?",
        "It's unclear to me, can you explain?",
    ),
    "mixed": (
        "I'm a bit nervous but I don't know, let's go.",
        "Sorry, could you clarify the question?",
        "I start by reproducing the issue and reading the logs.",
        "I'm proud of how I mentor people and I'm great at debugging.",
        "In a few years I would like to own a product area end to end and help the people around me grow into senior engineers.",
    ),
}


# =============================================================================
# Simulation Runner
# =============================================================================

def simulate(
    persona: str,
    candidate_name: str = DEFAULT_CANDIDATE_NAME,
    question_provider: Optional[QuestionProvider] = None,
) -> InterviewSession:
    """
    Play a persona's answers through a fresh interview session.

    Args:
        persona: Key into PERSONA_SCRIPTS.
        candidate_name: Name recorded on the session.
        question_provider: Optional LLM phrasing for follow-up questions.

    Returns:
        The completed InterviewSession.

    Raises:
        ValueError: If the persona is unknown.
    """
    answers = PERSONA_SCRIPTS.get((persona or "").strip().lower())
    if answers is None:
        supported = ", ".join(sorted(PERSONA_SCRIPTS))
        raise ValueError(f"Unknown persona '{persona}'. Supported personas: {supported}.")

    manager = InterviewSessionManager()
    session = manager.start_session(candidate_name)
    for message in session.messages:
        logger.info("Interviewer: %s", message.content)

    for i, answer in enumerate(answers, 1):
        logger.info("\n[%d/%d] Candidate: %s", i, len(answers), answer)
        result = manager.submit_answer(answer, question_provider=question_provider)
        logger.info("  sentiment=%s confidence=%d", result.sentiment.value, result.confidence)
        for reply in result.replies:
            logger.info("Interviewer: %s", reply.content)

    manager.end_session()
    return session


def run_simulation(
    persona: str,
    candidate_name: str,
    output_dir: Optional[Path] = None,
    use_llm: bool = False,
) -> int:
    """
    Run one simulated interview and report the results.

    Args:
        persona: Which answer script to replay.
        candidate_name: Name of the simulated candidate.
        output_dir: Directory for the JSON report. Nothing is written if None.
        use_llm: Rephrase follow-up questions with the LLM generator.

    Returns:
        Exit code indicating success or failure.
    """
    question_provider: Optional[QuestionProvider] = None
    if use_llm:
        from fairhire.generator import QuestionGenerator

        try:
            question_provider = QuestionGenerator().as_provider()
        except ValueError as exc:
            logger.error("LLM configuration error: %s", exc)
            return EXIT_CONFIG_ERROR

    try:
        session = simulate(persona, candidate_name, question_provider=question_provider)
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG_ERROR

    report = build_reflection_report(session)

    logger.info("\n%s", "=" * 60)
    logger.info("Interview simulation complete!")
    logger.info("%s", "=" * 60)
    logger.info("Confidence score: %d%% (%s)", report.confidence_score, report.confidence_label)
    logger.info("Sentiments: %s", ", ".join(s.value for s in report.sentiment_breakdown))
    logger.info("Adaptive adjustments: %d", report.adjustments)
    for strength in report.strengths:
        logger.info("  + %s", strength)
    for item in report.growth_opportunities:
        logger.info("  - %s", item)

    if output_dir is not None:
        try:
            path = ReportWriter(output_dir).write(report)
        except ReportWriteError as exc:
            logger.error("Failed to save report: %s", exc)
            return EXIT_REPORT_ERROR
        logger.info("Report saved to %s", path)

    return EXIT_SUCCESS


def main(
    persona: str | None = None,
    candidate_name: str | None = None,
    output_dir: str | None = None,
    use_llm: bool = False,
) -> int:
    """
    Main entry point for the interview simulator.

    Args:
        persona: Persona to replay (defaults to "mixed").
        candidate_name: Name of the candidate (defaults to env var or "Jordan Lee").
        output_dir: Report directory (defaults to OUTPUT_DIR env var, else no report).
        use_llm: Use the LLM question generator.

    Returns:
        Exit code indicating success or failure.
    """
    resolved_persona = persona or DEFAULT_PERSONA
    resolved_candidate = candidate_name or os.environ.get("CANDIDATE_NAME", DEFAULT_CANDIDATE_NAME)
    resolved_output = output_dir or os.environ.get("OUTPUT_DIR")

    logger.info("=" * 60)
    logger.info("FairHire Interview Simulator")
    logger.info("=" * 60)
    logger.info("Persona: %s", resolved_persona)
    logger.info("Candidate: %s", resolved_candidate)
    logger.info("")

    try:
        return run_simulation(
            persona=resolved_persona,
            candidate_name=resolved_candidate,
            output_dir=Path(resolved_output).expanduser() if resolved_output else None,
            use_llm=use_llm,
        )
    except KeyboardInterrupt:
        logger.info("\nSimulation interrupted")
        return EXIT_INTERRUPTED


def cli() -> None:
    """
    Command-line interface entry point with argument parsing.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Replay a candidate persona through the adaptive interview.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Run with defaults
    uv run python simulate_interview.py

    # Anxious candidate, save the report
    uv run python simulate_interview.py --persona anxious --output-dir ./output

Environment Variables:
    CANDIDATE_NAME   Candidate name (default: Jordan Lee)
    OUTPUT_DIR       Directory for the JSON report
        """,
    )

    parser.add_argument(
        "--persona",
        choices=sorted(PERSONA_SCRIPTS),
        default=None,
        help=f"Answer script to replay (default: {DEFAULT_PERSONA})",
    )
    parser.add_argument(
        "--candidate",
        type=str,
        default=None,
        dest="candidate_name",
        help=f"Candidate name (default: {DEFAULT_CANDIDATE_NAME})",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the JSON reflection report",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Rephrase follow-up questions with the LLM (needs OpenAI credentials)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    exit_code = main(
        persona=args.persona,
        candidate_name=args.candidate_name,
        output_dir=args.output_dir,
        use_llm=args.llm,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
