"""
Interview script and sentiment-driven question selection.

The script is a fixed tuple of five topic slots, each with a standard,
an encouraging and a simplified phrasing. Selection is a flat lookup by
sentiment; anything unrecognized gets the standard phrasing.
"""

from __future__ import annotations

from typing import Final, Optional

from .models import QuestionVariantSet, SentimentState


INTERVIEW_QUESTIONS: Final[tuple[QuestionVariantSet, ...]] = (
    QuestionVariantSet(
        standard="Tell me about yourself and what brings you to this interview today.",
        encouraging="I'd love to hear your story. What interests you most about this opportunity? Take your time.",
        simplified="Let's start simple - what kind of work do you enjoy doing?",
    ),
    QuestionVariantSet(
        standard="Describe a challenging project you've worked on and how you handled it.",
        encouraging="Think about a time when you did something you're proud of. What made it special for you?",
        simplified="Tell me about something you worked on. What did you do?",
    ),
    QuestionVariantSet(
        standard="How do you approach problem-solving in your work?",
        encouraging="Everyone solves problems differently. What's your style? There's no wrong answer here.",
        simplified="When something goes wrong, what do you usually do?",
    ),
    QuestionVariantSet(
        standard="What are your key strengths and how do they apply to this role?",
        encouraging="What do you do really well? I'd love to hear about your talents.",
        simplified="What are you good at?",
    ),
    QuestionVariantSet(
        standard="Where do you see yourself in the next few years professionally?",
        encouraging="What are you hoping for in your future? Let's dream a little together.",
        simplified="What would you like to do next in your career?",
    ),
)

MAX_QUESTIONS: Final[int] = len(INTERVIEW_QUESTIONS)

COMPLETION_MESSAGE: Final[str] = "Thank you for your time. That completes our interview."

WELCOME_MESSAGE: Final[str] = (
    "Welcome to FairHire AI. I'm here to conduct your interview in a supportive and "
    "adaptive way. I'll adjust my approach based on how you're feeling to ensure a fair "
    "evaluation. Let's begin!"
)

CLOSING_NOTE: Final[str] = (
    "You did wonderfully! I've completed my evaluation, and your reflection portal is "
    "now ready. Open the results to see your personalized feedback."
)

ENCOURAGING_REPLIES: Final[dict[SentimentState, str]] = {
    SentimentState.ANXIOUS: (
        "I can sense you might be feeling a bit nervous, and that's completely okay. "
        "Take a deep breath. There's no rush at all. Let's talk about something that "
        "really excites you."
    ),
    SentimentState.CONFUSED: (
        "Let me rephrase that to make it clearer. I want to make sure we're on the same page."
    ),
    SentimentState.CONFIDENT: "That's wonderful to hear! Your confidence really comes through.",
    SentimentState.NEUTRAL: "Thank you for sharing that with me.",
}

# Sentiments that get an aside spliced in before the next question
_ASIDE_SENTIMENTS: Final[frozenset[SentimentState]] = frozenset(
    {SentimentState.ANXIOUS, SentimentState.CONFUSED, SentimentState.CONFIDENT}
)


def next_question(index: int, sentiment: SentimentState | str) -> str:
    """
    Pick the phrasing of question ``index`` that suits the candidate's mood.

    Args:
        index: 0-based question slot. Past the end of the script the
            completion message is returned; negative values fall back to
            the first slot.
        sentiment: Sentiment of the most recent answer.

    Returns:
        Question text, or COMPLETION_MESSAGE once the script is exhausted.

    Example:
        >>> next_question(0, "ANXIOUS")
        "I'd love to hear your story. What interests you most about this opportunity? Take your time."
        >>> next_question(5, "NEUTRAL")
        'Thank you for your time. That completes our interview.'
    """
    if index >= MAX_QUESTIONS:
        return COMPLETION_MESSAGE

    question_set = INTERVIEW_QUESTIONS[max(index, 0)]
    state = SentimentState.coerce(sentiment)

    if state == SentimentState.ANXIOUS:
        return question_set.encouraging
    if state == SentimentState.CONFUSED:
        return question_set.simplified
    return question_set.standard


def encouraging_reply(sentiment: SentimentState | str) -> str:
    """Fixed short acknowledgment for a sentiment."""
    return ENCOURAGING_REPLIES[SentimentState.coerce(sentiment)]


def empathetic_aside(sentiment: SentimentState | str) -> Optional[str]:
    """
    Extra message to show before the next question, if any.

    Anxious, confused and confident answers get their acknowledgment;
    neutral answers go straight to the next question.
    """
    state = SentimentState.coerce(sentiment)
    if state in _ASIDE_SENTIMENTS:
        return ENCOURAGING_REPLIES[state]
    return None
