#!/usr/bin/env python3
"""
Streamlit UI for the FairHire Adaptive Interviewer.

Provides the candidate-facing interview with:
- Chat transcript with detected sentiment per answer
- Adaptive follow-up questions (scripted, or LLM-phrased when enabled)
- Reflection portal with confidence score, emotional timeline and
  downloadable JSON report

Usage:
    uv run streamlit run streamlit_ui.py --server.port 8502
"""

from __future__ import annotations

import logging
import os
from typing import Final

import streamlit as st

from fairhire.models import ChatMessage, SentimentState
from fairhire.questions import MAX_QUESTIONS
from fairhire.report import build_reflection_report
from fairhire.session import InterviewSessionManager, QuestionProvider

# =============================================================================
# Logging Configuration
# =============================================================================

logger: logging.Logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CANDIDATE_NAME: Final[str] = os.environ.get("CANDIDATE_NAME", "Candidate")
USE_LLM_DEFAULT: Final[bool] = os.environ.get("FAIRHIRE_USE_LLM", "").lower() in {"1", "true", "yes"}

SENTIMENT_BADGES: Final[dict[SentimentState, str]] = {
    SentimentState.ANXIOUS: "🟠",
    SentimentState.CONFIDENT: "🟢",
    SentimentState.NEUTRAL: "🔵",
    SentimentState.CONFUSED: "🟣",
}


# =============================================================================
# Page Configuration
# =============================================================================

st.set_page_config(
    page_title="FairHire AI",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# =============================================================================
# Custom CSS
# =============================================================================

st.markdown("""
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}
.stDeployButton {display: none;}

.main .block-container {
    padding: 1rem 2rem;
    max-width: 1100px;
}

.aside-bubble {
    background: linear-gradient(135deg, #FEF3C7 0%, #FDE68A 100%);
    color: #78350F;
    padding: 0.6rem 0.9rem;
    border-radius: 12px;
    font-style: italic;
}

.sentiment-meta {
    font-size: 0.75rem;
    color: #64748B;
    margin-top: 0.25rem;
}
</style>
""", unsafe_allow_html=True)


# =============================================================================
# State Management
# =============================================================================

def init_state() -> None:
    """
    Initialize Streamlit session state for the interview.

    Only initializes state on first run; subsequent calls are no-ops.
    This ensures state persists across Streamlit reruns.
    """
    if "init" not in st.session_state:
        st.session_state.init = True
        st.session_state.manager = InterviewSessionManager()
        st.session_state.manager.start_session(DEFAULT_CANDIDATE_NAME)
        st.session_state.show_reflection = False
        st.session_state.use_llm = USE_LLM_DEFAULT


def restart_interview() -> None:
    """Throw away the current interview and start a fresh one."""
    manager: InterviewSessionManager = st.session_state.manager
    manager.start_session(DEFAULT_CANDIDATE_NAME)
    st.session_state.show_reflection = False


# =============================================================================
# Helper Functions
# =============================================================================

@st.cache_resource
def get_question_provider() -> QuestionProvider:
    """
    Build the LLM question provider once per server process.

    Only successful builds are cached; a configuration error propagates
    so the next call tries again.

    Returns:
        A provider for InterviewSessionManager.submit_answer.

    Raises:
        ValueError: If the OpenAI/Azure settings are incomplete.
    """
    from fairhire.generator import QuestionGenerator

    return QuestionGenerator().as_provider()


def resolve_question_provider(use_llm: bool) -> QuestionProvider | None:
    """
    Provider for this turn, or None to use the scripted questions.

    Args:
        use_llm: Whether LLM follow-ups are switched on.

    Returns:
        The cached provider, or None if disabled or misconfigured.
    """
    if not use_llm:
        return None
    try:
        return get_question_provider()
    except ValueError as e:
        logger.error("Question generator unavailable: %s", e)
        st.warning(f"LLM follow-ups unavailable, using scripted questions: {e}")
        return None


def render_message(message: ChatMessage) -> None:
    """Render one chat message with its sentiment badge."""
    avatar = "🧑" if message.role == "user" else "✨"
    with st.chat_message(message.role, avatar=avatar):
        if message.kind == "aside":
            st.markdown(
                f'<div class="aside-bubble">{message.content}</div>',
                unsafe_allow_html=True,
            )
        else:
            st.markdown(message.content)

        if message.sentiment is not None:
            badge = SENTIMENT_BADGES.get(message.sentiment, "")
            st.markdown(
                f'<div class="sentiment-meta">{badge} {message.sentiment.label}</div>',
                unsafe_allow_html=True,
            )


def handle_answer(text: str) -> None:
    """Submit the candidate's answer and surface completion."""
    manager: InterviewSessionManager = st.session_state.manager
    provider = resolve_question_provider(st.session_state.use_llm)

    try:
        with st.spinner("Thinking about your answer..."):
            result = manager.submit_answer(text, question_provider=provider)
    except ValueError as e:
        st.warning(str(e))
        return

    if result.is_complete:
        st.toast("Interview Complete! Your reflection portal is ready to view.")


# =============================================================================
# Views
# =============================================================================

def render_interview() -> None:
    """Chat view: transcript, input box and progress caption."""
    manager: InterviewSessionManager = st.session_state.manager
    session = manager.session
    if session is None:
        return

    for message in session.messages:
        render_message(message)

    if manager.is_complete:
        return

    answer = st.chat_input("Type your response here...")
    st.caption(f"Question {session.current_question + 1} of {MAX_QUESTIONS}")

    if answer and answer.strip():
        handle_answer(answer)
        st.rerun()


def render_reflection() -> None:
    """Reflection portal: aggregated results for the finished interview."""
    manager: InterviewSessionManager = st.session_state.manager
    session = manager.session
    if session is None:
        return

    report = build_reflection_report(session)

    st.markdown("## Your Reflection Portal")
    st.caption("A personalized analysis of your interview journey")
    st.download_button(
        "⬇️ Download Report",
        data=report.to_json(),
        file_name=f"fairhire-report-{report.session_id}.json",
        mime="application/json",
    )

    col_score, col_journey, col_bias = st.columns(3)
    with col_score:
        st.metric("Confidence Score", f"{report.confidence_score}%")
        st.caption(report.confidence_label)
    with col_journey:
        st.markdown("**Emotional Journey**")
        for state_value, count in report.sentiment_counts.items():
            state = SentimentState.coerce(state_value)
            st.markdown(f"{SENTIMENT_BADGES[state]} {state.label}: **{count}x**")
    with col_bias:
        st.markdown("**Bias Reduction**")
        st.caption(
            f"The interviewer adjusted {report.adjustments} times to ensure you "
            "felt comfortable and understood."
        )

    st.markdown("### Emotional Timeline")
    if report.timeline:
        st.line_chart(
            {
                "question": [f"Q{entry.question + 1}" for entry in report.timeline],
                "confidence": [entry.confidence for entry in report.timeline],
            },
            x="question",
            y="confidence",
        )

    col_strengths, col_growth = st.columns(2)
    with col_strengths:
        st.markdown("### Key Strengths")
        for item in report.strengths:
            st.markdown(f"- {item}")
    with col_growth:
        st.markdown("### Growth Opportunities")
        for item in report.growth_opportunities:
            st.markdown(f"- {item}")

    st.markdown("### Interview Breakdown")
    for row in report.breakdown:
        st.markdown(f"**Q{row.number}.** {row.question}")
        if row.answer is not None:
            st.markdown(f"> {row.answer}")
            st.caption(f"{row.sentiment_label} · {row.word_count} words")
        st.divider()

    st.markdown("### Bias Reduction Narrative")
    st.markdown(
        f"- **Emotional Awareness:** We detected {report.anxious_moments} moments of anxiety "
        "and shifted to more encouraging, open-ended questions.\n"
        "- **Clarity First:** When confusion was detected, questions were rephrased so you "
        "fully understood what was being asked.\n"
        f"- **Confidence Building:** Your confidence moved from {report.starting_confidence}% "
        f"to {report.final_confidence}% over the interview."
    )


# =============================================================================
# Main Application
# =============================================================================

def main() -> None:
    """
    Main Streamlit application entry point.

    Renders:
    - Header with restart and results controls
    - Either the interview chat or the reflection portal
    """
    init_state()
    manager: InterviewSessionManager = st.session_state.manager

    col_title, col_llm, col_results, col_restart = st.columns([4, 2, 1, 1])
    with col_title:
        st.markdown("### ✨ FairHire AI · The Adaptive Interviewer")
    with col_llm:
        st.session_state.use_llm = st.toggle(
            "LLM follow-ups",
            value=st.session_state.use_llm,
            disabled=manager.is_complete,
        )
    with col_results:
        if st.session_state.show_reflection:
            if st.button("⬅️ Back"):
                st.session_state.show_reflection = False
                st.rerun()
        elif st.button("📊 Results", disabled=not manager.is_complete, type="primary"):
            st.session_state.show_reflection = True
            st.rerun()
    with col_restart:
        if st.button("🔄 Restart"):
            restart_interview()
            st.rerun()

    if st.session_state.show_reflection and manager.is_complete:
        render_reflection()
    else:
        render_interview()


if __name__ == "__main__":
    main()
