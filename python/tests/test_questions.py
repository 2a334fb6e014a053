"""
Tests for the interview script and sentiment-driven question selection.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fairhire.models import QuestionVariantSet, SentimentState
from fairhire.questions import (
    COMPLETION_MESSAGE,
    ENCOURAGING_REPLIES,
    INTERVIEW_QUESTIONS,
    MAX_QUESTIONS,
    empathetic_aside,
    encouraging_reply,
    next_question,
)


class TestInterviewScript:
    """The script is five fixed, immutable topic slots."""

    def test_script_has_five_slots(self):
        assert MAX_QUESTIONS == 5
        assert len(INTERVIEW_QUESTIONS) == 5

    def test_slots_are_frozen(self):
        with pytest.raises(ValidationError):
            INTERVIEW_QUESTIONS[0].standard = "changed"

    def test_variant_set_requires_all_three_phrasings(self):
        with pytest.raises(ValidationError):
            QuestionVariantSet(standard="a", encouraging="b")

    def test_variant_set_rejects_extra_phrasings(self):
        with pytest.raises(ValidationError):
            QuestionVariantSet(standard="a", encouraging="b", simplified="c", playful="d")


class TestNextQuestion:
    """Tests for next_question()."""

    def test_neutral_gets_standard(self):
        assert next_question(0, SentimentState.NEUTRAL) == INTERVIEW_QUESTIONS[0].standard

    def test_anxious_gets_encouraging(self):
        assert next_question(0, "ANXIOUS") == INTERVIEW_QUESTIONS[0].encouraging

    def test_confused_gets_simplified(self):
        assert next_question(3, SentimentState.CONFUSED) == INTERVIEW_QUESTIONS[3].simplified

    def test_confident_gets_standard(self):
        assert next_question(2, SentimentState.CONFIDENT) == INTERVIEW_QUESTIONS[2].standard

    @pytest.mark.parametrize("sentiment", list(SentimentState))
    def test_past_end_returns_completion(self, sentiment):
        assert next_question(5, sentiment) == COMPLETION_MESSAGE

    def test_far_past_end_returns_completion(self):
        assert next_question(99, SentimentState.ANXIOUS) == COMPLETION_MESSAGE

    def test_negative_index_falls_back_to_first_slot(self):
        assert next_question(-1, SentimentState.NEUTRAL) == INTERVIEW_QUESTIONS[0].standard

    def test_unknown_sentiment_gets_standard(self):
        assert next_question(1, "EUPHORIC") == INTERVIEW_QUESTIONS[1].standard

    def test_every_slot_and_sentiment_resolves(self):
        for index, slot in enumerate(INTERVIEW_QUESTIONS):
            assert next_question(index, SentimentState.ANXIOUS) == slot.encouraging
            assert next_question(index, SentimentState.CONFUSED) == slot.simplified
            assert next_question(index, SentimentState.NEUTRAL) == slot.standard


class TestReplies:
    """Tests for encouraging_reply() and empathetic_aside()."""

    def test_one_reply_per_state(self):
        assert set(ENCOURAGING_REPLIES) == set(SentimentState)
        assert len(set(ENCOURAGING_REPLIES.values())) == 4

    def test_encouraging_reply_for_anxious(self):
        assert "nervous" in encouraging_reply(SentimentState.ANXIOUS)

    def test_encouraging_reply_unknown_is_neutral(self):
        assert encouraging_reply("???") == ENCOURAGING_REPLIES[SentimentState.NEUTRAL]

    @pytest.mark.parametrize(
        "sentiment",
        [SentimentState.ANXIOUS, SentimentState.CONFUSED, SentimentState.CONFIDENT],
    )
    def test_aside_for_non_neutral(self, sentiment):
        assert empathetic_aside(sentiment) == encouraging_reply(sentiment)

    def test_no_aside_for_neutral(self):
        assert empathetic_aside(SentimentState.NEUTRAL) is None

    def test_no_aside_for_unknown(self):
        assert empathetic_aside(None) is None
