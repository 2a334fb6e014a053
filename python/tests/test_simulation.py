"""
Tests for the scripted interview simulator.

Each persona replays five answers; the expected sentiments and the
running confidence are fixed by the keyword tables.

Last Grunted: 10/19/2026
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from fairhire.config import load_environment
from fairhire.models import SentimentState
from fairhire.questions import INTERVIEW_QUESTIONS
from fairhire.report import build_reflection_report
from simulate_interview import (
    EXIT_CONFIG_ERROR,
    EXIT_REPORT_ERROR,
    EXIT_SUCCESS,
    PERSONA_SCRIPTS,
    main,
    run_simulation,
    simulate,
)


A = SentimentState.ANXIOUS
C = SentimentState.CONFIDENT
N = SentimentState.NEUTRAL
Q = SentimentState.CONFUSED


# =============================================================================
# Persona Tests
# =============================================================================

class TestPersonas:
    """Every persona plays a full interview with a known outcome."""

    def test_each_persona_has_five_answers(self):
        for answers in PERSONA_SCRIPTS.values():
            assert len(answers) == 5

    @pytest.mark.parametrize(
        "persona,sentiments,confidences",
        [
            ("confident", [C, C, C, C, C], [65, 80, 95, 100, 100]),
            ("anxious", [A, A, A, A, A], [40, 30, 20, 10, 0]),
            ("confused", [Q, Q, Q, Q, Q], [50, 50, 50, 50, 50]),
            ("mixed", [A, Q, N, C, C], [40, 40, 40, 55, 70]),
        ],
    )
    def test_persona_outcome(self, persona, sentiments, confidences):
        session = simulate(persona)

        assert session.complete
        assert session.ended_at is not None
        assert session.sentiment_history == sentiments
        assert [t.confidence for t in session.timeline] == confidences

    def test_persona_name_is_case_insensitive(self):
        assert simulate("  Confident ").complete

    def test_unknown_persona_raises(self):
        with pytest.raises(ValueError, match="Unknown persona"):
            simulate("bored")

    def test_candidate_name_is_recorded(self):
        session = simulate("mixed", candidate_name="Sam Rivera")
        assert session.candidate_name == "Sam Rivera"

    def test_anxious_persona_gets_encouraging_questions(self):
        session = simulate("anxious")
        report = build_reflection_report(session)

        assert report.anxious_moments == 5
        assert report.confidence_label == "Room for growth"
        assert session.questions[1].content == INTERVIEW_QUESTIONS[1].encouraging

    def test_provider_is_passed_through(self):
        session = simulate(
            "confident",
            question_provider=lambda index, sentiment, messages: f"Custom question {index}?",
        )
        assert [m.content for m in session.questions[1:]] == [
            "Custom question 1?",
            "Custom question 2?",
            "Custom question 3?",
            "Custom question 4?",
        ]


# =============================================================================
# Runner Tests
# =============================================================================

class TestRunSimulation:
    """Tests for run_simulation() and main()."""

    def test_writes_report(self, tmp_path: Path):
        exit_code = run_simulation("confident", "Jordan Lee", output_dir=tmp_path)

        assert exit_code == EXIT_SUCCESS
        reports = list(tmp_path.glob("fairhire-report-*.json"))
        assert len(reports) == 1
        data = json.loads(reports[0].read_text(encoding="utf-8"))
        assert data["candidate_name"] == "Jordan Lee"
        assert data["confidence_score"] == 100

    def test_no_output_dir_writes_nothing(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert run_simulation("mixed", "Jordan Lee") == EXIT_SUCCESS
        assert list(tmp_path.iterdir()) == []

    def test_unknown_persona_is_config_error(self):
        assert run_simulation("bored", "Jordan Lee") == EXIT_CONFIG_ERROR

    def test_unwritable_output_dir_is_report_error(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert run_simulation("mixed", "Jordan Lee", output_dir=blocker / "out") == EXIT_REPORT_ERROR

    def test_main_reads_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CANDIDATE_NAME", "Env Candidate")
        monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))

        assert main(persona="anxious") == EXIT_SUCCESS

        report = next(tmp_path.glob("fairhire-report-*.json"))
        assert json.loads(report.read_text(encoding="utf-8"))["candidate_name"] == "Env Candidate"


class TestDotenvSettings:
    """Settings placed in a .env file reach the simulator."""

    @pytest.fixture
    def clean_env(self, monkeypatch):
        # setenv first so monkeypatch restores the absence on teardown
        for name in ("CANDIDATE_NAME", "OUTPUT_DIR"):
            monkeypatch.setenv(name, "unset")
            monkeypatch.delenv(name)

    def test_main_uses_dotenv_values(self, tmp_path: Path, clean_env):
        output_dir = tmp_path / "reports"
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"CANDIDATE_NAME=Dotenv Candidate\nOUTPUT_DIR={output_dir}\n",
            encoding="utf-8",
        )

        assert load_environment(env_file)
        assert main(persona="confused") == EXIT_SUCCESS

        report = next(output_dir.glob("fairhire-report-*.json"))
        assert json.loads(report.read_text(encoding="utf-8"))["candidate_name"] == "Dotenv Candidate"

    def test_process_env_wins_over_dotenv(self, tmp_path: Path, clean_env, monkeypatch):
        monkeypatch.setenv("CANDIDATE_NAME", "Shell Candidate")
        env_file = tmp_path / ".env"
        env_file.write_text("CANDIDATE_NAME=Dotenv Candidate\n", encoding="utf-8")

        load_environment(env_file)

        assert os.environ["CANDIDATE_NAME"] == "Shell Candidate"

    def test_missing_dotenv_file(self, tmp_path: Path):
        assert load_environment(tmp_path / "missing.env") is False
