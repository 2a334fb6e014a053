"""
Tests for the Streamlit UI's question provider wiring.

The module is imported outside a Streamlit server, where st.* calls run
in bare mode.
"""

from __future__ import annotations

import pytest

import streamlit_ui


@pytest.fixture
def provider_cache():
    streamlit_ui.get_question_provider.clear()
    yield
    streamlit_ui.get_question_provider.clear()


@pytest.fixture
def openai_env(monkeypatch):
    for name in (
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_KEY",
        "AZURE_OPENAI_DEPLOYMENT",
        "OPENAI_API_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


class TestQuestionProvider:
    """Tests for get_question_provider() and resolve_question_provider()."""

    def test_disabled_returns_none(self, provider_cache):
        assert streamlit_ui.resolve_question_provider(False) is None

    def test_configured_returns_provider(self, provider_cache, openai_env):
        provider = streamlit_ui.resolve_question_provider(True)
        assert callable(provider)

    def test_config_error_is_not_cached(self, provider_cache, openai_env, monkeypatch):
        """After fixing a partial Azure config the provider becomes available."""
        monkeypatch.setenv("OPENAI_API_TYPE", "azure")

        with pytest.raises(ValueError):
            streamlit_ui.get_question_provider()
        assert streamlit_ui.resolve_question_provider(True) is None

        monkeypatch.delenv("OPENAI_API_TYPE")

        assert callable(streamlit_ui.resolve_question_provider(True))
