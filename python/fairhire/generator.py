"""
LLM Question Generator using OpenAI Agents SDK.

Optionally rephrases the next interview question so it builds on the
candidate's previous answers while matching their detected sentiment.
Classification stays keyword-based; the model only supplies wording.
Any failure falls back to the scripted phrasing.

Supports both OpenAI and Azure OpenAI backends:
  - OpenAI: Set OPENAI_API_KEY
  - Azure OpenAI: Set AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_KEY, AZURE_OPENAI_DEPLOYMENT

Last Grunted: 10/19/2026
"""

import asyncio
import logging
import os
from typing import Optional, Sequence

from agents import Agent, ModelSettings, OpenAIChatCompletionsModel, Runner
from openai import AsyncAzureOpenAI

from .models import ChatMessage, SentimentState
from .questions import MAX_QUESTIONS, next_question
from .session import QuestionProvider


logger = logging.getLogger(__name__)


DEFAULT_TEMPERATURE = 0.8


def _get_openai_config() -> tuple[str, Optional[AsyncAzureOpenAI]]:
    """
    Determine OpenAI configuration based on environment variables.

    Returns:
        Tuple of (model_name, azure_client_or_none)

    Azure OpenAI requires:
        - AZURE_OPENAI_ENDPOINT: The endpoint URL
        - AZURE_OPENAI_KEY: The API key
        - AZURE_OPENAI_DEPLOYMENT: The deployment name (used as model)

    Standard OpenAI requires:
        - OPENAI_API_KEY: The API key
        - OPENAI_MODEL (optional): Model name, defaults to gpt-4o-mini
    """
    azure_endpoint = os.environ.get("AZURE_OPENAI_ENDPOINT")
    azure_key = os.environ.get("AZURE_OPENAI_KEY")
    azure_deployment = os.environ.get("AZURE_OPENAI_DEPLOYMENT")
    api_type = os.environ.get("OPENAI_API_TYPE", "").lower()

    if api_type == "azure" or (azure_endpoint and azure_key and azure_deployment):
        if not all([azure_endpoint, azure_key, azure_deployment]):
            raise ValueError(
                "Azure OpenAI requires AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_KEY, "
                "and AZURE_OPENAI_DEPLOYMENT environment variables"
            )

        logger.info("Using Azure OpenAI: %s, deployment: %s", azure_endpoint, azure_deployment)

        azure_client = AsyncAzureOpenAI(
            azure_endpoint=azure_endpoint,
            api_key=azure_key,
            api_version=os.environ.get("AZURE_OPENAI_API_VERSION", "2024-08-01-preview"),
        )
        return azure_deployment, azure_client

    model = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
    logger.info("Using OpenAI: model %s", model)
    return model, None


# =============================================================================
# Agent Instructions
# =============================================================================

QUESTION_GENERATOR_INSTRUCTIONS = f"""You are an empathetic AI interviewer for FairHire AI. Your goal is to conduct fair, adaptive job interviews.

## Guidelines
- If sentiment is ANXIOUS: Be extra encouraging, warm, and supportive. Use gentle language and tell them to take their time.
- If sentiment is CONFUSED: Simplify your question and make it clearer. Break it down into smaller parts.
- If sentiment is CONFIDENT: Acknowledge their confidence and ask more detailed follow-up questions.
- If sentiment is NEUTRAL: Ask standard professional questions.

The interview has {MAX_QUESTIONS} questions. Generate ONE contextual follow-up question based on the conversation so far. The question should:
1. Build naturally on what the candidate has already shared
2. Match the detected emotional state
3. Feel like a real, caring interviewer asking follow-ups
4. Be specific to their previous answers, not generic

Return ONLY the question text, nothing else."""


# =============================================================================
# Question Generator Class
# =============================================================================

class QuestionGenerator:
    """
    Generates sentiment-aware follow-up questions with an LLM.

    The scripted question for the same slot and sentiment is used as a
    topic hint and as the fallback whenever generation fails.

    Example:
        >>> generator = QuestionGenerator()
        >>> question = await generator.generate_async(
        ...     question_index=2,
        ...     sentiment=SentimentState.ANXIOUS,
        ...     conversation=manager.get_conversation(),
        ... )
    """

    def __init__(
        self,
        model: Optional[str] = None,
        azure_client: Optional[AsyncAzureOpenAI] = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        """
        Initialize the QuestionGenerator.

        Args:
            model: Model/deployment to use. If None, auto-detects from environment.
            azure_client: Optional Azure OpenAI client override.
            temperature: Sampling temperature for the question wording.

        Raises:
            ValueError: If Azure OpenAI is only partially configured.
        """
        default_model, default_azure_client = _get_openai_config()
        self.model = model or default_model
        self._azure_client = azure_client or default_azure_client

        if not self._azure_client and not os.environ.get("OPENAI_API_KEY"):
            logger.warning(
                "No OpenAI credentials configured. Question generation will fall back "
                "to the scripted questions."
            )

        agent_model: str | OpenAIChatCompletionsModel = self.model
        if self._azure_client:
            agent_model = OpenAIChatCompletionsModel(
                model=self.model,
                openai_client=self._azure_client,
            )

        self._agent = Agent(
            name="Adaptive Interviewer",
            instructions=QUESTION_GENERATOR_INSTRUCTIONS,
            model=agent_model,
            model_settings=ModelSettings(temperature=temperature),
        )

        provider_info = "Azure OpenAI" if self._azure_client else "OpenAI"
        logger.info("QuestionGenerator initialized with %s, model: %s", provider_info, self.model)

    def _build_prompt(
        self,
        question_index: int,
        sentiment: SentimentState,
        conversation: Sequence[dict[str, str]],
    ) -> str:
        """Build the per-turn prompt from sentiment, slot and conversation."""
        parts = [
            f"CURRENT SENTIMENT: {sentiment.value}",
            f"This is question {question_index + 1} of {MAX_QUESTIONS}.",
            f"Topic hint: {next_question(question_index, sentiment)}",
            "",
        ]

        if conversation:
            parts.append("## Conversation so far")
            for turn in conversation:
                label = "INTERVIEWER" if turn.get("role") == "assistant" else "CANDIDATE"
                parts.append(f"[{label}]: {turn.get('text', '')}")
            parts.append("")

        parts.append("Write the next question now.")
        return "\n".join(parts)

    async def generate_async(
        self,
        question_index: int,
        sentiment: SentimentState | str,
        conversation: Optional[Sequence[dict[str, str]]] = None,
    ) -> str:
        """
        Generate the next question asynchronously.

        Args:
            question_index: 0-based slot of the question being asked.
            sentiment: Sentiment of the candidate's latest answer.
            conversation: Prior turns as {"role", "text"} dicts.

        Returns:
            The generated question, or the scripted question when the
            slot is past the end of the script, the model returns nothing,
            or the call fails.
        """
        state = SentimentState.coerce(sentiment)
        scripted = next_question(question_index, state)
        if question_index >= MAX_QUESTIONS:
            return scripted

        prompt = self._build_prompt(question_index, state, conversation or [])
        logger.debug("Generating question %d with sentiment %s", question_index, state.value)

        try:
            result = await Runner.run(self._agent, prompt)
        except Exception as e:
            logger.error("Question generation failed: %s", e, exc_info=True)
            return scripted

        question = str(result.final_output or "").strip()
        if not question:
            logger.warning("Model returned an empty question, using scripted phrasing")
            return scripted

        logger.info("Generated question %d: %s", question_index, question[:100])
        return question

    def generate(
        self,
        question_index: int,
        sentiment: SentimentState | str,
        conversation: Optional[Sequence[dict[str, str]]] = None,
    ) -> str:
        """
        Generate the next question synchronously.

        Convenience wrapper that runs generate_async in a new event loop.
        Prefer generate_async inside async code.
        """
        return asyncio.run(
            self.generate_async(
                question_index=question_index,
                sentiment=sentiment,
                conversation=conversation,
            )
        )

    def as_provider(self) -> QuestionProvider:
        """Adapt this generator to InterviewSessionManager.submit_answer."""

        def provide(
            question_index: int,
            sentiment: SentimentState,
            messages: list[ChatMessage],
        ) -> Optional[str]:
            conversation = [{"role": m.role, "text": m.content} for m in messages]
            return self.generate(question_index, sentiment, conversation)

        return provide


# =============================================================================
# Factory Function
# =============================================================================

def create_question_generator(
    model: Optional[str] = None,
    azure_client: Optional[AsyncAzureOpenAI] = None,
) -> QuestionGenerator:
    """
    Factory function to create a configured QuestionGenerator.

    Automatically detects Azure OpenAI vs standard OpenAI based on environment.

    Args:
        model: Optional model override.
        azure_client: Optional Azure client override.

    Returns:
        Configured QuestionGenerator instance.
    """
    return QuestionGenerator(model=model, azure_client=azure_client)
