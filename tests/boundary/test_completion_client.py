"""
Test suite for CompletionClient.

Tests prompt hand-off to the chat model, text extraction, the empty
reply fallback, error wrapping and settings-based construction.

System role: Verification of the text-completion adapter
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage, SystemMessage
from pydantic import SecretStr

from solarchat.boundary.llm.completion_client import (
    EMPTY_COMPLETION_REPLY,
    CompletionClient,
    extract_text,
)
from solarchat.configs.llm import AnthropicSettings
from solarchat.configs.settings import Settings
from solarchat.core.chat_prompt import FALLBACK_SYSTEM_PROMPT
from solarchat.core.exceptions import ConfigurationError, GenerationError
from solarchat.models.chat import ChatTurn, MessageRole


@pytest.fixture
def history() -> list[ChatTurn]:
    """Provide a one-turn conversation."""
    return [ChatTurn(role=MessageRole.USER, content="What financing options do you have?")]


class TestGenerate:
    """Test suite for CompletionClient.generate."""

    async def test_should_return_reply_text(
        self,
        completion_client: CompletionClient,
        history: list[ChatTurn],
        reply_text: str,
    ) -> None:
        """Test the model's string content is returned."""
        assert await completion_client.generate(history) == reply_text

    async def test_should_send_system_prompt_and_history(
        self,
        completion_client: CompletionClient,
        mock_chat_model: MagicMock,
        history: list[ChatTurn],
    ) -> None:
        """Test the model receives the assembled prompt."""
        # Act
        await completion_client.generate(history)

        # Assert
        messages = mock_chat_model.ainvoke.call_args.args[0]
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == FALLBACK_SYSTEM_PROMPT
        assert messages[1].content == "What financing options do you have?"

    async def test_should_use_grounded_prompt_with_context(
        self,
        completion_client: CompletionClient,
        mock_chat_model: MagicMock,
        history: list[ChatTurn],
    ) -> None:
        """Test context switches to the grounded system prompt."""
        await completion_client.generate(history, context="PACE financing is available.")

        messages = mock_chat_model.ainvoke.call_args.args[0]
        assert "PACE financing is available." in messages[0].content

    async def test_empty_completion_should_return_apology(
        self,
        mock_chat_model: MagicMock,
        history: list[ChatTurn],
    ) -> None:
        """Test an empty reply is replaced by the fixed apology."""
        # Arrange
        mock_chat_model.ainvoke.return_value = AIMessage(content="")
        client = CompletionClient(chat_model=mock_chat_model)

        # Act & Assert
        assert await client.generate(history) == EMPTY_COMPLETION_REPLY

    async def test_model_failure_should_raise_generation_error(
        self,
        mock_chat_model: MagicMock,
        history: list[ChatTurn],
    ) -> None:
        """Test upstream errors surface as GenerationError with a generic message."""
        # Arrange
        mock_chat_model.ainvoke = AsyncMock(side_effect=RuntimeError("rate limited"))
        client = CompletionClient(chat_model=mock_chat_model)

        # Act & Assert
        with pytest.raises(GenerationError) as exc_info:
            await client.generate(history)

        assert exc_info.value.message == (
            "Failed to generate chat response. Please try again later."
        )
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        mock_chat_model.ainvoke.assert_awaited_once()


class TestExtractText:
    """Test suite for extract_text."""

    def test_should_return_plain_strings_unchanged(self) -> None:
        """Test string content passes through."""
        assert extract_text("Hello") == "Hello"

    def test_should_join_text_blocks_only(self) -> None:
        """Test non-text blocks are ignored."""
        content = [
            {"type": "text", "text": "Solar "},
            {"type": "tool_use", "id": "x", "name": "lookup", "input": {}},
            {"type": "text", "text": "works."},
        ]

        assert extract_text(content) == "Solar works."


class TestFromSettings:
    """Test suite for CompletionClient.from_settings."""

    def test_missing_api_key_should_raise_configuration_error(self) -> None:
        """Test startup fails fast without credentials."""
        settings = Settings(anthropic=AnthropicSettings(api_key=None))

        with pytest.raises(ConfigurationError):
            CompletionClient.from_settings(settings)

    def test_should_build_anthropic_model_from_settings(self) -> None:
        """Test model name, token limit and retry policy come from settings."""
        # Arrange
        settings = Settings(
            anthropic=AnthropicSettings(
                api_key=SecretStr("sk-test"),
                model="claude-3-7-sonnet-20250219",
                max_tokens=2048,
            )
        )

        # Act
        client = CompletionClient.from_settings(settings)

        # Assert
        assert client.model_id == "claude-3-7-sonnet-20250219"
        assert client.chat_model.model == "claude-3-7-sonnet-20250219"
        assert client.chat_model.max_tokens == 2048
        assert client.chat_model.max_retries == 0
