"""
Chat completion client.

Wraps a LangChain chat model (Anthropic Claude in production) behind a
single generate() call that takes the conversation history and optional
retrieved context and returns plain reply text.

Dependencies: langchain_core, langchain_anthropic, solarchat.core.chat_prompt
System role: Outbound text-completion adapter for chat replies
"""

import logging
import time
from collections.abc import Sequence

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel

from solarchat.configs.settings import Settings
from solarchat.core.chat_prompt import build_prompt_messages
from solarchat.core.exceptions import ConfigurationError, GenerationError
from solarchat.models.chat import ChatTurn

logger = logging.getLogger(__name__)

EMPTY_COMPLETION_REPLY = "I'm sorry, I couldn't process that request."


def extract_text(content: str | list) -> str:
    """
    Pull the text out of a chat model response.

    Anthropic responses are either a plain string or a list of content
    blocks; only text blocks are kept and concatenated in order.

    Args:
        content: AIMessage.content from the chat model

    Returns:
        str: Reply text, possibly empty
    """
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class CompletionClient:
    """
    Single-shot chat completion over a LangChain chat model.

    One request per call: no retries and no streaming. Any failure from
    the provider is logged with its real cause and surfaced to callers as
    GenerationError with a generic message.

    Usage:
        client = CompletionClient.from_settings(get_settings())
        reply = await client.generate(history, context="We offer ...")
    """

    def __init__(self, chat_model: BaseChatModel, model_id: str | None = None) -> None:
        """
        Initialize the client around a chat model.

        Args:
            chat_model: Any LangChain chat model
            model_id: Identifier reported in logs
        """
        self.chat_model = chat_model
        self.model_id = model_id or type(chat_model).__name__

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        """
        Build the production Anthropic client from settings.

        Args:
            settings: Application settings

        Returns:
            CompletionClient: Client bound to ChatAnthropic

        Raises:
            ConfigurationError: If ANTHROPIC_API_KEY is not configured
        """
        config = settings.anthropic
        if config.api_key is None or not config.api_key.get_secret_value():
            raise ConfigurationError(
                "ANTHROPIC_API_KEY is not set",
                details={"setting": "ANTHROPIC_API_KEY"},
            )

        model_kwargs = {
            "model": config.model,
            "max_tokens": config.max_tokens,
            "api_key": config.api_key,
            "timeout": config.timeout,
            "max_retries": 0,
        }
        if config.temperature is not None:
            model_kwargs["temperature"] = config.temperature

        chat_model = ChatAnthropic(**model_kwargs)
        logger.info(
            "Anthropic completion client initialized",
            extra={"model": config.model, "max_tokens": config.max_tokens},
        )
        return cls(chat_model=chat_model, model_id=config.model)

    async def generate(
        self,
        history: Sequence[ChatTurn],
        context: str | None = None,
    ) -> str:
        """
        Generate the assistant reply for a conversation.

        Args:
            history: Full ordered conversation, latest user message last
            context: Retrieved chunk text; selects the grounded system prompt

        Returns:
            str: Reply text, or a fixed apology when the model returns no text

        Raises:
            GenerationError: If the chat model call fails for any reason
        """
        messages = build_prompt_messages(history, context)
        start = time.perf_counter()

        try:
            response = await self.chat_model.ainvoke(messages)
        except Exception as e:
            logger.error(
                f"{__name__}:generate - Completion failed: {type(e).__name__}: {e}",
                extra={"model": self.model_id, "message_count": len(messages)},
            )
            raise GenerationError(
                details={"model": self.model_id, "error_type": type(e).__name__},
            ) from e

        text = extract_text(response.content)
        logger.info(
            f"{__name__}:generate - Completion received",
            extra={
                "model": self.model_id,
                "grounded": bool(context),
                "message_count": len(messages),
                "reply_chars": len(text),
                "elapsed_ms": round((time.perf_counter() - start) * 1000, 1),
            },
        )
        return text or EMPTY_COMPLETION_REPLY
