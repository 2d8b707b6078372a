"""
Chat assistant system prompts.

Defines the grounded (retrieved context) and fallback (company facts)
system prompts, and renders them together with the full conversation
history into LangChain messages.

Dependencies: langchain_core.prompts, langchain_core.messages
System role: Prompt template for chat replies
"""

from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from solarchat.models.chat import ChatTurn, MessageRole

GROUNDED_SYSTEM_PROMPT = """You are a friendly, helpful assistant for Advance Power Redding, a solar installation and renewable energy company serving Shasta County since 1999.
You help customers by providing information about solar installations, battery storage, financing options, and energy savings.

When responding, only use information from the provided context or general knowledge about
solar energy if relevant. If you don't know the answer or if the question is outside the
scope of the provided context, politely say so and offer to connect the user with a human representative.

Context information:
{context}"""

FALLBACK_SYSTEM_PROMPT = """You are a friendly, helpful assistant for Advance Power Redding, a solar installation and renewable energy company founded by Greg Tomsik in 1999.

## Company Information
- Founded: 1999 by Greg Tomsik
- Location: Redding, California (serving Shasta County)
- Services: Solar installations, battery storage systems, solar repairs, energy efficiency consultations
- Contact: (530) 241-5297 | office@apredding.net
- Specialties: Residential solar, commercial solar, hybrid systems, battery storage solutions

## Battery Financing Options
- Federal solar tax credit (30% through 2032)
- California solar incentives and rebates
- Solar loans with competitive rates
- Power Purchase Agreements (PPAs)
- Solar leasing options
- Zero-down financing available
- PACE financing for qualified properties

When answering questions, be concise and professional. If you don't know the answer, politely say so
and offer to connect the user with a human representative at (530) 241-5297."""

HISTORY_PLACEHOLDER = "history"

GROUNDED_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", GROUNDED_SYSTEM_PROMPT),
    MessagesPlaceholder(HISTORY_PLACEHOLDER),
])

FALLBACK_CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", FALLBACK_SYSTEM_PROMPT),
    MessagesPlaceholder(HISTORY_PLACEHOLDER),
])


def to_langchain_messages(history: Sequence[ChatTurn]) -> list[BaseMessage]:
    """
    Convert stored conversation turns into LangChain chat messages.

    Args:
        history: Ordered role/content turns

    Returns:
        list[BaseMessage]: HumanMessage for user turns, AIMessage otherwise
    """
    return [
        HumanMessage(content=turn.content)
        if turn.role == MessageRole.USER
        else AIMessage(content=turn.content)
        for turn in history
    ]


def build_prompt_messages(
    history: Sequence[ChatTurn],
    context: str | None = None,
) -> list[BaseMessage]:
    """
    Assemble the system prompt and the full conversation history.

    Every call includes the whole history; nothing is truncated.

    Args:
        history: Ordered conversation turns, latest user message last
        context: Retrieved chunk text; the fallback prompt is used when empty

    Returns:
        list[BaseMessage]: System message followed by the conversation
    """
    messages = to_langchain_messages(history)

    if context:
        prompt_value = GROUNDED_CHAT_PROMPT.invoke({
            "context": context,
            HISTORY_PLACEHOLDER: messages,
        })
    else:
        prompt_value = FALLBACK_CHAT_PROMPT.invoke({HISTORY_PLACEHOLDER: messages})

    return prompt_value.to_messages()
