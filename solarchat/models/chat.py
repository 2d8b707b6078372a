"""
Chat domain models and schemas.

Request/response schemas for chat operations and the conversation turn
value object passed to prompt assembly.

Dependencies: pydantic
System role: Chat API contracts
"""

import enum
from datetime import datetime

from pydantic import BaseModel, Field

from solarchat.models.common import CamelModel


class MessageRole(str, enum.Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One role/content pair of a conversation history."""

    role: MessageRole
    content: str


class SendMessageRequest(CamelModel):
    """
    Request schema for sending a chat message.

    Fields are optional at the schema level so that missing values are
    reported by the chat service as validation errors.
    """

    session_id: str | None = Field(default=None, description="Target session ID")
    content: str | None = Field(default=None, description="User message text")
    use_rag: bool = Field(
        default=True,
        alias="useRAG",
        description="Retrieve document chunks as reply context",
    )


class ChatMessageResponse(CamelModel):
    """Single persisted chat message."""

    id: int
    session_id: str
    role: MessageRole
    content: str
    cited_documents: list[int] | None = Field(
        default=None,
        description="IDs of documents whose chunks informed the reply",
    )
    created_at: datetime
