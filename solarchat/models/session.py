"""
Session domain models and schemas.

Request/response schemas for chat session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime

from pydantic import Field

from solarchat.models.chat import ChatMessageResponse
from solarchat.models.common import CamelModel


class CreateSessionRequest(CamelModel):
    """Request schema for opening a chat session."""

    session_id: str | None = Field(
        default=None,
        description="Client-generated opaque session ID (generated when omitted)",
    )
    title: str | None = Field(default=None, description="Optional initial title")


class SessionResponse(CamelModel):
    """Response schema for session operations."""

    id: int
    session_id: str
    title: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class SessionDetailResponse(SessionResponse):
    """Session with its messages in append order."""

    messages: list[ChatMessageResponse] = Field(default_factory=list)
