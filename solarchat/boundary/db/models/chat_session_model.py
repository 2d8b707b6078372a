"""
Chat session ORM model.

Represents one conversation thread, addressed externally by an opaque
session identifier rather than the integer primary key.

Dependencies: sqlalchemy, solarchat.boundary.db.base
System role: Session persistence for conversation grouping
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from solarchat.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class ChatSessionModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Chat session ORM model.

    Messages reference the session through session_id, not the integer
    id. updated_at is touched on every message send so listing by
    updated_at surfaces the most recently active conversations first.

    Attributes:
        id: Integer primary key (auto-generated)
        session_id: Opaque external identifier, unique
        title: Optional display title, derived from the first user message
        is_active: Soft activity flag, defaults to True
        messages: Ordered ChatMessageModel rows (cascading delete)
        created_at: Session creation timestamp (UTC)
        updated_at: Last activity timestamp (UTC)
    """

    __tablename__ = "chat_sessions"

    session_id: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ChatMessageModel.id",
        passive_deletes=True,
        lazy="raise",
    )
