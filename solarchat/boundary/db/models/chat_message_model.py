"""
Chat message ORM model.

One user or assistant turn inside a chat session. Messages are
append-only and ordered by creation time.

Dependencies: sqlalchemy, solarchat.boundary.db.base
System role: Conversation log persistence
"""

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from solarchat.boundary.db.base import Base, CreatedAtMixin, IntegerIDMixin


class ChatMessageModel(Base, IntegerIDMixin, CreatedAtMixin):
    """
    Chat message ORM model.

    Attributes:
        id: Integer primary key, also the append-order tie-break
        session_id: Parent session's external identifier
        role: "user" or "assistant"
        content: Message text
        cited_documents: Document IDs whose chunks grounded an assistant
            reply, or None
        created_at: Append timestamp (UTC)
    """

    __tablename__ = "chat_messages"

    session_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("chat_sessions.session_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cited_documents: Mapped[list[int] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
    )

    session = relationship("ChatSessionModel", back_populates="messages", lazy="raise")
