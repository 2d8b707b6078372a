"""
Chat message CRUD operations.

Append-only access to the conversation log.

Dependencies: sqlalchemy, solarchat.boundary.db.models
System role: Conversation history persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.base_crud import BaseCRUD
from solarchat.boundary.db.models.chat_message_model import ChatMessageModel
from solarchat.models.chat import MessageRole


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    async def append(
        self,
        session: AsyncSession,
        session_id: str,
        role: MessageRole,
        content: str,
        cited_documents: list[int] | None = None,
    ) -> ChatMessageModel:
        """
        Append a message to a session's log.

        The caller is responsible for checking that the session exists.

        Args:
            session: Async database session
            session_id: Parent session identifier
            role: Author of the message
            content: Message text
            cited_documents: Grounding document IDs, None when not grounded

        Returns:
            The persisted ChatMessageModel
        """
        return await self.create(
            session,
            session_id=session_id,
            role=MessageRole(role).value,
            content=content,
            cited_documents=cited_documents or None,
        )

    async def get_by_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[ChatMessageModel]:
        """Retrieve a session's messages in append order."""
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at, ChatMessageModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chat_message_crud = ChatMessageCRUD()
