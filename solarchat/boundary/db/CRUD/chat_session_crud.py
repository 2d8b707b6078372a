"""
Chat session CRUD operations.

Provides lookups by the external session identifier, recency-ordered
listing, activity touch and title updates for ChatSessionModel.

Dependencies: sqlalchemy, solarchat.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.base import utc_now
from solarchat.boundary.db.CRUD.base_crud import BaseCRUD
from solarchat.boundary.db.models.chat_message_model import ChatMessageModel
from solarchat.boundary.db.models.chat_session_model import ChatSessionModel


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """CRUD operations for ChatSessionModel."""

    def __init__(self) -> None:
        super().__init__(ChatSessionModel)

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> ChatSessionModel | None:
        """
        Retrieve a chat session by its external identifier.

        Args:
            session: Async database session
            session_id: Opaque session identifier

        Returns:
            ChatSessionModel if found, None otherwise
        """
        stmt = select(ChatSessionModel).where(ChatSessionModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_recent(self, session: AsyncSession) -> Sequence[ChatSessionModel]:
        """Retrieve all sessions, most recently updated first."""
        stmt = select(ChatSessionModel).order_by(
            ChatSessionModel.updated_at.desc(),
            ChatSessionModel.id.desc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def touch(
        self,
        session: AsyncSession,
        chat_session: ChatSessionModel,
    ) -> ChatSessionModel:
        """Mark a session as active now by bumping updated_at."""
        return await self.update_instance(session, chat_session, updated_at=utc_now())

    async def set_title(
        self,
        session: AsyncSession,
        chat_session: ChatSessionModel,
        title: str,
    ) -> ChatSessionModel:
        """Store a display title on the session."""
        return await self.update_instance(session, chat_session, title=title)

    async def delete_by_session_id(self, session: AsyncSession, session_id: str) -> bool:
        """
        Delete a session and all of its messages.

        Messages are removed explicitly so the outcome does not depend on
        the backend enforcing ON DELETE CASCADE.

        Args:
            session: Async database session
            session_id: Opaque session identifier

        Returns:
            True if the session existed and was deleted, False otherwise
        """
        await session.execute(
            delete(ChatMessageModel).where(ChatMessageModel.session_id == session_id)
        )
        result = await session.execute(
            delete(ChatSessionModel).where(ChatSessionModel.session_id == session_id)
        )
        return result.rowcount > 0


chat_session_crud = ChatSessionCRUD()
