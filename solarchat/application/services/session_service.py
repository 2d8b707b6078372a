"""
Session service orchestrator.

Coordinates chat session lifecycle operations.

Dependencies: solarchat.boundary.db.CRUD, solarchat.boundary.db.models
System role: Session use case orchestration
"""

import logging
import uuid
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.chat_message_crud import chat_message_crud
from solarchat.boundary.db.CRUD.chat_session_crud import chat_session_crud
from solarchat.boundary.db.errors import translate_db_errors
from solarchat.boundary.db.models.chat_message_model import ChatMessageModel
from solarchat.boundary.db.models.chat_session_model import ChatSessionModel
from solarchat.core.exceptions import SessionNotFoundError, ValidationError

logger = logging.getLogger(__name__)

SESSION_ID_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 255


def generate_session_id() -> str:
    """Generate an opaque, collision-resistant session identifier."""
    return uuid.uuid4().hex


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_session(
        self,
        session_id: str | None = None,
        title: str | None = None,
    ) -> ChatSessionModel:
        """
        Open a new chat session.

        Args:
            session_id: Client-supplied identifier; generated when omitted or blank
            title: Optional initial title

        Returns:
            ChatSessionModel: The persisted session

        Raises:
            ValidationError: If either field is too long
            PersistenceError: If the insert fails, including ID collisions
        """
        if session_id is None or not session_id.strip():
            session_id = generate_session_id()
        elif len(session_id) > SESSION_ID_MAX_LENGTH:
            raise ValidationError(
                f"Session ID must be at most {SESSION_ID_MAX_LENGTH} characters",
                field="sessionId",
            )

        if title is not None and len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title must be at most {TITLE_MAX_LENGTH} characters",
                field="title",
            )

        async with translate_db_errors(self.db, "create_session"):
            chat_session = await chat_session_crud.create(
                self.db,
                session_id=session_id,
                title=title,
            )
            await self.db.commit()

        logger.info("Chat session created", extra={"session_id": session_id})
        return chat_session

    async def list_sessions(self) -> Sequence[ChatSessionModel]:
        """
        List all sessions, most recently updated first.

        Returns:
            Sequence[ChatSessionModel]: Sessions without their messages
        """
        return await chat_session_crud.get_all_recent(self.db)

    async def get_session(
        self,
        session_id: str,
    ) -> tuple[ChatSessionModel, Sequence[ChatMessageModel]]:
        """
        Get a session together with its messages in append order.

        Args:
            session_id: Opaque session identifier

        Returns:
            tuple: (session, messages)

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        chat_session = await chat_session_crud.get_by_session_id(self.db, session_id)
        if chat_session is None:
            raise SessionNotFoundError(session_id)

        messages = await chat_message_crud.get_by_session(self.db, session_id)
        return chat_session, messages

    async def delete_session(self, session_id: str) -> None:
        """
        Delete a session and every message in it.

        Args:
            session_id: Opaque session identifier

        Raises:
            SessionNotFoundError: If the session does not exist
            PersistenceError: If the delete fails
        """
        async with translate_db_errors(self.db, "delete_session"):
            deleted = await chat_session_crud.delete_by_session_id(self.db, session_id)
            if not deleted:
                await self.db.rollback()
                raise SessionNotFoundError(session_id)
            await self.db.commit()

        logger.info("Chat session deleted", extra={"session_id": session_id})
