"""
Chat service for conversational Q&A with keyword retrieval.

Orchestrates the full message flow: validation, user message persistence,
optional chunk retrieval, completion, assistant message persistence and
lazy session titling.

Dependencies: solarchat.boundary.db, solarchat.boundary.llm, solarchat.core.retriever
System role: Chat service orchestration layer
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.chat_message_crud import chat_message_crud
from solarchat.boundary.db.CRUD.chat_session_crud import chat_session_crud
from solarchat.boundary.db.CRUD.rag_chunk_crud import rag_chunk_crud
from solarchat.boundary.db.errors import translate_db_errors
from solarchat.boundary.db.models.chat_message_model import ChatMessageModel
from solarchat.boundary.llm.completion_client import CompletionClient
from solarchat.configs.chat import ChatSettings
from solarchat.core.exceptions import SessionNotFoundError, ValidationError
from solarchat.core.retriever import rank_chunks
from solarchat.models.chat import ChatTurn, MessageRole

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"
TITLE_ELLIPSIS = "..."
# History length (user message included) up to which a missing title is filled in.
TITLE_HISTORY_LIMIT = 2


@dataclass
class RetrievedContext:
    """Chunk text selected for a reply and the documents it came from."""

    text: str = ""
    document_ids: list[int] = field(default_factory=list)


def derive_session_title(content: str, max_length: int = 50) -> str:
    """
    Derive a session title from the first user message.

    Args:
        content: User message text
        max_length: Longest title kept verbatim

    Returns:
        str: The message itself, or its first max_length - 3 characters plus "..."
    """
    if len(content) <= max_length:
        return content
    return content[: max_length - len(TITLE_ELLIPSIS)] + TITLE_ELLIPSIS


def _require_text(value: str | None, field_name: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required", field=field_name)
    return value


class ChatService:
    """
    Chat service for conversational Q&A.

    Coordinates session validation, history retrieval, keyword retrieval,
    completion and message persistence for multi-turn conversations.
    """

    def __init__(
        self,
        db: AsyncSession,
        completion_client: CompletionClient,
        settings: ChatSettings | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations
            completion_client: Client producing assistant replies
            settings: Retrieval and titling knobs (defaults when omitted)
        """
        self.db = db
        self.completion_client = completion_client
        self.settings = settings or ChatSettings()

    async def send_message(
        self,
        session_id: str | None,
        content: str | None,
        use_rag: bool = True,
    ) -> ChatMessageModel:
        """
        Process one user message through the full conversation flow.

        Flow:
        1. Validate session_id and content
        2. Load the session (no auto-create)
        3. Touch the session and persist the user message
        4. Load the full ordered history
        5. Optionally retrieve the best matching chunks as context
        6. Generate the reply
        7. Persist the assistant message with cited document IDs
        8. Title an untitled session from its first message

        The user message stays persisted when generation fails.

        Args:
            session_id: Target session identifier
            content: User message text
            use_rag: Whether to ground the reply in stored documents

        Returns:
            ChatMessageModel: The persisted assistant message

        Raises:
            ValidationError: If session_id or content is missing; nothing is persisted
            SessionNotFoundError: If the session does not exist
            GenerationError: If the completion call fails
            PersistenceError: If a database write fails
        """
        session_id = _require_text(session_id, "sessionId", "Session ID")
        content = _require_text(content, "content", "Message content")

        chat_session = await chat_session_crud.get_by_session_id(self.db, session_id)
        if chat_session is None:
            raise SessionNotFoundError(session_id)

        async with translate_db_errors(self.db, "save_user_message"):
            await chat_session_crud.touch(self.db, chat_session)
            await chat_message_crud.append(
                self.db,
                session_id=session_id,
                role=MessageRole.USER,
                content=content,
            )
            await self.db.commit()

        previous_messages = await chat_message_crud.get_by_session(self.db, session_id)
        history = self.to_history(previous_messages)

        retrieved = RetrievedContext()
        if use_rag:
            retrieved = await self._retrieve_context(content)

        logger.info(
            "Generating chat reply",
            extra={
                "session_id": session_id,
                "history_length": len(history),
                "grounded": bool(retrieved.text),
            },
        )
        reply = await self.completion_client.generate(history, retrieved.text or None)

        async with translate_db_errors(self.db, "save_assistant_message"):
            assistant_message = await chat_message_crud.append(
                self.db,
                session_id=session_id,
                role=MessageRole.ASSISTANT,
                content=reply,
                cited_documents=retrieved.document_ids or None,
            )
            await self.db.commit()

        if not chat_session.title and len(previous_messages) <= TITLE_HISTORY_LIMIT:
            title = derive_session_title(content, self.settings.title_max_length)
            async with translate_db_errors(self.db, "set_session_title"):
                await chat_session_crud.set_title(self.db, chat_session, title)
                await self.db.commit()
            logger.info("Session titled", extra={"session_id": session_id, "title": title})

        return assistant_message

    async def _retrieve_context(self, query: str) -> RetrievedContext:
        """
        Select the best matching chunks across all documents.

        Args:
            query: User message used as the search query

        Returns:
            RetrievedContext: Joined chunk text in rank order and the distinct
                parent document IDs in first-cited order; empty when nothing matches
        """
        candidates = await rag_chunk_crud.get_all_candidates(self.db)
        if not candidates:
            return RetrievedContext()

        ranked_ids = rank_chunks(query, candidates, top_k=self.settings.rag_top_k)
        by_id = {candidate.id: candidate for candidate in candidates}
        selected = [by_id[chunk_id] for chunk_id in ranked_ids]

        document_ids: list[int] = []
        for chunk in selected:
            if chunk.document_id not in document_ids:
                document_ids.append(chunk.document_id)

        logger.info(
            "Retrieved context chunks",
            extra={
                "candidates": len(candidates),
                "chunk_ids": ranked_ids,
                "document_ids": document_ids,
            },
        )
        return RetrievedContext(
            text=CONTEXT_SEPARATOR.join(chunk.content for chunk in selected),
            document_ids=document_ids,
        )

    @staticmethod
    def to_history(messages: Sequence[ChatMessageModel]) -> list[ChatTurn]:
        """Convert stored messages into role/content turns."""
        return [
            ChatTurn(role=MessageRole(message.role), content=message.content)
            for message in messages
        ]
