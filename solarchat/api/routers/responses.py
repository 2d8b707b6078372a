"""
Response mapping utilities.

Transforms ORM models into Pydantic response models.
Centralizes response construction logic.

Dependencies: solarchat.models, solarchat.boundary.db.models
System role: API response transformation
"""

from typing import Sequence

from solarchat.boundary.db.models import (
    ChatMessageModel,
    ChatSessionModel,
    RagChunkModel,
    RagDocumentModel,
)
from solarchat.models.chat import ChatMessageResponse, MessageRole
from solarchat.models.document import (
    ChunkResponse,
    DocumentDetailResponse,
    DocumentResponse,
)
from solarchat.models.session import SessionDetailResponse, SessionResponse


def map_session_to_response(chat_session: ChatSessionModel) -> SessionResponse:
    """Transform a session row into SessionResponse."""
    return SessionResponse(
        id=chat_session.id,
        session_id=chat_session.session_id,
        title=chat_session.title,
        is_active=chat_session.is_active,
        created_at=chat_session.created_at,
        updated_at=chat_session.updated_at,
    )


def map_message_to_response(message: ChatMessageModel) -> ChatMessageResponse:
    """Transform a message row into ChatMessageResponse."""
    return ChatMessageResponse(
        id=message.id,
        session_id=message.session_id,
        role=MessageRole(message.role),
        content=message.content,
        cited_documents=message.cited_documents or None,
        created_at=message.created_at,
    )


def map_session_detail_to_response(
    chat_session: ChatSessionModel,
    messages: Sequence[ChatMessageModel],
) -> SessionDetailResponse:
    """
    Transform a session and its messages into SessionDetailResponse.

    Args:
        chat_session: Session row
        messages: Message rows in append order

    Returns:
        SessionDetailResponse: Session fields plus messages
    """
    session_response = map_session_to_response(chat_session)
    return SessionDetailResponse(
        **session_response.model_dump(),
        messages=[map_message_to_response(message) for message in messages],
    )


def map_document_to_response(document: RagDocumentModel) -> DocumentResponse:
    """Transform a document row into DocumentResponse."""
    return DocumentResponse(
        id=document.id,
        title=document.title,
        content=document.content,
        source=document.source,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def map_chunk_to_response(chunk: RagChunkModel) -> ChunkResponse:
    """Transform a chunk row into ChunkResponse."""
    return ChunkResponse(
        id=chunk.id,
        document_id=chunk.document_id,
        content=chunk.content,
        chunk_index=chunk.chunk_index,
        metadata=chunk.chunk_metadata or {},
    )


def map_document_detail_to_response(
    document: RagDocumentModel,
    chunks: Sequence[RagChunkModel],
) -> DocumentDetailResponse:
    """Transform a document and its chunks into DocumentDetailResponse."""
    document_response = map_document_to_response(document)
    return DocumentDetailResponse(
        **document_response.model_dump(),
        chunks=[map_chunk_to_response(chunk) for chunk in chunks],
    )
