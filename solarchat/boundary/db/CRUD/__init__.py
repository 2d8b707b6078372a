"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from solarchat.boundary.db.CRUD import chat_session_crud, chat_message_crud

    session = await chat_session_crud.get_by_session_id(db, "abc123")
    history = await chat_message_crud.get_by_session(db, "abc123")
"""

from solarchat.boundary.db.CRUD.base_crud import BaseCRUD
from solarchat.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from solarchat.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from solarchat.boundary.db.CRUD.rag_document_crud import RagDocumentCRUD, rag_document_crud
from solarchat.boundary.db.CRUD.rag_chunk_crud import RagChunkCRUD, rag_chunk_crud

__all__ = [
    "BaseCRUD",
    "ChatSessionCRUD",
    "chat_session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
    "RagDocumentCRUD",
    "rag_document_crud",
    "RagChunkCRUD",
    "rag_chunk_crud",
]
