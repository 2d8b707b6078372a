"""
Database models package.

Exports:
  - ChatSessionModel: Chat session ORM model
  - ChatMessageModel: Chat message ORM model
  - RagDocumentModel: Knowledge-base document ORM model
  - RagChunkModel: Document chunk ORM model

Dependencies: sqlalchemy, solarchat.boundary.db.base
System role: Database model definitions for domain entities
"""

from solarchat.boundary.db.models.chat_session_model import ChatSessionModel
from solarchat.boundary.db.models.chat_message_model import ChatMessageModel
from solarchat.boundary.db.models.rag_document_model import RagDocumentModel
from solarchat.boundary.db.models.rag_chunk_model import RagChunkModel

__all__ = [
    "ChatSessionModel",
    "ChatMessageModel",
    "RagDocumentModel",
    "RagChunkModel",
]
