"""
Application services.

Exports:
  - SessionService: Chat session lifecycle
  - ChatService: Message send orchestration (retrieval, completion, titles)
  - DocumentService: Knowledge-base document library
"""

from solarchat.application.services.session_service import SessionService
from solarchat.application.services.chat_service import ChatService
from solarchat.application.services.document_service import DocumentService

__all__ = ["SessionService", "ChatService", "DocumentService"]
