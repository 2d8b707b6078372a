"""
Dependency injection container.

Factory functions for FastAPI dependencies. The completion client is
built once during application startup and stored on app.state.

Dependencies: solarchat.configs, solarchat.application, solarchat.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.application.services import ChatService, DocumentService, SessionService
from solarchat.boundary.db import get_async_db
from solarchat.boundary.llm import CompletionClient
from solarchat.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_completion_client(request: Request) -> CompletionClient:
    """Get the completion client created at application startup."""
    return request.app.state.completion_client


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    completion_client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        completion_client: Shared completion client
        settings: Application settings

    Returns:
        ChatService: Chat service instance
    """
    return ChatService(db=db, completion_client=completion_client, settings=settings.chat)


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> DocumentService:
    """Get document service instance."""
    return DocumentService(db=db, settings=settings.chat)
