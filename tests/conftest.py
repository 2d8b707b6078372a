"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database, chat model doubles, sample data
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage


@pytest.fixture
async def test_session_factory():
    """
    Create an in-memory SQLite database and a session factory bound to it.

    StaticPool keeps a single connection, so every session from the
    factory sees the same in-memory database.

    Yields:
        async_sessionmaker: Factory for AsyncSession objects
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from solarchat.boundary.db.base import Base
    import solarchat.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Provide a session on the in-memory test database.

    Yields:
        AsyncSession: Test database session, rolled back after the test
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def reply_text() -> str:
    """Canned assistant reply returned by the chat model double."""
    return "We offer several financing options, including zero-down plans."


@pytest.fixture
def mock_chat_model(reply_text: str) -> MagicMock:
    """
    Provide a chat model double whose ainvoke returns a fixed AIMessage.

    Returns:
        MagicMock: Object with an AsyncMock ainvoke
    """
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content=reply_text))
    return model


@pytest.fixture
def completion_client(mock_chat_model: MagicMock):
    """Provide a CompletionClient wrapping the chat model double."""
    from solarchat.boundary.llm.completion_client import CompletionClient

    return CompletionClient(chat_model=mock_chat_model, model_id="test-model")


@pytest.fixture
def financing_document_text() -> str:
    """Knowledge-base text about financing."""
    return "We offer zero-down financing and PACE financing for qualified properties."
