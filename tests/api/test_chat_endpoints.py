"""
Test suite for the chat router.

Exercises routes with mocked services injected through
app.dependency_overrides.

System role: Verification of chat HTTP API
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from solarchat.api.deps import get_chat_service, get_session_service
from solarchat.boundary.db.models import ChatMessageModel, ChatSessionModel
from solarchat.core.exceptions import (
    GenerationError,
    PersistenceError,
    SessionNotFoundError,
    ValidationError,
)
from solarchat.main import create_app

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_session_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(mock_session_service: AsyncMock, mock_chat_service: AsyncMock) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_session_service] = lambda: mock_session_service
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    return TestClient(app)


def _session(session_id: str = "abc123", title: str | None = None) -> ChatSessionModel:
    return ChatSessionModel(
        id=1,
        session_id=session_id,
        title=title,
        is_active=True,
        created_at=NOW,
        updated_at=NOW,
    )


def _message(
    role: str,
    content: str,
    message_id: int = 1,
    cited_documents: list[int] | None = None,
) -> ChatMessageModel:
    return ChatMessageModel(
        id=message_id,
        session_id="abc123",
        role=role,
        content=content,
        cited_documents=cited_documents,
        created_at=NOW,
    )


class TestSessionRoutes:
    """Test suite for /api/chat/sessions."""

    def test_create_session_should_return_201_with_camel_case_body(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        # Arrange
        mock_session_service.create_session.return_value = _session()

        # Act
        response = client.post("/api/chat/sessions", json={"sessionId": "abc123"})

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["sessionId"] == "abc123"
        assert data["isActive"] is True
        assert data["title"] is None
        assert "createdAt" in data and "updatedAt" in data
        mock_session_service.create_session.assert_awaited_once_with(
            session_id="abc123", title=None
        )

    def test_create_session_without_body_should_generate_id(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.create_session.return_value = _session("generated")

        response = client.post("/api/chat/sessions")

        assert response.status_code == 201
        mock_session_service.create_session.assert_awaited_once_with(session_id=None, title=None)

    def test_create_session_invalid_should_return_400(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.create_session.side_effect = ValidationError(
            "Session ID must be at most 255 characters", field="sessionId"
        )

        response = client.post("/api/chat/sessions", json={"sessionId": "x" * 256})

        assert response.status_code == 400
        assert response.json() == {"detail": "Session ID must be at most 255 characters"}

    def test_create_session_duplicate_should_return_500(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.create_session.side_effect = PersistenceError(
            "Failed to save data: conflicting record", operation="create_session"
        )

        response = client.post("/api/chat/sessions", json={"sessionId": "dup"})

        assert response.status_code == 500

    def test_list_sessions_should_preserve_service_order(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.list_sessions.return_value = [_session("newer"), _session("older")]

        response = client.get("/api/chat/sessions")

        assert response.status_code == 200
        assert [s["sessionId"] for s in response.json()] == ["newer", "older"]

    def test_get_session_should_include_messages(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        # Arrange
        mock_session_service.get_session.return_value = (
            _session(title="Financing"),
            [
                _message("user", "Tell me about financing", 1),
                _message("assistant", "We offer PACE financing.", 2, cited_documents=[7]),
            ],
        )

        # Act
        response = client.get("/api/chat/sessions/abc123")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Financing"
        assert [m["role"] for m in data["messages"]] == ["user", "assistant"]
        assert data["messages"][0]["citedDocuments"] is None
        assert data["messages"][1]["citedDocuments"] == [7]

    def test_get_unknown_session_should_return_404(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.get_session.side_effect = SessionNotFoundError("does-not-exist")

        response = client.get("/api/chat/sessions/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"detail": "Chat session not found"}

    def test_delete_session_should_confirm(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.delete_session.return_value = None

        response = client.delete("/api/chat/sessions/abc123")

        assert response.status_code == 200
        assert response.json() == {"message": "Chat session deleted successfully"}
        mock_session_service.delete_session.assert_awaited_once_with("abc123")

    def test_delete_unknown_session_should_return_404(
        self, client: TestClient, mock_session_service: AsyncMock
    ) -> None:
        mock_session_service.delete_session.side_effect = SessionNotFoundError("nope")

        response = client.delete("/api/chat/sessions/nope")

        assert response.status_code == 404


class TestMessageRoute:
    """Test suite for POST /api/chat/messages."""

    def test_send_message_should_return_assistant_message(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        # Arrange
        mock_chat_service.send_message.return_value = _message(
            "assistant", "We offer zero-down financing.", 2, cited_documents=[3]
        )

        # Act
        response = client.post(
            "/api/chat/messages",
            json={"sessionId": "abc123", "content": "Tell me about financing"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "assistant"
        assert data["citedDocuments"] == [3]
        assert data["sessionId"] == "abc123"
        mock_chat_service.send_message.assert_awaited_once_with(
            session_id="abc123",
            content="Tell me about financing",
            use_rag=True,
        )

    def test_use_rag_flag_should_be_forwarded(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        mock_chat_service.send_message.return_value = _message("assistant", "Hi", 2)

        client.post(
            "/api/chat/messages",
            json={"sessionId": "abc123", "content": "Hi", "useRAG": False},
        )

        assert mock_chat_service.send_message.await_args.kwargs["use_rag"] is False

    def test_missing_content_should_return_400(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        mock_chat_service.send_message.side_effect = ValidationError(
            "Message content is required", field="content"
        )

        response = client.post("/api/chat/messages", json={"sessionId": "abc123"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Message content is required"}

    def test_wrong_json_type_should_return_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/chat/messages",
            json={"sessionId": "abc123", "content": ["not", "a", "string"]},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid request")

    def test_unknown_session_should_return_404(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        mock_chat_service.send_message.side_effect = SessionNotFoundError("nope")

        response = client.post("/api/chat/messages", json={"sessionId": "nope", "content": "Hi"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Chat session not found"}

    def test_generation_failure_should_return_500_with_generic_message(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        mock_chat_service.send_message.side_effect = GenerationError(
            details={"error_type": "APIConnectionError"}
        )

        response = client.post("/api/chat/messages", json={"sessionId": "abc123", "content": "Hi"})

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Failed to generate chat response. Please try again later."
        }

    def test_unexpected_error_should_not_leak_internals(
        self, client: TestClient, mock_chat_service: AsyncMock
    ) -> None:
        mock_chat_service.send_message.side_effect = RuntimeError("secret stack detail")

        response = client.post("/api/chat/messages", json={"sessionId": "abc123", "content": "Hi"})

        assert response.status_code == 500
        assert "secret" not in response.json()["detail"]
