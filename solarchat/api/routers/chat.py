"""
Chat API endpoints.

Routes:
- POST /chat/sessions - Open a chat session
- GET /chat/sessions - List sessions, most recently active first
- GET /chat/sessions/{session_id} - Session with its messages
- DELETE /chat/sessions/{session_id} - Delete session and messages
- POST /chat/messages - Send a user message and get the assistant reply

Dependencies: solarchat.application.services, solarchat.models
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from solarchat.api.deps import get_chat_service, get_session_service
from solarchat.api.routers.error_handling import handle_api_errors
from solarchat.api.routers.responses import (
    map_message_to_response,
    map_session_detail_to_response,
    map_session_to_response,
)
from solarchat.application.services.chat_service import ChatService
from solarchat.application.services.session_service import SessionService
from solarchat.models.chat import ChatMessageResponse, SendMessageRequest
from solarchat.models.common import MessageResponse
from solarchat.models.session import (
    CreateSessionRequest,
    SessionDetailResponse,
    SessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_api_errors
async def create_session(
    request: CreateSessionRequest | None = None,
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Open a chat session.

    Args:
        request: Optional sessionId and title; the body may be omitted
        session_service: Injected SessionService

    Returns:
        SessionResponse: Created session

    Raises:
        HTTPException(400): Invalid session ID or title
        HTTPException(500): Creation failed (including duplicate session ID)
    """
    request = request or CreateSessionRequest()
    chat_session = await session_service.create_session(
        session_id=request.session_id,
        title=request.title,
    )
    return map_session_to_response(chat_session)


@router.get("/sessions", response_model=list[SessionResponse])
@handle_api_errors
async def list_sessions(
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """List all sessions, most recently updated first."""
    sessions = await session_service.list_sessions()
    return [map_session_to_response(chat_session) for chat_session in sessions]


@router.get("/sessions/{session_id}", response_model=SessionDetailResponse)
@handle_api_errors
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> SessionDetailResponse:
    """
    Get a session and its messages in append order.

    Raises:
        HTTPException(404): Session not found
    """
    chat_session, messages = await session_service.get_session(session_id)
    return map_session_detail_to_response(chat_session, messages)


@router.delete("/sessions/{session_id}", response_model=MessageResponse)
@handle_api_errors
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Delete a session and all of its messages.

    Raises:
        HTTPException(404): Session not found
    """
    await session_service.delete_session(session_id)
    return MessageResponse(message="Chat session deleted successfully")


@router.post("/messages", response_model=ChatMessageResponse)
@handle_api_errors
async def send_message(
    request: SendMessageRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatMessageResponse:
    """
    Send a user message and return the persisted assistant reply.

    Args:
        request: sessionId, content and optional useRAG flag (default true)
        chat_service: Injected ChatService

    Returns:
        ChatMessageResponse: Assistant message with citedDocuments

    Raises:
        HTTPException(400): Missing sessionId or content
        HTTPException(404): Session not found
        HTTPException(500): Reply generation or persistence failed
    """
    assistant_message = await chat_service.send_message(
        session_id=request.session_id,
        content=request.content,
        use_rag=request.use_rag,
    )
    return map_message_to_response(assistant_message)
