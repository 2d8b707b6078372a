"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_completion_client,
    get_document_service,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_chat_service",
    "get_completion_client",
    "get_document_service",
    "get_session_service",
    "get_settings_dependency",
]
