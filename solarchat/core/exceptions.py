"""
Exception hierarchy for the solar chat assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class SolarChatException(Exception):
    """Base exception for all solar chat assistant errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(SolarChatException):
    """Raised when request fields are missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(SolarChatException):
    """Base class for unknown session or document IDs."""

    pass


class SessionNotFoundError(NotFoundError):
    """Raised when a chat session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__("Chat session not found", details)


class DocumentNotFoundError(NotFoundError):
    """Raised when a RAG document cannot be found."""

    def __init__(self, document_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize document not found error.

        Args:
            document_id: ID of the missing document
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        self.document_id = document_id
        super().__init__("Document not found", details)


class GenerationError(SolarChatException):
    """Raised when the text-completion service fails to produce a reply."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        """
        Initialize generation error with the user-facing retry message.

        Args:
            details: Additional context (upstream error type, model)
        """
        super().__init__(
            "Failed to generate chat response. Please try again later.",
            details,
        )


class PersistenceError(SolarChatException):
    """Raised when a database operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            operation: Operation that failed (create_session, send_message, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ConfigurationError(SolarChatException):
    """Raised at startup when required configuration is missing."""

    pass
