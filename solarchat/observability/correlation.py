"""
Correlation ID context manager.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar, Token

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None or empty)

    Returns:
        Token: Reset token for restoring the previous value
    """
    return correlation_id_ctx.set(correlation_id or uuid.uuid4().hex)


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID, empty outside a request
    """
    return correlation_id_ctx.get()


def clear_correlation_id(token: Token[str] | None = None) -> None:
    """
    Clear correlation ID from context.

    Args:
        token: Token from set_correlation_id; restores the previous value when given
    """
    if token is not None:
        correlation_id_ctx.reset(token)
    else:
        correlation_id_ctx.set("")
