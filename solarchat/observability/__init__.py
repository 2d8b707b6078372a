"""
Observability package.

Exports:
  - configure_logging: Root logger setup with correlation IDs
  - CorrelationMiddleware, RequestLoggingMiddleware: HTTP middleware
"""

from solarchat.observability.logger import configure_logging
from solarchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = ["configure_logging", "CorrelationMiddleware", "RequestLoggingMiddleware"]
