"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from solarchat.configs.base import BaseSettings
from solarchat.configs.chat import ChatSettings
from solarchat.configs.database import DatabaseSettings
from solarchat.configs.llm import AnthropicSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    anthropic: AnthropicSettings = Field(default_factory=AnthropicSettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from solarchat.configs import get_settings
        settings = get_settings()
    """
    return Settings()
