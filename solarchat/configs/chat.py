"""
Chat and retrieval configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for chunking, retrieval, and session titles
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Chat orchestration and document chunking configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    rag_top_k: int = Field(default=3, description="Number of chunks used as reply context")
    max_chunk_size: int = Field(
        default=1000,
        description="Maximum characters per document chunk",
    )
    title_max_length: int = Field(
        default=50,
        description="Maximum characters of a session title derived from the first message",
    )
