"""
LLM provider configuration settings.

Settings for the Anthropic text-completion service used for chat replies.
The API key is optional here so that tooling can import settings without
credentials; the completion client refuses to start without it.

Dependencies: pydantic, pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnthropicSettings(BaseSettings):
    """Anthropic chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANTHROPIC_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="Anthropic API key (ANTHROPIC_API_KEY), required at startup",
    )
    model: str = Field(
        default="claude-3-7-sonnet-20250219",
        description="Anthropic model identifier",
    )
    max_tokens: int = Field(default=2048, description="Maximum tokens per completion")
    temperature: float | None = Field(
        default=None,
        description="Sampling temperature (provider default when unset)",
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (no timeout when unset)",
    )
