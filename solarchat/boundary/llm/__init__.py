"""
Language model boundary package.

Exports:
  - CompletionClient: Single-shot chat completion over a LangChain chat model
"""

from solarchat.boundary.llm.completion_client import CompletionClient

__all__ = ["CompletionClient"]
