# src/quizsmith/providers/__init__.py
"""Provider implementations for Quizsmith.

This module contains LLM and embedding provider abstractions:
- LLMClient: Abstract base class for LLM completion providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations of both

Usage:
    from quizsmith.providers import LLMClient, EmbeddingClient
    from quizsmith.providers.litellm import LiteLLMClient, ChatModels
"""

from quizsmith.providers.base import EmbeddingClient, LLMClient
from quizsmith.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
