# src/quizsmith/providers/litellm/__init__.py
"""LiteLLM provider clients for Quizsmith.

Usage:
    from quizsmith.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.CLAUDE_SONNET_45)
"""

from quizsmith.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from quizsmith.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    "ChatModels",
    "EmbeddingModels",
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
