# src/quizsmith/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

Any valid LiteLLM model string works; these only exist for autocomplete.
"""


class ChatModels:
    """Chat models for quiz generation and refinement."""

    # Anthropic
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"

    # OpenAI
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_41 = "openai/gpt-4.1"

    # Google Gemini
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"
    GEMINI_25_PRO = "gemini/gemini-2.5-pro"


class EmbeddingModels:
    """Embedding models for question deduplication."""

    # Google Gemini
    GEMINI_004 = "gemini/text-embedding-004"
    GEMINI_EMBEDDING_001 = "gemini/gemini-embedding-001"

    # OpenAI
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"
