# src/quizsmith/providers/litellm/client.py
"""LiteLLM client implementations for LLM and embedding APIs."""

from typing import Any

import litellm

from quizsmith.providers.base import EmbeddingClient, LLMClient
from quizsmith.providers.litellm.models import ChatModels, EmbeddingModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    Supports any model available through LiteLLM (Anthropic, OpenAI, Gemini,
    Bedrock, etc.).

    Example:
        client = LiteLLMClient(model=ChatModels.CLAUDE_SONNET_45, num_retries=5)
        text = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.CLAUDE_SONNET_45,
        num_retries: int = 3,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically.
        """
        self.model = model
        self.num_retries = num_retries

    def _completion_kwargs(self, messages: list[dict], temperature: float | None) -> dict:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            kwargs["temperature"] = temperature
        return kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Example:
        client = LiteLLMEmbeddingClient(model=EmbeddingModels.GEMINI_004)
        vectors = client.embed(["What is X?", "How does X work?"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.GEMINI_004,
        num_retries: int = 3,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
            num_retries: Number of retries on rate limit errors.
        """
        self.model = model
        self.num_retries = num_retries

    @staticmethod
    def _ordered_vectors(response: Any) -> list[list[float]]:
        # Providers may return items out of order; "index" maps back to the input
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        response = litellm.embedding(
            model=self.model,
            input=texts,
            num_retries=self.num_retries,
        )
        return self._ordered_vectors(response)

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM (async)."""
        if not texts:
            return []

        response = await litellm.aembedding(
            model=self.model,
            input=texts,
            num_retries=self.num_retries,
        )
        return self._ordered_vectors(response)
