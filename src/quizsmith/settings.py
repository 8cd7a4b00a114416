# src/quizsmith/settings.py
"""Behavioral settings for Quizsmith.

Settings are passed programmatically - the library does not read from
environment variables. The CLI (and any other application layer) reads
config files and env vars through ``quizsmith.config`` and passes the
resulting Settings explicitly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from quizsmith.providers.litellm.models import ChatModels, EmbeddingModels
from quizsmith.taxonomy import TaxonomyCategory


class Settings(BaseModel):
    """Behavioral settings for quiz generation.

    Example:
        settings = Settings(similarity_threshold=0.9, refine=False)
    """

    # Providers
    llm_model: str = ChatModels.CLAUDE_SONNET_45
    embedding_model: str = EmbeddingModels.GEMINI_004
    num_retries: int = 5

    # Oversampling: requested = ceil(needed * factor) + pad
    oversampling_factor: float = Field(default=1.5, ge=1.0)
    oversampling_pad: int = Field(default=2, ge=0)

    # Use largest-remainder allocation so per-category counts sum to the total
    balance_rounding: bool = False

    # Deduplication
    similarity_threshold: float = Field(default=0.95, gt=0.0, le=1.0)

    # Temperatures (categories not listed use the taxonomy defaults)
    category_temperatures: dict[TaxonomyCategory, float] = Field(default_factory=dict)
    refine_temperature: float = 0.2

    # Refinement pass
    refine: bool = True

    # Per-LLM-call timeout in seconds (None disables)
    llm_timeout: float | None = Field(default=120.0, gt=0.0)

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with the given fields replaced (validated)."""
        data = self.model_dump()
        data.update(overrides)
        return Settings(**data)
