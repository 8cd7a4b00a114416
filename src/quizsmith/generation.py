# src/quizsmith/generation.py
"""Single entry point for turning source text into a quiz."""

from __future__ import annotations

import asyncio
import logging
import random

from quizsmith.composer import QuizComposer
from quizsmith.models import QuestionSet
from quizsmith.providers.base import EmbeddingClient, LLMClient
from quizsmith.question_generator import SimilarityFilter, TaxonomyQuestionGenerator
from quizsmith.refiner import QuizRefiner
from quizsmith.settings import Settings
from quizsmith.taxonomy import Difficulty, TaxonomyCategory

logger = logging.getLogger(__name__)


class QuizPipeline:
    """Composer followed by refiner.

    Stateless between calls: one pipeline can serve concurrent requests.

    Example:
        pipeline = QuizPipeline.from_settings(Settings())
        quiz = await pipeline.agenerate("medium", 10, source_text)
        print(len(quiz.questions))
    """

    def __init__(self, composer: QuizComposer, refiner: QuizRefiner | None = None) -> None:
        """Create a pipeline.

        Args:
            composer: Produces the blended, deduplicated question set
            refiner: Optional second-pass editor. None skips refinement.
        """
        self.composer = composer
        self.refiner = refiner

    @classmethod
    def from_clients(
        cls,
        llm_client: LLMClient,
        embedding_client: EmbeddingClient,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> QuizPipeline:
        """Wire all components around the given provider clients."""
        settings = settings if settings is not None else Settings()
        generator = TaxonomyQuestionGenerator(
            llm_client=llm_client,
            temperatures=settings.category_temperatures,
            timeout=settings.llm_timeout,
        )
        composer = QuizComposer(
            question_generator=generator,
            embedding_client=embedding_client,
            similarity_filter=SimilarityFilter(threshold=settings.similarity_threshold),
            oversampling_factor=settings.oversampling_factor,
            oversampling_pad=settings.oversampling_pad,
            balance_rounding=settings.balance_rounding,
            rng=rng,
        )
        refiner = (
            QuizRefiner(
                llm_client=llm_client,
                temperature=settings.refine_temperature,
                timeout=settings.llm_timeout,
            )
            if settings.refine
            else None
        )
        return cls(composer=composer, refiner=refiner)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> QuizPipeline:
        """Build a pipeline backed by LiteLLM clients for the configured models."""
        from quizsmith.providers.litellm import LiteLLMClient, LiteLLMEmbeddingClient

        settings = settings if settings is not None else Settings()
        return cls.from_clients(
            llm_client=LiteLLMClient(model=settings.llm_model, num_retries=settings.num_retries),
            embedding_client=LiteLLMEmbeddingClient(
                model=settings.embedding_model, num_retries=settings.num_retries
            ),
            settings=settings,
        )

    async def agenerate(
        self,
        difficulty: Difficulty | str,
        total_count: int,
        source_text: str,
        taxonomy_override: TaxonomyCategory | str | None = None,
    ) -> QuestionSet:
        """Compose then refine a quiz (async).

        Raises:
            EmbeddingError: If deduplication cannot embed the generated questions.
        """
        questions = await self.composer.acompose(
            difficulty, total_count, source_text, taxonomy_override
        )
        if self.refiner is not None:
            questions = await self.refiner.arefine(questions)
        logger.info("Generated quiz with %d questions (requested %d)", len(questions), total_count)
        return QuestionSet(questions=questions)

    def generate(
        self,
        difficulty: Difficulty | str,
        total_count: int,
        source_text: str,
        taxonomy_override: TaxonomyCategory | str | None = None,
    ) -> QuestionSet:
        """Compose then refine a quiz (sync wrapper around agenerate)."""
        return asyncio.run(self.agenerate(difficulty, total_count, source_text, taxonomy_override))


async def agenerate_quiz_from_source(
    difficulty: Difficulty | str,
    total_count: int,
    source_text: str,
    taxonomy_override: TaxonomyCategory | str | None = None,
    *,
    pipeline: QuizPipeline | None = None,
    settings: Settings | None = None,
) -> QuestionSet:
    """Generate a quiz from source text (async).

    Args:
        difficulty: "easy", "medium" or "hard"
        total_count: Number of questions wanted
        source_text: Material to quiz on
        taxonomy_override: Single category replacing the difficulty blend
        pipeline: Pre-built pipeline. Built from ``settings`` when omitted.
        settings: Settings for the default LiteLLM-backed pipeline

    Returns:
        The final question set. It may hold fewer questions than requested.
    """
    pipeline = pipeline or QuizPipeline.from_settings(settings)
    return await pipeline.agenerate(difficulty, total_count, source_text, taxonomy_override)


def generate_quiz_from_source(
    difficulty: Difficulty | str,
    total_count: int,
    source_text: str,
    taxonomy_override: TaxonomyCategory | str | None = None,
    *,
    pipeline: QuizPipeline | None = None,
    settings: Settings | None = None,
) -> QuestionSet:
    """Generate a quiz from source text (sync)."""
    return asyncio.run(
        agenerate_quiz_from_source(
            difficulty,
            total_count,
            source_text,
            taxonomy_override,
            pipeline=pipeline,
            settings=settings,
        )
    )
