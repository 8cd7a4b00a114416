# src/quizsmith/composer.py
"""Quiz composition: blend, oversample, deduplicate, truncate and shuffle.

Pipeline per request:
1. Resolve the active categories (difficulty blend or a single override)
2. Compute how many questions each category needs
3. Oversample: request ceil(needed * factor) + pad from each category
4. Generate all categories concurrently
5. Per category: embed, drop near-duplicates, keep the first ``needed``
6. Concatenate and shuffle

The result may be shorter than requested when a category under-produces.
That is an expected outcome, not an error.
"""

from __future__ import annotations

import asyncio
import logging
import math
import random
from dataclasses import dataclass

from quizsmith.exceptions import EmbeddingError
from quizsmith.models import Question
from quizsmith.providers.base import EmbeddingClient
from quizsmith.question_generator import QuestionGenerator, SimilarityFilter
from quizsmith.taxonomy import Difficulty, TaxonomyCategory, blend_for

logger = logging.getLogger(__name__)

OVERSAMPLING_FACTOR = 1.5
OVERSAMPLING_MIN_ADD = 2


@dataclass(frozen=True)
class CategoryPlan:
    """How many questions one category contributes, and how many to request."""

    category: TaxonomyCategory
    weight: float
    needed: int
    requested: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def allocate_counts(
    total_count: int,
    weights: dict[TaxonomyCategory, float],
    balance: bool = False,
) -> dict[TaxonomyCategory, int]:
    """Split ``total_count`` across categories by weight.

    By default each category is rounded independently, so the counts may not
    sum to ``total_count`` (e.g. 3 questions at 0.5/0.3/0.2 gives 2/1/1).
    With ``balance=True`` the largest-remainder method is used instead and
    the counts always sum to ``total_count``.
    """
    if not balance:
        return {
            category: round_half_up(total_count * weight) for category, weight in weights.items()
        }

    exact = {category: total_count * weight for category, weight in weights.items()}
    counts = {category: math.floor(value) for category, value in exact.items()}
    remainder = total_count - sum(counts.values())
    # Ties keep blend order (sorted is stable)
    by_fraction = sorted(exact, key=lambda c: exact[c] - counts[c], reverse=True)
    for category in by_fraction[: max(remainder, 0)]:
        counts[category] += 1
    return counts


class QuizComposer:
    """Orchestrates per-category generation and blends the results.

    Example:
        composer = QuizComposer(
            question_generator=TaxonomyQuestionGenerator(llm_client),
            embedding_client=LiteLLMEmbeddingClient(),
        )
        questions = await composer.acompose("medium", 10, source_text)
    """

    def __init__(
        self,
        question_generator: QuestionGenerator,
        embedding_client: EmbeddingClient,
        similarity_filter: SimilarityFilter | None = None,
        oversampling_factor: float = OVERSAMPLING_FACTOR,
        oversampling_pad: int = OVERSAMPLING_MIN_ADD,
        balance_rounding: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            question_generator: Generates questions for one category
            embedding_client: Embeds question texts for deduplication
            similarity_filter: Near-duplicate filter (default threshold 0.95)
            oversampling_factor: Multiplier applied to each category's need
            oversampling_pad: Extra questions requested on top of the multiplier
            balance_rounding: Allocate counts with the largest-remainder method
            rng: Random source for the final shuffle (seed it in tests)
        """
        self.question_generator = question_generator
        self.embedding_client = embedding_client
        self.similarity_filter = similarity_filter or SimilarityFilter()
        self.oversampling_factor = oversampling_factor
        self.oversampling_pad = oversampling_pad
        self.balance_rounding = balance_rounding
        self._rng = rng or random.Random()

    def plan(
        self,
        difficulty: Difficulty | str,
        total_count: int,
        taxonomy_override: TaxonomyCategory | str | None = None,
    ) -> list[CategoryPlan]:
        """Compute needed and requested counts for every active category.

        Categories whose share rounds to zero are included with
        ``requested == 0``; they are never sent to the generator.
        """
        weights = blend_for(difficulty, taxonomy_override)
        needed_counts = allocate_counts(total_count, weights, balance=self.balance_rounding)

        plans = []
        for category, weight in weights.items():
            needed = needed_counts[category]
            requested = (
                math.ceil(needed * self.oversampling_factor) + self.oversampling_pad
                if needed > 0
                else 0
            )
            plans.append(
                CategoryPlan(category=category, weight=weight, needed=needed, requested=requested)
            )
        return plans

    async def _compose_category(self, plan: CategoryPlan, source_text: str) -> list[Question]:
        """Generate, deduplicate and truncate one category."""
        logger.debug(
            "Category %s: needed %d, requesting %d",
            plan.category.value,
            plan.needed,
            plan.requested,
        )
        candidates = await self.question_generator.agenerate(
            plan.category, plan.requested, source_text
        )
        if not candidates:
            return []

        texts = [q.question_text for q in candidates]
        try:
            embeddings = await self.embedding_client.aembed(texts)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to embed {len(texts)} questions for category {plan.category.value}",
                category=plan.category.value,
            ) from e

        if len(embeddings) != len(candidates):
            raise EmbeddingError(
                f"Embedding count mismatch for category {plan.category.value}: "
                f"{len(candidates)} questions, {len(embeddings)} embeddings",
                category=plan.category.value,
            )

        unique = self.similarity_filter.filter_unique(candidates, embeddings)
        selected = unique[: plan.needed]
        if len(selected) < plan.needed:
            logger.info(
                "Category %s under-produced: %d of %d needed",
                plan.category.value,
                len(selected),
                plan.needed,
            )
        return selected

    async def acompose(
        self,
        difficulty: Difficulty | str,
        total_count: int,
        source_text: str,
        taxonomy_override: TaxonomyCategory | str | None = None,
    ) -> list[Question]:
        """Compose a shuffled quiz of about ``total_count`` questions (async).

        Raises:
            EmbeddingError: If embedding fails for any category.
        """
        active = [p for p in self.plan(difficulty, total_count, taxonomy_override) if p.needed > 0]

        tasks = [asyncio.ensure_future(self._compose_category(p, source_text)) for p in active]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        questions: list[Question] = []
        for selected in results:
            questions.extend(selected)

        self._rng.shuffle(questions)

        if len(questions) < total_count:
            logger.info("Composed %d of %d requested questions", len(questions), total_count)
        return questions

    def compose(
        self,
        difficulty: Difficulty | str,
        total_count: int,
        source_text: str,
        taxonomy_override: TaxonomyCategory | str | None = None,
    ) -> list[Question]:
        """Compose a quiz (sync wrapper around acompose)."""
        return asyncio.run(self.acompose(difficulty, total_count, source_text, taxonomy_override))
