# src/quizsmith/question_generator/base.py
"""QuestionGenerator abstract base class."""

import asyncio
from abc import ABC, abstractmethod

from quizsmith.models import Question
from quizsmith.taxonomy import TaxonomyCategory


class QuestionGenerator(ABC):
    """Abstract base class for per-category question generation."""

    @abstractmethod
    async def agenerate(
        self,
        category: TaxonomyCategory,
        requested_count: int,
        source_text: str,
    ) -> list[Question]:
        """Generate up to ``requested_count`` questions for one category (async).

        Implementations must not raise for generation or parse failures;
        they return an empty list instead so one bad category cannot abort a
        whole quiz.
        """
        ...

    def generate(
        self,
        category: TaxonomyCategory,
        requested_count: int,
        source_text: str,
    ) -> list[Question]:
        """Generate questions for one category (sync wrapper around agenerate)."""
        return asyncio.run(self.agenerate(category, requested_count, source_text))
