# src/quizsmith/question_generator/__init__.py
"""Question generation and deduplication for Quizsmith."""

from quizsmith.question_generator.base import QuestionGenerator
from quizsmith.question_generator.similarity_filter import (
    DEFAULT_SIMILARITY_THRESHOLD,
    SimilarityFilter,
    cosine_similarity,
)
from quizsmith.question_generator.taxonomy import TaxonomyQuestionGenerator

__all__ = [
    "QuestionGenerator",
    "TaxonomyQuestionGenerator",
    "SimilarityFilter",
    "cosine_similarity",
    "DEFAULT_SIMILARITY_THRESHOLD",
]
