# src/quizsmith/question_generator/similarity_filter.py
"""Semantic deduplication of generated questions."""

import logging
from collections.abc import Sequence

import numpy as np

from quizsmith.models import Question

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.95


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    For text embeddings, values are typically 0 to 1:
    - 0.95+ = the same question reworded
    - 0.7-0.9 = same topic, different angle
    - <0.5 = unrelated

    A zero-magnitude vector has no direction, so its similarity to anything
    is defined as 0.0 (never a duplicate).
    """
    a_arr, b_arr = np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    norm_a, norm_b = np.linalg.norm(a_arr), np.linalg.norm(b_arr)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a_arr, b_arr) / (norm_a * norm_b))


class SimilarityFilter:
    """Removes near-duplicate questions by embedding cosine similarity.

    Greedy and order-sensitive: questions are visited in input order and each
    one is kept only if it is not too similar to any question already kept.
    The earliest member of a near-duplicate cluster is the one that survives.
    """

    def __init__(self, threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> None:
        """Initialize the filter.

        Args:
            threshold: Cosine similarity cutoff in (0.0, 1.0]. A question whose
                      similarity to a kept question is strictly greater than
                      the threshold is dropped.
        """
        if not 0.0 < threshold <= 1.0:
            raise ValueError("Threshold must be in (0.0, 1.0]")
        self.threshold = threshold

    def filter_unique(
        self,
        questions: Sequence[Question],
        embeddings: Sequence[Sequence[float]],
    ) -> list[Question]:
        """Return the questions that are not near-duplicates of an earlier one.

        Args:
            questions: Candidate questions.
            embeddings: Parallel embeddings; embeddings[i] belongs to questions[i].

        Returns:
            The surviving questions, in input order.
        """
        if len(questions) != len(embeddings):
            raise ValueError(
                f"Embedding count mismatch: {len(questions)} questions, "
                f"{len(embeddings)} embeddings"
            )
        if not questions:
            return []

        kept: list[Question] = [questions[0]]
        kept_embeddings: list[Sequence[float]] = [embeddings[0]]

        for question, embedding in zip(questions[1:], embeddings[1:], strict=True):
            max_similarity = max(
                cosine_similarity(embedding, kept_embedding) for kept_embedding in kept_embeddings
            )
            if max_similarity > self.threshold:
                continue
            kept.append(question)
            kept_embeddings.append(embedding)

        dropped = len(questions) - len(kept)
        if dropped:
            logger.debug("Dropped %d near-duplicate question(s)", dropped)
        return kept
