# tests/question_generator/test_similarity_filter.py
"""Tests for the SimilarityFilter."""

import math

import pytest

from quizsmith.question_generator import SimilarityFilter, cosine_similarity


@pytest.fixture
def filter():
    """Create a SimilarityFilter with default threshold."""
    return SimilarityFilter()


class TestCosineSimilarity:
    def test_identical_vectors(self):
        assert cosine_similarity([1.0, 2.0], [1.0, 2.0]) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_zero_vector_is_never_similar(self):
        result = cosine_similarity([0.0, 0.0], [1.0, 0.0])
        assert result == 0.0
        assert not math.isnan(result)

    def test_two_zero_vectors(self):
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


class TestSimilarityFilter:
    def test_default_threshold(self, filter):
        assert filter.threshold == 0.95

    def test_threshold_validation(self):
        with pytest.raises(ValueError):
            SimilarityFilter(threshold=0.0)
        with pytest.raises(ValueError):
            SimilarityFilter(threshold=1.5)

    def test_threshold_of_one_is_allowed(self):
        assert SimilarityFilter(threshold=1.0).threshold == 1.0

    def test_empty_input(self, filter):
        assert filter.filter_unique([], []) == []

    def test_single_question_unchanged(self, filter, make_question):
        question = make_question("Q1?")
        result = filter.filter_unique([question], [[1.0, 0.0, 0.0]])
        assert result == [question]
        assert result[0] is question

    def test_keeps_first_of_duplicate_pair(self, filter, make_question):
        first, second = make_question("Original?"), make_question("Reworded?")
        result = filter.filter_unique([first, second], [[1.0, 0.0], [0.99, 0.01]])
        assert result == [first]

    def test_order_decides_the_survivor(self, filter, make_question):
        first, second = make_question("Original?"), make_question("Reworded?")
        result = filter.filter_unique([second, first], [[0.99, 0.01], [1.0, 0.0]])
        assert result == [second]

    def test_zero_vectors_are_both_kept(self, filter, make_question):
        questions = [make_question("Q1?"), make_question("Q2?")]
        result = filter.filter_unique(questions, [[0.0, 0.0], [0.0, 0.0]])
        assert len(result) == 2

    def test_similarity_equal_to_threshold_is_kept(self, make_question):
        # cos([1, 0], [1, 1]) == 1/sqrt(2); only similarity above the threshold drops
        filter = SimilarityFilter(threshold=1 / math.sqrt(2))
        questions = [make_question("Q1?"), make_question("Q2?")]
        result = filter.filter_unique(questions, [[1.0, 0.0], [1.0, 1.0]])
        assert len(result) == 2

    def test_compares_against_every_kept_question(self, make_question):
        filter = SimilarityFilter(threshold=0.9)
        questions = [
            make_question("A?"),
            make_question("B?"),
            make_question("Like B?"),
            make_question("C?"),
        ]
        embeddings = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.99, 0.05], [0.0, 0.0, 1.0]]
        result = filter.filter_unique(questions, embeddings)
        assert [q.question_text for q in result] == ["A?", "B?", "C?"]

    def test_dropped_question_does_not_shadow_later_ones(self, make_question):
        # Q2 is dropped as a duplicate of Q1, so Q3 is compared against Q1 only
        filter = SimilarityFilter(threshold=0.9)
        questions = [make_question("Q1?"), make_question("Q2?"), make_question("Q3?")]
        embeddings = [[1.0, 0.0], [0.95, 0.31], [0.8, 0.6]]
        result = filter.filter_unique(questions, embeddings)
        assert [q.question_text for q in result] == ["Q1?", "Q3?"]

    def test_length_mismatch_raises(self, filter, make_question):
        with pytest.raises(ValueError, match="mismatch"):
            filter.filter_unique([make_question()], [])

    def test_deterministic(self, filter, make_question):
        questions = [make_question(f"Q{i}?") for i in range(5)]
        embeddings = [[1.0, 0.0], [1.0, 0.0], [0.0, 1.0], [0.0, 1.0], [1.0, 1.0]]
        first = filter.filter_unique(questions, embeddings)
        second = filter.filter_unique(questions, embeddings)
        assert first == second
