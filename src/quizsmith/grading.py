# src/quizsmith/grading.py
"""Grading of quiz submissions and leaderboard ranking."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field, computed_field

from quizsmith.models import Question


class QuestionResult(BaseModel):
    """Outcome of one answered question."""

    question_index: int
    selected_option: int
    correct_option: int
    is_correct: bool
    explanation: str | None = None


class GradeResult(BaseModel):
    """Outcome of a whole submission."""

    score: int
    total: int
    results: list[QuestionResult]

    @computed_field
    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return round(100 * self.score / self.total, 1)


class LeaderboardEntry(BaseModel):
    """A scored attempt shown on a quiz leaderboard."""

    nickname: str | None = Field(default=None, min_length=3, max_length=20)
    score: int = Field(ge=0)
    time_taken: int = Field(gt=0, description="Seconds spent on the quiz.")


def grade_submission(
    questions: Sequence[Question],
    answers: Mapping[int, int],
) -> GradeResult:
    """Grade answers against a quiz.

    Args:
        questions: The quiz, in play order.
        answers: Question index -> selected option index. Indexes that do not
            refer to a question are ignored; unanswered questions score zero.

    Returns:
        Per-question results in question order plus the total score.
    """
    results: list[QuestionResult] = []
    for question_index in sorted(answers):
        if not 0 <= question_index < len(questions):
            continue
        question = questions[question_index]
        selected = answers[question_index]
        correct = question.correct_index
        results.append(
            QuestionResult(
                question_index=question_index,
                selected_option=selected,
                correct_option=correct,
                is_correct=selected == correct,
                explanation=question.explanation or None,
            )
        )

    score = sum(1 for result in results if result.is_correct)
    return GradeResult(score=score, total=len(questions), results=results)


def rank_leaderboard(
    entries: Sequence[LeaderboardEntry],
    limit: int | None = None,
) -> list[LeaderboardEntry]:
    """Order attempts by score (highest first), then by time (fastest first).

    Ties keep their submission order.
    """
    ranked = sorted(entries, key=lambda entry: (-entry.score, entry.time_taken))
    return ranked[:limit] if limit is not None else ranked
