# src/quizsmith/models/question.py
"""Question data models."""

from pydantic import BaseModel, Field, model_validator


class Option(BaseModel):
    """One answer choice of a multiple-choice question."""

    option_text: str = Field(description="The text for a potential answer choice.")
    is_correct: bool = Field(description="Indicates if this is the correct answer.")


class Question(BaseModel):
    """A multiple-choice question with exactly four options, one of them correct."""

    question_text: str = Field(min_length=1, description="The question text.")
    source_quote: str = Field(
        description=(
            "The exact sentence or phrase from the source text that justifies "
            "the correct answer."
        )
    )
    explanation: str = Field(
        description="A brief explanation of why the correct answer is correct."
    )
    options: list[Option] = Field(
        min_length=4,
        max_length=4,
        description="An array of exactly four answer options, with one marked as correct.",
    )

    @model_validator(mode="after")
    def _exactly_one_correct(self) -> "Question":
        correct = sum(1 for option in self.options if option.is_correct)
        if correct != 1:
            raise ValueError(f"Expected exactly one correct option, got {correct}")
        return self

    @property
    def correct_index(self) -> int:
        """Position of the correct option within ``options``."""
        return next(i for i, option in enumerate(self.options) if option.is_correct)


class QuestionSet(BaseModel):
    """The structured payload exchanged with the LLM and handed to persistence."""

    questions: list[Question] = Field(
        default_factory=list,
        description="An array of question objects for the quiz.",
    )

    def __len__(self) -> int:
        return len(self.questions)
