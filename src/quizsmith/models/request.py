# src/quizsmith/models/request.py
"""Generation request model used at the API/worker boundary."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from quizsmith.taxonomy import Difficulty, TaxonomyCategory

SourceType = Literal["topic", "youtube", "url", "pdf"]


class GenerationRequest(BaseModel):
    """A caller-validated request to generate a quiz.

    The pipeline itself accepts any ``question_count``; the 3..10 range and the
    source length rule are product constraints enforced here, before the
    request reaches the pipeline.
    """

    title: str = Field(min_length=5)
    description: str | None = None
    difficulty: Difficulty
    taxonomy_level: TaxonomyCategory | None = None
    question_count: int = Field(ge=3, le=10)
    source_type: SourceType = "topic"
    source_data: str = ""
    is_public: bool = False

    @model_validator(mode="after")
    def _source_required_unless_pdf(self) -> "GenerationRequest":
        # PDF text is extracted after upload, so the request may arrive empty
        if self.source_type != "pdf" and len(self.source_data) < 3:
            raise ValueError("The source must be at least 3 characters long.")
        return self
