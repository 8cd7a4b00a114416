# src/quizsmith/exceptions.py
"""Exceptions raised by Quizsmith."""


class QuizsmithError(Exception):
    """Base class for all Quizsmith errors."""


class EmbeddingError(QuizsmithError):
    """Raised when questions cannot be embedded for deduplication.

    Without embeddings there is no deduplication safety net, so the whole
    generation request fails instead of degrading.

    Attributes:
        category: Taxonomy category being deduplicated when the failure happened.
    """

    def __init__(self, message: str, category: str | None = None) -> None:
        super().__init__(message)
        self.category = category


class ConfigError(QuizsmithError):
    """Raised when configuration values are invalid.

    Attributes:
        suggestion: Optional hint on how to fix the configuration.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion
