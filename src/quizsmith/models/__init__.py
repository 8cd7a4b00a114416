# src/quizsmith/models/__init__.py
"""Data models for Quizsmith."""

from quizsmith.models.question import Option, Question, QuestionSet
from quizsmith.models.request import GenerationRequest, SourceType

__all__ = ["Option", "Question", "QuestionSet", "GenerationRequest", "SourceType"]
