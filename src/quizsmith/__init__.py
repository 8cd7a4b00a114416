"""Quizsmith - multiple-choice quiz generation from source text.

Questions are sampled from an LLM across Bloom's-taxonomy categories,
deduplicated by embedding similarity, blended to the requested difficulty
and polished by a second "editor" pass.

Quick Start:
    from quizsmith import generate_quiz_from_source

    quiz = generate_quiz_from_source("medium", 10, source_text)
    for question in quiz.questions:
        print(question.question_text)

Custom providers:
    from quizsmith import QuizPipeline, Settings

    pipeline = QuizPipeline.from_clients(my_llm_client, my_embedding_client, Settings())
    quiz = await pipeline.agenerate("hard", 5, source_text, taxonomy_override="applying")
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("quizsmith")
except PackageNotFoundError:
    # Running from a source tree without an installed distribution
    __version__ = "unknown"

from quizsmith.composer import CategoryPlan, QuizComposer, allocate_counts
from quizsmith.exceptions import ConfigError, EmbeddingError, QuizsmithError
from quizsmith.generation import (
    QuizPipeline,
    agenerate_quiz_from_source,
    generate_quiz_from_source,
)
from quizsmith.grading import (
    GradeResult,
    LeaderboardEntry,
    QuestionResult,
    grade_submission,
    rank_leaderboard,
)
from quizsmith.json_repair import clean_json
from quizsmith.models import GenerationRequest, Option, Question, QuestionSet
from quizsmith.providers import EmbeddingClient, LLMClient
from quizsmith.question_generator import (
    QuestionGenerator,
    SimilarityFilter,
    TaxonomyQuestionGenerator,
)
from quizsmith.refiner import QuizRefiner
from quizsmith.settings import Settings
from quizsmith.taxonomy import Difficulty, TaxonomyCategory

__all__ = [
    # Version
    "__version__",
    # Models
    "Option",
    "Question",
    "QuestionSet",
    "GenerationRequest",
    # Taxonomy
    "Difficulty",
    "TaxonomyCategory",
    # Config
    "Settings",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipeline components
    "QuestionGenerator",
    "TaxonomyQuestionGenerator",
    "SimilarityFilter",
    "QuizComposer",
    "CategoryPlan",
    "allocate_counts",
    "QuizRefiner",
    "QuizPipeline",
    "clean_json",
    # Entry points
    "generate_quiz_from_source",
    "agenerate_quiz_from_source",
    # Grading
    "grade_submission",
    "rank_leaderboard",
    "GradeResult",
    "QuestionResult",
    "LeaderboardEntry",
    # Errors
    "QuizsmithError",
    "EmbeddingError",
    "ConfigError",
]
