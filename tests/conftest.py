"""Shared pytest fixtures."""

import json
import re
import threading

import pytest

from quizsmith.providers.base import EmbeddingClient, LLMClient
from quizsmith.taxonomy import CATEGORY_INSTRUCTIONS

_COUNT_PATTERN = re.compile(r"exactly (\d+) multiple-choice questions")


def question_dict(text: str, correct_index: int = 0, explanation: str = "Because.") -> dict:
    """Build a schema-valid question payload."""
    return {
        "question_text": text,
        "source_quote": f"Quote for {text}",
        "explanation": explanation,
        "options": [
            {"option_text": f"{text} option {i}", "is_correct": i == correct_index}
            for i in range(4)
        ],
    }


class ScriptedLLMClient(LLMClient):
    """LLM double that records calls and answers through a callback."""

    def __init__(self, responder) -> None:
        self.responder = responder
        self.calls: list[tuple[list[dict], float | None]] = []

    def complete(self, messages: list[dict], temperature: float | None = None) -> str:
        self.calls.append((messages, temperature))
        return self.responder(messages, temperature)


class OneHotEmbeddingClient(EmbeddingClient):
    """Embedding double: identical texts share a vector, distinct texts are orthogonal."""

    def __init__(self, dimensions: int = 256) -> None:
        self.dimensions = dimensions
        self.calls: list[list[str]] = []
        self._index: dict[str, int] = {}
        # Sync clients run in worker threads, so categories may embed at once
        self._lock = threading.Lock()

    def embed(self, texts: list[str]) -> list[list[float]]:
        vectors = []
        with self._lock:
            self.calls.append(list(texts))
            positions = [self._index.setdefault(text, len(self._index)) for text in texts]
        for position in positions:
            vector = [0.0] * self.dimensions
            vector[position % self.dimensions] = 1.0
            vectors.append(vector)
        return vectors


def category_of(messages: list[dict]) -> str | None:
    """Return the taxonomy category a generation prompt was built for."""
    system = messages[0]["content"]
    for category, instructions in CATEGORY_INSTRUCTIONS.items():
        if instructions in system:
            return category.value
    return None


def requested_count_of(messages: list[dict]) -> int:
    match = _COUNT_PATTERN.search(messages[0]["content"])
    assert match, "generation prompt must state the question count"
    return int(match.group(1))


def is_refinement(messages: list[dict]) -> bool:
    return "<InputQuiz>" in messages[-1]["content"]


@pytest.fixture
def make_question():
    """Factory for Question models."""
    from quizsmith.models import Question

    def _make(text: str = "What is X?", correct_index: int = 0, explanation: str = "Because."):
        return Question.model_validate(question_dict(text, correct_index, explanation))

    return _make


@pytest.fixture
def embedding_client():
    return OneHotEmbeddingClient()


@pytest.fixture
def make_quiz_llm():
    """Factory for an LLM double that serves generation and refinement prompts.

    Generation prompts get exactly the requested number of distinct questions
    named "<category> question <i>". Categories in ``failing`` get invalid JSON.
    ``refine_mode`` controls refinement replies: "echo" rewords every question,
    "garbage" returns unparseable text, "short" drops the last question,
    "blank" rewords but empties every explanation.
    """

    def _make(failing: tuple[str, ...] = (), refine_mode: str = "echo") -> ScriptedLLMClient:
        def respond(messages: list[dict], temperature: float | None) -> str:
            if is_refinement(messages):
                return _refine(messages, refine_mode)
            category = category_of(messages)
            if category in failing:
                return "Sorry, I cannot produce JSON today {"
            count = requested_count_of(messages)
            payload = {
                "questions": [
                    question_dict(f"{category} question {i}", correct_index=i % 4)
                    for i in range(count)
                ]
            }
            return f"```json\n{json.dumps(payload)}\n```"

        return ScriptedLLMClient(respond)

    return _make


def _refine(messages: list[dict], mode: str) -> str:
    if mode == "garbage":
        return "I refined it but forgot the JSON."
    content = messages[-1]["content"]
    quiz = json.loads(content.split("<InputQuiz>\n", 1)[1].rsplit("\n</InputQuiz>", 1)[0])
    questions = quiz["questions"]
    if mode == "short":
        questions = questions[:-1]
    for question in questions:
        question["question_text"] = f"Refined: {question['question_text']}"
        question["explanation"] = "" if mode == "blank" else f"Deeper: {question['explanation']}"
    return json.dumps({"questions": questions})


@pytest.fixture
def make_llm():
    """Factory for a ScriptedLLMClient answering every call with ``responder``."""
    return ScriptedLLMClient


@pytest.fixture
def make_question_dict():
    """Factory for raw (JSON-ready) question payloads."""
    return question_dict
