# src/quizsmith/refiner.py
"""Second-pass quiz refinement by an "editor" persona."""

import asyncio
import json
import logging

from pydantic import ValidationError

from quizsmith.models import Question
from quizsmith.output_parser import dump_question_set, format_instructions, parse_question_set
from quizsmith.providers.base import LLMClient

logger = logging.getLogger(__name__)

# Low temperature biases toward analytical edits over creative rewrites
REFINE_TEMPERATURE = 0.2

REVIEWER_PROMPT = """<Persona>
You are an expert editor, pedagogue, and subject-matter expert. Your task is to review and refine an existing quiz to elevate it to a world-class standard. You are meticulous, critical, and have a deep understanding of nuance.
</Persona>

<Task>
Review the provided <InputQuiz> JSON. Your goal is to improve its quality by performing the following checks and enhancements. You will output a new JSON object in the exact same format as the input, with the same number of questions in the same order, but with your improvements applied.

1.  **Factual Accuracy & Nuance Check**:
    - For each question, scrutinize the selected correct answer. Is it the most precise and nuanced answer?
    - Correct any subtle inaccuracies. For questions asking for an application of a concept, ensure the scenario and correct answer represent a true application, not just a superficial understanding.

2.  **Distractor Sophistication Check**:
    - For each question, evaluate the incorrect options (distractors). Are they too obviously wrong?
    - Replace at least one distractor per question with a more sophisticated, plausible alternative that would genuinely challenge an advanced student. A good sophisticated distractor is often partially true or true in a different context.

3.  **Explanation Depth Check**:
    - Review the explanation for each question. Does it merely define the term, or does it explain the reasoning?
    - Enhance each explanation. It should clarify why the correct answer is correct *in the context of the question* and, if possible, briefly explain why a key distractor is incorrect.

4.  **Consistency Check**:
    - Ensure every single question has a non-empty explanation field.
    - Keep exactly four options per question with exactly one marked correct.

Your final output MUST be the complete, refined quiz in the same JSON structure as the <InputQuiz>.
</Task>

<OutputInstructions>
{format_instructions}
</OutputInstructions>"""

INPUT_QUIZ_PROMPT = """<InputQuiz>
{quiz_json}
</InputQuiz>"""


class QuizRefiner:
    """Improves distractors, correctness nuance and explanations of a quiz.

    The refined quiz has the same length and order as the input. When the
    refinement pass fails (transport error, timeout, unparseable output or a
    different number of questions) the input is returned unchanged.

    Example:
        refiner = QuizRefiner(llm_client=LiteLLMClient())
        refined = await refiner.arefine(questions)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        temperature: float | None = REFINE_TEMPERATURE,
        timeout: float | None = None,
        prompt_template: str | None = None,
    ) -> None:
        """Initialize the refiner.

        Args:
            llm_client: Any LLMClient implementation
            temperature: LLM temperature. None to use model default.
            timeout: Seconds to wait for the LLM call. None waits forever.
            prompt_template: Custom system prompt with {format_instructions}
        """
        self._client = llm_client
        self.temperature = temperature
        self.timeout = timeout
        self.prompt_template = prompt_template or REVIEWER_PROMPT

    def build_messages(self, questions: list[Question]) -> list[dict]:
        """Build the system/user message pair for a refinement request."""
        return [
            {
                "role": "system",
                "content": self.prompt_template.format(format_instructions=format_instructions()),
            },
            {
                "role": "user",
                "content": INPUT_QUIZ_PROMPT.format(quiz_json=dump_question_set(questions)),
            },
        ]

    async def arefine(self, questions: list[Question]) -> list[Question]:
        """Refine a quiz (async). Never raises for refinement failures."""
        if not questions:
            return []

        try:
            raw_output = await asyncio.wait_for(
                self._client.acomplete(self.build_messages(questions), self.temperature),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Refinement timed out after %ss; keeping unrefined quiz", self.timeout)
            return list(questions)
        except Exception:
            logger.exception("Refinement LLM call failed; keeping unrefined quiz")
            return list(questions)

        try:
            refined = parse_question_set(raw_output)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Failed to parse refined quiz (%s); keeping unrefined quiz", e)
            logger.debug("Raw refinement output: %s", raw_output)
            return list(questions)

        if len(refined) != len(questions):
            logger.warning(
                "Refined quiz has %d questions, expected %d; keeping unrefined quiz",
                len(refined),
                len(questions),
            )
            return list(questions)

        return [
            _keep_explanation(new, original)
            for new, original in zip(refined, questions, strict=True)
        ]

    def refine(self, questions: list[Question]) -> list[Question]:
        """Refine a quiz (sync wrapper around arefine)."""
        return asyncio.run(self.arefine(questions))


def _keep_explanation(refined: Question, original: Question) -> Question:
    """Carry over the original explanation if the editor blanked it."""
    if refined.explanation.strip():
        return refined
    return refined.model_copy(update={"explanation": original.explanation})
