# src/quizsmith/question_generator/taxonomy.py
"""Taxonomy-aware multiple-choice question generator."""

import asyncio
import json
import logging
from collections.abc import Mapping

from pydantic import ValidationError

from quizsmith.models import Question
from quizsmith.output_parser import format_instructions, parse_question_set
from quizsmith.providers.base import LLMClient
from quizsmith.question_generator.base import QuestionGenerator
from quizsmith.taxonomy import TaxonomyCategory, default_temperature, instructions_for

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """<Persona>
You are a world-class expert in pedagogy and quiz design, specializing in creating educational content based on Bloom's Taxonomy.
</Persona>

<Task>
Your task is to generate a complete quiz based on the user's provided <SourceText>.
The quiz must contain exactly {question_count} multiple-choice questions.

**CRITICAL INSTRUCTIONS:**
1.  For each question, you MUST provide a single array of exactly four `options`.
2.  One of these options must be the correct answer, and it should have its `is_correct` flag set to `true`. The other three options must be plausible distractors with their `is_correct` flag set to `false`.
3.  **The position of the correct answer in the `options` array MUST be randomized.** Do not always place it first or last.
4.  For each question, you MUST provide a "source_quote" field containing the exact sentence or phrase from the <SourceText> that justifies the correct answer. This is non-negotiable.
5.  Distractors must be challenging and well-thought-out. Good distractors often include:
    - Common misconceptions related to the topic.
    - Concepts that are closely related but not the correct answer.
    - Options that are factually correct but do not correctly answer the question posed.
    - Subtly incorrect numerical values or terminology.
6.  You must also provide a brief "explanation" for why the correct answer is correct, which can elaborate on the source_quote.

**Taxonomy-Specific Instructions:**
{taxonomy_instructions}
</Task>

<OutputInstructions>
The entire output must be in the JSON format specified below. Do not include any other text, markdown, or commentary outside of the JSON structure.
{format_instructions}
</OutputInstructions>"""

HUMAN_PROMPT = """<SourceText>
{source_text}
</SourceText>"""


class TaxonomyQuestionGenerator(QuestionGenerator):
    """Generates multiple-choice questions for one taxonomy category per call.

    Failures never propagate: a transport error, a timeout, malformed JSON or
    a schema mismatch is logged and yields an empty list.

    Example:
        from quizsmith.providers.litellm import LiteLLMClient

        generator = TaxonomyQuestionGenerator(llm_client=LiteLLMClient())
        questions = await generator.agenerate(TaxonomyCategory.APPLYING, 5, text)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        temperatures: Mapping[TaxonomyCategory, float] | None = None,
        timeout: float | None = None,
        system_prompt: str | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: Any LLMClient implementation
            temperatures: Per-category temperature overrides. Categories not
                listed use the taxonomy defaults.
            timeout: Seconds to wait for each LLM call. None waits forever.
            system_prompt: Custom system prompt with {question_count},
                {taxonomy_instructions} and {format_instructions}
        """
        self._client = llm_client
        self.temperatures = dict(temperatures or {})
        self.timeout = timeout
        self.system_prompt = system_prompt or SYSTEM_PROMPT

    def temperature_for(self, category: TaxonomyCategory) -> float:
        """Return the sampling temperature used for a category."""
        if category in self.temperatures:
            return self.temperatures[category]
        return default_temperature(category)

    def build_messages(
        self,
        category: TaxonomyCategory,
        requested_count: int,
        source_text: str,
    ) -> list[dict]:
        """Build the system/user message pair for one category request."""
        system = self.system_prompt.format(
            question_count=requested_count,
            taxonomy_instructions=instructions_for(category),
            format_instructions=format_instructions(),
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": HUMAN_PROMPT.format(source_text=source_text)},
        ]

    async def agenerate(
        self,
        category: TaxonomyCategory,
        requested_count: int,
        source_text: str,
    ) -> list[Question]:
        """Generate up to ``requested_count`` questions for ``category``."""
        if requested_count <= 0:
            return []

        category = TaxonomyCategory.parse(category)
        messages = self.build_messages(category, requested_count, source_text)

        try:
            raw_output = await asyncio.wait_for(
                self._client.acomplete(messages, temperature=self.temperature_for(category)),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "LLM call for category %s timed out after %ss", category.value, self.timeout
            )
            return []
        except Exception:
            logger.exception("LLM call for category %s failed", category.value)
            return []

        try:
            questions = parse_question_set(raw_output)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error("Failed to parse cleaned JSON for category %s: %s", category.value, e)
            logger.error("Raw LLM output that failed parsing: %s", raw_output)
            return []

        logger.debug(
            "Category %s: requested %d, parsed %d questions",
            category.value,
            requested_count,
            len(questions),
        )
        return questions
