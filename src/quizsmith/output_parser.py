# src/quizsmith/output_parser.py
"""Structured output handling for quiz-shaped LLM responses."""

import json

from quizsmith.json_repair import clean_json
from quizsmith.models import Question, QuestionSet

_FORMAT_INSTRUCTIONS = """You must format your output as a JSON value that adheres to a given "JSON Schema" instance.

"JSON Schema" is a declarative language that allows you to annotate and validate JSON documents.

For example, the example "JSON Schema" instance {{"properties": {{"foo": {{"description": "a list of test words", "type": "array", "items": {{"type": "string"}}}}}}, "required": ["foo"]}}
would match an object with one required property, "foo". The "type" property specifies "foo" must be an "array", and the "description" property semantically describes it as "a list of test words". The items within "foo" must be strings.
Thus, the object {{"foo": ["bar", "baz"]}} is a well-formatted instance of this example "JSON Schema". The object {{"properties": {{"foo": ["bar", "baz"]}}}} is not well-formatted.

Your output will be parsed and type-checked according to the provided schema instance, so make sure all fields in your output match the schema exactly and there are no trailing commas!

Here is the JSON Schema instance your output must adhere to. Include the enclosing markdown codeblock:
```json
{schema}
```"""


def format_instructions() -> str:
    """Describe the required QuestionSet JSON shape for a prompt."""
    schema = json.dumps(QuestionSet.model_json_schema())
    return _FORMAT_INSTRUCTIONS.format(schema=schema)


def parse_question_set(raw_text: str) -> list[Question]:
    """Clean and validate raw LLM output against the QuestionSet schema.

    A bare JSON array of questions is accepted as well as the
    ``{"questions": [...]}`` object.

    Raises:
        json.JSONDecodeError: If the cleaned text is not valid JSON.
        pydantic.ValidationError: If the JSON does not match the schema.
    """
    payload = json.loads(clean_json(raw_text))
    if isinstance(payload, list):
        payload = {"questions": payload}
    return QuestionSet.model_validate(payload).questions


def dump_question_set(questions: list[Question]) -> str:
    """Serialize questions to the same JSON shape the parser expects."""
    return QuestionSet(questions=questions).model_dump_json()
