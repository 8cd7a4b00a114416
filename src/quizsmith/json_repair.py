# src/quizsmith/json_repair.py
"""Best-effort cleanup of near-valid JSON returned by an LLM.

This is a heuristic layer for the malformations models actually produce
(markdown code fences, trailing commas), not a general JSON repairer.
"""

import re

_FENCED_BLOCK = re.compile(r"```[A-Za-z]*[ \t]*\n(.*?)\n?```", re.DOTALL)
_LEADING_FENCE = re.compile(r"^```[A-Za-z]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```$")
_TRAILING_COMMA = re.compile(r"(?:,\s*)+(?=[}\]])")


def _clean_once(text: str) -> str:
    cleaned = text.strip()

    # Models sometimes wrap the fenced JSON in a sentence of prose
    if not cleaned.startswith("```"):
        match = _FENCED_BLOCK.search(cleaned)
        if match:
            cleaned = match.group(1)

    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_COMMA.sub("", cleaned)
    return cleaned.strip()


def clean_json(text: str) -> str:
    """Clean raw LLM output so it can be parsed as JSON.

    Removes markdown code-fence markers, drops trailing commas before a
    closing ``}`` or ``]`` and trims surrounding whitespace. Passes repeat
    until nothing changes, so ``clean_json(clean_json(x)) == clean_json(x)``.

    Example:
        >>> clean_json('```json\\n{"a":1,}\\n```')
        '{"a":1}'
    """
    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again
