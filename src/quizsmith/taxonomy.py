# src/quizsmith/taxonomy.py
"""Bloom's-taxonomy categories and difficulty blends.

A quiz is composed from one or more taxonomy categories. Each difficulty
level maps to a weighted blend of categories:

    easy   -> remembering only
    medium -> mostly understanding, some recall and application
    hard   -> analysis and application

Each category also carries the instruction text injected into the generation
prompt and a default sampling temperature. Recall-type categories use a low
temperature to stay close to the source; application and analysis categories
use a higher one so the model invents scenarios.
"""

from __future__ import annotations

from enum import Enum


class TaxonomyCategory(str, Enum):
    """Cognitive skill a question probes."""

    REMEMBERING = "remembering"
    UNDERSTANDING = "understanding"
    APPLYING = "applying"
    ANALYZING = "analyzing"

    @classmethod
    def parse(cls, value: str | TaxonomyCategory | None) -> TaxonomyCategory:
        """Resolve a category from user input.

        Unrecognized or empty values fall back to REMEMBERING, the single
        documented default for unknown taxonomy keys.
        """
        if isinstance(value, TaxonomyCategory):
            return value
        if not value:
            return cls.REMEMBERING
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.REMEMBERING


class Difficulty(str, Enum):
    """Requested quiz difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Fractions of the total question count per category. Insertion order is the
# category-processing order used by the composer.
DIFFICULTY_BLENDS: dict[Difficulty, dict[TaxonomyCategory, float]] = {
    Difficulty.EASY: {TaxonomyCategory.REMEMBERING: 1.0},
    Difficulty.MEDIUM: {
        TaxonomyCategory.UNDERSTANDING: 0.5,
        TaxonomyCategory.REMEMBERING: 0.3,
        TaxonomyCategory.APPLYING: 0.2,
    },
    Difficulty.HARD: {
        TaxonomyCategory.ANALYZING: 0.6,
        TaxonomyCategory.APPLYING: 0.4,
    },
}

CATEGORY_TEMPERATURES: dict[TaxonomyCategory, float] = {
    TaxonomyCategory.REMEMBERING: 0.3,
    TaxonomyCategory.UNDERSTANDING: 0.3,
    TaxonomyCategory.APPLYING: 0.7,
    TaxonomyCategory.ANALYZING: 0.7,
}

CATEGORY_INSTRUCTIONS: dict[TaxonomyCategory, str] = {
    TaxonomyCategory.REMEMBERING: (
        "Generate questions that test the ability to recall facts, basic concepts, "
        "and answers. The questions should ask for definitions, lists, or simple "
        "identification of information directly present in the source text. Focus "
        "on who, what, where, when, and how."
    ),
    TaxonomyCategory.UNDERSTANDING: (
        "Generate questions that test the ability to explain ideas or concepts. "
        "**Crucially, the question should NOT be answerable by simply stating a "
        "definition.** It should require explaining a relationship, a process, or a "
        "consequence. For example, instead of 'What is X?', ask 'How does X enable "
        "Y?' or 'What is the key difference between X and Y?'"
    ),
    TaxonomyCategory.APPLYING: (
        "Generate questions that test the ability to use information in new "
        "situations. The questions should present a hypothetical scenario or problem "
        "where the user must apply a rule, concept, or theory from the source text "
        'to find a solution. Focus on questions that ask the user to "solve," '
        '"use," or "demonstrate."'
    ),
    TaxonomyCategory.ANALYZING: (
        "Generate questions that test the ability to draw connections and analyze "
        "components. The questions should require the user to differentiate, "
        "organize, or compare/contrast elements from the source text. Focus on "
        "identifying patterns, motives, or underlying assumptions."
    ),
}


def instructions_for(category: TaxonomyCategory | str | None) -> str:
    """Return the prompt instructions for a category (REMEMBERING if unknown)."""
    return CATEGORY_INSTRUCTIONS[TaxonomyCategory.parse(category)]


def default_temperature(category: TaxonomyCategory | str | None) -> float:
    """Return the default sampling temperature for a category."""
    return CATEGORY_TEMPERATURES[TaxonomyCategory.parse(category)]


def blend_for(
    difficulty: Difficulty | str,
    taxonomy_override: TaxonomyCategory | str | None = None,
) -> dict[TaxonomyCategory, float]:
    """Return the active category weights for a request.

    An override replaces the difficulty blend with a single category at
    weight 1.0.
    """
    if taxonomy_override:
        return {TaxonomyCategory.parse(taxonomy_override): 1.0}
    return dict(DIFFICULTY_BLENDS[Difficulty(difficulty)])
