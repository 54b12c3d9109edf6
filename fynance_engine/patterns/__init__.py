"""
Pattern Definitions for the Fynance Categorization Engine.

Contains the static keyword rule table, the regex patterns bound to
categories, and the lexical signals used for income/expense type correction.
"""

from .keyword_database import (
    KEYWORD_DATABASE,
    REGEX_PATTERNS,
)
from .type_correction_patterns import (
    TYPE_CORRECTION_RULES,
    EXPENSE_INDICATORS,
    INCOME_INDICATORS,
    DIRECTIONAL_RULES,
    INCOME_CONTRADICTION_WORDS,
    EXPENSE_CONTRADICTION_WORDS,
)

__all__ = [
    "KEYWORD_DATABASE",
    "REGEX_PATTERNS",
    "TYPE_CORRECTION_RULES",
    "EXPENSE_INDICATORS",
    "INCOME_INDICATORS",
    "DIRECTIONAL_RULES",
    "INCOME_CONTRADICTION_WORDS",
    "EXPENSE_CONTRADICTION_WORDS",
]
