"""
Categorisation Module for the Fynance Categorization Engine.

Orchestrates transaction categorization through:
- Rule database (keyword rules with confidence ceiling and priority)
- Pattern matching (exact, partial, fuzzy and regex strategies)
- Ranking by confidence and priority
- Learning store (user feedback overrides rule matching)
"""

from .engine import CategoryEngine, CategorizationOptions, LearningRecord
from .matcher import CategoryMatcher, CategorizationResult
from .rule_database import RuleDatabase, CategoryRule
from .preprocess import normalize_text
from .pattern_matching import (
    MatchCandidate,
    exact_match,
    partial_match,
    fuzzy_match,
    regex_match,
    calculate_similarity,
)
from .batch import map_preserving_order

__all__ = [
    # Main engine
    "CategoryEngine",
    "CategorizationOptions",
    "LearningRecord",
    # Matcher
    "CategoryMatcher",
    "CategorizationResult",
    "MatchCandidate",
    # Rule database
    "RuleDatabase",
    "CategoryRule",
    # Utilities
    "normalize_text",
    "exact_match",
    "partial_match",
    "fuzzy_match",
    "regex_match",
    "calculate_similarity",
    "map_preserving_order",
]
