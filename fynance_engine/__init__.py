"""
Fynance Engine - Automatic Transaction Categorization.

Assigns a category (e.g. "Alimentação", "Transporte", "Salário") to bank
statement transactions from their description, declared type and amount.

Main Components:
    - patterns: Keyword rule table, regex patterns and type-correction signals
    - config: Engine thresholds and fallback categories
    - categorisation: Rule database, matcher and category engine
    - correction: Income/expense type correction and consistency warnings
"""

from typing import Dict, List, Optional

# Core categorisation components
from .categorisation.engine import (
    CategoryEngine,
    CategorizationOptions,
    LearningRecord,
)
from .categorisation.matcher import (
    CategoryMatcher,
    CategorizationResult,
)
from .categorisation.pattern_matching import MatchCandidate
from .categorisation.rule_database import (
    RuleDatabase,
    CategoryRule,
)

# Type correction
from .correction.type_corrector import (
    TypeCorrector,
    TypeCorrection,
)
from .correction.improved_engine import (
    ImprovedCategoryEngine,
    ImprovedCategorizationResult,
    TransactionContext,
)

# Configuration
from .config.engine_config import (
    ENGINE_CONFIG,
    INCOME,
    EXPENSE,
)

from .patterns.keyword_database import (
    KEYWORD_DATABASE,
    REGEX_PATTERNS,
)


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "CategoryEngine",
    "CategorizationOptions",
    "LearningRecord",
    "CategoryMatcher",
    "CategorizationResult",
    "MatchCandidate",
    "RuleDatabase",
    "CategoryRule",
    # Correction
    "TypeCorrector",
    "TypeCorrection",
    "ImprovedCategoryEngine",
    "ImprovedCategorizationResult",
    "TransactionContext",
    # Configuration
    "ENGINE_CONFIG",
    "INCOME",
    "EXPENSE",
    # Patterns
    "KEYWORD_DATABASE",
    "REGEX_PATTERNS",
    # Main function
    "categorize_transactions",
]


def categorize_transactions(
    transactions: List[Dict],
    available_categories: Optional[List[str]] = None,
    engine: Optional[ImprovedCategoryEngine] = None,
) -> Dict:
    """
    Main entry point for categorizing a statement.

    This function runs the complete pipeline:
    1. Check each transaction's declared type against its description
    2. Categorize under the effective type (learning store, then rules)
    3. Summarize the corrections and warnings

    Args:
        transactions: List of transaction dictionaries with keys:
            - date: Transaction date (ISO-8601 string)
            - description: Transaction description
            - amount: Transaction amount (non-negative)
            - type: "income" or "expense"
        available_categories: Optional category names to restrict matching to
        engine: Engine to use; a new one with the built-in rules if None

    Returns:
        Dictionary containing:
            - categorized_transactions: List of per-transaction results
            - report: Correction report (totals, corrections, average confidence)

    Example:
        >>> result = categorize_transactions([
        ...     {"date": "2025-01-15", "description": "Supermercado Extra",
        ...      "amount": 150.0, "type": "expense"},
        ... ])
        >>> result["categorized_transactions"][0]["category"]
        'Alimentação'
    """
    engine = engine or ImprovedCategoryEngine()
    results = engine.categorize_batch_with_corrections(transactions, available_categories)

    categorized_list = []
    for entry in results:
        context = entry["transaction"]
        result = entry["result"]
        categorized_list.append({
            "date": context.date,
            "description": context.description,
            "amount": context.amount,
            "type": (result.corrected_type if result else None) or context.original_type,
            "category": result.category if result else None,
            "confidence": result.confidence if result else 0,
            "method": result.method if result else None,
            "matched_keyword": result.matched_keyword if result else None,
            "corrected_type": result.corrected_type if result else None,
            "type_correction_reason": result.type_correction_reason if result else None,
            "validation_warnings": list(result.validation_warnings) if result else [],
        })

    return {
        "categorized_transactions": categorized_list,
        "report": engine.generate_correction_report(results),
    }
