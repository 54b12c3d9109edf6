"""
Engine configuration for the Fynance Categorization Engine.
Contains matching thresholds, fallback categories and batch settings.
"""

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

ENGINE_CONFIG = {
    # Categorization defaults (overridable per engine and per call)
    "min_confidence": 70,
    "enable_learning": True,

    # Matching thresholds
    "matching": {
        "partial_threshold": 0.6,  # keyword length / description length
        "fuzzy_threshold": 0.7,    # normalized Levenshtein similarity
        "max_alternatives": 3,
        "default_priority": 1,     # used when a candidate's rule cannot be resolved
    },

    # User feedback store
    "learning": {
        "capacity": 1000,          # most recent records kept, oldest evicted first
        "confidence": 100,
    },

    # Fallback when nothing clears min_confidence
    "fallback": {
        "confidence": 50,
        "categories": {
            INCOME: "Outros Recebimentos",
            EXPENSE: "Outros Gastos",
        },
    },

    # Heuristic income/expense override
    "type_correction": {
        "confidence_penalty": 20,
        "confidence_floor": 50,
    },

    # categorize_batch worker pool
    "batch": {
        "max_workers": 4,
    },
}


def describe_type(transaction_type: str) -> str:
    """Portuguese label for a transaction type, used in reasons and warnings."""
    return "receita" if transaction_type == INCOME else "despesa"


def get_default_category(transaction_type: str) -> str:
    """Return the fallback category name for a transaction type."""
    categories = ENGINE_CONFIG["fallback"]["categories"]
    if transaction_type == INCOME:
        return categories[INCOME]
    return categories[EXPENSE]
