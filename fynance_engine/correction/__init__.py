"""
Correction Module for the Fynance Categorization Engine.

Detects transactions whose declared income/expense type contradicts their
description, re-categorizes them under the corrected type and reports
consistency warnings.
"""

from .type_corrector import TypeCorrector, TypeCorrection
from .improved_engine import (
    ImprovedCategoryEngine,
    ImprovedCategorizationResult,
    TransactionContext,
)

__all__ = [
    "TypeCorrector",
    "TypeCorrection",
    "ImprovedCategoryEngine",
    "ImprovedCategorizationResult",
    "TransactionContext",
]
