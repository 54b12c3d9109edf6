"""
Improved Category Engine with income/expense type correction.

Wraps a CategoryEngine: fixes the declared transaction type when the
description clearly contradicts it, categorizes under the effective type,
lowers confidence after a correction and reports advisory warnings when the
chosen category's type disagrees with the transaction.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config.engine_config import (
    ENGINE_CONFIG,
    INCOME,
    EXPENSE,
    describe_type,
    get_default_category,
)
from ..categorisation.batch import map_preserving_order
from ..categorisation.engine import CategoryEngine
from ..categorisation.matcher import CategorizationResult
from ..categorisation.preprocess import normalize_text, contains_any
from ..patterns.type_correction_patterns import (
    INCOME_CONTRADICTION_WORDS,
    EXPENSE_CONTRADICTION_WORDS,
)
from .type_corrector import TypeCorrector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionContext:
    """Transaction as seen by the correction layer."""
    description: str
    amount: float
    original_type: str
    date: Optional[str] = None
    account_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data) -> "TransactionContext":
        """Build a context from a mapping using 'original_type' or 'type'."""
        if isinstance(data, TransactionContext):
            return data
        if not isinstance(data, Mapping):
            return cls(description="", amount=0.0, original_type=EXPENSE)

        try:
            amount = float(data.get("amount") or 0.0)
        except (ValueError, TypeError):
            amount = 0.0

        return cls(
            description=data.get("description") or "",
            amount=amount,
            original_type=str(data.get("original_type") or data.get("type") or EXPENSE).lower(),
            date=data.get("date"),
            account_type=data.get("account_type"),
        )


@dataclass(frozen=True)
class ImprovedCategorizationResult(CategorizationResult):
    """Categorization result with type-correction and validation metadata."""
    corrected_type: Optional[str] = None
    type_correction_reason: Optional[str] = None
    validation_warnings: Tuple[str, ...] = ()


class ImprovedCategoryEngine:
    """Categorizes transactions with type correction and consistency checks."""

    CONFIDENCE_PENALTY = ENGINE_CONFIG["type_correction"]["confidence_penalty"]
    CONFIDENCE_FLOOR = ENGINE_CONFIG["type_correction"]["confidence_floor"]

    def __init__(
        self,
        engine: Optional[CategoryEngine] = None,
        type_corrector: Optional[TypeCorrector] = None
    ):
        self.engine = engine or CategoryEngine()
        self.type_corrector = type_corrector or TypeCorrector()

    def categorize_with_corrections(
        self,
        transaction,
        available_categories: Optional[List[str]] = None
    ) -> Optional[ImprovedCategorizationResult]:
        """
        Categorize a transaction, correcting its type first when needed.

        Args:
            transaction: TransactionContext or mapping with description, amount
                and original_type (or type)
            available_categories: Optional category names to restrict matching to

        Returns:
            ImprovedCategorizationResult, or None if the engine produced nothing
        """
        context = TransactionContext.from_dict(transaction)

        # 1. Type correction
        correction = self.type_corrector.correct_transaction_type(
            context.description, context.original_type
        )
        effective_type = correction.corrected_type or context.original_type

        # 2. Categorize under the effective type
        options = {"available_categories": available_categories} if available_categories else None
        categorization = self.engine.categorize({
            "date": context.date or "",
            "description": context.description,
            "amount": abs(context.amount),
            "type": effective_type,
        }, options)
        if categorization is None:
            return None

        # 3. A heuristic override adds uncertainty
        confidence = categorization.confidence
        if correction.corrected_type:
            confidence = max(self.CONFIDENCE_FLOOR, confidence - self.CONFIDENCE_PENALTY)
            logger.debug(
                "Type of %r corrected %s -> %s (%s)",
                context.description, context.original_type, effective_type, correction.reason,
            )

        # 4. Advisory consistency checks
        warnings = self.validate_categorization_consistency(
            categorization.category, effective_type, context.description
        )

        return ImprovedCategorizationResult(
            category=categorization.category,
            confidence=confidence,
            method=categorization.method,
            matched_keyword=categorization.matched_keyword,
            alternatives=categorization.alternatives,
            corrected_type=correction.corrected_type,
            type_correction_reason=correction.reason,
            validation_warnings=tuple(warnings),
        )

    def validate_categorization_consistency(
        self,
        category_name: str,
        transaction_type: str,
        description: str
    ) -> List[str]:
        """
        Check that a category makes sense for the transaction type.

        Returns:
            Human-readable warnings; empty when consistent or when the category
            is not in the rule table (default and learned-only names)
        """
        warnings: List[str] = []

        rule = self.engine.rule_database.get_by_name(category_name)
        if rule is None:
            return warnings

        if rule.type != transaction_type:
            warnings.append(
                f'Categoria "{category_name}" é do tipo {describe_type(rule.type)}, '
                f"mas a transação foi classificada como {describe_type(transaction_type)}. "
                f"Verifique se está correto."
            )

        text = normalize_text(description)

        if transaction_type == INCOME and rule.type == EXPENSE:
            word = contains_any(text, INCOME_CONTRADICTION_WORDS)
            if word:
                warnings.append(
                    f'Atenção: a transação parece ser receita (contém "{word}") '
                    f'mas foi categorizada como despesa "{category_name}".'
                )

        if transaction_type == EXPENSE and rule.type == INCOME:
            word = contains_any(text, EXPENSE_CONTRADICTION_WORDS)
            if word:
                warnings.append(
                    f'Atenção: a transação parece ser despesa (contém "{word}") '
                    f'mas foi categorizada como receita "{category_name}".'
                )

        return warnings

    def categorize_batch_with_corrections(
        self,
        transactions: List,
        available_categories: Optional[List[str]] = None
    ) -> List[Dict]:
        """
        Categorize a list of transactions with corrections.

        A failing item gets the default category of its declared type instead
        of aborting the batch.

        Returns:
            List of {"transaction": TransactionContext, "result": result} in input order
        """
        def categorize_one(transaction):
            context = TransactionContext.from_dict(transaction)
            return {
                "transaction": context,
                "result": self._categorize_isolated(context, available_categories),
            }

        return map_preserving_order(categorize_one, list(transactions), self.engine.max_workers)

    def _categorize_isolated(
        self,
        context: TransactionContext,
        available_categories: Optional[List[str]]
    ) -> Optional[ImprovedCategorizationResult]:
        try:
            return self.categorize_with_corrections(context, available_categories)
        except Exception:
            logger.warning(
                "Categorization with corrections failed for %r, using default category",
                context.description, exc_info=True,
            )
            return ImprovedCategorizationResult(
                category=get_default_category(context.original_type),
                confidence=self.engine.DEFAULT_CONFIDENCE,
                method="default",
            )

    def generate_correction_report(self, results: List[Dict]) -> Dict:
        """
        Summarize the corrections applied to a batch.

        Args:
            results: Output of categorize_batch_with_corrections

        Returns:
            Dictionary with totals, average confidence and one entry per type correction
        """
        report = {
            "total_transactions": len(results),
            "type_corrections": 0,
            "warnings": 0,
            "average_confidence": 0.0,
            "corrections": [],
        }

        total_confidence = 0
        valid_results = 0

        for entry in results:
            context = entry["transaction"]
            result = entry["result"]
            if result is None:
                continue

            total_confidence += result.confidence
            valid_results += 1

            if result.corrected_type and result.corrected_type != context.original_type:
                report["type_corrections"] += 1
                report["corrections"].append({
                    "description": context.description,
                    "original_type": context.original_type,
                    "corrected_type": result.corrected_type,
                    "reason": result.type_correction_reason or "Tipo corrigido automaticamente",
                    "category": result.category,
                })

            report["warnings"] += len(result.validation_warnings)

        if valid_results > 0:
            report["average_confidence"] = total_confidence / valid_results

        return report
