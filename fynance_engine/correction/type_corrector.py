"""
Type Correction Module for the Fynance Categorization Engine.

Detects transactions whose declared income/expense type contradicts strong
lexical signals in their description. Checks run in a fixed order and the
first signal found decides the type:
phrase rules -> expense indicators -> income indicators -> directional phrases.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config.engine_config import INCOME, describe_type
from ..categorisation.preprocess import normalize_text, contains_any
from ..patterns.type_correction_patterns import (
    TYPE_CORRECTION_RULES,
    EXPENSE_INDICATORS,
    INCOME_INDICATORS,
    DIRECTIONAL_RULES,
)


@dataclass(frozen=True)
class TypeCorrection:
    """Outcome of a type check. Empty when the declared type stands."""
    corrected_type: Optional[str] = None
    reason: Optional[str] = None


class TypeCorrector:
    """Determines the income/expense type implied by a description."""

    TYPE_CORRECTION_RULES: List[Tuple[str, str]] = TYPE_CORRECTION_RULES
    EXPENSE_INDICATORS: List[str] = EXPENSE_INDICATORS
    INCOME_INDICATORS: List[str] = INCOME_INDICATORS
    DIRECTIONAL_RULES = DIRECTIONAL_RULES

    def correct_transaction_type(self, description: str, original_type: str) -> TypeCorrection:
        """
        Check a description against the declared type.

        Args:
            description: Raw transaction description
            original_type: Declared type ('income' or 'expense')

        Returns:
            TypeCorrection with corrected_type/reason set only when the type
            implied by the description differs from original_type
        """
        implied_type, reason = self.infer_type(description)
        if implied_type is None or implied_type == str(original_type).lower():
            return TypeCorrection()
        return TypeCorrection(corrected_type=implied_type, reason=reason)

    def infer_type(self, description: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Infer the transaction type from its description.

        Returns:
            (type, reason) from the first matching signal, or (None, None)
        """
        text = normalize_text(description)
        if not text:
            return None, None

        for phrase, expected_type in self.TYPE_CORRECTION_RULES:
            if phrase in text:
                return expected_type, f'Padrão "{phrase}" indica {describe_type(expected_type)}'

        indicator = contains_any(text, self.EXPENSE_INDICATORS)
        if indicator:
            return "expense", f'Palavra "{indicator}" indica despesa (saída de dinheiro)'

        indicator = contains_any(text, self.INCOME_INDICATORS)
        if indicator:
            return INCOME, f'Palavra "{indicator}" indica receita (entrada de dinheiro)'

        return self._match_directional(text)

    def _match_directional(self, text: str) -> Tuple[Optional[str], Optional[str]]:
        for subjects, directions, expected_type in self.DIRECTIONAL_RULES:
            subject = contains_any(text, subjects)
            if not subject:
                continue
            direction = contains_any(text, directions)
            if direction:
                return expected_type, (
                    f'"{subject}" com "{direction}" indica {describe_type(expected_type)}'
                )
        return None, None
