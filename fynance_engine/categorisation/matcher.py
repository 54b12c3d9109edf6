"""
Category matcher combining the four matching strategies.

Runs exact, partial, fuzzy and regex matching over the rule table, pools the
candidates and ranks them by confidence weighted by rule priority.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..config.engine_config import ENGINE_CONFIG
from .pattern_matching import (
    MatchCandidate,
    exact_match,
    partial_match,
    fuzzy_match,
    regex_match,
)
from .preprocess import normalize_text, lower_text
from .rule_database import CategoryRule, RuleDatabase, find_rule_by_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorizationResult:
    """Result of transaction categorization."""
    category: str
    confidence: int
    method: str
    matched_keyword: Optional[str] = None
    alternatives: Tuple[MatchCandidate, ...] = ()


class CategoryMatcher:
    """Matches transaction descriptions against the category rule table."""

    MAX_ALTERNATIVES = ENGINE_CONFIG["matching"]["max_alternatives"]
    DEFAULT_PRIORITY = ENGINE_CONFIG["matching"]["default_priority"]

    def __init__(self, rule_database: Optional[RuleDatabase] = None):
        self.rule_database = rule_database or RuleDatabase()

    def match(
        self,
        description: str,
        transaction_type: str,
        available_rule_names: Optional[Iterable[str]] = None
    ) -> Optional[CategorizationResult]:
        """
        Categorize a description.

        Args:
            description: Raw transaction description
            transaction_type: 'income' or 'expense'; filters keyword rules
            available_rule_names: Optional category names to restrict matching to

        Returns:
            Best CategorizationResult with up to 3 alternatives, or None when
            nothing matched or the description is blank
        """
        text = normalize_text(description)
        if not text:
            return None

        # One snapshot per call so all strategies see the same rule set
        all_rules = self.rule_database.snapshot()
        allowed = set(available_rule_names) if available_rule_names else None
        rules = self._filter_rules(all_rules, transaction_type, allowed)

        # Pool order is exact > partial > fuzzy > regex; ties keep this order
        candidates: List[MatchCandidate] = []
        candidates.extend(exact_match(text, rules))
        candidates.extend(partial_match(text, rules))
        candidates.extend(fuzzy_match(lower_text(description), rules))
        candidates.extend(regex_match(text, all_rules, allowed))

        if not candidates:
            logger.debug("No match for %r (%s)", text, transaction_type)
            return None

        ranked = sorted(
            candidates,
            key=lambda c: c.confidence * self._priority(all_rules, c.category),
            reverse=True,
        )
        best = ranked[0]

        logger.debug(
            "Matched %r -> %s (%d, %s, %d candidates)",
            text, best.category, best.confidence, best.method, len(candidates),
        )

        return CategorizationResult(
            category=best.category,
            confidence=best.confidence,
            method=best.method,
            matched_keyword=best.matched_keyword,
            alternatives=self._pick_alternatives(best, ranked[1:]),
        )

    def _filter_rules(
        self,
        all_rules: Dict[str, CategoryRule],
        transaction_type: str,
        allowed: Optional[set]
    ) -> Dict[str, CategoryRule]:
        return {
            key: rule for key, rule in all_rules.items()
            if rule.type == transaction_type and (allowed is None or rule.name in allowed)
        }

    def _priority(self, all_rules: Dict[str, CategoryRule], category: str) -> int:
        rule = find_rule_by_name(all_rules, category)
        if rule is None:
            return self.DEFAULT_PRIORITY
        return rule.priority

    def _pick_alternatives(
        self,
        best: MatchCandidate,
        remaining: List[MatchCandidate]
    ) -> Tuple[MatchCandidate, ...]:
        """Next-best candidates, one per category, excluding the winner's category."""
        seen = {best.category}
        alternatives = []
        for candidate in remaining:
            if candidate.category in seen:
                continue
            seen.add(candidate.category)
            alternatives.append(candidate)
            if len(alternatives) >= self.MAX_ALTERNATIVES:
                break
        return tuple(alternatives)
