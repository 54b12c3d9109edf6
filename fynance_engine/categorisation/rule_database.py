"""
Category rule database for transaction categorization.

Holds the keyword rules loaded from the static table. The table can be
changed at runtime (keyword add/remove); every change publishes a new
immutable mapping so concurrent readers always see a complete rule set.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from ..patterns.keyword_database import KEYWORD_DATABASE
from .preprocess import normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRule:
    """A single categorization rule."""
    key: str
    name: str
    type: str  # 'income' or 'expense'
    keywords: Tuple[str, ...]
    confidence: int  # ceiling confidence for matches against this rule
    priority: int = 1


def _build_rule(key: str, info: Dict) -> CategoryRule:
    # Lower-case and drop in-rule duplicates, keeping first occurrence order
    keywords = tuple(dict.fromkeys(
        normalize_text(keyword) for keyword in info.get("keywords", []) if normalize_text(keyword)
    ))
    return CategoryRule(
        key=key,
        name=info["name"],
        type=info["type"],
        keywords=keywords,
        confidence=int(info.get("confidence", 0)),
        priority=int(info.get("priority", 1)),
    )


class RuleDatabase:
    """In-memory category rule table with copy-on-write keyword mutation."""

    def __init__(self, table: Optional[Dict[str, Dict]] = None):
        """Load rules from ``table`` (defaults to the built-in KEYWORD_DATABASE)."""
        source = KEYWORD_DATABASE if table is None else table
        self._rules: Dict[str, CategoryRule] = {
            key: _build_rule(key, info) for key, info in source.items()
        }
        self._write_lock = threading.Lock()

    def snapshot(self) -> Dict[str, CategoryRule]:
        """Return the current rule mapping. Never mutated after publication."""
        return self._rules

    def get_all(self) -> Dict[str, CategoryRule]:
        return dict(self._rules)

    def get_by_type(self, transaction_type: str) -> Dict[str, CategoryRule]:
        """Return rules of the given type, keyed by rule key."""
        return {
            key: rule for key, rule in self._rules.items()
            if rule.type == transaction_type
        }

    def get_by_name(self, name: str) -> Optional[CategoryRule]:
        """Return the rule with display name ``name``, or None."""
        return find_rule_by_name(self._rules, name)

    def get_keywords(self, category_name: str) -> List[str]:
        rule = self.get_by_name(category_name)
        if rule is None:
            return []
        return list(rule.keywords)

    def find_categories_by_keyword(self, keyword: str) -> List[CategoryRule]:
        """Return every rule that lists ``keyword`` (case-insensitive)."""
        normalized = normalize_text(keyword)
        if not normalized:
            return []
        return [rule for rule in self._rules.values() if normalized in rule.keywords]

    def add_keyword(self, category_name: str, keyword: str) -> bool:
        """
        Add a keyword to a category.

        Returns:
            True if added, False if the category is unknown, the keyword is
            blank or already present
        """
        normalized = normalize_text(keyword)
        if not normalized:
            return False

        with self._write_lock:
            rule = find_rule_by_name(self._rules, category_name)
            if rule is None or normalized in rule.keywords:
                return False
            self._publish(replace(rule, keywords=rule.keywords + (normalized,)))

        logger.info("Keyword %r added to category %r", normalized, category_name)
        return True

    def remove_keyword(self, category_name: str, keyword: str) -> bool:
        """
        Remove a keyword from a category.

        Returns:
            True if removed, False if the category is unknown or the keyword
            is not present
        """
        normalized = normalize_text(keyword)

        with self._write_lock:
            rule = find_rule_by_name(self._rules, category_name)
            if rule is None or normalized not in rule.keywords:
                return False
            keywords = tuple(k for k in rule.keywords if k != normalized)
            self._publish(replace(rule, keywords=keywords))

        logger.info("Keyword %r removed from category %r", normalized, category_name)
        return True

    def _publish(self, rule: CategoryRule) -> None:
        # Caller holds the write lock
        rules = dict(self._rules)
        rules[rule.key] = rule
        self._rules = rules


def find_rule_by_name(rules: Dict[str, CategoryRule], name: str) -> Optional[CategoryRule]:
    """Look up a rule by display name in a rule mapping."""
    for rule in rules.values():
        if rule.name == name:
            return rule
    return None
