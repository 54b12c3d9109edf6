"""
Category Engine for automatic transaction categorization.

Orchestrates the learning store, the matcher and the confidence threshold:
user feedback always wins, rule matches are accepted above min_confidence,
and everything else falls back to a type-specific default category.
"""

import logging
import threading
from collections import Counter, deque
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..config.engine_config import ENGINE_CONFIG, EXPENSE, get_default_category
from .batch import map_preserving_order
from .matcher import CategoryMatcher, CategorizationResult
from .preprocess import normalize_text
from .rule_database import RuleDatabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LearningRecord:
    """User feedback: a description the user assigned to a category."""
    description: str
    user_category: str
    original_category: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_dict(cls, data) -> "LearningRecord":
        """Build a record from a mapping (or return an existing record as-is)."""
        if isinstance(data, LearningRecord):
            return data

        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            try:
                timestamp = datetime.fromisoformat(timestamp)
            except ValueError:
                timestamp = None

        return cls(
            description=data.get("description", ""),
            user_category=data.get("user_category", ""),
            original_category=data.get("original_category"),
            timestamp=timestamp or datetime.now(),
        )

    def to_dict(self) -> Dict:
        return {
            "description": self.description,
            "user_category": self.user_category,
            "original_category": self.original_category,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class CategorizationOptions:
    """Per-engine defaults, overridable per call."""
    min_confidence: int = ENGINE_CONFIG["min_confidence"]
    enable_learning: bool = ENGINE_CONFIG["enable_learning"]
    available_categories: Optional[Tuple[str, ...]] = None  # None = all categories

    def with_overrides(self, overrides=None) -> "CategorizationOptions":
        """Return a copy with the non-None values of ``overrides`` applied."""
        if not overrides:
            return self
        if isinstance(overrides, CategorizationOptions):
            return overrides

        names = {f.name for f in fields(self)}
        values = {
            key: value for key, value in overrides.items()
            if key in names and value is not None
        }
        if "available_categories" in values:
            values["available_categories"] = tuple(values["available_categories"])
        return replace(self, **values)


def _extract_fields(transaction) -> Tuple[str, str]:
    """Pull (description, type) out of a transaction mapping without raising."""
    if not isinstance(transaction, Mapping):
        return "", EXPENSE

    description = transaction.get("description") or ""
    if not isinstance(description, str):
        description = str(description)

    transaction_type = transaction.get("type") or EXPENSE
    return description, str(transaction_type).lower()


class CategoryEngine:
    """Main categorization engine: learning lookup, matching and fallback."""

    LEARNING_CAPACITY = ENGINE_CONFIG["learning"]["capacity"]
    LEARNED_CONFIDENCE = ENGINE_CONFIG["learning"]["confidence"]
    DEFAULT_CONFIDENCE = ENGINE_CONFIG["fallback"]["confidence"]

    def __init__(
        self,
        rule_database: Optional[RuleDatabase] = None,
        options: Optional[Dict] = None,
        max_workers: Optional[int] = None
    ):
        """Initialize the engine.

        Args:
            rule_database: Rule table to match against (a fresh built-in table if None)
            options: Default option overrides (min_confidence, enable_learning,
                available_categories)
            max_workers: Thread pool size for categorize_batch (1 = sequential)
        """
        self.rule_database = rule_database or RuleDatabase()
        self.matcher = CategoryMatcher(self.rule_database)
        self.options = CategorizationOptions().with_overrides(options)
        self.max_workers = (
            ENGINE_CONFIG["batch"]["max_workers"] if max_workers is None else max_workers
        )
        self._learning_data = deque(maxlen=self.LEARNING_CAPACITY)
        self._learning_lock = threading.Lock()

    # ----------------------------
    # Categorization
    # ----------------------------
    def categorize(self, transaction: Dict, options: Optional[Dict] = None) -> CategorizationResult:
        """
        Categorize a single transaction.

        Args:
            transaction: Mapping with 'description', 'type' ('income'/'expense'),
                'amount' and 'date'; extra fields are ignored
            options: Optional overrides for min_confidence, enable_learning and
                available_categories

        Returns:
            CategorizationResult; the type's default category when nothing
            clears min_confidence
        """
        final_options = self.options.with_overrides(options)
        description, transaction_type = _extract_fields(transaction)

        if final_options.enable_learning:
            learned = self._get_learned_record(description)
            if learned is not None:
                return CategorizationResult(
                    category=learned.user_category,
                    confidence=self.LEARNED_CONFIDENCE,
                    method="learned",
                    matched_keyword=learned.description,
                )

        result = self.matcher.match(
            description,
            transaction_type,
            final_options.available_categories,
        )

        if result is not None and result.confidence >= final_options.min_confidence:
            return result

        if result is not None:
            logger.debug(
                "Discarding %s (%d) for %r: below min_confidence %d",
                result.category, result.confidence, description, final_options.min_confidence,
            )
        return self._default_result(transaction_type)

    def categorize_batch(self, transactions: List[Dict], options: Optional[Dict] = None) -> List[Dict]:
        """
        Categorize a list of transactions.

        Each item is categorized independently; a failing item gets the default
        category instead of aborting the batch.

        Args:
            transactions: List of transaction mappings
            options: Optional overrides applied to every item

        Returns:
            List of transaction dicts (input order) with a 'categorization' key
        """
        def categorize_one(transaction):
            entry = dict(transaction) if isinstance(transaction, Mapping) else {}
            entry["categorization"] = self._categorize_isolated(transaction, options)
            return entry

        return map_preserving_order(categorize_one, list(transactions), self.max_workers)

    def _categorize_isolated(self, transaction, options: Optional[Dict]) -> CategorizationResult:
        try:
            return self.categorize(transaction, options)
        except Exception:
            logger.warning(
                "Categorization failed for %r, using default category", transaction, exc_info=True
            )
            _, transaction_type = _extract_fields(transaction)
            return self._default_result(transaction_type)

    def _default_result(self, transaction_type: str) -> CategorizationResult:
        return CategorizationResult(
            category=get_default_category(transaction_type),
            confidence=self.DEFAULT_CONFIDENCE,
            method="default",
        )

    # ----------------------------
    # Learning store
    # ----------------------------
    def learn(self, record) -> None:
        """
        Record user feedback.

        Args:
            record: LearningRecord or mapping with 'description', 'user_category'
                and optional 'original_category'. The timestamp is assigned here.
        """
        if not self.options.enable_learning:
            return

        record = replace(LearningRecord.from_dict(record), timestamp=datetime.now())
        with self._learning_lock:
            self._learning_data.append(record)

        logger.info("Learned %r -> %r", record.description, record.user_category)

    def _get_learned_record(self, description: str) -> Optional[LearningRecord]:
        """Find feedback for a description: exact match first, then containment."""
        text = normalize_text(description)
        if not text:
            return None

        with self._learning_lock:
            records = list(self._learning_data)

        for record in records:
            if normalize_text(record.description) == text:
                return record

        for record in records:
            learned = normalize_text(record.description)
            if learned and (learned in text or text in learned):
                return record

        return None

    def get_stats(self) -> Dict:
        """
        Summarize the learning store.

        Returns:
            Dictionary with total_categorized, average_confidence,
            learning_data_count and category_distribution
        """
        with self._learning_lock:
            records = list(self._learning_data)

        distribution = Counter(record.user_category for record in records)
        total = len(records)

        return {
            "total_categorized": total,
            # Learned entries always carry full confidence
            "average_confidence": float(self.LEARNED_CONFIDENCE) if total else 0.0,
            "learning_data_count": total,
            "category_distribution": dict(distribution),
        }

    def export_learning_data(self) -> List[Dict]:
        with self._learning_lock:
            return [record.to_dict() for record in self._learning_data]

    def import_learning_data(self, records: List) -> None:
        """Replace the learning store with ``records`` (not merged)."""
        converted = [LearningRecord.from_dict(record) for record in records]
        with self._learning_lock:
            self._learning_data = deque(converted, maxlen=self.LEARNING_CAPACITY)
        logger.info("Imported %d learning records", len(converted))

    def clear_learning_data(self) -> None:
        with self._learning_lock:
            self._learning_data = deque(maxlen=self.LEARNING_CAPACITY)
        logger.info("Learning data cleared")

    # ----------------------------
    # Rule table and options
    # ----------------------------
    def get_available_categories(self, transaction_type: Optional[str] = None) -> List[Dict]:
        return [
            {"key": rule.key, "name": rule.name, "type": rule.type}
            for rule in self.rule_database.snapshot().values()
            if transaction_type is None or rule.type == transaction_type
        ]

    def get_keywords_for_category(self, category_name: str) -> List[str]:
        return self.rule_database.get_keywords(category_name)

    def add_keyword_to_category(self, category_name: str, keyword: str) -> bool:
        return self.rule_database.add_keyword(category_name, keyword)

    def remove_keyword_from_category(self, category_name: str, keyword: str) -> bool:
        return self.rule_database.remove_keyword(category_name, keyword)

    def update_options(self, overrides: Dict) -> None:
        self.options = self.options.with_overrides(overrides)
