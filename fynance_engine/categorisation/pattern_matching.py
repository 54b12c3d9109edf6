"""
Pattern Matching strategies for Transaction Categorization.

Provides the four matching strategies used by the matcher: exact keyword,
partial (substring) keyword, fuzzy (whole-string Levenshtein) and regex.
Each strategy returns a list of MatchCandidate in discovery order.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from rapidfuzz.distance import Levenshtein

from ..config.engine_config import ENGINE_CONFIG
from ..patterns.keyword_database import REGEX_PATTERNS
from .rule_database import CategoryRule, find_rule_by_name


PARTIAL_THRESHOLD = ENGINE_CONFIG["matching"]["partial_threshold"]
FUZZY_THRESHOLD = ENGINE_CONFIG["matching"]["fuzzy_threshold"]

# Pre-compiled regex patterns, kept in table order
COMPILED_REGEX_PATTERNS = [
    (re.compile(entry["pattern"], re.IGNORECASE), entry["category"], entry["confidence"])
    for entry in REGEX_PATTERNS
]


@dataclass(frozen=True)
class MatchCandidate:
    """A single match produced by one strategy."""
    category: str
    confidence: int
    method: str  # 'exact', 'partial', 'fuzzy', 'regex', 'learned', 'default'
    matched_keyword: Optional[str] = None


def round_half_up(value: float) -> int:
    """Round a non-negative score to the nearest integer (.5 rounds up)."""
    return int(value + 0.5)


def calculate_similarity(first: str, second: str) -> float:
    """
    Normalized Levenshtein similarity between two whole strings.

    Returns:
        (max_len - distance) / max_len, or 1.0 when both strings are empty
    """
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    distance = Levenshtein.distance(first, second)
    return (longest - distance) / longest


def exact_match(description: str, rules: Dict[str, CategoryRule]) -> List[MatchCandidate]:
    """
    Match rules whose keyword equals the whole description.

    Only the first equal keyword of each rule produces a candidate.

    Args:
        description: Trimmed, lower-cased description
        rules: Candidate rules keyed by rule key

    Returns:
        One candidate per matching rule, confidence at the rule ceiling
    """
    results = []
    for rule in rules.values():
        for keyword in rule.keywords:
            if description == keyword:
                results.append(MatchCandidate(
                    category=rule.name,
                    confidence=rule.confidence,
                    method="exact",
                    matched_keyword=keyword,
                ))
                break
    return results


def partial_match(description: str, rules: Dict[str, CategoryRule]) -> List[MatchCandidate]:
    """
    Match keywords contained in the description.

    Confidence is the keyword's share of the description length, capped at
    the rule ceiling. Hits below PARTIAL_THRESHOLD are dropped.
    """
    results = []
    if not description:
        return results

    for rule in rules.values():
        for keyword in rule.keywords:
            if keyword not in description:
                continue
            confidence = min(rule.confidence, (len(keyword) / len(description)) * 100)
            if confidence >= PARTIAL_THRESHOLD * 100:
                results.append(MatchCandidate(
                    category=rule.name,
                    confidence=round_half_up(confidence),
                    method="partial",
                    matched_keyword=keyword,
                ))
    return results


def fuzzy_match(description: str, rules: Dict[str, CategoryRule]) -> List[MatchCandidate]:
    """
    Match keywords by whole-string edit-distance similarity.

    The full description is compared against each keyword; this is not
    token-level matching, and the thresholds depend on that.

    Args:
        description: Lower-cased description
        rules: Candidate rules keyed by rule key

    Returns:
        Candidates with similarity >= FUZZY_THRESHOLD, scaled by rule ceiling
    """
    results = []
    for rule in rules.values():
        for keyword in rule.keywords:
            similarity = calculate_similarity(description, keyword)
            if similarity >= FUZZY_THRESHOLD:
                results.append(MatchCandidate(
                    category=rule.name,
                    confidence=round_half_up(similarity * rule.confidence),
                    method="fuzzy",
                    matched_keyword=keyword,
                ))
    return results


def regex_match(
    description: str,
    all_rules: Dict[str, CategoryRule],
    available_rule_names: Optional[Set[str]] = None
) -> List[MatchCandidate]:
    """
    Match the fixed regex patterns against the description.

    Patterns carry their own category, so they are checked against the full
    rule table rather than the type-filtered subset. A pattern only yields a
    candidate when its category exists (and is available, if restricted).
    """
    results = []
    for pattern, category, confidence in COMPILED_REGEX_PATTERNS:
        if not pattern.search(description):
            continue
        rule = find_rule_by_name(all_rules, category)
        if rule is None:
            continue
        if available_rule_names and category not in available_rule_names:
            continue
        results.append(MatchCandidate(
            category=category,
            confidence=min(confidence, rule.confidence),
            method="regex",
            matched_keyword=pattern.pattern,
        ))
    return results
