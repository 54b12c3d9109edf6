"""
Tests for the individual matching strategies.
"""

import unittest

from fynance_engine.categorisation.pattern_matching import (
    calculate_similarity,
    round_half_up,
    exact_match,
    partial_match,
    fuzzy_match,
    regex_match,
)
from fynance_engine.categorisation.rule_database import RuleDatabase


class TestSimilarity(unittest.TestCase):
    """Test whole-string Levenshtein similarity."""

    def test_identical_strings(self):
        self.assertEqual(calculate_similarity("netflix", "netflix"), 1.0)

    def test_empty_strings(self):
        self.assertEqual(calculate_similarity("", ""), 1.0)

    def test_classic_distance(self):
        """kitten -> sitting is 3 edits over 7 characters."""
        self.assertAlmostEqual(calculate_similarity("kitten", "sitting"), 4 / 7)

    def test_not_token_based(self):
        """Word order matters: the whole string is compared."""
        self.assertLess(calculate_similarity("pizza hut", "hut pizza"), 0.7)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(66.5), 67)
        self.assertEqual(round_half_up(66.4), 66)
        self.assertEqual(round_half_up(68.6), 69)


class TestStrategies(unittest.TestCase):
    """Test exact, partial, fuzzy and regex strategies."""

    def setUp(self):
        self.db = RuleDatabase()
        self.expense = self.db.get_by_type("expense")
        self.all_rules = self.db.snapshot()

    def test_exact_match(self):
        results = exact_match("netflix", self.expense)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].category, "Serviços")
        self.assertEqual(results[0].confidence, 90)
        self.assertEqual(results[0].method, "exact")
        self.assertEqual(results[0].matched_keyword, "netflix")

    def test_exact_match_one_candidate_per_rule(self):
        """'farmacia' is listed by two rules; each contributes once."""
        categories = [c.category for c in exact_match("farmacia", self.expense)]
        self.assertEqual(sorted(categories), ["Compras", "Saúde"])

    def test_partial_match_confidence_from_length_ratio(self):
        """'uber' is 4 of 6 characters in 'uber x' -> 67."""
        results = partial_match("uber x", self.expense)
        transport = [c for c in results if c.category == "Transporte"]
        self.assertEqual(len(transport), 1)
        self.assertEqual(transport[0].confidence, 67)
        self.assertEqual(transport[0].method, "partial")

    def test_partial_match_below_threshold_dropped(self):
        results = partial_match("posto de gasolina da esquina", self.expense)
        self.assertEqual(results, [])

    def test_partial_match_capped_at_ceiling(self):
        results = partial_match("uber", self.expense)
        self.assertEqual(results[0].confidence, 95)

    def test_fuzzy_match_typo(self):
        """'netflx' is one edit from 'netflix': round(6/7 * 90) = 77."""
        results = fuzzy_match("netflx", self.expense)
        netflix = [c for c in results if c.matched_keyword == "netflix"]
        self.assertEqual(len(netflix), 1)
        self.assertEqual(netflix[0].category, "Serviços")
        self.assertEqual(netflix[0].confidence, 77)
        self.assertEqual(netflix[0].method, "fuzzy")

    def test_fuzzy_match_never_exceeds_ceiling(self):
        for candidate in fuzzy_match("uber", self.expense):
            rule = self.db.get_by_name(candidate.category)
            self.assertLessEqual(candidate.confidence, rule.confidence)

    def test_regex_match(self):
        results = regex_match("pix recebido de maria", self.all_rules)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].category, "Transferências")
        self.assertEqual(results[0].confidence, 95)
        self.assertEqual(results[0].method, "regex")

    def test_regex_match_keeps_pattern_order(self):
        results = regex_match("depósito salário", self.all_rules)
        self.assertEqual(
            [(c.category, c.confidence) for c in results],
            [("Transferências", 90), ("Salário", 95)],
        )

    def test_regex_match_respects_available_names(self):
        results = regex_match("depósito salário", self.all_rules, {"Salário"})
        self.assertEqual([c.category for c in results], ["Salário"])

    def test_regex_match_requires_category_in_table(self):
        db = RuleDatabase({
            "lazer": {"name": "Lazer", "type": "expense", "keywords": ["cinema"],
                      "confidence": 90, "priority": 8},
        })
        self.assertEqual(regex_match("pix recebido", db.snapshot()), [])

    def test_regex_confidence_clamped_to_rule_ceiling(self):
        db = RuleDatabase({
            "salario": {"name": "Salário", "type": "income", "keywords": [],
                        "confidence": 80, "priority": 5},
        })
        results = regex_match("salario", db.snapshot())
        self.assertEqual(results[0].confidence, 80)


if __name__ == "__main__":
    unittest.main()
