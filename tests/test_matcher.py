"""
Tests for CategoryMatcher ranking and alternatives.
"""

import unittest

from fynance_engine.categorisation.matcher import CategoryMatcher
from fynance_engine.categorisation.rule_database import RuleDatabase


def _rule(name, confidence, priority, keywords, type_="expense"):
    return {"name": name, "type": type_, "keywords": keywords,
            "confidence": confidence, "priority": priority}


class TestCategoryMatcher(unittest.TestCase):
    """Test matching against the built-in rule table."""

    def setUp(self):
        self.matcher = CategoryMatcher()

    def test_blank_description_returns_none(self):
        self.assertIsNone(self.matcher.match("", "expense"))
        self.assertIsNone(self.matcher.match("   ", "expense"))
        self.assertIsNone(self.matcher.match(None, "expense"))

    def test_exact_keyword_wins(self):
        result = self.matcher.match("Netflix", "expense")
        self.assertEqual(result.category, "Serviços")
        self.assertEqual(result.confidence, 90)
        self.assertEqual(result.method, "exact")
        self.assertEqual(result.matched_keyword, "netflix")

    def test_exact_keyword_other_categories(self):
        cases = [
            ("Spotify", "Serviços", 90),
            ("Udemy", "Educação", 95),
            ("  IFOOD  ", "Alimentação", 95),
        ]
        for description, category, confidence in cases:
            with self.subTest(description=description):
                result = self.matcher.match(description, "expense")
                self.assertEqual(result.category, category)
                self.assertEqual(result.confidence, confidence)
                self.assertEqual(result.method, "exact")

    def test_keyword_rules_filtered_by_type(self):
        self.assertIsNone(self.matcher.match("uber", "income"))

    def test_unknown_type_matches_nothing_but_regex(self):
        self.assertIsNone(self.matcher.match("netflix", "transfer"))

    def test_regex_ignores_transaction_type(self):
        """Salário is an income rule but its pattern applies to any type."""
        result = self.matcher.match("Salário", "expense")
        self.assertEqual(result.category, "Salário")
        self.assertEqual(result.confidence, 95)
        self.assertEqual(result.method, "regex")

    def test_priority_weighted_ranking(self):
        """'farmacia' hits Compras (90 x 8) and Saúde (95 x 10)."""
        result = self.matcher.match("farmacia", "expense")
        self.assertEqual(result.category, "Saúde")
        self.assertEqual(result.method, "exact")
        self.assertIn("Compras", [alt.category for alt in result.alternatives])

    def test_available_categories_restrict_matching(self):
        result = self.matcher.match("farmacia", "expense", ["Compras"])
        self.assertEqual(result.category, "Compras")
        self.assertEqual(result.confidence, 90)

    def test_empty_available_list_means_all_categories(self):
        result = self.matcher.match("farmacia", "expense", [])
        self.assertEqual(result.category, "Saúde")

    def test_tie_keeps_discovery_order(self):
        """Investimentos and Impostos e Taxas both score 95 x 10 for 'juros'."""
        result = self.matcher.match("juros", "expense")
        self.assertEqual(result.category, "Investimentos")
        self.assertIn("Impostos e Taxas", [alt.category for alt in result.alternatives])

    def test_low_confidence_result_still_returned(self):
        """The matcher does not apply min_confidence; the engine does."""
        result = self.matcher.match("supermercado qwzyk", "expense")
        self.assertEqual(result.category, "Alimentação")
        self.assertLess(result.confidence, 70)

    def test_alternatives_exclude_winner(self):
        result = self.matcher.match("farmacia", "expense")
        categories = [alt.category for alt in result.alternatives]
        self.assertNotIn(result.category, categories)
        self.assertEqual(len(categories), len(set(categories)))


class TestMatcherCustomRules(unittest.TestCase):
    """Test ranking rules with a hand-built table."""

    def test_priority_beats_raw_confidence(self):
        db = RuleDatabase({
            "a": _rule("A", 80, 10, ["xpto"]),
            "b": _rule("B", 95, 1, ["xpto"]),
        })
        result = CategoryMatcher(db).match("xpto", "expense")
        self.assertEqual(result.category, "A")
        self.assertEqual(result.confidence, 80)

    def test_at_most_three_distinct_alternatives(self):
        db = RuleDatabase({
            key: _rule(key.upper(), 90 - idx, 5, ["xpto"])
            for idx, key in enumerate(["a", "b", "c", "d", "e"])
        })
        result = CategoryMatcher(db).match("xpto", "expense")

        self.assertEqual(result.category, "A")
        self.assertEqual([alt.category for alt in result.alternatives], ["B", "C", "D"])

    def test_matcher_sees_runtime_keywords(self):
        db = RuleDatabase({"a": _rule("A", 90, 5, ["xpto"])})
        matcher = CategoryMatcher(db)
        self.assertIsNone(matcher.match("novidade", "expense"))

        db.add_keyword("A", "novidade")
        self.assertEqual(matcher.match("novidade", "expense").category, "A")


if __name__ == "__main__":
    unittest.main()
