"""
Tests for batch categorization.

Verifies input order is preserved on the worker pool, input fields survive,
and a failing item does not abort the batch.
"""

import time
import unittest
from unittest.mock import patch

from fynance_engine.categorisation.batch import map_preserving_order
from fynance_engine.categorisation.engine import CategoryEngine


DESCRIPTIONS = [
    "Netflix",
    "Uber",
    "farmacia",
    "xyz987 unknown merchant",
    "Salário recebido",
    "Ifood",
    "Aluguel",
]


def _transactions(count):
    return [
        {
            "date": "2025-01-%02d" % (i % 28 + 1),
            "description": DESCRIPTIONS[i % len(DESCRIPTIONS)],
            "amount": float(i),
            "type": "expense",
        }
        for i in range(count)
    ]


class TestMapPreservingOrder(unittest.TestCase):
    """Test the order-preserving executor helper."""

    def test_results_follow_input_order(self):
        # Earlier items sleep longer, so completion order is reversed
        def slow_square(n):
            time.sleep(0.005 * (10 - n))
            return n * n

        results = map_preserving_order(slow_square, list(range(10)), max_workers=4)
        self.assertEqual(results, [n * n for n in range(10)])

    def test_inline_when_single_worker(self):
        self.assertEqual(map_preserving_order(str, [1, 2, 3], max_workers=1), ["1", "2", "3"])

    def test_empty_input(self):
        self.assertEqual(map_preserving_order(str, [], max_workers=4), [])


class TestCategorizeBatch(unittest.TestCase):
    """Test CategoryEngine.categorize_batch."""

    def setUp(self):
        self.engine = CategoryEngine(max_workers=4)

    def test_batch_matches_single_categorization_in_order(self):
        transactions = _transactions(30)
        results = self.engine.categorize_batch(transactions)

        self.assertEqual(len(results), len(transactions))
        for transaction, entry in zip(transactions, results):
            self.assertEqual(entry["description"], transaction["description"])
            self.assertEqual(entry["categorization"], self.engine.categorize(transaction))

    def test_parallel_and_sequential_agree(self):
        transactions = _transactions(20)
        sequential = CategoryEngine(max_workers=1).categorize_batch(transactions)
        parallel = self.engine.categorize_batch(transactions)

        self.assertEqual(sequential, parallel)

    def test_input_fields_preserved(self):
        transactions = [{"description": "Netflix", "type": "expense", "amount": 39.9,
                         "date": "2025-01-10", "account": "conta corrente"}]
        entry = self.engine.categorize_batch(transactions)[0]

        self.assertEqual(entry["amount"], 39.9)
        self.assertEqual(entry["account"], "conta corrente")
        self.assertEqual(entry["categorization"].category, "Serviços")
        self.assertNotIn("categorization", transactions[0])

    def test_empty_batch(self):
        self.assertEqual(self.engine.categorize_batch([]), [])

    def test_options_applied_to_every_item(self):
        results = self.engine.categorize_batch(_transactions(7), {"min_confidence": 100})
        for entry in results:
            self.assertEqual(entry["categorization"].method, "default")

    def test_failing_item_gets_default(self):
        original = self.engine.categorize

        def flaky(transaction, options=None):
            if transaction.get("description") == "boom":
                raise RuntimeError("matcher exploded")
            return original(transaction, options)

        transactions = [
            {"description": "Netflix", "type": "expense"},
            {"description": "boom", "type": "income"},
            {"description": "Uber", "type": "expense"},
        ]

        with patch.object(self.engine, "categorize", side_effect=flaky):
            with self.assertLogs("fynance_engine.categorisation.engine", level="WARNING"):
                results = self.engine.categorize_batch(transactions)

        self.assertEqual(results[0]["categorization"].category, "Serviços")
        self.assertEqual(results[1]["categorization"].category, "Outros Recebimentos")
        self.assertEqual(results[1]["categorization"].method, "default")
        self.assertEqual(results[2]["categorization"].category, "Transporte")

    def test_non_mapping_item_gets_default(self):
        results = self.engine.categorize_batch([None, {"description": "Netflix", "type": "expense"}])

        self.assertEqual(results[0]["categorization"].category, "Outros Gastos")
        self.assertEqual(results[1]["categorization"].category, "Serviços")


if __name__ == "__main__":
    unittest.main()
