"""
Simple examples demonstrating the Fynance categorization engine.
"""

import logging

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Basic categorization
print("=" * 60)
print("Example 1: Basic Transaction Categorization")
print("=" * 60)

from fynance_engine import CategoryEngine

engine = CategoryEngine()

transactions = [
    {"date": "2025-01-15", "description": "Supermercado Extra", "amount": 150.0, "type": "expense"},
    {"date": "2025-01-15", "description": "Netflix", "amount": 39.9, "type": "expense"},
    {"date": "2025-01-16", "description": "Uber", "amount": 23.5, "type": "expense"},
    {"date": "2025-01-20", "description": "Salário janeiro", "amount": 5000.0, "type": "income"},
    {"date": "2025-01-21", "description": "xyz987 unknown merchant", "amount": 42.0, "type": "expense"},
]

print("\nCategorizing transactions:")
for entry in engine.categorize_batch(transactions):
    result = entry["categorization"]
    print(f"  {entry['description']:30} -> {result.category:20} (conf: {result.confidence}, {result.method})")

# Example 2: Learning from user feedback
print("\n" + "=" * 60)
print("Example 2: User Feedback")
print("=" * 60)

engine.learn({"description": "Uber", "user_category": "Trabalho", "original_category": "Transporte"})
result = engine.categorize({"description": "UBER", "type": "expense"})
print(f"\n  {'UBER':30} -> {result.category:20} (conf: {result.confidence}, {result.method})")
print(f"  Stats: {engine.get_stats()}")

# Example 3: Type correction
print("\n" + "=" * 60)
print("Example 3: Income/Expense Type Correction")
print("=" * 60)

from fynance_engine import categorize_transactions

output = categorize_transactions([
    {"date": "2025-01-16", "description": "PIX recebido de Maria", "amount": 500.0, "type": "expense"},
    {"date": "2025-01-17", "description": "Compra no mercado", "amount": 80.0, "type": "income"},
    {"date": "2025-01-18", "description": "Aluguel", "amount": 1500.0, "type": "expense"},
])

print("\nCategorizing with corrections:")
for item in output["categorized_transactions"]:
    status = f"corrected to {item['corrected_type']}" if item["corrected_type"] else "type ok"
    print(f"  {item['description']:30} -> {item['category']:20} (conf: {item['confidence']}, {status})")
    for warning in item["validation_warnings"]:
        print(f"      ! {warning}")

report = output["report"]
print(f"\n  Corrections: {report['type_corrections']}/{report['total_transactions']}"
      f", average confidence: {report['average_confidence']:.1f}")

print("\n" + "=" * 60)
print("✓ All examples completed successfully!")
print("=" * 60)
