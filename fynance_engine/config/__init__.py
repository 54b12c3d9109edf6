"""
Configuration module for the Fynance Categorization Engine.

This module contains the engine configuration dictionary and type constants.
"""

from .engine_config import (
    ENGINE_CONFIG,
    INCOME,
    EXPENSE,
    TRANSACTION_TYPES,
    describe_type,
    get_default_category,
)

__all__ = [
    "ENGINE_CONFIG",
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "describe_type",
    "get_default_category",
]
