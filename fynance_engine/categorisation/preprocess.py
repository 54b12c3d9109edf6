"""
Preprocessing utilities for transaction categorization.
Handles text normalization for matching and lookups.
"""

from typing import Optional


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Lower-cased, trimmed text ("" for None or non-text input)
    """
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return text.lower().strip()


def lower_text(text: Optional[str]) -> str:
    """Lower-case text without trimming (whole-string similarity input)."""
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return text.lower()


def contains_any(text: str, words) -> Optional[str]:
    """
    Return the first word from ``words`` contained in ``text``.

    Args:
        text: Normalized text to search
        words: Ordered iterable of lower-case words/phrases

    Returns:
        The first matching word, or None
    """
    for word in words:
        if word in text:
            return word
    return None
