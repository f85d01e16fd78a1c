"""Adapter-level exceptions."""

from __future__ import annotations


class CategoryRetrievalError(Exception):
    """Raised when one category's backend fails, times out or rejects the query.

    The failure is scoped to ``category``; sibling categories are unaffected.
    """

    def __init__(self, category: str, message: str) -> None:
        super().__init__(f"{category}: {message}")
        self.category = category
