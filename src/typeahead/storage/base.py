"""Base record store — Abstract interface for the category record storage.

The typeahead core only needs three capabilities from storage:
  1. Substring / prefix matching on one text field
  2. Equality filtering on status / type fields (optionally through a join)
  3. Ordering by identifier or timestamp, with a limit
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from typeahead.models.query import StoreQuery


class StoreError(Exception):
    """Raised when the record store cannot serve a query."""


class RecordStore(ABC):
    """Abstract base class for record stores.

    Implementations return plain dict rows; related records requested
    through ``StoreQuery.include`` are embedded under the relation name.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique store name (e.g., 'memory')."""

    @abstractmethod
    async def select(self, query: StoreQuery) -> list[dict[str, Any]]:
        """Run a filtered, ordered, limited read.

        Args:
            query: The store query.

        Returns:
            Matching rows, at most ``query.limit`` of them.

        Raises:
            StoreError: If the store is unavailable or rejects the query.
        """

    async def health_check(self) -> bool:
        """Report whether the store can currently serve queries."""
        return True
