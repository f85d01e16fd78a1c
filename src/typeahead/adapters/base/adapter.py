"""Base category adapter — Abstract interface for one typeahead category.

Every adapter is responsible for:
  1. Refusing to do any work for an empty query
  2. Describing its lookup (text field, status/type filters, ordering)
  3. Validating raw rows into its native record model
  4. Wrapping records into category hits for the normalizer
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from typeahead.core.strategy import RetrievalStrategy
from typeahead.models.hits import CategoryHit
from typeahead.models.query import RetrievalRequest
from typeahead.models.records import NodeOrder

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

RecordT = TypeVar("RecordT", bound=BaseModel)


def is_blank(query: str | None) -> bool:
    """True for ``None``, empty and whitespace-only queries."""
    return query is None or not str(query).strip()


class CategoryAdapter(ABC, Generic[RecordT]):
    """Abstract base class for category adapters.

    Subclasses set ``category`` and ``record_model`` and implement
    ``build_request()`` and ``to_hit()``.  Categories that never use the
    full-text engine set ``supports_fulltext = False``.
    """

    category: ClassVar[str]
    record_model: ClassVar[type[BaseModel]]
    supports_fulltext: ClassVar[bool] = True

    async def find(
        self,
        query: str | None,
        limit: int = DEFAULT_LIMIT,
        *,
        strategy: RetrievalStrategy,
        order: NodeOrder = NodeOrder.DEFAULT,
    ) -> list[RecordT]:
        """Look up records matching ``query``.

        Args:
            query: Raw user input; blank input returns ``[]`` without a backend call.
            limit: Maximum number of records.
            strategy: Retrieval path chosen for this call.
            order: Secondary sort, honoured by categories that support it.

        Returns:
            Native records, at most ``limit`` of them.

        Raises:
            ValueError: If ``limit`` is not a positive integer.
        """
        if is_blank(query):
            return []
        self.check_limit(limit)
        request = self.build_request(str(query).strip(), limit, order)
        rows = await strategy.retrieve(request)
        return self.to_records(rows)[:limit]

    @abstractmethod
    def build_request(self, query: str, limit: int, order: NodeOrder) -> RetrievalRequest:
        """Describe the lookup for ``query``."""

    @abstractmethod
    def to_hit(self, record: RecordT) -> CategoryHit:
        """Tag a record with this adapter's category."""

    def accept(self, record: RecordT) -> bool:
        """Final visibility check applied to every record, whatever path produced it."""
        return True

    def to_records(self, rows: list[dict[str, Any]]) -> list[RecordT]:
        records: list[RecordT] = []
        for row in rows:
            try:
                record = self.record_model.model_validate(row)
            except ValidationError as e:
                logger.warning("Skipping malformed %s row: %s", self.category, e.errors(include_url=False))
                continue
            if self.accept(record):  # type: ignore[arg-type]
                records.append(record)  # type: ignore[arg-type]
        return records

    @staticmethod
    def check_limit(limit: Any) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
