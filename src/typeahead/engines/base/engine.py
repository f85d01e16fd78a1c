"""Base full-text engine — Abstract interface for all full-text connectors.

A full-text engine is an optional collaborator.  When the capability
selector reports it available, content lookups are delegated to it and
the engine scores relevance itself.  Every engine is responsible for:
  1. Executing filtered, limited free-text queries against one index
  2. Returning hits in the same shape as record-store rows
  3. Reporting health status
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from typeahead.models.query import EngineQuery


class EngineHealth(BaseModel):
    """Health status of a full-text engine."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class FullTextEngine(ABC):
    """Abstract base class for full-text search engines.

    All engines must implement:
      - search(): Execute a query and return raw hits
      - health_check(): Report engine health status

    Engines should be stateless apart from their HTTP client.  Connection
    setup happens in ``initialize()``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique engine name (e.g., 'meilisearch', 'solr')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections and verify the backend is reachable."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections and release resources."""

    @abstractmethod
    async def search(self, query: EngineQuery) -> list[dict[str, Any]]:
        """Execute a free-text query with filters and limit applied.

        Args:
            query: The engine query.

        Returns:
            Hits as plain dicts shaped like record-store rows.

        Raises:
            EngineConnectionError: If the engine is not initialized or unreachable.
            EngineQueryError: If the backend rejects the query.
        """

    @abstractmethod
    async def health_check(self) -> EngineHealth:
        """Check the health of the search backend."""
