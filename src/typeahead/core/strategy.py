"""Retrieval strategies — The two paths a content lookup can take.

``FullTextStrategy`` delegates to a full-text engine, which scores
relevance itself; ``PatternMatchStrategy`` runs a substring match against
the record store.  Adapters describe *what* they want as a
``RetrievalRequest`` and stay unaware of which path serves it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from typeahead.engines.base.engine import FullTextEngine
from typeahead.models.query import EngineQuery, RetrievalRequest, StoreQuery
from typeahead.storage.base import RecordStore

logger = logging.getLogger(__name__)


class RetrievalStrategy(ABC):
    """Serves a ``RetrievalRequest`` from one kind of backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name used in logs ('fulltext' or 'pattern')."""

    @abstractmethod
    async def retrieve(self, request: RetrievalRequest) -> list[dict[str, Any]]:
        """Return raw rows matching the request, at most ``request.limit``."""


class PatternMatchStrategy(RetrievalStrategy):
    """Case-insensitive substring / prefix match against the record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    @property
    def name(self) -> str:
        return "pattern"

    async def retrieve(self, request: RetrievalRequest) -> list[dict[str, Any]]:
        logger.debug("Pattern match on %s.%s for %r", request.collection, request.text_field, request.needle)
        return await self.store.select(StoreQuery.from_request(request))


class FullTextStrategy(RetrievalStrategy):
    """Relevance-ranked lookup through a full-text engine."""

    def __init__(self, engine: FullTextEngine) -> None:
        self.engine = engine

    @property
    def name(self) -> str:
        return "fulltext"

    async def retrieve(self, request: RetrievalRequest) -> list[dict[str, Any]]:
        logger.debug("Full-text query on %s via %s for %r", request.collection, self.engine.name, request.needle)
        return await self.engine.search(EngineQuery.from_request(request))
