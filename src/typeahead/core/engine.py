"""Typeahead Engine — Public entry point for federated suggestions.

For a query and a per-category limit the engine:
  1. Picks the retrieval path for each category (full-text or pattern match)
  2. Runs the category adapter under a timeout
  3. Normalizes every native record into a ``TagResult``
  4. Merges category lists in a fixed order

Two families of accessors are exposed:
  - **Raw** (``notes``, ``tags``, ...) — native records for category widgets.
  - **Search** (``search_notes``, ..., ``search_all``) — normalized ``ResultList``.

``search_all`` never raises for a backend problem: a failing or slow
category is logged and left out, and the other categories still answer.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from typeahead.adapters import (
    CommentAdapter,
    MapAdapter,
    NoteAdapter,
    ProfileAdapter,
    QuestionAdapter,
    TagAdapter,
    WikiAdapter,
)
from typeahead.adapters.base.adapter import DEFAULT_LIMIT, CategoryAdapter, is_blank
from typeahead.adapters.base.exceptions import CategoryRetrievalError
from typeahead.cache.manager import CacheManager
from typeahead.config.settings import SearchSettings
from typeahead.core.capability import EngineCapability
from typeahead.core.normalizer import normalize
from typeahead.core.strategy import FullTextStrategy, PatternMatchStrategy, RetrievalStrategy
from typeahead.engines.base.engine import FullTextEngine
from typeahead.models.records import (
    CommentRecord,
    NodeOrder,
    NodeRecord,
    ProfileRecord,
    TagRecord,
)
from typeahead.models.result import ResultList, ResultListBuilder
from typeahead.storage.base import RecordStore
from typeahead.storage.memory import MemoryRecordStore

if TYPE_CHECKING:
    from typeahead.config.settings import Settings
    from typeahead.engines.base.registry import EngineRegistry

logger = logging.getLogger(__name__)

# Merge order of search_all
SEARCH_ALL_ORDER: tuple[str, ...] = ("note", "wiki", "profile", "tag", "map", "question", "comment")


class TypeaheadEngine:
    """Federated typeahead orchestrator.

    Attributes:
        store: Record store serving pattern-match lookups.
        capability: Whether the full-text engine may be used.
        fulltext: Optional full-text engine.
        settings: Limits, timeout and concurrency configuration.
        cache: Optional ``search_all`` response cache.
    """

    def __init__(
        self,
        store: RecordStore,
        capability: EngineCapability | None = None,
        fulltext: FullTextEngine | None = None,
        settings: SearchSettings | None = None,
        cache: CacheManager | None = None,
    ) -> None:
        self.store = store
        self.capability = capability or EngineCapability()
        self.fulltext = fulltext
        self.settings = settings or SearchSettings()
        self.cache = cache
        self._pattern = PatternMatchStrategy(store)
        self._fulltext = FullTextStrategy(fulltext) if fulltext is not None else None
        self.adapters: dict[str, CategoryAdapter[Any]] = {
            adapter.category: adapter
            for adapter in (
                NoteAdapter(),
                WikiAdapter(),
                ProfileAdapter(),
                TagAdapter(),
                MapAdapter(),
                QuestionAdapter(),
                CommentAdapter(),
            )
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        store: RecordStore | None = None,
        registry: EngineRegistry | None = None,
    ) -> TypeaheadEngine:
        """Build an engine (store, full-text engine, cache) from configuration.

        The full-text engine is created but not connected; call
        ``initialize()`` before serving queries.
        """
        if store is None:
            data_file = settings.storage.data_file
            store = MemoryRecordStore.from_file(data_file) if data_file else MemoryRecordStore()

        fulltext: FullTextEngine | None = None
        if settings.fulltext.enabled:
            if registry is None:
                from typeahead.engines import default_registry

                registry = default_registry()
            fulltext = registry.create(settings.fulltext.backend, **settings.fulltext.engine_kwargs())

        cache = CacheManager(settings.cache) if settings.cache.enabled else None

        return cls(
            store=store,
            capability=EngineCapability.from_settings(settings.fulltext),
            fulltext=fulltext,
            settings=settings.search,
            cache=cache,
        )

    async def initialize(self) -> None:
        """Connect the full-text engine and the cache, if configured."""
        if self.fulltext is not None and self.capability.is_engine_available():
            await self.fulltext.initialize()
        if self.cache is not None:
            await self.cache.initialize()
        logger.info(
            "Typeahead engine initialized (store=%s, fulltext=%s)",
            self.store.name,
            self.fulltext.name if self._engine_available() else "disabled",
        )

    async def shutdown(self) -> None:
        """Release engine and cache connections."""
        if self.fulltext is not None:
            await self.fulltext.shutdown()
        if self.cache is not None:
            await self.cache.shutdown()
        logger.info("Typeahead engine shut down")

    # ──────────────────────────────────────────────────────────────────────
    # Raw category accessors
    # ──────────────────────────────────────────────────────────────────────

    async def tags(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[TagRecord]:
        return await self._find("tag", query, limit)

    async def notes(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[NodeRecord]:
        return await self._find("note", query, limit)

    async def wikis(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[NodeRecord]:
        return await self._find("wiki", query, limit)

    async def maps(
        self, query: str | None, limit: int = DEFAULT_LIMIT, order: NodeOrder = NodeOrder.DEFAULT
    ) -> list[NodeRecord]:
        return await self._find("map", query, limit, order)

    async def questions(
        self, query: str | None, limit: int = DEFAULT_LIMIT, order: NodeOrder = NodeOrder.DEFAULT
    ) -> list[NodeRecord]:
        return await self._find("question", query, limit, order)

    async def comments(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[CommentRecord]:
        return await self._find("comment", query, limit)

    async def profiles(self, query: str | None, limit: int = DEFAULT_LIMIT) -> list[ProfileRecord]:
        return await self._find("profile", query, limit)

    # ──────────────────────────────────────────────────────────────────────
    # Normalized search accessors
    # ──────────────────────────────────────────────────────────────────────

    async def search_notes(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        return await self._search("note", query, limit)

    async def search_wikis(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        return await self._search("wiki", query, limit)

    async def search_maps(
        self, query: str | None, limit: int = DEFAULT_LIMIT, order: NodeOrder = NodeOrder.DEFAULT
    ) -> ResultList:
        return await self._search("map", query, limit, order)

    async def search_tags(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        return await self._search("tag", query, limit)

    async def search_questions(
        self, query: str | None, limit: int = DEFAULT_LIMIT, order: NodeOrder = NodeOrder.DEFAULT
    ) -> ResultList:
        return await self._search("question", query, limit, order)

    async def search_comments(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        return await self._search("comment", query, limit)

    async def search_profiles(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        return await self._search("profile", query, limit)

    async def search_all(self, query: str | None, limit: int = DEFAULT_LIMIT) -> ResultList:
        """Search every category and merge the results in category order.

        ``limit`` applies per category, so up to ``7 * limit`` entries can
        come back.  Failed or timed-out categories contribute nothing.

        Args:
            query: Raw user input; blank input returns an empty list without any backend call.
            limit: Per-category result limit.

        Returns:
            The merged ``ResultList``.
        """
        if is_blank(query):
            return ResultList.empty()
        assert query is not None

        if self.cache is not None:
            cached = await self.cache.get_results(query, limit)
            if cached is not None:
                logger.debug("search_all cache hit for %r", query)
                return cached

        start_time = time.monotonic()
        outcomes: list[ResultList | BaseException]
        if self.settings.concurrent:
            outcomes = list(
                await asyncio.gather(
                    *(self._search(category, query, limit) for category in SEARCH_ALL_ORDER),
                    return_exceptions=True,
                )
            )
        else:
            outcomes = []
            for category in SEARCH_ALL_ORDER:
                try:
                    outcomes.append(await self._search(category, query, limit))
                except CategoryRetrievalError as e:
                    outcomes.append(e)

        builder = ResultListBuilder()
        failed: list[str] = []
        for category, outcome in zip(SEARCH_ALL_ORDER, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.warning("Category '%s' dropped from search_all: %s", category, outcome, exc_info=outcome)
                failed.append(category)
                continue
            builder.extend(outcome)

        result = builder.build()
        logger.debug(
            "search_all %r: %d entries, %d failed categories in %d ms",
            query,
            len(result),
            len(failed),
            int((time.monotonic() - start_time) * 1000),
        )

        if self.cache is not None and not failed:
            await self.cache.set_results(query, limit, result)
        return result

    # ──────────────────────────────────────────────────────────────────────
    # Shared internals
    # ──────────────────────────────────────────────────────────────────────

    def _engine_available(self) -> bool:
        return self._fulltext is not None and self.capability.is_engine_available()

    def select_strategy(self, adapter: CategoryAdapter[Any]) -> RetrievalStrategy:
        """Full-text when the capability allows it and the category supports it, else pattern match."""
        if adapter.supports_fulltext and self._engine_available():
            assert self._fulltext is not None
            return self._fulltext
        return self._pattern

    async def _find(
        self,
        category: str,
        query: str | None,
        limit: int,
        order: NodeOrder = NodeOrder.DEFAULT,
    ) -> list[Any]:
        """Run one category adapter under the configured timeout.

        Raises:
            CategoryRetrievalError: On any backend error, malformed limit or timeout.
        """
        if is_blank(query):
            return []
        adapter = self.adapters[category]
        strategy = self.select_strategy(adapter)
        timeout = self.settings.category_timeout
        try:
            return await asyncio.wait_for(
                adapter.find(query, limit, strategy=strategy, order=order),
                timeout=timeout,
            )
        except TimeoutError as e:
            raise CategoryRetrievalError(category, f"timed out after {timeout}s ({strategy.name})") from e
        except Exception as e:
            raise CategoryRetrievalError(category, f"{type(e).__name__}: {e}") from e

    async def _search(
        self,
        category: str,
        query: str | None,
        limit: int,
        order: NodeOrder = NodeOrder.DEFAULT,
    ) -> ResultList:
        if is_blank(query):
            return ResultList.empty()
        adapter = self.adapters[category]
        builder = ResultListBuilder()
        for record in await self._find(category, query, limit, order):
            builder.add(normalize(adapter.to_hit(record)))
        return builder.build()
