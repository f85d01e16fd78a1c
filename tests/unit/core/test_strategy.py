"""Tests for retrieval strategies and the capability selector."""

from __future__ import annotations

from typeahead.config.settings import FullTextSettings
from typeahead.core.capability import EngineCapability
from typeahead.core.strategy import FullTextStrategy, PatternMatchStrategy
from typeahead.models.query import RetrievalRequest, SortField
from tests.fakes import FakeFullTextEngine, RecordingStore


def _request(**kwargs) -> RetrievalRequest:
    defaults = {
        "collection": "node",
        "text_field": "title",
        "needle": "map",
        "filters": {"type": "note", "status": 1},
        "order_by": [SortField(field="changed")],
        "limit": 3,
    }
    return RetrievalRequest(**{**defaults, **kwargs})


class TestEngineCapability:
    def test_default_disabled(self) -> None:
        assert EngineCapability().is_engine_available() is False

    def test_from_settings(self) -> None:
        assert EngineCapability.from_settings(FullTextSettings(enabled=True)).is_engine_available() is True


class TestPatternMatchStrategy:
    async def test_translates_to_store_query(self, store: RecordingStore) -> None:
        rows = await PatternMatchStrategy(store).retrieve(_request())
        query = store.queries[-1]
        assert query.collection == "node"
        assert query.needle == "map"
        assert query.filters == {"type": "note", "status": 1}
        assert query.limit == 3
        assert [r["nid"] for r in rows] == [3, 1]

    def test_name(self, store: RecordingStore) -> None:
        assert PatternMatchStrategy(store).name == "pattern"


class TestFullTextStrategy:
    async def test_relevance_request_sends_no_sort(
        self, store: RecordingStore, fulltext: FakeFullTextEngine
    ) -> None:
        await FullTextStrategy(fulltext).retrieve(_request(relevance=True))
        query = fulltext.queries[-1]
        assert query.sort == []
        assert query.text_field == "title"
        assert query.filters == {"type": "note", "status": 1}
        assert store.queries[-1].collection == "node"

    async def test_explicit_order_is_forwarded(self, fulltext: FakeFullTextEngine) -> None:
        await FullTextStrategy(fulltext).retrieve(_request(relevance=False))
        assert [s.field for s in fulltext.queries[-1].sort] == ["changed"]

    def test_name(self, fulltext: FakeFullTextEngine) -> None:
        assert FullTextStrategy(fulltext).name == "fulltext"
