"""Tests for the engine registry."""

from __future__ import annotations

import pytest

from tests.fakes import FakeFullTextEngine, RecordingStore
from typeahead.engines import default_registry
from typeahead.engines.base.exceptions import EngineConfigurationError, EngineError
from typeahead.engines.base.registry import EngineNotFoundError, EngineRegistry
from typeahead.engines.solr.engine import SolrEngine


class TestEngineRegistry:
    def test_default_registry(self) -> None:
        assert default_registry().registered_engines == ["meilisearch", "solr"]

    def test_create_unknown_raises(self) -> None:
        with pytest.raises(EngineNotFoundError, match="No engine registered"):
            EngineRegistry().create("elastic")

    def test_unknown_backend_is_a_configuration_error(self) -> None:
        with pytest.raises(EngineConfigurationError) as exc_info:
            default_registry().create("elastic")
        assert isinstance(exc_info.value, EngineError)

    def test_create_does_not_connect(self) -> None:
        engine = default_registry().create("solr", base_url="http://solr:8983/solr")
        assert isinstance(engine, SolrEngine)
        assert engine._base_url == "http://solr:8983/solr"
        assert engine._client is None

    def test_create_passes_kwargs(self) -> None:
        registry = EngineRegistry()
        registry.register("fake", FakeFullTextEngine)
        store = RecordingStore()
        engine = registry.create("fake", store=store)
        assert isinstance(engine, FakeFullTextEngine)
        assert engine.store is store
