"""Full-text engine layer — Optional relevance-ranked retrieval backends.

Built-in engines:
  - meilisearch: MeiliSearch (instant, typo-tolerant search)
  - solr: Apache Solr v8+ (edismax full-text search)

Implement ``FullTextEngine`` to connect your own search backend.
"""

from typeahead.engines.base.registry import EngineRegistry
from typeahead.engines.meilisearch.engine import MeiliSearchEngine
from typeahead.engines.solr.engine import SolrEngine


def default_registry() -> EngineRegistry:
    """Create a registry with the built-in engines registered."""
    registry = EngineRegistry()
    registry.register("meilisearch", MeiliSearchEngine)
    registry.register("solr", SolrEngine)
    return registry


__all__ = ["MeiliSearchEngine", "SolrEngine", "default_registry"]
