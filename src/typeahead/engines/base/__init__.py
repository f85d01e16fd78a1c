"""Base engine interface — Abstract classes for full-text search connectors."""

from typeahead.engines.base.engine import EngineHealth, FullTextEngine
from typeahead.engines.base.registry import EngineNotFoundError, EngineRegistry

__all__ = ["EngineHealth", "EngineNotFoundError", "EngineRegistry", "FullTextEngine"]
