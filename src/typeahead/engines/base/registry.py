"""Engine Registry — Maps backend names to full-text engine classes.

The configured backend is looked up by name and instantiated from
settings; the orchestrator owns the engine's lifecycle from there.
"""

from __future__ import annotations

import logging
from typing import Any

from typeahead.engines.base.engine import FullTextEngine
from typeahead.engines.base.exceptions import EngineConfigurationError

logger = logging.getLogger(__name__)


class EngineNotFoundError(EngineConfigurationError):
    """Raised when the configured backend name is not registered."""


class EngineRegistry:
    """Registry of full-text engine classes.

    Example:
        >>> registry = EngineRegistry()
        >>> registry.register("meilisearch", MeiliSearchEngine)
        >>> engine = registry.create("meilisearch", base_url="http://localhost:7700")
        >>> await engine.initialize()
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[FullTextEngine]] = {}

    def register(self, name: str, engine_class: type[FullTextEngine]) -> None:
        """Register an engine class under ``name``."""
        if name in self._classes:
            logger.warning("Overwriting existing engine registration: %s", name)
        self._classes[name] = engine_class
        logger.debug("Registered engine: %s", name)

    def create(self, name: str, **kwargs: Any) -> FullTextEngine:
        """Instantiate a registered engine without connecting it.

        Raises:
            EngineNotFoundError: If no engine is registered under this name.
        """
        if name not in self._classes:
            raise EngineNotFoundError(
                f"No engine registered with name '{name}'. "
                f"Available engines: {self.registered_engines}"
            )
        return self._classes[name](**kwargs)

    @property
    def registered_engines(self) -> list[str]:
        return list(self._classes.keys())
