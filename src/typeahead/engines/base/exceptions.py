"""Full-text engine exceptions."""


class EngineError(Exception):
    """Base exception for full-text engine errors."""


class EngineConnectionError(EngineError):
    """Raised when the engine cannot reach its search backend."""


class EngineQueryError(EngineError):
    """Raised when a search query fails."""


class EngineConfigurationError(EngineError):
    """Raised when engine configuration is invalid."""
