"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (TYPEAHEAD_ prefix)
  3. Default values
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class SearchSettings(BaseModel):
    """Typeahead behavior configuration."""

    default_limit: int = Field(default=5, ge=1, description="Per-category result limit when none is given")
    category_timeout: float | None = Field(
        default=2.0,
        gt=0,
        description="Seconds a single category may take before it is dropped (None = no timeout)",
    )
    concurrent: bool = Field(default=True, description="Query categories in parallel in search_all")


class FullTextSettings(BaseModel):
    """Full-text engine configuration."""

    enabled: bool = Field(default=False, description="Use the full-text engine for content categories")
    backend: str = Field(default="meilisearch", description="Registered engine name: meilisearch, solr")
    hosts: list[str] = Field(default_factory=list, description="Backend host URLs (first one is used)")
    index_prefix: str = Field(default="", description="Prefix prepended to every index / collection name")
    username: str | None = Field(default=None, description="Authentication username")
    password: str | None = Field(default=None, description="Authentication password")
    api_key: str | None = Field(default=None, description="API key authentication")
    timeout: float = Field(default=5.0, gt=0, description="HTTP request timeout in seconds")
    extra: dict[str, Any] = Field(default_factory=dict, description="Engine-specific options")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)

    def engine_kwargs(self) -> dict[str, Any]:
        """Constructor keyword arguments for the configured engine."""
        kwargs: dict[str, Any] = {"index_prefix": self.index_prefix, "timeout": self.timeout, **self.extra}
        if self.hosts:
            kwargs["base_url"] = self.hosts[0]
        if self.backend == "meilisearch":
            kwargs["api_key"] = self.api_key
        else:
            kwargs["username"] = self.username
            kwargs["password"] = self.password
        return kwargs


class StorageSettings(BaseModel):
    """Record store configuration."""

    data_file: str | None = Field(default=None, description="JSON or YAML seed file for the in-memory store")


class CacheSettings(BaseModel):
    """search_all result cache configuration."""

    enabled: bool = Field(default=False, description="Cache search_all responses")
    backend: str = Field(default="memory", description="Cache backend: memory, redis")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    ttl: int = Field(default=60, ge=1, description="Time-to-live of cached responses in seconds")
    max_entries: int = Field(default=1024, ge=1, description="Maximum number of responses held by the in-memory backend")
    key_prefix: str = Field(default="typeahead:", description="Prefix of every cache key")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the TYPEAHEAD_ prefix.
    Nested settings use double underscores: TYPEAHEAD_FULLTEXT__ENABLED=true

    Example:
        TYPEAHEAD_FULLTEXT__ENABLED=true
        TYPEAHEAD_FULLTEXT__BACKEND=solr
        TYPEAHEAD_SEARCH__CATEGORY_TIMEOUT=0.5
    """

    model_config = {
        "env_prefix": "TYPEAHEAD_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    search: SearchSettings = Field(default_factory=SearchSettings)
    fulltext: FullTextSettings = Field(default_factory=FullTextSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as init arguments, so they win
        over environment variables for the keys they set.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
