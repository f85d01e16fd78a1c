"""Cache Manager — Redis-backed or in-memory caching of typeahead responses.

Only ``search_all`` responses are cached; keys combine the configured
prefix, the per-category limit and the normalized query.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as aioredis
from cachetools import TTLCache

from typeahead.config.settings import CacheSettings
from typeahead.models.result import ResultList

logger = logging.getLogger(__name__)


class CacheManager:
    """Manages the response cache.

    A Redis backend that cannot be reached at startup degrades to the
    in-memory backend, a ``TTLCache`` holding at most
    ``settings.max_entries`` responses for ``settings.ttl`` seconds.
    Cache errors are never raised to callers; a failed read is a miss.

    Attributes:
        settings: Cache configuration.
    """

    def __init__(self, settings: CacheSettings) -> None:
        self.settings = settings
        self._client: Any = None
        self._memory_cache: TTLCache = TTLCache(maxsize=settings.max_entries, ttl=settings.ttl)

    def key_for(self, query: str, limit: int) -> str:
        """Build the cache key of a ``search_all`` call."""
        return f"{self.settings.key_prefix}all:{limit}:{query.strip().lower()}"

    async def get_results(self, query: str, limit: int) -> ResultList | None:
        """Return the cached ``search_all`` result for this query and limit, if any."""
        cached = await self.get(self.key_for(query, limit))
        if cached is None:
            return None
        return ResultList.model_validate(cached)

    async def set_results(self, query: str, limit: int, results: ResultList) -> None:
        await self.set(self.key_for(query, limit), results.model_dump())

    async def initialize(self) -> None:
        """Initialize the cache backend."""
        if self.settings.backend == "redis":
            try:
                self._client = aioredis.from_url(self.settings.redis_url, decode_responses=True)
                await self._client.ping()
                logger.info("Connected to Redis cache at %s", self.settings.redis_url)
            except Exception:
                logger.warning("Failed to connect to Redis, falling back to memory cache", exc_info=True)
                self._client = None
                self.settings.backend = "memory"
        else:
            logger.info("Using in-memory cache backend")

    async def shutdown(self) -> None:
        """Close cache connections."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, key: str) -> Any | None:
        """Retrieve a value from cache, or None on a miss."""
        try:
            if self.settings.backend == "redis" and self._client:
                value = await self._client.get(key)
                return json.loads(value) if value else None

            return self._memory_cache.get(key)
        except Exception:
            logger.debug("Cache get failed for key: %s", key, exc_info=True)
            return None

    async def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value for the configured TTL."""
        try:
            if self.settings.backend == "redis" and self._client:
                await self._client.setex(key, self.settings.ttl, json.dumps(value, default=str))
            else:
                self._memory_cache[key] = value
        except Exception:
            logger.debug("Cache set failed for key: %s", key, exc_info=True)

    async def delete(self, key: str) -> None:
        try:
            if self.settings.backend == "redis" and self._client:
                await self._client.delete(key)
            else:
                self._memory_cache.pop(key, None)
        except Exception:
            logger.debug("Cache delete failed for key: %s", key, exc_info=True)

    async def clear(self) -> None:
        """Drop every cached response."""
        try:
            if self.settings.backend == "redis" and self._client:
                async for key in self._client.scan_iter(match=f"{self.settings.key_prefix}*"):
                    await self._client.delete(key)
            else:
                self._memory_cache.clear()
        except Exception:
            logger.debug("Cache clear failed", exc_info=True)
