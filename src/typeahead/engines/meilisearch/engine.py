"""MeiliSearch engine — Instant, typo-tolerant full-text lookups.

Each record collection is expected in its own index named
``{index_prefix}{collection}`` (e.g. ``typeahead_node``), holding documents
shaped like record-store rows.  Filterable attributes must include the
status / type fields and sortable attributes the ordering fields.

Usage::

    engine = MeiliSearchEngine(
        base_url="http://localhost:7700",
        index_prefix="typeahead_",
        api_key="your-master-key",
    )
    await engine.initialize()
    hits = await engine.search(EngineQuery(collection="node", query="balloon"))
"""

from __future__ import annotations

import json
import logging
import time
from datetime import UTC, datetime
from typing import Any

import httpx

from typeahead.engines.base.engine import EngineHealth, FullTextEngine
from typeahead.engines.base.exceptions import EngineConnectionError, EngineQueryError
from typeahead.models.query import EngineQuery

logger = logging.getLogger(__name__)


class MeiliSearchEngine(FullTextEngine):
    """Full-text engine backed by MeiliSearch.

    Communicates with MeiliSearch via its `REST API`_ over HTTP.

    .. _REST API: https://www.meilisearch.com/docs/reference/api/overview

    Args:
        base_url: MeiliSearch instance URL, e.g. ``"http://localhost:7700"``.
        index_prefix: Prefix prepended to the collection name to form the index UID.
        api_key: Master key or API key for authentication.
        timeout: HTTP request timeout in seconds.
        **kwargs: Extra keyword arguments stored for future use.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:7700",
        index_prefix: str = "",
        api_key: str | None = None,
        timeout: float = 5.0,
        **kwargs: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._index_prefix = index_prefix
        self._api_key = api_key
        self._timeout = timeout
        self._extra_kwargs = kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "meilisearch"

    async def initialize(self) -> None:
        """Create an ``httpx.AsyncClient`` and verify connection to MeiliSearch."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            headers=headers,
        )

        try:
            resp = await self._client.get("/health")
            resp.raise_for_status()
            data = resp.json()
            if data.get("status") != "available":
                raise EngineConnectionError(f"MeiliSearch not available: {data}")
            logger.info("Connected to MeiliSearch at %s", self._base_url)
        except httpx.HTTPError as e:
            raise EngineConnectionError(f"Failed to connect to MeiliSearch: {e}") from e

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, query: EngineQuery) -> list[dict[str, Any]]:
        """Execute a query against ``/indexes/{index}/search``."""
        if not self._client:
            raise EngineConnectionError("MeiliSearch client not initialized.")

        payload: dict[str, Any] = {
            "q": query.query,
            "limit": query.limit,
            "offset": 0,
        }
        if query.text_field:
            payload["attributesToSearchOn"] = [query.text_field]
        if query.filters:
            payload["filter"] = self._build_filter(query.filters)
        if query.sort:
            payload["sort"] = [f"{s.field}:{'desc' if s.descending else 'asc'}" for s in query.sort]

        index = self._index_name(query.collection)
        try:
            start = time.monotonic()
            resp = await self._client.post(f"/indexes/{index}/search", json=payload)
            resp.raise_for_status()
            data = resp.json()
            logger.debug(
                "MeiliSearch %s returned %d hits in %d ms",
                index,
                len(data.get("hits", [])),
                int((time.monotonic() - start) * 1000),
            )
            return list(data.get("hits", []))
        except httpx.HTTPError as e:
            raise EngineQueryError(f"MeiliSearch query failed: {e}") from e

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> EngineHealth:
        """Check MeiliSearch health."""
        if not self._client:
            return EngineHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            resp = await self._client.get("/health")
            latency_ms = int((time.monotonic() - start) * 1000)

            if resp.status_code == 200:
                status = resp.json().get("status", "unknown")
                return EngineHealth(
                    status="healthy" if status == "available" else "degraded",
                    latency_ms=latency_ms,
                    last_check=datetime.now(UTC).isoformat(),
                    message=f"status: {status}",
                )
            return EngineHealth(
                status="degraded",
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"MeiliSearch returned HTTP {resp.status_code}",
            )
        except Exception as e:
            return EngineHealth(status="unhealthy", message=str(e))

    # ── Helpers ──────────────────────────────────────────────────────────

    def _index_name(self, collection: str) -> str:
        return f"{self._index_prefix}{collection}"

    @staticmethod
    def _build_filter(filters: dict[str, Any]) -> str:
        """Render equality filters as a MeiliSearch filter expression::

            status = 1 AND type = "note"
        """
        clauses = []
        for field, value in filters.items():
            rendered = json.dumps(value) if isinstance(value, str) else str(value)
            clauses.append(f"{field} = {rendered}")
        return " AND ".join(clauses)
