"""Apache Solr engine — Full-text lookups via Solr's JSON Request API.

Each record collection lives in its own Solr collection/core named
``{index_prefix}{collection}``.  Joined fields are indexed flat with a
dotted name (``node.path``) and unflattened back into nested dicts so
hits have the same shape as record-store rows.

Usage::

    engine = SolrEngine(base_url="http://localhost:8983/solr", index_prefix="typeahead_")
    await engine.initialize()
    hits = await engine.search(EngineQuery(collection="comment", query="sensor"))
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

import httpx

from typeahead.engines.base.engine import EngineHealth, FullTextEngine
from typeahead.engines.base.exceptions import EngineConnectionError, EngineQueryError
from typeahead.models.query import EngineQuery

logger = logging.getLogger(__name__)


class SolrEngine(FullTextEngine):
    """Full-text engine backed by Apache Solr (v8+).

    Communicates with Solr via its `JSON Request API`_ over HTTP using the
    ``edismax`` query parser.

    .. _JSON Request API: https://solr.apache.org/guide/solr/latest/query-guide/json-request-api.html

    Args:
        base_url: Solr base URL, e.g. ``"http://localhost:8983/solr"``.
        index_prefix: Prefix prepended to the collection name.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP request timeout in seconds.
        **kwargs: Extra keyword arguments stored for future use.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8983/solr",
        index_prefix: str = "",
        username: str | None = None,
        password: str | None = None,
        timeout: float = 5.0,
        **kwargs: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._index_prefix = index_prefix
        self._username = username
        self._password = password
        self._timeout = timeout
        self._extra_kwargs = kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return "solr"

    async def initialize(self) -> None:
        """Create an ``httpx.AsyncClient`` and ping the Solr system info API."""
        auth = None
        if self._username and self._password:
            auth = httpx.BasicAuth(self._username, self._password)

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            auth=auth,
        )

        try:
            resp = await self._client.get("/admin/info/system", params={"wt": "json"})
            resp.raise_for_status()
            logger.info("Connected to Solr at %s", self._base_url)
        except httpx.HTTPError as e:
            raise EngineConnectionError(f"Failed to connect to Solr: {e}") from e

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    async def search(self, query: EngineQuery) -> list[dict[str, Any]]:
        """Execute a query against ``/{collection}/select``."""
        if not self._client:
            raise EngineConnectionError("Solr client not initialized.")

        body: dict[str, Any] = {
            "query": query.query,
            "limit": query.limit,
            "offset": 0,
            "params": {"defType": "edismax", "fl": "*"},
        }
        if query.text_field:
            body["params"]["qf"] = query.text_field
        if query.filters:
            body["filter"] = [self._filter_clause(field, value) for field, value in query.filters.items()]
        if query.sort:
            body["sort"] = ", ".join(f"{s.field} {'desc' if s.descending else 'asc'}" for s in query.sort)

        collection = f"{self._index_prefix}{query.collection}"
        try:
            start = time.monotonic()
            resp = await self._client.post(f"/{collection}/select", json=body)
            resp.raise_for_status()
            data = resp.json()
            docs = data.get("response", {}).get("docs", [])
            logger.debug(
                "Solr %s returned %d docs in %d ms",
                collection,
                len(docs),
                int((time.monotonic() - start) * 1000),
            )
            return [self._to_row(doc) for doc in docs]
        except httpx.HTTPError as e:
            raise EngineQueryError(f"Solr query failed: {e}") from e

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> EngineHealth:
        """Query the Solr system info endpoint."""
        if not self._client:
            return EngineHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            resp = await self._client.get("/admin/info/system", params={"wt": "json"})
            latency_ms = int((time.monotonic() - start) * 1000)

            if resp.status_code == 200:
                mode = resp.json().get("mode", "unknown")
                return EngineHealth(
                    status="healthy",
                    latency_ms=latency_ms,
                    last_check=datetime.now(UTC).isoformat(),
                    message=f"mode: {mode}",
                )
            return EngineHealth(
                status="degraded",
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"Solr returned HTTP {resp.status_code}",
            )
        except Exception as e:
            return EngineHealth(status="unhealthy", message=str(e))

    # ── Helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _filter_clause(field: str, value: Any) -> str:
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'{field}:"{escaped}"'
        return f"{field}:{value}"

    @classmethod
    def _to_row(cls, doc: dict[str, Any]) -> dict[str, Any]:
        """Unwrap single-valued lists and nest dotted keys (``node.path`` -> ``{"node": {"path": ...}}``)."""
        row: dict[str, Any] = {}
        for key, value in doc.items():
            value = cls._first_value(value)
            if "." in key:
                relation, field = key.split(".", 1)
                nested = row.setdefault(relation, {})
                if isinstance(nested, dict):
                    nested[field] = value
            else:
                row[key] = value
        return row

    @staticmethod
    def _first_value(val: Any) -> Any:
        """Solr may return single-valued fields as lists; unwrap transparently."""
        if isinstance(val, list):
            return val[0] if val else ""
        return val
