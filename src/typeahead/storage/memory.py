"""In-memory record store — Dict-backed storage for development and tests.

Rows are kept per collection in insertion order.  Nodes are additionally
indexed by ``nid`` so that tag and comment rows can be joined to the
content they belong to (``node.status`` filters, ``include=["node"]``).

Usage::

    store = MemoryRecordStore.from_file("seed.yaml")
    rows = await store.select(StoreQuery(collection="node", text_field="title", needle="map"))
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from typeahead.models.query import MatchMode, StoreQuery
from typeahead.storage.base import RecordStore, StoreError

logger = logging.getLogger(__name__)

COLLECTIONS = ("node", "tag", "comment", "profile")


class MemoryRecordStore(RecordStore):
    """Record store holding every row in process memory.

    Matching is case-insensitive.  Ordering is stable, so rows with equal
    sort keys keep their insertion order.

    Args:
        data: Optional initial rows keyed by collection name.
    """

    def __init__(self, data: Mapping[str, Iterable[dict[str, Any]]] | None = None) -> None:
        self._collections: dict[str, list[dict[str, Any]]] = {name: [] for name in COLLECTIONS}
        self._nodes: dict[int, dict[str, Any]] = {}
        if data:
            self.load(data)

    @property
    def name(self) -> str:
        return "memory"

    # ── Loading ──────────────────────────────────────────────────────────

    def add(self, collection: str, row: dict[str, Any]) -> None:
        """Append one row to a collection."""
        if collection not in self._collections:
            raise StoreError(f"Unknown collection '{collection}'. Available: {list(self._collections)}")
        row = dict(row)
        self._collections[collection].append(row)
        if collection == "node" and row.get("nid") is not None:
            self._nodes[int(row["nid"])] = row

    def load(self, data: Mapping[str, Iterable[dict[str, Any]]]) -> None:
        """Append rows for several collections at once."""
        for collection, rows in data.items():
            for row in rows:
                self.add(collection, row)
        logger.info(
            "Loaded records: %s",
            ", ".join(f"{name}={len(rows)}" for name, rows in self._collections.items()),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> MemoryRecordStore:
        """Build a store from a JSON or YAML seed file.

        The file holds a mapping of collection name to a list of rows.

        Raises:
            FileNotFoundError: If the file does not exist.
            StoreError: If the file does not contain a mapping.
        """
        seed_path = Path(path)
        if not seed_path.exists():
            raise FileNotFoundError(f"Seed file not found: {seed_path}")

        with open(seed_path, encoding="utf-8") as f:
            if seed_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise StoreError(f"Seed file must contain a mapping of collections: {seed_path}")
        return cls(data)

    # ── Query ────────────────────────────────────────────────────────────

    async def select(self, query: StoreQuery) -> list[dict[str, Any]]:
        rows = self._collections.get(query.collection)
        if rows is None:
            raise StoreError(f"Unknown collection '{query.collection}'")

        needle = query.needle.lower()
        matched: list[dict[str, Any]] = []
        for row in rows:
            text = str(row.get(query.text_field) or "").lower()
            hit = text.startswith(needle) if query.match == MatchMode.PREFIX else needle in text
            if not hit:
                continue
            if all(self._resolve(row, key) == value for key, value in query.filters.items()):
                matched.append(row)

        # Stable multi-key sort: apply the least significant key first
        for sort in reversed(query.order_by):
            matched.sort(key=lambda r, f=sort.field: self._sort_key(self._resolve(r, f)), reverse=sort.descending)

        if query.group_by:
            seen: set[Any] = set()
            grouped: list[dict[str, Any]] = []
            for row in matched:
                key = self._resolve(row, query.group_by)
                if key in seen:
                    continue
                seen.add(key)
                grouped.append(row)
            matched = grouped

        results: list[dict[str, Any]] = []
        for row in matched[: query.limit]:
            out = dict(row)
            for relation in query.include:
                related = self._related(row, relation)
                out[relation] = dict(related) if related is not None else None
            results.append(out)
        return results

    # ── Helpers ──────────────────────────────────────────────────────────

    def _related(self, row: dict[str, Any], relation: str) -> dict[str, Any] | None:
        if relation != "node":
            raise StoreError(f"Unsupported relation '{relation}'")
        nid = row.get("nid")
        return self._nodes.get(int(nid)) if nid is not None else None

    def _resolve(self, row: dict[str, Any], key: str) -> Any:
        """Read ``key`` from a row, following a ``relation.field`` join."""
        if "." not in key:
            return row.get(key)
        relation, field = key.split(".", 1)
        related = self._related(row, relation)
        return related.get(field) if related is not None else None

    @staticmethod
    def _sort_key(value: Any) -> tuple[bool, Any]:
        # Missing values sort below present ones
        return (value is not None, value)
