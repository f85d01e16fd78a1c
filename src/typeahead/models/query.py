"""Query models — What an adapter asks for, and how each backend receives it."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class MatchMode(StrEnum):
    """How the needle is compared with the text field in pattern-match mode."""

    CONTAINS = "contains"
    PREFIX = "prefix"


class SortField(BaseModel):
    """One ordering key."""

    field: str = Field(description="Field name to order by")
    descending: bool = Field(default=True, description="Sort highest first")


class RetrievalRequest(BaseModel):
    """A category lookup, independent of the retrieval path that serves it."""

    collection: str = Field(description="Record collection / index name (e.g. 'node')")
    text_field: str = Field(description="Primary text field matched against the query")
    needle: str = Field(min_length=1, description="Raw user query")
    match: MatchMode = Field(default=MatchMode.CONTAINS, description="Pattern-match mode")
    filters: dict[str, Any] = Field(default_factory=dict, description="Equality filters")
    include: list[str] = Field(default_factory=list, description="Related records to embed (e.g. 'node')")
    order_by: list[SortField] = Field(default_factory=list, description="Deterministic ordering")
    relevance: bool = Field(
        default=False,
        description="Leave ordering to the full-text engine's relevance score when it serves the request",
    )
    group_by: str | None = Field(default=None, description="Keep only the first row per value of this field")
    limit: int = Field(default=5, ge=1, description="Maximum number of rows")


class StoreQuery(BaseModel):
    """A filtered, ordered, limited read against a ``RecordStore``.

    Filter keys of the form ``"node.<field>"`` are resolved through the
    row's ``nid`` against the ``node`` collection.
    """

    collection: str
    text_field: str
    needle: str
    match: MatchMode = MatchMode.CONTAINS
    filters: dict[str, Any] = Field(default_factory=dict)
    include: list[str] = Field(default_factory=list)
    order_by: list[SortField] = Field(default_factory=list)
    group_by: str | None = None
    limit: int = Field(default=5, ge=1)

    @classmethod
    def from_request(cls, request: RetrievalRequest) -> StoreQuery:
        return cls(
            collection=request.collection,
            text_field=request.text_field,
            needle=request.needle,
            match=request.match,
            filters=request.filters,
            include=request.include,
            order_by=request.order_by,
            group_by=request.group_by,
            limit=request.limit,
        )


class EngineQuery(BaseModel):
    """A free-text query sent to a full-text engine, with filters and limit on top."""

    collection: str = Field(description="Index / collection name")
    query: str = Field(description="Free-text query")
    text_field: str | None = Field(default=None, description="Field the query is restricted to")
    filters: dict[str, Any] = Field(default_factory=dict, description="Equality filters")
    sort: list[SortField] = Field(default_factory=list, description="Explicit sort; empty means relevance")
    limit: int = Field(default=5, ge=1, description="Maximum number of hits")

    @classmethod
    def from_request(cls, request: RetrievalRequest) -> EngineQuery:
        return cls(
            collection=request.collection,
            query=request.needle,
            text_field=request.text_field,
            filters=request.filters,
            sort=[] if request.relevance else request.order_by,
            limit=request.limit,
        )
