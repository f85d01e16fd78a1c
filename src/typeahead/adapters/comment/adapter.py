"""Comment adapter — Published comment bodies, joined to their parent content."""

from __future__ import annotations

from typeahead.adapters.base.adapter import CategoryAdapter
from typeahead.models.hits import CategoryHit, CommentHit
from typeahead.models.query import RetrievalRequest, SortField
from typeahead.models.records import PUBLISHED, CommentRecord, NodeOrder


class CommentAdapter(CategoryAdapter[CommentRecord]):
    category = "comment"
    record_model = CommentRecord

    def build_request(self, query: str, limit: int, order: NodeOrder) -> RetrievalRequest:
        return RetrievalRequest(
            collection="comment",
            text_field="comment",
            needle=query,
            filters={"status": PUBLISHED},
            include=["node"],
            order_by=[SortField(field="nid"), SortField(field="cid")],
            relevance=True,
            limit=limit,
        )

    def accept(self, record: CommentRecord) -> bool:
        return record.status == PUBLISHED

    def to_hit(self, record: CommentRecord) -> CategoryHit:
        return CommentHit(record=record)
