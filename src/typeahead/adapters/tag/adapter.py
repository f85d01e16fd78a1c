"""Tag adapter — Tag names attached to published content.

Tags never go through the full-text engine.  Rows are grouped by the
tagged content id, so a tag name used on several items appears once per
item, and an item with several matching tags contributes one row.
"""

from __future__ import annotations

from typeahead.adapters.base.adapter import CategoryAdapter
from typeahead.models.hits import CategoryHit, TagHit
from typeahead.models.query import RetrievalRequest, SortField
from typeahead.models.records import PUBLISHED, NodeOrder, TagRecord


class TagAdapter(CategoryAdapter[TagRecord]):
    category = "tag"
    record_model = TagRecord
    supports_fulltext = False

    def build_request(self, query: str, limit: int, order: NodeOrder) -> RetrievalRequest:
        return RetrievalRequest(
            collection="tag",
            text_field="name",
            needle=query,
            filters={"node.status": PUBLISHED},
            order_by=[SortField(field="nid"), SortField(field="tid", descending=False)],
            group_by="nid",
            limit=limit,
        )

    def to_hit(self, record: TagRecord) -> CategoryHit:
        return TagHit(record=record)
