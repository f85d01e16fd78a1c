"""Content adapters — Notes, wiki pages, maps and questions.

All four categories live in the ``node`` collection and differ only in
their ``type`` filter and ordering.  Only published nodes are ever
returned.
"""

from __future__ import annotations

from typing import ClassVar

from typeahead.adapters.base.adapter import CategoryAdapter
from typeahead.models.hits import CategoryHit, MapHit, NoteHit, QuestionHit, WikiHit
from typeahead.models.query import RetrievalRequest, SortField
from typeahead.models.records import PUBLISHED, NodeOrder, NodeRecord, NodeType

RECENT_FIRST = [SortField(field="changed"), SortField(field="nid")]
NEWEST_ID_FIRST = [SortField(field="nid")]

_ORDERINGS: dict[NodeOrder, list[SortField]] = {
    NodeOrder.DEFAULT: RECENT_FIRST,
    NodeOrder.NATURAL: NEWEST_ID_FIRST,
    NodeOrder.LIKES: [SortField(field="likes"), *RECENT_FIRST],
    NodeOrder.VIEWS: [SortField(field="views"), *RECENT_FIRST],
}


class NodeAdapter(CategoryAdapter[NodeRecord]):
    """Title lookup over published nodes of one ``node_type``."""

    record_model = NodeRecord
    node_type: ClassVar[NodeType]

    def build_request(self, query: str, limit: int, order: NodeOrder) -> RetrievalRequest:
        order_by, relevance = self.ordering(order)
        return RetrievalRequest(
            collection="node",
            text_field="title",
            needle=query,
            filters={"type": self.node_type.value, "status": PUBLISHED},
            order_by=order_by,
            relevance=relevance,
            limit=limit,
        )

    def ordering(self, order: NodeOrder) -> tuple[list[SortField], bool]:
        """Return the fallback sort keys and whether the engine may rank by relevance."""
        return RECENT_FIRST, True

    def accept(self, record: NodeRecord) -> bool:
        return record.status == PUBLISHED and record.type == self.node_type.value


class NoteAdapter(NodeAdapter):
    category = "note"
    node_type = NodeType.NOTE

    def to_hit(self, record: NodeRecord) -> CategoryHit:
        return NoteHit(record=record)


class WikiAdapter(NodeAdapter):
    category = "wiki"
    node_type = NodeType.PAGE

    def ordering(self, order: NodeOrder) -> tuple[list[SortField], bool]:
        return NEWEST_ID_FIRST, True

    def to_hit(self, record: NodeRecord) -> CategoryHit:
        return WikiHit(record=record)


class _OrderedNodeAdapter(NodeAdapter):
    """Node category honouring the caller's ``order`` argument."""

    def ordering(self, order: NodeOrder) -> tuple[list[SortField], bool]:
        return _ORDERINGS[NodeOrder(order)], order == NodeOrder.NATURAL


class MapAdapter(_OrderedNodeAdapter):
    category = "map"
    node_type = NodeType.MAP

    def to_hit(self, record: NodeRecord) -> CategoryHit:
        return MapHit(record=record)


class QuestionAdapter(_OrderedNodeAdapter):
    category = "question"
    node_type = NodeType.QUESTION

    def to_hit(self, record: NodeRecord) -> CategoryHit:
        return QuestionHit(record=record)
