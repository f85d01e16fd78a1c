"""Profile adapter — Active users by username.

Usernames starting with the query come first, followed by usernames that
merely contain it; each group is alphabetical.
"""

from __future__ import annotations

from typeahead.adapters.base.adapter import DEFAULT_LIMIT, CategoryAdapter, is_blank
from typeahead.core.strategy import RetrievalStrategy
from typeahead.models.hits import CategoryHit, ProfileHit
from typeahead.models.query import MatchMode, RetrievalRequest, SortField
from typeahead.models.records import PUBLISHED, NodeOrder, ProfileRecord


class ProfileAdapter(CategoryAdapter[ProfileRecord]):
    category = "profile"
    record_model = ProfileRecord
    supports_fulltext = False

    async def find(
        self,
        query: str | None,
        limit: int = DEFAULT_LIMIT,
        *,
        strategy: RetrievalStrategy,
        order: NodeOrder = NodeOrder.DEFAULT,
    ) -> list[ProfileRecord]:
        if is_blank(query):
            return []
        prefixed = await super().find(query, limit, strategy=strategy, order=order)
        if len(prefixed) >= limit:
            return prefixed

        request = self.build_request(str(query).strip(), limit, order).model_copy(
            update={"match": MatchMode.CONTAINS, "limit": limit + len(prefixed)}
        )
        seen = {record.uid for record in prefixed}
        others = [r for r in self.to_records(await strategy.retrieve(request)) if r.uid not in seen]
        return [*prefixed, *others][:limit]

    def build_request(self, query: str, limit: int, order: NodeOrder) -> RetrievalRequest:
        return RetrievalRequest(
            collection="profile",
            text_field="username",
            needle=query,
            match=MatchMode.PREFIX,
            filters={"status": PUBLISHED},
            order_by=[SortField(field="username", descending=False)],
            limit=limit,
        )

    def accept(self, record: ProfileRecord) -> bool:
        return record.status == PUBLISHED

    def to_hit(self, record: ProfileRecord) -> CategoryHit:
        return ProfileHit(record=record)
