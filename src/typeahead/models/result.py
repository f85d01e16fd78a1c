"""Result models — The uniform suggestion entry and its ordered container.

Every category, whatever its native record shape, is reduced to
``TagResult`` entries.  A ``ResultList`` is an immutable ordered sequence
of entries; it is assembled by a ``ResultListBuilder`` and only handed
out once fully populated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import Any, overload

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ResultCategory(StrEnum):
    """Well-known category tags.  Map entries carry their own icon tag instead."""

    TAG = "tag"
    FILE = "file"
    USER = "user"
    COMMENT = "comment"
    QUESTION = "question-circle"


class TagResult(BaseModel):
    """A single normalized typeahead suggestion."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(default=0, description="Record id, or 0 when the category has none")
    value: str = Field(default="", description="Display string shown to the user")
    category: str = Field(description="Category tag used for rendering")
    source: str | None = Field(default=None, description="Locator of the full resource")


class ResultList:
    """Ordered, immutable collection of ``TagResult`` entries.

    Order is backend invocation order, not relevance.  Entries are never
    deduplicated.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[TagResult] = ()) -> None:
        self._entries: tuple[TagResult, ...] = tuple(entries)

    @classmethod
    def empty(cls) -> ResultList:
        return cls()

    @property
    def entries(self) -> tuple[TagResult, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TagResult]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @overload
    def __getitem__(self, index: int) -> TagResult: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TagResult, ...]: ...

    def __getitem__(self, index: int | slice) -> TagResult | tuple[TagResult, ...]:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultList):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"ResultList({len(self._entries)} entries)"

    def model_dump(self) -> list[dict[str, Any]]:
        """Serialize every entry to a plain dict (JSON-compatible)."""
        return [entry.model_dump() for entry in self._entries]

    @classmethod
    def model_validate(cls, data: Iterable[dict[str, Any]]) -> ResultList:
        """Rebuild a list from ``model_dump()`` output."""
        return cls(TagResult.model_validate(item) for item in data)


class ResultListBuilder:
    """Accumulates entries and produces a ``ResultList``.

    Entries with an empty ``value`` are dropped so a built list never
    contains a blank suggestion.
    """

    def __init__(self) -> None:
        self._entries: list[TagResult] = []

    def add(self, entry: TagResult) -> ResultListBuilder:
        if not entry.value:
            logger.debug("Dropping %s entry %d with empty value", entry.category, entry.id)
            return self
        self._entries.append(entry)
        return self

    def extend(self, other: ResultList | Iterable[TagResult]) -> ResultListBuilder:
        """Append every entry of ``other`` after the current entries, keeping its order."""
        for entry in other:
            self.add(entry)
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def build(self) -> ResultList:
        return ResultList(self._entries)
