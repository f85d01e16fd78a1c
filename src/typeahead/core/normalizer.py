"""Result normalizer — Maps a category hit to a uniform ``TagResult``.

| category       | id        | value                   | source              | category tag      |
|----------------|-----------|-------------------------|---------------------|-------------------|
| tag            | 0         | tag name                | none                | ``tag``           |
| note / wiki    | nid       | title                   | content path        | ``file``          |
| map            | nid       | title                   | content path        | record icon       |
| question       | nid       | title                   | content path        | ``question-circle`` |
| comment        | pid       | body, 20 chars at most  | parent content path | ``comment``       |
| profile        | 0         | username                | ``/profile/<name>`` | ``user``          |

Missing text fields become empty strings; nothing here raises.
"""

from __future__ import annotations

from typing import assert_never

from typeahead.models.hits import (
    CategoryHit,
    CommentHit,
    MapHit,
    NoteHit,
    ProfileHit,
    QuestionHit,
    TagHit,
    WikiHit,
)
from typeahead.models.result import ResultCategory, TagResult

COMMENT_MAX_LENGTH = 20
OMISSION = "..."
MAP_FALLBACK_ICON = "map"


def truncate(text: str, length: int = COMMENT_MAX_LENGTH, omission: str = OMISSION) -> str:
    """Cut ``text`` to at most ``length`` characters, ending with ``omission`` when cut."""
    if len(text) <= length:
        return text
    return text[: max(length - len(omission), 0)] + omission


def profile_path(username: str) -> str:
    return f"/profile/{username}" if username else ""


def normalize(hit: CategoryHit) -> TagResult:
    """Convert one category hit into a ``TagResult``."""
    match hit:
        case TagHit(record=record):
            return TagResult(id=0, value=record.name or "", category=ResultCategory.TAG, source=None)
        case NoteHit(record=record) | WikiHit(record=record):
            return TagResult(
                id=record.nid,
                value=record.title or "",
                category=ResultCategory.FILE,
                source=record.path or "",
            )
        case MapHit(record=record):
            return TagResult(
                id=record.nid,
                value=record.title or "",
                category=record.icon or MAP_FALLBACK_ICON,
                source=record.path or "",
            )
        case QuestionHit(record=record):
            return TagResult(
                id=record.nid,
                value=record.title or "",
                category=ResultCategory.QUESTION,
                source=record.path or "",
            )
        case CommentHit(record=record):
            parent_path = record.parent.path if record.parent is not None else ""
            return TagResult(
                id=record.pid,
                value=truncate(record.comment or ""),
                category=ResultCategory.COMMENT,
                source=parent_path or "",
            )
        case ProfileHit(record=record):
            username = record.username or ""
            return TagResult(id=0, value=username, category=ResultCategory.USER, source=profile_path(username))
        case _:
            assert_never(hit)
