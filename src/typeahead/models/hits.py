"""Category hits — A native record tagged with the category that produced it.

The normalizer dispatches on these variants with a single ``match``
statement, so adding a category means adding a variant here and a case
there.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from typeahead.models.records import CommentRecord, NodeRecord, ProfileRecord, TagRecord


class _Hit(BaseModel):
    model_config = ConfigDict(frozen=True)


class TagHit(_Hit):
    category: Literal["tag"] = "tag"
    record: TagRecord


class NoteHit(_Hit):
    category: Literal["note"] = "note"
    record: NodeRecord


class WikiHit(_Hit):
    category: Literal["wiki"] = "wiki"
    record: NodeRecord


class MapHit(_Hit):
    category: Literal["map"] = "map"
    record: NodeRecord


class QuestionHit(_Hit):
    category: Literal["question"] = "question"
    record: NodeRecord


class CommentHit(_Hit):
    category: Literal["comment"] = "comment"
    record: CommentRecord


class ProfileHit(_Hit):
    category: Literal["profile"] = "profile"
    record: ProfileRecord


CategoryHit = TagHit | NoteHit | WikiHit | MapHit | QuestionHit | CommentHit | ProfileHit
