"""Native record models — Category-specific shapes returned by the backends.

Both retrieval paths (record store and full-text engine) return plain
dicts.  Adapters validate those rows into the models below before handing
them to the normalizer.  Unknown keys are ignored and missing text fields
default to empty strings so a sparse row never fails validation.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

PUBLISHED = 1


class NodeType(StrEnum):
    """Content subtype stored on a node."""

    NOTE = "note"
    PAGE = "page"
    MAP = "map"
    QUESTION = "question"


class NodeOrder(StrEnum):
    """Secondary sort for the map and question categories."""

    DEFAULT = "default"
    NATURAL = "natural"
    LIKES = "likes"
    VIEWS = "views"


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NodeRecord(_Record):
    """A piece of content: note, wiki page, map or question."""

    nid: int = Field(description="Content identifier")
    title: str = Field(default="", description="Display title")
    path: str = Field(default="", description="Locator of the content page")
    type: str = Field(default=NodeType.NOTE, description="Content subtype")
    status: int = Field(default=0, description="1 when published")
    changed: int = Field(default=0, description="Last modification time (epoch seconds)")
    icon: str = Field(default="", description="Icon tag rendered for maps")
    likes: int = Field(default=0, description="Cached like count")
    views: int = Field(default=0, description="Cached view count")


class TagRecord(_Record):
    """A tag name attached to one content item."""

    tid: int = Field(default=0, description="Tag identifier")
    name: str = Field(default="", description="Tag name")
    nid: int = Field(description="Identifier of the tagged content")


class CommentRecord(_Record):
    """A comment left on a content item."""

    cid: int = Field(description="Comment identifier")
    pid: int = Field(default=0, description="Parent identifier reported as the suggestion id")
    nid: int = Field(default=0, description="Parent content identifier")
    comment: str = Field(default="", description="Comment body")
    status: int = Field(default=0, description="1 when published")
    timestamp: int = Field(default=0, description="Creation time (epoch seconds)")
    parent: NodeRecord | None = Field(default=None, alias="node", description="Joined parent content")


class ProfileRecord(_Record):
    """A user profile."""

    uid: int = Field(description="User identifier")
    username: str = Field(default="", description="Login name")
    status: int = Field(default=0, description="1 when the account is active")
