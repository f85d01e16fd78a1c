"""Category adapter layer — One connector per typeahead category.

Built-in adapters:
  - tag: tag names on published content (always pattern match)
  - note, wiki, map, question: published content titles
  - comment: published comment bodies
  - profile: active usernames (always pattern match)

Implement ``CategoryAdapter`` to add a category.
"""

from typeahead.adapters.comment.adapter import CommentAdapter
from typeahead.adapters.node.adapter import MapAdapter, NoteAdapter, QuestionAdapter, WikiAdapter
from typeahead.adapters.profile.adapter import ProfileAdapter
from typeahead.adapters.tag.adapter import TagAdapter

__all__ = [
    "CommentAdapter",
    "MapAdapter",
    "NoteAdapter",
    "ProfileAdapter",
    "QuestionAdapter",
    "TagAdapter",
    "WikiAdapter",
]
