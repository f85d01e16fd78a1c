"""Tests for native record models."""

from __future__ import annotations

from typeahead.models.records import CommentRecord, NodeRecord, ProfileRecord, TagRecord


class TestRecords:
    def test_node_missing_fields_default_to_empty(self) -> None:
        node = NodeRecord.model_validate({"nid": 3})
        assert node.title == ""
        assert node.path == ""
        assert node.status == 0

    def test_extra_fields_ignored(self) -> None:
        node = NodeRecord.model_validate({"nid": 1, "title": "t", "_rankingScore": 0.7})
        assert not hasattr(node, "_rankingScore")

    def test_comment_parent_from_node_key(self) -> None:
        comment = CommentRecord.model_validate(
            {"cid": 1, "nid": 3, "comment": "hi", "node": {"nid": 3, "path": "/notes/x"}}
        )
        assert comment.parent is not None
        assert comment.parent.path == "/notes/x"

    def test_comment_without_parent(self) -> None:
        comment = CommentRecord.model_validate({"cid": 1, "node": None})
        assert comment.parent is None

    def test_tag_and_profile(self) -> None:
        assert TagRecord.model_validate({"nid": 2, "name": "kite"}).tid == 0
        assert ProfileRecord.model_validate({"uid": 9}).username == ""
