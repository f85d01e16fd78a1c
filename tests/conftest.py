"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from tests.fakes import FakeFullTextEngine, RecordingStore
from typeahead.config.settings import SearchSettings, Settings
from typeahead.core.capability import EngineCapability
from typeahead.core.engine import TypeaheadEngine

# ── Seed data ────────────────────────────────────────────────────────────────
#
# For the query "map" the published matches are:
#   notes      3, 1          (changed DESC)
#   wikis      5, 4          (nid DESC)
#   profiles   mapper, amapola
#   tags       nid 6, 4, 1   (grouped by nid, nid DESC)
#   maps       6, 7          (changed DESC)
#   questions  9
#   comments   cid 4, 2, 1   (nid DESC)

SEED: dict[str, list[dict[str, Any]]] = {
    "node": [
        {"nid": 1, "title": "Balloon mapping basics", "path": "/notes/alice/balloon-mapping", "type": "note",
         "status": 1, "changed": 100},
        {"nid": 2, "title": "Balloon mapping draft", "path": "/notes/bob/draft", "type": "note",
         "status": 0, "changed": 900},
        {"nid": 3, "title": "Kite mapping", "path": "/notes/carol/kite-mapping", "type": "note",
         "status": 1, "changed": 300},
        {"nid": 4, "title": "Balloon Mapping", "path": "/wiki/balloon-mapping", "type": "page",
         "status": 1, "changed": 50},
        {"nid": 5, "title": "Mapping Guide", "path": "/wiki/mapping-guide", "type": "page",
         "status": 1, "changed": 20},
        {"nid": 6, "title": "Balloon map of Gowanus", "path": "/map/gowanus", "type": "map",
         "status": 1, "changed": 500, "icon": "map-marker", "likes": 3, "views": 10},
        {"nid": 7, "title": "Pier map", "path": "/map/pier", "type": "map",
         "status": 1, "changed": 200, "icon": "map-o", "likes": 9, "views": 1},
        {"nid": 8, "title": "Hidden map", "path": "/map/hidden", "type": "map",
         "status": 0, "changed": 999, "icon": "map-marker"},
        {"nid": 9, "title": "How do I fly a balloon map?", "path": "/questions/dave/fly", "type": "question",
         "status": 1, "changed": 400},
        {"nid": 10, "title": "Unanswered map question", "path": "/questions/erin/spam", "type": "question",
         "status": 0, "changed": 410},
        {"nid": 11, "title": "Spectrometer kit", "path": "/notes/frank/spectrometer", "type": "note",
         "status": 1, "changed": 600},
    ],
    "tag": [
        {"tid": 1, "name": "balloon-mapping", "nid": 1},
        {"tid": 2, "name": "balloon", "nid": 1},
        {"tid": 1, "name": "balloon-mapping", "nid": 2},
        {"tid": 1, "name": "balloon-mapping", "nid": 4},
        {"tid": 3, "name": "mapping", "nid": 6},
        {"tid": 4, "name": "mapknitter", "nid": 6},
    ],
    "comment": [
        {"cid": 1, "pid": 1, "nid": 1, "comment": "Great map of the balloon flight!", "status": 1, "timestamp": 10},
        {"cid": 2, "pid": 3, "nid": 3, "comment": "map ok", "status": 1, "timestamp": 20},
        {"cid": 3, "pid": 1, "nid": 1, "comment": "spam map link", "status": 0, "timestamp": 30},
        {"cid": 4, "pid": 99, "nid": 99, "comment": "map orphan", "status": 1, "timestamp": 40},
    ],
    "profile": [
        {"uid": 1, "username": "mapper", "status": 1},
        {"uid": 2, "username": "amapola", "status": 1},
        {"uid": 3, "username": "mapbanned", "status": 0},
        {"uid": 4, "username": "balloonist", "status": 1},
    ],
}


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore(SEED)


@pytest.fixture
def fulltext(store: RecordingStore) -> FakeFullTextEngine:
    return FakeFullTextEngine(store)


@pytest.fixture
def engine(store: RecordingStore) -> TypeaheadEngine:
    """Engine in pattern-match mode."""
    return TypeaheadEngine(store=store, settings=SearchSettings(category_timeout=1.0))


@pytest.fixture
def fulltext_engine(store: RecordingStore, fulltext: FakeFullTextEngine) -> TypeaheadEngine:
    """Engine with the full-text capability enabled."""
    return TypeaheadEngine(
        store=store,
        capability=EngineCapability(enabled=True),
        fulltext=fulltext,
        settings=SearchSettings(category_timeout=1.0),
    )
