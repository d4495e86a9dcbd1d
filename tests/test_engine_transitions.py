from __future__ import annotations

import pytest

from config.settings import get_settings
from services.query_engine import QueryEngine


def test_initial_state(store):
    engine = QueryEngine(store, page_size=6)
    assert engine.state.query == ""
    assert engine.state.page == 1
    assert [r.id for r in engine.result.visible] == [1, 2, 3, 4, 5, 6]
    assert engine.result.total_pages == 2


def test_page_request_beyond_range_is_clamped(store):
    engine = QueryEngine(store, page_size=6)
    result = engine.on_page_request(999)
    assert result.page == 2
    assert [r.id for r in result.visible] == [7, 8]
    assert engine.on_page_request(-3).page == 1


def test_query_change_resets_page(store):
    engine = QueryEngine(store, page_size=6)
    engine.on_page_request(2)
    result = engine.on_query_change("person")
    assert result.page == 1
    assert engine.state.page == 1


def test_engineer_then_empty_query(store):
    engine = QueryEngine(store, page_size=6)
    narrowed = engine.on_query_change("engineer")
    assert narrowed.total_matches == 3
    assert narrowed.page == 1
    widened = engine.on_query_change("")
    assert widened.page == 1
    assert widened.total_matches == 8
    assert [r.id for r in widened.visible] == [1, 2, 3, 4, 5, 6]


def test_no_matches_state(store):
    engine = QueryEngine(store, page_size=6)
    result = engine.on_query_change("nothing matches this")
    assert (result.total_pages, result.page, result.visible) == (1, 1, ())
    assert engine.on_page_request(5).page == 1


def test_same_page_request_is_idempotent(store):
    engine = QueryEngine(store, page_size=3)
    before = engine.on_page_request(2)
    after = engine.on_page_request(engine.state.page)
    assert after == before
    assert engine.recompute() == before


def test_next_and_previous_stop_at_bounds(store):
    engine = QueryEngine(store, page_size=3)
    assert engine.previous_page().page == 1
    assert engine.next_page().page == 2
    assert engine.next_page().page == 3
    last = engine.next_page()
    assert last.page == 3
    assert not last.has_next and last.has_previous


def test_preserve_page_policy_reclamps(store):
    engine = QueryEngine(store, page_size=2, reset_page_on_query=False)
    engine.on_page_request(4)
    kept = engine.on_query_change("person")
    assert kept.page == 4
    shrunk = engine.on_query_change("engineer")
    # three matches -> two pages, stale page 4 clamps to 2
    assert shrunk.total_pages == 2
    assert shrunk.page == 2
    assert [r.id for r in shrunk.visible] == [6]


def test_policy_and_page_size_from_settings(store, monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "4")
    monkeypatch.setenv("RESET_PAGE_ON_QUERY", "false")
    # loading the store already cached settings
    get_settings.cache_clear()
    engine = QueryEngine(store)
    assert engine.page_size == 4
    assert engine.reset_page_on_query is False
    assert engine.result.total_pages == 2


def test_state_is_a_copy(store):
    engine = QueryEngine(store, page_size=6)
    snapshot = engine.state
    snapshot.page = 2
    assert engine.state.page == 1


def test_non_positive_page_size_rejected(store):
    with pytest.raises(ValueError):
        QueryEngine(store, page_size=0)
