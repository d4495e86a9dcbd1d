from __future__ import annotations

import pytest

from models.team_member import TeamMember
from services.query_engine import build_view, filter_records, matches, paginate


def _member(i, **kw):
    data = {"id": i, "name": f"Person {i}", "jobTitle": "Staff"}
    data.update(kw)
    return TeamMember.model_validate(data)


def test_empty_query_is_identity(store):
    records = store.all()
    assert filter_records(records, "") == list(records)


def test_filter_is_stable_subsequence_and_exact(store):
    records = store.all()
    out = filter_records(records, "engineer")
    assert [r.id for r in out] == [2, 4, 6]
    # everything left out fails the predicate
    excluded = [r for r in records if r not in out]
    assert all(not matches(r, "engineer") for r in excluded)
    assert all(matches(r, "engineer") for r in out)


def test_skill_match_is_case_insensitive(store):
    out = filter_records(store.all(), "rust")
    assert [r.id for r in out] == [7]


def test_bio_and_name_are_searched(store):
    assert [r.id for r in filter_records(store.all(), "DASHBOARDS")] == [8]
    assert [r.id for r in filter_records(store.all(), "person 3")] == [3]


def test_missing_bio_and_skills_do_not_match_or_fail():
    m = _member(1)
    assert m.bio is None and m.skills == ()
    assert not matches(m, "python")


def test_substring_not_tokenized():
    m = _member(1, skills=["Distributed Systems"])
    assert matches(m, "ted sys")


def test_paginate_scenario_two_pages(store):
    records = store.all()
    first = paginate(records, 6, 1)
    assert first.total_pages == 2
    assert [r.id for r in first.visible] == [1, 2, 3, 4, 5, 6]
    second = paginate(records, 6, 2)
    assert [r.id for r in second.visible] == [7, 8]


@pytest.mark.parametrize("requested,expected", [(-5, 1), (0, 1), (1, 1), (2, 2), (3, 2), (999, 2)])
def test_paginate_clamps_out_of_range(store, requested, expected):
    page_slice = paginate(store.all(), 6, requested)
    assert page_slice.page == expected
    assert 1 <= page_slice.page <= page_slice.total_pages


def test_paginate_empty_set_has_one_empty_page():
    page_slice = paginate([], 6, 3)
    assert page_slice.total_pages == 1
    assert page_slice.page == 1
    assert page_slice.visible == ()


def test_paginate_exact_multiple(store):
    page_slice = paginate(store.all(), 4, 2)
    assert page_slice.total_pages == 2
    assert [r.id for r in page_slice.visible] == [5, 6, 7, 8]


def test_paginate_rejects_non_positive_page_size(store):
    with pytest.raises(ValueError):
        paginate(store.all(), 0, 1)


def test_build_view_no_matches(store):
    view = build_view(store.all(), "zzz-nobody", 4, 6)
    assert view.total_matches == 0
    assert view.total_pages == 1
    assert view.page == 1
    assert view.visible == ()
    assert view.is_empty
    assert view.total_records == 8
