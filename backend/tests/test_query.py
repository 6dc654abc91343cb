from __future__ import annotations
import pytest
from pydantic import ValidationError
from aftersolve.schemas.problem import UnsolvedProblem
from aftersolve.schemas.query import QueryConfig
from aftersolve.services.query import clamp_page, filter_problems, paginate, run_query, sort_problems, total_pages


def _p(name, rating=None, time=None, tags=()):
    return UnsolvedProblem(contest_id=1, index=name, name=name, rating=rating, time=time, tags=list(tags))


def _names(problems):
    return [p.name for p in problems]


PROBLEMS = [
    _p("a", 1200, 300, ["dp"]),
    _p("b", None, 100, ["greedy", "math"]),
    _p("c", 800, 200, ["graphs"]),
    _p("d", 1600, 100, ["dp", "graphs"]),
    _p("e", 800, None, []),
]


def test_no_options_is_identity():
    page = run_query(PROBLEMS, QueryConfig(page_size=50))
    assert _names(page.items) == ["a", "b", "c", "d", "e"]


def test_max_rating_includes_unrated_by_default():
    out = filter_problems(PROBLEMS, QueryConfig(max_rating=1200))
    assert _names(out) == ["a", "b", "c", "e"]


def test_max_rating_can_exclude_unrated():
    out = filter_problems(PROBLEMS, QueryConfig(max_rating=1200, unrated="exclude"))
    assert _names(out) == ["a", "c", "e"]


def test_unrated_policy_ignored_without_rating_cap():
    out = filter_problems(PROBLEMS, QueryConfig(unrated="exclude"))
    assert len(out) == len(PROBLEMS)


def test_tags_use_or_semantics():
    out = filter_problems(PROBLEMS, QueryConfig(tags=frozenset({"graphs", "math"})))
    assert _names(out) == ["b", "c", "d"]


def test_impossible_filter_gives_empty_page():
    page = run_query(PROBLEMS, QueryConfig(max_rating=100, unrated="exclude", tags=frozenset({"fft"})))
    assert page.items == [] and page.total_items == 0 and page.total_pages == 0
    assert (page.start_index, page.end_index) == (0, 0)


def test_sort_time_only_is_stable():
    out = sort_problems(PROBLEMS, QueryConfig(sort_time="oldest-first"))
    # e has no time -> 0; b and d share time 100 and keep their order
    assert _names(out) == ["e", "b", "d", "c", "a"]


def test_sort_time_latest_first_is_stable():
    out = sort_problems(PROBLEMS, QueryConfig(sort_time="latest-first"))
    assert _names(out) == ["a", "c", "b", "d", "e"]


@pytest.mark.parametrize("direction,expected", [
    ("increasing", ["b", "c", "e", "a", "d"]),
    ("decreasing", ["d", "a", "c", "e", "b"]),
])
def test_sort_rating_only(direction, expected):
    assert _names(sort_problems(PROBLEMS, QueryConfig(sort_rating=direction))) == expected


def test_time_primary_rating_secondary_with_own_directions():
    out = sort_problems(PROBLEMS, QueryConfig(sort_time="oldest-first", sort_rating="decreasing"))
    assert _names(out) == ["e", "d", "b", "c", "a"]
    out = sort_problems(PROBLEMS, QueryConfig(sort_time="latest-first", sort_rating="increasing"))
    assert _names(out) == ["a", "c", "b", "d", "e"]


def test_sorting_does_not_mutate_input():
    before = list(PROBLEMS)
    sort_problems(PROBLEMS, QueryConfig(sort_rating="decreasing"))
    assert PROBLEMS == before


def test_pagination_arithmetic():
    items = [_p(str(i)) for i in range(23)]
    assert total_pages(23, 10) == 3
    page = paginate(items, 3, 10)
    assert len(page.items) == 3
    assert (page.start_index, page.end_index, page.total_items, page.total_pages) == (20, 23, 23, 3)
    assert _names(page.items) == ["20", "21", "22"]


def test_page_past_the_end_is_empty_not_error():
    page = paginate([_p("x")], 5, 10)
    assert page.items == []
    assert page.total_pages == 1


@pytest.mark.parametrize("page,total,size,expected", [
    (0, 23, 10, 1),
    (4, 23, 10, 3),
    (2, 23, 10, 2),
    (3, 0, 10, 1),
])
def test_clamp_page(page, total, size, expected):
    assert clamp_page(page, total, size) == expected


def test_filter_sort_then_paginate():
    cfg = QueryConfig(max_rating=1200, sort_rating="increasing", page_size=2, page=2)
    page = run_query(PROBLEMS, cfg)
    assert _names(page.items) == ["e", "a"]
    assert page.total_items == 4 and page.total_pages == 2


def test_config_is_immutable_and_validated():
    cfg = QueryConfig()
    with pytest.raises(ValidationError):
        cfg.page = 2
    with pytest.raises(ValidationError):
        QueryConfig(page_size=0)
    with pytest.raises(ValidationError):
        QueryConfig(sort_time="sideways")
