from __future__ import annotations
import math
from typing import Sequence
from aftersolve.schemas.problem import UnsolvedProblem
from aftersolve.schemas.query import Page, QueryConfig


def _passes_rating(p: UnsolvedProblem, cfg: QueryConfig) -> bool:
    if cfg.max_rating is None:
        return True
    if p.rating is None:
        return cfg.unrated == "include"
    return p.rating <= cfg.max_rating


def _passes_tags(p: UnsolvedProblem, cfg: QueryConfig) -> bool:
    if not cfg.tags:
        return True
    return any(t in cfg.tags for t in p.tags)


def filter_problems(problems: Sequence[UnsolvedProblem], cfg: QueryConfig) -> list[UnsolvedProblem]:
    return [p for p in problems if _passes_rating(p, cfg) and _passes_tags(p, cfg)]


def sort_problems(problems: Sequence[UnsolvedProblem], cfg: QueryConfig) -> list[UnsolvedProblem]:
    """
    Order by time (primary) then rating (secondary), each in its own direction.

    Missing values sort as 0. Python's sort is stable, so sorting by the
    secondary key first and the primary key second gives the composite
    order while equal records keep their derivation order.
    """
    out = list(problems)
    if cfg.sort_rating is not None:
        out.sort(key=lambda p: p.rating or 0, reverse=cfg.sort_rating == "decreasing")
    if cfg.sort_time is not None:
        out.sort(key=lambda p: p.time or 0, reverse=cfg.sort_time == "latest-first")
    return out


def total_pages(total_items: int, page_size: int) -> int:
    return math.ceil(total_items / page_size) if total_items else 0


def clamp_page(page: int, total_items: int, page_size: int) -> int:
    return min(max(page, 1), max(total_pages(total_items, page_size), 1))


def paginate(problems: Sequence[UnsolvedProblem], page: int, page_size: int) -> Page:
    total = len(problems)
    start = min((page - 1) * page_size, total)
    end = min(page * page_size, total)
    return Page(
        items=list(problems[start:end]),
        total_items=total,
        total_pages=total_pages(total, page_size),
        start_index=start,
        end_index=end,
    )


def run_query(problems: Sequence[UnsolvedProblem], cfg: QueryConfig) -> Page:
    """Filter, then sort, then slice out `cfg.page`. Never raises for out-of-range pages."""
    filtered = filter_problems(problems, cfg)
    ordered = sort_problems(filtered, cfg)
    return paginate(ordered, cfg.page, cfg.page_size)
