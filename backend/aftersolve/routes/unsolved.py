from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from aftersolve.config import settings
from aftersolve.schemas.problem import UnsolvedResponse
from aftersolve.schemas.query import (
    Option, OptionsResponse, PageResponse, ProblemView, QueryConfig,
    SortRating, SortTime, UnratedPolicy,
)
from aftersolve.services.aggregation import Aggregation, get_unsolved_problems
from aftersolve.services.codeforces import CodeforcesClient, get_codeforces_client
from aftersolve.services.errors import AggregationError, RateLimited
from aftersolve.services.problem_urls import contest_url, problem_url
from aftersolve.services.query import clamp_page, filter_problems, run_query
from aftersolve.services.verdicts import label_table, verdict_label

router = APIRouter(prefix="/api", tags=["unsolved"])

RATING_CAPS = list(range(800, 3501, 100))
PAGE_SIZES = [10, 20, 30, 40, 50]
TAGS = [
    "2-sat", "binary search", "bitmasks", "brute force", "combinatorics",
    "constructive algorithms", "data structures", "dfs and similar",
    "divide and conquer", "dp", "dsu", "flows", "fft", "games", "geometry",
    "graphs", "greedy", "hashing", "implementation", "interactive",
    "matrix exponentiation", "meet-in-the-middle", "math", "number theory",
    "probabilities", "shortest paths", "sortings", "strings", "ternary search",
    "two pointers", "trees",
]


def _to_http(e: AggregationError) -> HTTPException:
    headers = {"X-Error-Kind": e.kind}
    if isinstance(e, RateLimited):
        headers["Retry-After"] = str(e.retry_after_seconds)
    return HTTPException(status_code=e.status_code, detail=e.message, headers=headers)


async def _aggregate(client: CodeforcesClient, handle: str) -> Aggregation:
    try:
        return await get_unsolved_problems(client, handle)
    except AggregationError as e:
        raise _to_http(e)


@router.get("/user/{handle}/unsolved", response_model=UnsolvedResponse)
async def unsolved(
    handle: str = Path(..., min_length=1),
    client: CodeforcesClient = Depends(get_codeforces_client),
):
    agg = await _aggregate(client, handle)
    return UnsolvedResponse(handle=agg.handle, unsolved=agg.unsolved)


@router.get("/user/{handle}/unsolved/page", response_model=PageResponse)
async def unsolved_page(
    handle: str = Path(..., min_length=1),
    max_rating: int | None = Query(default=None, alias="maxRating", ge=0),
    tags: list[str] = Query(default=[]),
    sort_time: SortTime | None = Query(default=None, alias="sortTime"),
    sort_rating: SortRating | None = Query(default=None, alias="sortRating"),
    unrated: UnratedPolicy = Query(default="include"),
    page_size: int = Query(default=settings.default_page_size, alias="pageSize", ge=1, le=settings.max_page_size),
    page: int = Query(default=1, ge=1),
    client: CodeforcesClient = Depends(get_codeforces_client),
):
    agg = await _aggregate(client, handle)
    cfg = QueryConfig(
        max_rating=max_rating,
        tags=frozenset(tags),
        sort_time=sort_time,
        sort_rating=sort_rating,
        unrated=unrated,
        page_size=page_size,
        page=page,
    )
    # the engine slices as asked; bringing the page into range is our job
    matching = len(filter_problems(agg.unsolved, cfg))
    cfg = cfg.model_copy(update={"page": clamp_page(page, matching, page_size)})
    result = run_query(agg.unsolved, cfg)
    return PageResponse(
        handle=agg.handle,
        items=[
            ProblemView(
                **p.model_dump(),
                status_label=verdict_label(p.status),
                problem_url=problem_url(p.contest_id, p.index),
                contest_url=contest_url(p.contest_id),
                unrated=p.rating is None,
            )
            for p in result.items
        ],
        total_items=result.total_items,
        total_pages=result.total_pages,
        page=cfg.page,
        page_size=cfg.page_size,
        start_index=result.start_index,
        end_index=result.end_index,
    )


@router.get("/options", response_model=OptionsResponse)
async def options():
    return OptionsResponse(
        ratings=[Option(value=r, label=f"<= {r}") for r in RATING_CAPS],
        tags=[Option(value=t, label=t) for t in TAGS],
        page_sizes=[Option(value=n, label=str(n)) for n in PAGE_SIZES],
        sort_time=[
            Option(value="oldest-first", label="Oldest First"),
            Option(value="latest-first", label="Latest First"),
        ],
        sort_rating=[
            Option(value="increasing", label="Increasing"),
            Option(value="decreasing", label="Decreasing"),
        ],
        verdicts=label_table(),
    )
