from __future__ import annotations
import asyncio
from dataclasses import dataclass
import structlog
from aftersolve.schemas.problem import UnsolvedProblem
from aftersolve.services.codeforces import CodeforcesClient
from aftersolve.services.indexing import index_submissions, join_contest_metadata, participated_contests
from aftersolve.services.projector import project_unsolved

log = structlog.get_logger()


@dataclass(frozen=True)
class Aggregation:
    handle: str
    unsolved: list[UnsolvedProblem]


async def get_unsolved_problems(client: CodeforcesClient, handle: str) -> Aggregation:
    """
    Derive the unsolved problems of every contest `handle` competed in.

    The handle lookup runs first and short-circuits everything else on failure.
    Submissions and both catalogs are then fetched concurrently and all three
    are awaited to completion before the first failure (if any) is raised.
    Raises an AggregationError subclass; no partial result is returned.
    """
    user = await client.get_user(handle)

    results = await asyncio.gather(
        client.get_submissions(user.handle),
        client.list_contests(),
        client.list_problems(),
        return_exceptions=True,
    )
    for r in results:
        if isinstance(r, BaseException):
            raise r
    submissions, contests, catalog = results

    index = index_submissions(submissions)
    participated = participated_contests(submissions)
    lookup = join_contest_metadata(contests, participated)
    unsolved = list(project_unsolved(catalog, participated, index, lookup))

    log.info(
        "unsolved_aggregated",
        handle=user.handle,
        submissions=len(submissions),
        contests=len(participated),
        unsolved=len(unsolved),
    )
    return Aggregation(handle=user.handle, unsolved=unsolved)
