from __future__ import annotations
from typing import Iterable, Iterator
from aftersolve.schemas.problem import UNATTEMPTED, CatalogProblem, UnsolvedProblem
from aftersolve.services.indexing import ContestLookup, SubmissionIndex


def project_unsolved(
    catalog: Iterable[CatalogProblem],
    participated: set[int],
    index: SubmissionIndex,
    lookup: ContestLookup,
) -> Iterator[UnsolvedProblem]:
    """
    Yield an UnsolvedProblem for every catalog problem whose contest was
    participated in and whose key is not solved. Catalog order is kept.
    """
    seen = set()
    for p in catalog:
        if p.key.contest_id not in participated or p.key in index.solved:
            continue
        if p.key in seen:
            continue
        seen.add(p.key)
        yield UnsolvedProblem(
            contest_id=p.key.contest_id,
            index=p.key.index,
            contest_name=lookup.names.get(p.key.contest_id),
            name=p.name,
            rating=p.rating,
            tags=list(p.tags),
            time=lookup.start_times.get(p.key.contest_id),
            status=index.verdicts.get(p.key, UNATTEMPTED),
        )
