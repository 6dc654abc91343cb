from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable
from aftersolve.schemas.problem import ACCEPTED, ContestMeta, ProblemKey, SubmissionRecord


@dataclass
class SubmissionIndex:
    solved: set[ProblemKey] = field(default_factory=set)
    verdicts: dict[ProblemKey, str] = field(default_factory=dict)


@dataclass
class ContestLookup:
    names: dict[int, str] = field(default_factory=dict)
    start_times: dict[int, int] = field(default_factory=dict)


def index_submissions(submissions: Iterable[SubmissionRecord]) -> SubmissionIndex:
    """
    Build the solved-set and the verdict map in one pass.

    The verdict map keeps the last indexed verdict per key. Submissions
    without a verdict (still in testing) do not overwrite an earlier one.
    """
    index = SubmissionIndex()
    for sub in submissions:
        if sub.verdict is None:
            continue
        index.verdicts[sub.key] = sub.verdict
        if sub.verdict == ACCEPTED:
            index.solved.add(sub.key)
    return index


def participated_contests(submissions: Iterable[SubmissionRecord]) -> set[int]:
    # practice and virtual submissions never make a contest "participated"
    return {sub.key.contest_id for sub in submissions if sub.is_contestant}


def join_contest_metadata(contests: Iterable[ContestMeta], participated: set[int]) -> ContestLookup:
    lookup = ContestLookup()
    for c in contests:
        if c.id not in participated:
            continue
        lookup.names[c.id] = c.name
        if c.start_time is not None:
            lookup.start_times[c.id] = c.start_time
    return lookup
