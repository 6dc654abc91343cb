from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

UNATTEMPTED = "Unattempted"
ACCEPTED = "OK"


class CamelModel(BaseModel):
    """Base for models exchanged with Codeforces or the front end (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProblemKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    contest_id: int
    index: str

    def __str__(self) -> str:
        return f"{self.contest_id}-{self.index}"


def _coerce_rating(value: Any) -> int | None:
    # bool is an int subclass; a boolean rating is not a rating
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


# --- Codeforces wire shapes -------------------------------------------------

class WireProblem(CamelModel):
    contest_id: int | None = None
    index: str
    name: str = ""
    rating: int | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("rating", mode="before")
    @classmethod
    def numeric_rating(cls, v: Any) -> int | None:
        return _coerce_rating(v)


class WireAuthor(CamelModel):
    participant_type: str = "PRACTICE"


class WireSubmission(CamelModel):
    id: int | None = None
    contest_id: int | None = None
    problem: WireProblem
    author: WireAuthor = Field(default_factory=WireAuthor)
    verdict: str | None = None


class WireContest(CamelModel):
    id: int
    name: str = ""
    start_time_seconds: int | None = None


class WireUser(CamelModel):
    handle: str
    rating: int | None = None
    max_rating: int | None = None


# --- domain entities ----------------------------------------------------------

class SubmissionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: ProblemKey
    verdict: str | None = None
    is_contestant: bool = False

    @classmethod
    def from_wire(cls, sub: WireSubmission) -> SubmissionRecord | None:
        contest_id = sub.problem.contest_id if sub.problem.contest_id is not None else sub.contest_id
        if contest_id is None:
            return None
        return cls(
            key=ProblemKey(contest_id=contest_id, index=sub.problem.index),
            verdict=sub.verdict,
            is_contestant=sub.author.participant_type == "CONTESTANT",
        )


class ContestMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    start_time: int | None = None

    @classmethod
    def from_wire(cls, c: WireContest) -> ContestMeta:
        return cls(id=c.id, name=c.name, start_time=c.start_time_seconds)


class CatalogProblem(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: ProblemKey
    name: str
    rating: int | None = None
    # upstream order is kept; membership is what matters
    tags: tuple[str, ...] = ()

    @field_validator("rating", mode="before")
    @classmethod
    def numeric_rating(cls, v: Any) -> int | None:
        return _coerce_rating(v)

    @classmethod
    def from_wire(cls, p: WireProblem) -> CatalogProblem | None:
        if p.contest_id is None:
            return None
        return cls(
            key=ProblemKey(contest_id=p.contest_id, index=p.index),
            name=p.name,
            rating=p.rating,
            tags=tuple(p.tags),
        )


class UnsolvedProblem(CamelModel):
    """Derived record; one per unsolved problem of a participated contest."""
    model_config = ConfigDict(frozen=True)

    contest_id: int
    index: str
    contest_name: str | None = None
    name: str
    rating: int | None = None
    tags: list[str] = Field(default_factory=list)
    time: int | None = None
    status: str = UNATTEMPTED

    @property
    def key(self) -> ProblemKey:
        return ProblemKey(contest_id=self.contest_id, index=self.index)


class UnsolvedResponse(CamelModel):
    handle: str
    unsolved: list[UnsolvedProblem]
