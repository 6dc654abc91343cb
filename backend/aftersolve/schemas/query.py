from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from aftersolve.schemas.problem import UnsolvedProblem

SortTime = Literal["oldest-first", "latest-first"]
SortRating = Literal["increasing", "decreasing"]
UnratedPolicy = Literal["include", "exclude"]


class QueryConfig(BaseModel):
    """Immutable view settings for one query over the derived list."""
    model_config = ConfigDict(frozen=True)

    max_rating: int | None = None
    tags: frozenset[str] = frozenset()
    sort_time: SortTime | None = None
    sort_rating: SortRating | None = None
    unrated: UnratedPolicy = "include"
    page_size: int = Field(default=10, gt=0)
    page: int = Field(default=1, ge=1)


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: list[UnsolvedProblem]
    total_items: int
    total_pages: int
    start_index: int
    end_index: int


class ProblemView(UnsolvedProblem):
    status_label: str
    problem_url: str
    contest_url: str
    unrated: bool


class PageResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    handle: str
    items: list[ProblemView]
    total_items: int
    total_pages: int
    page: int
    page_size: int
    start_index: int
    end_index: int


class Option(BaseModel):
    value: str | int
    label: str


class OptionsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ratings: list[Option]
    tags: list[Option]
    page_sizes: list[Option]
    sort_time: list[Option]
    sort_rating: list[Option]
    verdicts: dict[str, str]
