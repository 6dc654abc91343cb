from __future__ import annotations
from typing import Any, AsyncGenerator
import httpx
import structlog
from pydantic import ValidationError
from aftersolve.config import settings
from aftersolve.schemas.problem import (
    CatalogProblem, ContestMeta, SubmissionRecord,
    WireContest, WireProblem, WireSubmission, WireUser,
)
from aftersolve.services.errors import (
    HandleNotFound, UpstreamError, classify_failure,
)

log = structlog.get_logger()


class CodeforcesClient:
    """Thin async wrapper over the public Codeforces API methods the aggregation needs."""

    def __init__(self, http: httpx.AsyncClient, base_url: str | None = None):
        self._http = http
        self.base_url = (base_url or settings.codeforces_api_base).rstrip("/")

    async def _call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = await self._http.get(f"{self.base_url}/{method}", params=params)
        except httpx.RequestError as e:
            log.warning("codeforces_call_failed", method=method, error=str(e))
            raise UpstreamError() from e

        try:
            payload = response.json()
        except ValueError:
            payload = None
        comment = payload.get("comment") if isinstance(payload, dict) else None

        ok = (
            response.status_code < 400
            and isinstance(payload, dict)
            and payload.get("status") == "OK"
        )
        if not ok:
            if response.status_code >= 400:
                status = response.status_code
            elif payload is None:
                status = 500
            else:
                status = 400
            log.warning("codeforces_call_failed", method=method, status=status, comment=comment)
            raise classify_failure(status, comment)
        return payload.get("result")

    async def get_user(self, handle: str) -> WireUser:
        # user.info accepts ';'-separated lists; only a single handle is valid here
        if not handle or ";" in handle:
            raise HandleNotFound()
        try:
            result = await self._call("user.info", {"handles": handle})
        except UpstreamError as e:
            if 400 <= e.status_code < 500:
                raise HandleNotFound() from e
            raise
        if not result:
            raise HandleNotFound()
        return _parse(WireUser, result[0])

    async def get_submissions(self, handle: str) -> list[SubmissionRecord]:
        result = await self._call(
            "user.status",
            {"handle": handle, "from": 1, "count": settings.codeforces_submissions_count},
        )
        records = []
        for raw in result or []:
            record = SubmissionRecord.from_wire(_parse(WireSubmission, raw))
            if record is not None:
                records.append(record)
        return records

    async def list_contests(self) -> list[ContestMeta]:
        gym = "true" if settings.codeforces_include_gym else "false"
        result = await self._call("contest.list", {"gym": gym})
        return [ContestMeta.from_wire(_parse(WireContest, raw)) for raw in result or []]

    async def list_problems(self) -> list[CatalogProblem]:
        result = await self._call("problemset.problems")
        problems = []
        for raw in (result or {}).get("problems", []):
            problem = CatalogProblem.from_wire(_parse(WireProblem, raw))
            if problem is not None:
                problems.append(problem)
        return problems


def _parse(model, raw: Any):
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        log.warning("codeforces_payload_invalid", model=model.__name__, error=str(e))
        raise UpstreamError() from e


async def get_codeforces_client() -> AsyncGenerator[CodeforcesClient, None]:
    async with httpx.AsyncClient(timeout=settings.codeforces_timeout_seconds) as http:
        yield CodeforcesClient(http)
