from __future__ import annotations
import httpx
import pytest
from aftersolve.services.codeforces import CodeforcesClient

BASE = "https://cf.test/api"


def cf_submission(contest_id, index, verdict="WRONG_ANSWER", participant_type="CONTESTANT", **problem):
    sub = {
        "id": hash((contest_id, index, verdict, participant_type)) & 0xFFFFFF,
        "contestId": contest_id,
        "problem": {"contestId": contest_id, "index": index, "name": f"Problem {index}", "tags": [], **problem},
        "author": {"contestId": contest_id, "participantType": participant_type, "members": [{"handle": "tourist"}]},
        "programmingLanguage": "GNU C++17",
    }
    if verdict is not None:
        sub["verdict"] = verdict
    return sub


def cf_problem(contest_id, index, rating=None, tags=()):
    p = {"contestId": contest_id, "index": index, "name": f"Problem {contest_id}{index}", "type": "PROGRAMMING", "tags": list(tags)}
    if rating is not None:
        p["rating"] = rating
    return p


def cf_contest(contest_id, name, start=None):
    c = {"id": contest_id, "name": name, "type": "CF", "phase": "FINISHED", "frozen": False, "durationSeconds": 7200}
    if start is not None:
        c["startTimeSeconds"] = start
    return c


def ok(result):
    return {"status": "OK", "result": result}


class FakeCodeforces:
    """Routes Codeforces API methods to canned (status, payload) pairs and records calls."""

    def __init__(self, submissions=(), contests=(), problems=(), handle="tourist"):
        self.routes = {
            "user.info": (200, ok([{"handle": handle, "rating": 3800}])),
            "user.status": (200, ok(list(submissions))),
            "contest.list": (200, ok(list(contests))),
            "problemset.problems": (200, ok({"problems": list(problems), "problemStatistics": []})),
        }
        self.calls: list[httpx.Request] = []

    def fail(self, method, status, payload=None):
        self.routes[method] = (status, payload)

    def raise_on(self, method, exc):
        self.routes[method] = exc

    def called(self, method) -> list[httpx.Request]:
        return [r for r in self.calls if r.url.path.endswith("/" + method)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        method = request.url.path.rsplit("/", 1)[-1]
        route = self.routes.get(method, (404, {"status": "FAILED", "comment": "unknown method"}))
        if isinstance(route, Exception):
            raise route
        status, payload = route
        if payload is None:
            return httpx.Response(status, text="<html>gateway</html>")
        return httpx.Response(status, json=payload)

    def client(self, http: httpx.AsyncClient) -> CodeforcesClient:
        return CodeforcesClient(http, base_url=BASE)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def scenario():
    """Submissions/catalog of the two-problem Div3 example."""
    return FakeCodeforces(
        submissions=[
            cf_submission(100, "A", "OK"),
            cf_submission(100, "B", "WRONG_ANSWER"),
        ],
        problems=[
            cf_problem(100, "A", 800),
            cf_problem(100, "B", 900),
            cf_problem(100, "C", 1000),
            cf_problem(200, "A", 800),
        ],
        contests=[cf_contest(100, "Div3", 1000)],
    )
