from __future__ import annotations
from typing import Literal

ErrorKind = Literal["NotFound", "RateLimited", "ServiceUnavailable", "UpstreamError"]

GENERIC_UPSTREAM_MESSAGE = "Server error. Please wait and try again in a few seconds."
API_DISABLED_MARKER = "The API is disabled"
CALL_LIMIT_MARKER = "call limit exceeded"


class AggregationError(Exception):
    kind: ErrorKind = "UpstreamError"
    status_code: int = 500
    default_message: str = GENERIC_UPSTREAM_MESSAGE

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class HandleNotFound(AggregationError):
    kind = "NotFound"
    status_code = 404
    default_message = "User not found."


class RateLimited(AggregationError):
    """Upstream request budget exhausted; callers should wait about a minute."""
    kind = "RateLimited"
    status_code = 429
    default_message = "Rate limit exceeded. Try again in a minute."
    retry_after_seconds = 60


class ServiceUnavailable(AggregationError):
    kind = "ServiceUnavailable"
    status_code = 503
    default_message = "Codeforces API unavailable. Try again later."


class UpstreamError(AggregationError):
    kind = "UpstreamError"


def classify_failure(status_code: int | None, comment: str | None) -> AggregationError:
    """Map an upstream failure (HTTP status and Codeforces `comment`) to the error taxonomy."""
    text = comment or ""
    if status_code == 429 or CALL_LIMIT_MARKER in text.lower():
        return RateLimited()
    if API_DISABLED_MARKER in text:
        return ServiceUnavailable()
    return UpstreamError(comment or None, status_code or 500)
