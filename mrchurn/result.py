"""
Explicit outcome of a single API request.

A request either succeeds with a decoded payload or fails with a reason.
Callers branch on the type instead of testing truthiness, so an empty
page and a failed page can never be confused.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

import httpx


@dataclass(frozen=True)
class Success:
    """A 2xx response with its decoded JSON body."""

    payload: Any
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Header lookups are case-insensitive regardless of what was passed in
        object.__setattr__(self, "headers", httpx.Headers(self.headers))


@dataclass(frozen=True)
class Failure:
    """A response with a non-2xx status."""

    status_code: int
    code: str
    reason: str
    request_id: str | None = None

    def describe(self) -> str:
        return f"HTTP {self.status_code} [{self.code}] {self.reason}"


ApiResult = Union[Success, Failure]


_STATUS_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    429: "RATE_LIMITED",
}


def failure_code(status_code: int) -> str:
    """Map an HTTP status to a short failure code."""
    if status_code in _STATUS_CODES:
        return _STATUS_CODES[status_code]
    if status_code >= 500:
        return "SERVER_ERROR"
    if 300 <= status_code < 400:
        return "REDIRECT"
    return "CLIENT_ERROR"


__all__ = ["ApiResult", "Failure", "Success", "failure_code"]
