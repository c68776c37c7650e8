"""
Mock transport for testing.

Provides a MockTransport that stands in for HTTPTransport without making
network calls. Results are queued per path and handed out in order, so a
paginated listing is configured by queueing one result per page.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from mrchurn.clients import ChangesClient, MergeRequestsClient
from mrchurn.clients._parsing import project_path
from mrchurn.config import GitLabConfig
from mrchurn.result import ApiResult, Failure, Success, failure_code


@dataclass
class MockCall:
    """Record of a request."""

    path: str
    params: dict[str, Any] | None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def merge_requests_path(project_id: str | int) -> str:
    return f"{project_path(project_id)}/merge_requests"


def changes_path(project_id: str | int, merge_request_iid: int) -> str:
    return f"{project_path(project_id)}/merge_requests/{merge_request_iid}/changes"


class MockTransport:
    """
    Mock transport for testing.

    Example:
        ```python
        from mrchurn.clients import MergeRequestsClient
        from mrchurn.testing import MockTransport, create_mock_merge_request

        transport = MockTransport()
        transport.add_listing_page("42", [create_mock_merge_request(iid=1)], next_page=2)
        transport.add_listing_page("42", [create_mock_merge_request(iid=2)])

        summaries = MergeRequestsClient(transport).list_all("42")
        assert [s.iid for s in summaries] == [1, 2]
        assert transport.call_count(merge_requests_path("42")) == 2
        ```
    """

    def __init__(self) -> None:
        self._results: dict[str, list[ApiResult | Exception]] = {}
        self._calls: list[MockCall] = []

    def add_result(self, path: str, result: ApiResult | Exception) -> None:
        """Queue a result (or an exception to raise) for the next GET of `path`."""
        self._results.setdefault(path, []).append(result)

    def add_page(
        self,
        path: str,
        payload: Any,
        next_page: int | None = None,
    ) -> None:
        """Queue a successful response, optionally advertising a next page."""
        headers = {"X-Next-Page": str(next_page) if next_page is not None else ""}
        self.add_result(path, Success(payload=payload, headers=headers))

    def add_failure(
        self,
        path: str,
        status_code: int = 500,
        reason: str | None = None,
    ) -> None:
        """Queue an error response."""
        self.add_result(
            path,
            Failure(
                status_code=status_code,
                code=failure_code(status_code),
                reason=reason or f"HTTP {status_code}",
            ),
        )

    def add_listing_page(
        self,
        project_id: str | int,
        items: list[dict[str, Any]],
        next_page: int | None = None,
    ) -> None:
        """Queue one page of the merge request listing."""
        self.add_page(merge_requests_path(project_id), items, next_page=next_page)

    def add_changes(
        self,
        project_id: str | int,
        merge_request_iid: int,
        changes: list[dict[str, Any]],
    ) -> None:
        """Queue the changes response of one merge request."""
        self.add_page(
            changes_path(project_id, merge_request_iid),
            {"iid": merge_request_iid, "changes": changes},
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> ApiResult:
        """Return the next queued result for `path`; unconfigured paths are 404s."""
        self._calls.append(MockCall(path=path, params=params))

        queue = self._results.get(path)
        if not queue:
            return Failure(
                status_code=404,
                code="NOT_FOUND",
                reason=f"No mock response configured for {path}",
            )

        result = queue.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def was_called(self, path: str) -> bool:
        """Check whether `path` was requested."""
        return any(call.path == path for call in self._calls)

    def call_count(self, path: str) -> int:
        """Number of requests made for `path`."""
        return sum(1 for call in self._calls if call.path == path)

    def get_calls(self, path: str | None = None) -> list[MockCall]:
        """Recorded requests, optionally filtered by path."""
        if path is None:
            return list(self._calls)
        return [call for call in self._calls if call.path == path]

    def reset(self) -> None:
        """Forget all recorded calls and queued results."""
        self._calls.clear()
        self._results.clear()

    def close(self) -> None:
        """No-op for compatibility with HTTPTransport."""
        pass

    def __enter__(self) -> "MockTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class MockChurnClient:
    """ChurnClient look-alike whose resource clients run over a MockTransport."""

    def __init__(
        self,
        transport: MockTransport | None = None,
        project_id: str = "mock-project",
    ) -> None:
        self.config = GitLabConfig(project_id=project_id, token="mock-token")
        self.transport = transport or MockTransport()
        self.merge_requests = MergeRequestsClient(self.transport)  # type: ignore[arg-type]
        self.changes = ChangesClient(self.transport)  # type: ignore[arg-type]

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "MockChurnClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = [
    "MockCall",
    "MockChurnClient",
    "MockTransport",
    "changes_path",
    "merge_requests_path",
]
