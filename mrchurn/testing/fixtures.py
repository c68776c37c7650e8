"""
Pytest fixtures and payload factories for mrchurn testing.

The factories build GitLab-shaped JSON so tests exercise the same parsing
code as a real run.
"""

from datetime import datetime, timezone
from typing import Any, Generator

import pytest

from mrchurn.testing.mock import MockChurnClient, MockTransport
from mrchurn.types.merge_requests import MergeRequestSummary


def create_mock_merge_request(
    iid: int = 1,
    author: str = "test-user",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a merge request listing entry.

    Args:
        iid: Project-scoped merge request number
        author: Author username
        **kwargs: Additional fields to override

    Returns:
        Dict shaped like an entry of GET /projects/:id/merge_requests
    """
    defaults: dict[str, Any] = {
        "id": 1000 + iid,
        "title": f"Test MR {iid}",
        "created_at": "2024-01-15T10:30:00.000Z",
        "state": "opened",
        "merged_at": None,
        "source_branch": f"feature-{iid}",
        "target_branch": "main",
    }
    defaults.update(kwargs)
    return {"iid": iid, "author": {"id": 7, "username": author}, **defaults}


def make_diff(added: int, removed: int, path: str = "file.txt") -> str:
    """Build a unified diff with `added` new and `removed` old lines."""
    lines = [f"--- a/{path}", f"+++ b/{path}", f"@@ -1,{removed + 1} +1,{added + 1} @@", " context"]
    lines.extend(f"-old line {i}" for i in range(removed))
    lines.extend(f"+new line {i}" for i in range(added))
    return "\n".join(lines) + "\n"


def create_mock_change(
    old_path: str | None = "file.txt",
    added: int = 1,
    removed: int = 0,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create one entry of a merge request's `changes` array.

    Args:
        old_path: Pre-change file path
        added: Added lines in the generated diff
        removed: Removed lines in the generated diff
        **kwargs: Additional fields to override (e.g., diff, new_path)

    Returns:
        Dict shaped like an element of GET .../merge_requests/:iid/changes "changes"
    """
    defaults: dict[str, Any] = {
        "old_path": old_path,
        "new_path": old_path,
        "new_file": False,
        "renamed_file": False,
        "deleted_file": False,
        "diff": make_diff(added, removed, old_path or "file.txt"),
    }
    defaults.update(kwargs)
    return defaults


def create_mock_changes_payload(
    iid: int = 1,
    changes: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a full changes response body."""
    return {"iid": iid, "changes": changes or []}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_project_id() -> str:
    """Provide a test project id."""
    return "42"


@pytest.fixture
def mock_transport() -> Generator[MockTransport, None, None]:
    """Provide a MockTransport that is reset after the test."""
    transport = MockTransport()
    yield transport
    transport.reset()


@pytest.fixture
def mock_client(
    mock_transport: MockTransport, mock_project_id: str
) -> MockChurnClient:
    """Provide a MockChurnClient over `mock_transport`."""
    return MockChurnClient(mock_transport, project_id=mock_project_id)


@pytest.fixture
def sample_summary() -> MergeRequestSummary:
    """Provide a merged MergeRequestSummary."""
    return MergeRequestSummary(
        iid=7,
        author="alice",
        created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        state="merged",
        merged_at=datetime(2024, 1, 16, 9, 0, tzinfo=timezone.utc),
        source_branch="feature/login",
    )
