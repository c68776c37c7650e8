"""Merge request changes client."""

from typing import TYPE_CHECKING

from mrchurn.clients._parsing import project_path
from mrchurn.diffstat import count_diff_lines
from mrchurn.exceptions import MalformedResponseError
from mrchurn.logging import get_logger
from mrchurn.result import Failure
from mrchurn.types.merge_requests import ChangeStats, FileChange

if TYPE_CHECKING:
    from mrchurn.transport import HTTPTransport

logger = get_logger()


class ChangesClient:
    """Client for the per-file changes of a merge request."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the changes client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get_stats(self, project_id: str | int, merge_request_iid: int) -> ChangeStats:
        """
        Count added and removed lines per file of a merge request.

        Files are reported under their `old_path`, so a renamed file shows
        its name before the rename.

        Args:
            project_id: Numeric id or full path of the project
            merge_request_iid: Project-scoped merge request number

        Returns:
            ChangeStats; empty with zero totals if the request failed

        Raises:
            MalformedResponseError: If the response or one of its changes is malformed
            TransportError: If the API cannot be reached
        """
        result = self.transport.get(
            f"{project_path(project_id)}/merge_requests/{merge_request_iid}/changes"
        )

        if isinstance(result, Failure):
            logger.warning(
                "No changes for MR IID %s, request failed: %s",
                merge_request_iid,
                result.describe(),
            )
            return ChangeStats()

        if not isinstance(result.payload, dict):
            raise MalformedResponseError(
                f"Changes of merge request !{merge_request_iid} is not an object"
            )

        context = f"Changes of merge request !{merge_request_iid}"
        changes = result.payload.get("changes") or []
        if not isinstance(changes, list):
            raise MalformedResponseError(f"{context} has an invalid 'changes'")

        file_changes: list[FileChange] = []
        for change in changes:
            if not isinstance(change, dict):
                raise MalformedResponseError(f"{context} has an entry that is not an object")

            diff = change.get("diff")
            if diff is not None and not isinstance(diff, str):
                raise MalformedResponseError(f"{context} has a non-text 'diff'")

            added, removed = count_diff_lines(diff)
            file_changes.append(
                FileChange(
                    file_path=change.get("old_path"),
                    added_lines=added,
                    removed_lines=removed,
                )
            )

        return ChangeStats.from_file_changes(file_changes)
