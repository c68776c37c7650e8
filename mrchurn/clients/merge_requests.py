"""Merge request listing client."""

from typing import TYPE_CHECKING, Any

from mrchurn.clients._parsing import parse_timestamp, project_path, require
from mrchurn.exceptions import MalformedResponseError
from mrchurn.logging import get_logger
from mrchurn.result import Failure
from mrchurn.types.merge_requests import MergeRequestSummary

if TYPE_CHECKING:
    from mrchurn.transport import HTTPTransport

logger = get_logger()


class MergeRequestsClient:
    """Client for the project merge request listing."""

    PER_PAGE = 100

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the merge requests client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_all(self, project_id: str | int) -> list[MergeRequestSummary]:
        """
        List every merge request of a project, in every state.

        Pages are requested one after another until a response carries no
        X-Next-Page value. A page that fails ends the listing early and
        the merge requests gathered so far are returned.

        Args:
            project_id: Numeric id or full path of the project

        Returns:
            Merge request summaries in the order the API returned them

        Raises:
            MalformedResponseError: If a page is not a list of merge requests
            TransportError: If the API cannot be reached
        """
        merge_requests: list[MergeRequestSummary] = []
        page = 1

        while True:
            logger.info("Fetching merge requests, page: %d", page)
            result = self.transport.get(
                f"{project_path(project_id)}/merge_requests",
                params={
                    "state": "all",
                    "scope": "all",
                    "per_page": self.PER_PAGE,
                    "page": page,
                },
            )

            if isinstance(result, Failure):
                logger.warning(
                    "Stopping at page %d, listing request failed: %s",
                    page,
                    result.describe(),
                )
                break

            if not isinstance(result.payload, list):
                raise MalformedResponseError(
                    f"Merge request listing page {page} is not a list"
                )

            merge_requests.extend(self._parse_summary(item) for item in result.payload)

            next_page = result.headers.get("X-Next-Page", "")
            if not next_page.strip():
                break

            page += 1

        return merge_requests

    def _parse_summary(self, data: Any) -> MergeRequestSummary:
        """Parse one listing entry from the API response."""
        if not isinstance(data, dict):
            raise MalformedResponseError("Merge request entry is not an object")

        iid = require(data, "iid", "Merge request")
        context = f"Merge request !{iid}"

        author = require(data, "author", context)
        if not isinstance(author, dict):
            raise MalformedResponseError(f"{context} has an invalid 'author'")

        merged_at = None
        if data.get("merged_at"):
            merged_at = parse_timestamp(data["merged_at"], context)

        return MergeRequestSummary(
            iid=int(iid),
            author=require(author, "username", f"{context} author"),
            created_at=parse_timestamp(require(data, "created_at", context), context),
            state=require(data, "state", context),
            merged_at=merged_at,
            source_branch=require(data, "source_branch", context),
        )
