"""
mrchurn main client.

Provides the primary interface for reading merge requests from GitLab.
"""

from typing import Any

import httpx

from mrchurn.clients import ChangesClient, MergeRequestsClient
from mrchurn.config import GitLabConfig
from mrchurn.transport import HTTPTransport


class ChurnClient:
    """
    Main client for collecting merge request churn.

    Aggregates the resource clients over one HTTP transport.

    Example:
        ```python
        from mrchurn import ChurnClient, GitLabConfig

        config = GitLabConfig(project_id="123", token="glpat-...")
        with ChurnClient(config) as client:
            summaries = client.merge_requests.list_all(config.project_id)
            stats = client.changes.get_stats(config.project_id, summaries[0].iid)
        ```
    """

    def __init__(
        self,
        config: GitLabConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Connection settings
            transport: Optional httpx transport (used by tests)
        """
        self.config = config

        self._transport = HTTPTransport.from_config(config, transport=transport)

        self.merge_requests = MergeRequestsClient(self._transport)
        self.changes = ChangesClient(self._transport)

    @classmethod
    def from_env(cls) -> "ChurnClient":
        """
        Create a client from environment variables.

        See GitLabConfig.from_env for the variables read.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(GitLabConfig.from_env())

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "ChurnClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
