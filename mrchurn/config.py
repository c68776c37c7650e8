"""
Configuration for talking to a GitLab instance.

The configuration is a plain value handed to the transport and resource
clients at construction time; nothing reads the environment after
`GitLabConfig.from_env` returns.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from mrchurn.exceptions import ConfigurationError

DEFAULT_API_URL = "https://gitlab.com/api/v4"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class GitLabConfig:
    """Connection settings for one project."""

    project_id: str
    token: str = field(repr=False)
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GitLabConfig":
        """
        Build a configuration from environment variables.

        Environment variables:
            GITLAB_API_URL: API base URL (optional, default: https://gitlab.com/api/v4)
            GITLAB_PROJECT_ID: Numeric id or URL-encoded path of the project (required)
            GITLAB_ACCESS_TOKEN: Personal access token (required)
            GITLAB_TIMEOUT: Request timeout in seconds (optional, default: 30)

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Configured GitLabConfig instance

        Raises:
            ConfigurationError: If a required variable is missing or invalid
        """
        if environ is None:
            environ = os.environ

        project_id = environ.get("GITLAB_PROJECT_ID")
        token = environ.get("GITLAB_ACCESS_TOKEN")
        api_url = environ.get("GITLAB_API_URL") or DEFAULT_API_URL
        raw_timeout = environ.get("GITLAB_TIMEOUT")

        if not project_id:
            raise ConfigurationError("GITLAB_PROJECT_ID environment variable not set")

        if not token:
            raise ConfigurationError("GITLAB_ACCESS_TOKEN environment variable not set")

        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid GITLAB_TIMEOUT: {raw_timeout}. Must be a number of seconds"
                ) from e

        return cls(project_id=project_id, token=token, api_url=api_url, timeout=timeout)
