"""
HTTP Transport for mrchurn.

Handles HTTP communication with the GitLab REST API: authentication,
response classification and request logging. Requests are issued one at
a time and are never retried.
"""

import time
from typing import Any

import httpx

from mrchurn.config import GitLabConfig
from mrchurn.exceptions import MalformedResponseError, TransportError
from mrchurn.logging import log_http_request, log_http_response
from mrchurn.result import ApiResult, Failure, Success, failure_code


class HTTPTransport:
    """
    Blocking HTTP transport for the GitLab API.

    Handles:
    - PRIVATE-TOKEN authentication on every request
    - Redirects followed, then classification of responses into Success / Failure
    - Translation of network errors into TransportError
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: API base URL (e.g., "https://gitlab.com/api/v4")
            token: Access token sent in the PRIVATE-TOKEN header
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"PRIVATE-TOKEN": token, "Accept": "application/json"},
            transport=transport,
            follow_redirects=True,
        )

    @classmethod
    def from_config(
        cls,
        config: GitLabConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "HTTPTransport":
        """Create a transport from a GitLabConfig."""
        return cls(
            base_url=config.api_url,
            token=config.token,
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> ApiResult:
        """
        Issue a GET request.

        Args:
            path: API path relative to the base URL (e.g., "/projects/1/merge_requests")
            params: Query parameters

        Returns:
            Success with the decoded JSON body, or Failure for any non-2xx status

        Raises:
            TransportError: If the request could not be completed
            MalformedResponseError: If a successful response is not valid JSON
        """
        url = f"{self.base_url}{path}"
        log_http_request("GET", url, headers=dict(self._client.headers), params=params)

        started = time.monotonic()
        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", f"GET {url} failed: {e}") from e
        elapsed_ms = (time.monotonic() - started) * 1000

        log_http_response(
            response.status_code,
            url,
            elapsed_ms=elapsed_ms,
            next_page=response.headers.get("X-Next-Page"),
        )

        if not response.is_success:
            return self._parse_failure(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"GET {url} returned a body that is not JSON",
                response.headers.get("X-Request-Id"),
            ) from e

        return Success(payload=payload, headers=response.headers)

    def _parse_failure(self, response: httpx.Response) -> Failure:
        """
        Parse an error response into a Failure.

        GitLab reports errors as {"message": ...} or {"error": ...}; the
        message may itself be a dict of field errors.

        Args:
            response: HTTP response with error status

        Returns:
            Failure describing the response
        """
        try:
            data = response.json()
        except ValueError:
            data = {}

        reason: Any = None
        if isinstance(data, dict):
            reason = data.get("message") or data.get("error")
        if not reason:
            reason = f"HTTP {response.status_code}"

        return Failure(
            status_code=response.status_code,
            code=failure_code(response.status_code),
            reason=str(reason),
            request_id=response.headers.get("X-Request-Id"),
        )
