"""Helpers shared by the resource clients for reading GitLab payloads."""

from datetime import datetime
from typing import Any
from urllib.parse import quote

from mrchurn.exceptions import MalformedResponseError


def project_path(project_id: str | int) -> str:
    """Return the `/projects/{id}` prefix, URL-encoding path-style ids."""
    return f"/projects/{quote(str(project_id), safe='')}"


def require(data: dict[str, Any], key: str, context: str) -> Any:
    """Return `data[key]`, raising MalformedResponseError if absent or null."""
    value = data.get(key)
    if value is None:
        raise MalformedResponseError(f"{context} is missing '{key}'")
    return value


def parse_timestamp(value: str, context: str) -> datetime:
    """Parse an ISO-8601 GitLab timestamp such as 2024-01-15T10:30:00.123Z."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise MalformedResponseError(f"{context} has an invalid timestamp: {value!r}") from e
