"""mrchurn - merge request churn reports for GitLab projects."""

from mrchurn.client import ChurnClient
from mrchurn.clients import ChangesClient, MergeRequestsClient
from mrchurn.config import GitLabConfig
from mrchurn.diffstat import count_diff_lines
from mrchurn.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    MrChurnError,
    TransportError,
)
from mrchurn.logging import configure_logging, get_logger
from mrchurn.report import build_reports, format_file_changes, write_csv
from mrchurn.result import ApiResult, Failure, Success
from mrchurn.transport import HTTPTransport
from mrchurn.types import ChangeStats, FileChange, MergeRequestReport, MergeRequestSummary

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "ChurnClient",
    "GitLabConfig",
    # Resource clients
    "MergeRequestsClient",
    "ChangesClient",
    # Types
    "MergeRequestSummary",
    "FileChange",
    "ChangeStats",
    "MergeRequestReport",
    # Results
    "ApiResult",
    "Success",
    "Failure",
    # Exceptions
    "MrChurnError",
    "ConfigurationError",
    "TransportError",
    "MalformedResponseError",
    # Transport
    "HTTPTransport",
    # Report
    "build_reports",
    "format_file_changes",
    "write_csv",
    "count_diff_lines",
    # Logging
    "configure_logging",
    "get_logger",
]
