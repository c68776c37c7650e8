"""mrchurn type definitions.

This module exports all data model types used by the package.
"""

from mrchurn.types.merge_requests import (
    ChangeStats,
    FileChange,
    MergeRequestReport,
    MergeRequestSummary,
)

__all__ = [
    "MergeRequestSummary",
    "FileChange",
    "ChangeStats",
    "MergeRequestReport",
]
