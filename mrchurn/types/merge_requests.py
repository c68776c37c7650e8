"""Merge request data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MergeRequestSummary:
    """One entry of the merge request listing."""

    iid: int
    author: str
    created_at: datetime
    state: str  # "opened", "merged", "closed", "locked", ... kept verbatim
    merged_at: datetime | None
    source_branch: str


@dataclass(frozen=True)
class FileChange:
    """Line counts for one changed file.

    `file_path` is the file's pre-change path as reported by GitLab
    (`old_path`). It may be None when the API omits it.
    """

    file_path: str | None
    added_lines: int
    removed_lines: int


@dataclass(frozen=True)
class ChangeStats:
    """Per-file changes of one merge request with their totals."""

    file_changes: tuple[FileChange, ...] = ()
    total_added: int = 0
    total_removed: int = 0

    @classmethod
    def from_file_changes(cls, file_changes: list[FileChange]) -> "ChangeStats":
        """Build stats whose totals are the sums over `file_changes`."""
        return cls(
            file_changes=tuple(file_changes),
            total_added=sum(change.added_lines for change in file_changes),
            total_removed=sum(change.removed_lines for change in file_changes),
        )


@dataclass(frozen=True)
class MergeRequestReport:
    """A merge request summary enriched with its change statistics."""

    summary: MergeRequestSummary
    file_changes: tuple[FileChange, ...] = ()
    total_added: int = 0
    total_removed: int = 0

    @classmethod
    def build(cls, summary: MergeRequestSummary, stats: ChangeStats) -> "MergeRequestReport":
        return cls(
            summary=summary,
            file_changes=stats.file_changes,
            total_added=stats.total_added,
            total_removed=stats.total_removed,
        )
