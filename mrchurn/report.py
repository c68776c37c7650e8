"""
Merge request churn report.

Combines the listing and the per-merge-request changes into report
records and writes them out as CSV.
"""

import csv
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from mrchurn.logging import get_logger
from mrchurn.types.merge_requests import FileChange, MergeRequestReport

if TYPE_CHECKING:
    from mrchurn.client import ChurnClient

logger = get_logger()

DEFAULT_OUTPUT = "merge_requests.csv"

CSV_HEADERS = [
    "MR IID",
    "Branch",
    "Author",
    "Start Time",
    "State",
    "Merged Time",
    "Total Added Lines",
    "Total Removed Lines",
    "File Changes",
]


def build_reports(client: "ChurnClient", project_id: str | int) -> list[MergeRequestReport]:
    """
    Collect a report for every merge request of a project.

    Merge requests are processed one at a time, in listing order.

    Args:
        client: Client to fetch with
        project_id: Numeric id or full path of the project

    Returns:
        One MergeRequestReport per merge request
    """
    reports = []
    for summary in client.merge_requests.list_all(project_id):
        logger.info("Processing MR IID: %d", summary.iid)
        stats = client.changes.get_stats(project_id, summary.iid)
        reports.append(MergeRequestReport.build(summary, stats))
    return reports


def format_file_changes(file_changes: Iterable[FileChange]) -> str:
    """Render file changes as "path: +A/-R" entries joined by "; "."""
    return "; ".join(
        f"{change.file_path or ''}: +{change.added_lines}/-{change.removed_lines}"
        for change in file_changes
    )


def _format_time(value: datetime | None) -> str:
    return value.isoformat() if value is not None else ""


def report_to_row(report: MergeRequestReport) -> list[str | int]:
    """Flatten a report into CSV cells, in CSV_HEADERS order."""
    summary = report.summary
    return [
        summary.iid,
        summary.source_branch,
        summary.author,
        _format_time(summary.created_at),
        summary.state,
        _format_time(summary.merged_at),
        report.total_added,
        report.total_removed,
        format_file_changes(report.file_changes),
    ]


def write_csv(reports: Iterable[MergeRequestReport], path: str | Path = DEFAULT_OUTPUT) -> int:
    """
    Write reports to a CSV file, replacing it if it exists.

    Args:
        reports: Reports to write
        path: Output file path

    Returns:
        Number of data rows written
    """
    rows = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADERS)
        for report in reports:
            writer.writerow(report_to_row(report))
            rows += 1
    return rows


__all__ = [
    "CSV_HEADERS",
    "DEFAULT_OUTPUT",
    "build_reports",
    "format_file_changes",
    "report_to_row",
    "write_csv",
]
