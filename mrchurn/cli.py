"""Command line entry point: write a merge request churn CSV for a project."""

import argparse
import logging
import os
import sys

from mrchurn.client import ChurnClient
from mrchurn.config import GitLabConfig
from mrchurn.logging import configure_logging, get_logger
from mrchurn.report import DEFAULT_OUTPUT, build_reports, write_csv

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mrchurn",
        description=(
            "Fetch every merge request of a GitLab project with per-file "
            "line counts and write them to a CSV file."
        ),
        epilog=(
            "Environment: GITLAB_ACCESS_TOKEN (required), GITLAB_PROJECT_ID, "
            "GITLAB_API_URL, GITLAB_TIMEOUT."
        ),
    )
    parser.add_argument("--project-id", help="Project id or path (overrides GITLAB_PROJECT_ID)")
    parser.add_argument("--api-url", help="API base URL (overrides GITLAB_API_URL)")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"CSV file to write (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every HTTP request",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level=logging.INFO,
        http_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    environ = dict(os.environ)
    if args.project_id:
        environ["GITLAB_PROJECT_ID"] = args.project_id
    if args.api_url:
        environ["GITLAB_API_URL"] = args.api_url

    try:
        config = GitLabConfig.from_env(environ)
        with ChurnClient(config) as client:
            reports = build_reports(client, config.project_id)
        rows = write_csv(reports, args.output)
    except Exception as e:
        logger.error("An error occurred: %s", e)
        return 1

    logger.info("Wrote %d merge requests to %s", rows, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
