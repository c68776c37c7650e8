"""
Line counting for unified diffs.

A line starting with "+" is an added line and a line starting with "-"
is a removed line, except for the "+++" and "---" file headers.
"""


def count_diff_lines(diff: str | None) -> tuple[int, int]:
    """
    Count added and removed lines in a unified diff.

    Args:
        diff: Unified diff text (may be None or empty)

    Returns:
        Tuple of (added, removed)

    Example:
        ```python
        >>> count_diff_lines("+++ b/f\\n+line1\\n+line2\\n--- a/f\\n-old\\n context")
        (2, 1)
        ```
    """
    if not diff:
        return 0, 0

    added = 0
    removed = 0
    for line in diff.split("\n"):
        if line.startswith("+"):
            if not line.startswith("+++"):
                added += 1
        elif line.startswith("-"):
            if not line.startswith("---"):
                removed += 1

    return added, removed


__all__ = ["count_diff_lines"]
