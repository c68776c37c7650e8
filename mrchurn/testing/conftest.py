"""
Pytest plugin for mrchurn testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["mrchurn.testing.conftest"]
"""

from mrchurn.testing.fixtures import (
    mock_client,
    mock_project_id,
    mock_transport,
    sample_summary,
)

__all__ = [
    "mock_client",
    "mock_project_id",
    "mock_transport",
    "sample_summary",
]
