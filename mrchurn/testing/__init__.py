"""mrchurn testing utilities.

Provides a mock transport and payload factories for testing code that
uses mrchurn.
"""

from mrchurn.testing.fixtures import (
    create_mock_change,
    create_mock_changes_payload,
    create_mock_merge_request,
    make_diff,
)
from mrchurn.testing.mock import (
    MockCall,
    MockChurnClient,
    MockTransport,
    changes_path,
    merge_requests_path,
)

__all__ = [
    "MockTransport",
    "MockChurnClient",
    "MockCall",
    "changes_path",
    "merge_requests_path",
    "create_mock_merge_request",
    "create_mock_change",
    "create_mock_changes_payload",
    "make_diff",
]
