"""mrchurn resource clients."""

from mrchurn.clients.changes import ChangesClient
from mrchurn.clients.merge_requests import MergeRequestsClient

__all__ = [
    "MergeRequestsClient",
    "ChangesClient",
]
