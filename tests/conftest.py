from mrchurn.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_project_id,
    mock_transport,
    sample_summary,
)
