"""Settings sync testing utilities.

Provides a mock client and fixtures for testing code that uses the
reconciliation engine.
"""

from settings_sync.testing.fixtures import create_mock_file, create_mock_repository
from settings_sync.testing.mock import MUTATING_METHODS, MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    "MUTATING_METHODS",
    # Helper functions
    "create_mock_repository",
    "create_mock_file",
]
