"""
Pytest plugin for settings sync testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["settings_sync.testing.conftest"]
"""

from settings_sync.testing.fixtures import (
    mock_client,
    mock_org,
    sample_collaborator,
    sample_repositories,
    sample_repository,
    sample_settings,
    sync_logger,
)

__all__ = [
    "mock_client",
    "mock_org",
    "sync_logger",
    "sample_repository",
    "sample_repositories",
    "sample_collaborator",
    "sample_settings",
]
