"""
Pytest fixtures for settings sync testing.

Provides common fixtures for testing code that drives the reconciliation
engine.
"""

from pathlib import Path
from typing import Generator

import pytest

from settings_sync.logging import SyncLogger
from settings_sync.testing.mock import MockGitHubClient
from settings_sync.types.config import CollaboratorSpec, DesiredConfiguration, FileSyncSpec
from settings_sync.types.repos import Collaborator, FileContent, Repository


def create_mock_repository(
    name: str = "mock-repo",
    owner: str = "acme",
    language: str | None = "Python",
    archived: bool = False,
) -> Repository:
    """Create a Repository with sensible defaults."""
    return Repository(name=name, owner=owner, language=language, archived=archived)


def create_mock_file(
    path: str = "README.md",
    content: str = "",
    sha: str = "0" * 40,
) -> FileContent:
    """Create a FileContent as returned by the contents client."""
    return FileContent(path=path, content=content, sha=sha)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure_list_for_org([create_mock_repository()])
            sync_settings(mock_client, "acme", DesiredConfiguration())
            assert not mock_client.mutating_calls()
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def mock_org() -> str:
    """Provide a test organization login."""
    return "acme"


@pytest.fixture
def sync_logger() -> SyncLogger:
    """Provide a SyncLogger writing to the ``settings_sync.sync`` logger."""
    return SyncLogger()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository(name="svc-a", language="Go")


@pytest.fixture
def sample_repositories() -> list[Repository]:
    """Provide repositories covering every filter dimension."""
    return [
        create_mock_repository(name="svc-a", language="Go"),
        create_mock_repository(name="lib-b", language="Python"),
        create_mock_repository(name="svc-old", language="Go", archived=True),
        create_mock_repository(name="docs", language=None),
    ]


@pytest.fixture
def sample_collaborator() -> Collaborator:
    """Provide a sample Collaborator object."""
    return Collaborator(username="alice", role="write")


@pytest.fixture
def sample_settings(tmp_path: Path) -> DesiredConfiguration:
    """Provide a configuration with every section populated."""
    local = tmp_path / "gitignore"
    local.write_text("*.pyc\n", encoding="utf-8")
    return DesiredConfiguration(
        repository={"has_wiki": False, "delete_branch_on_merge": True},
        collaborators=[CollaboratorSpec(username="alice", role="admin")],
        branch_protection={
            "main": {
                "required_status_checks": None,
                "enforce_admins": True,
                "required_pull_request_reviews": {"required_approving_review_count": 1},
                "restrictions": None,
            }
        },
        files=[FileSyncSpec(remote_path=".gitignore", local_path=str(local))],
    )
