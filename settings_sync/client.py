"""
GitHub client used by the reconciliation engine.

Provides the primary interface for reading and changing repository state.
"""

import os
from typing import Any

from settings_sync.clients import (
    BranchesClient,
    CollaboratorsClient,
    ContentsClient,
    LabelsClient,
    ReposClient,
)
from settings_sync.exceptions import ConfigurationError
from settings_sync.transport import HTTPTransport


class GitHubClient:
    """
    Main client for the GitHub REST API.

    Aggregates all resource clients over one authenticated transport.

    Example:
        ```python
        from settings_sync import GitHubClient

        # Create client with explicit configuration
        client = GitHubClient(token="ghp_...")

        # Or for GitHub Enterprise, from environment variables
        client = GitHubClient.from_env()

        repos = client.repos.list_for_org("acme", page=1)
        client.collaborators.add("acme", repos[0].name, "alice", "write")
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: Personal access token or installation token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)

        Raises:
            ConfigurationError: If the token is empty
        """
        if not token:
            raise ConfigurationError("A GitHub token is required")

        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=self.base_url,
            token=token,
            timeout=timeout,
        )

        self.repos = ReposClient(self._transport)
        self.collaborators = CollaboratorsClient(self._transport)
        self.branches = BranchesClient(self._transport)
        self.contents = ContentsClient(self._transport)
        self.labels = LabelsClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: The token to authenticate with (required)
            GITHUB_API_URL: Base URL for the API (optional, default: https://api.github.com)

        Args:
            timeout: Request timeout in seconds (default: 30.0)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If GITHUB_TOKEN is not set
        """
        token = os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("GITHUB_API_URL", cls.DEFAULT_BASE_URL)

        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
