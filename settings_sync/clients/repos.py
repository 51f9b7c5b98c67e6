"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from settings_sync.types.repos import Repository

if TYPE_CHECKING:
    from settings_sync.transport import HTTPTransport


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse a repository record from a listing response."""
    owner = data.get("owner") or {}
    return Repository(
        name=data["name"],
        owner=owner.get("login", ""),
        language=data.get("language"),
        archived=bool(data.get("archived", False)),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_for_org(
        self,
        org: str,
        page: int = 1,
        per_page: int = 100,
    ) -> list[Repository]:
        """
        List one page of an organization's repositories.

        Args:
            org: The organization login
            page: 1-based page number
            per_page: Page size (GitHub caps this at 100)

        Returns:
            Repositories on the requested page; empty past the last page

        Raises:
            AuthenticationError: If the token is invalid
            NotFoundError: If the organization does not exist
        """
        data = self.transport.request(
            method="GET",
            path=f"/orgs/{org}/repos",
            params={"per_page": per_page, "page": page},
        )
        return [_parse_repository(repo) for repo in data or []]

    def get(self, owner: str, repo: str) -> dict[str, Any]:
        """
        Get the full settings record of a repository.

        The record is returned as-is so any top-level field can be compared
        against desired settings.

        Raises:
            NotFoundError: If the repository does not exist
        """
        return self.transport.request(
            method="GET",
            path=f"/repos/{owner}/{repo}",
        ) or {}

    def update(self, owner: str, repo: str, settings: dict[str, Any]) -> dict[str, Any]:
        """
        Partially update repository settings.

        Only the fields present in ``settings`` are sent.

        Args:
            owner: Repository owner
            repo: Repository name
            settings: Fields to change

        Returns:
            The updated repository record

        Raises:
            ValidationError: If a field or value is rejected
        """
        return self.transport.request(
            method="PATCH",
            path=f"/repos/{owner}/{repo}",
            body=settings,
        ) or {}
