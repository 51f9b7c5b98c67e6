"""Collaborators resource client."""

from typing import TYPE_CHECKING, Any

from settings_sync.types.repos import Collaborator

if TYPE_CHECKING:
    from settings_sync.transport import HTTPTransport


class CollaboratorsClient:
    """Client for repository collaborator operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the collaborators client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def add(
        self,
        owner: str,
        repo: str,
        username: str,
        permission: str,
    ) -> dict[str, Any] | None:
        """
        Add a collaborator or change their permission.

        GitHub uses the same call for both; for users who are not yet
        collaborators it creates an invitation.

        Args:
            owner: Repository owner
            repo: Repository name
            username: The user's login
            permission: Role name ("admin", "maintain", "write", "triage" or "read")

        Returns:
            The invitation record, or None when an existing collaborator was updated

        Raises:
            AuthorizationError: If the token cannot administer the repository
            ValidationError: If the permission is rejected
        """
        return self.transport.request(
            method="PUT",
            path=f"/repos/{owner}/{repo}/collaborators/{username}",
            body={"permission": permission},
        )

    def list(self, owner: str, repo: str) -> list[Collaborator]:
        """
        List all collaborators of a repository with their role names.

        Raises:
            AuthorizationError: If the token cannot read collaborators
            NotFoundError: If the repository does not exist
        """
        data = self.transport.paginate(f"/repos/{owner}/{repo}/collaborators")
        return [
            Collaborator(username=collab["login"], role=collab.get("role_name", ""))
            for collab in data
        ]
