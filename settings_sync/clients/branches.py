"""Branch protection resource client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from settings_sync.transport import HTTPTransport


class BranchesClient:
    """Client for branch protection operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def update_protection(
        self,
        owner: str,
        repo: str,
        branch: str,
        rule: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Replace the protection rule of a branch.

        The rule is sent verbatim and overwrites whatever protection the
        branch had. GitHub requires ``required_status_checks``,
        ``enforce_admins``, ``required_pull_request_reviews`` and
        ``restrictions`` to be present (each may be null).

        Raises:
            NotFoundError: If the repository or branch does not exist
            ValidationError: If the rule is rejected
        """
        return self.transport.request(
            method="PUT",
            path=f"/repos/{owner}/{repo}/branches/{branch}/protection",
            body=rule,
        ) or {}
