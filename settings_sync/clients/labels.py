"""Labels resource client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from settings_sync.transport import HTTPTransport


class LabelsClient:
    """Client for repository labels."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def list(self, owner: str, repo: str) -> list[str]:
        """List the names of all labels defined in a repository."""
        data = self.transport.paginate(f"/repos/{owner}/{repo}/labels")
        return [label["name"] for label in data]
