"""Repository contents resource client."""

import base64
import binascii
from typing import TYPE_CHECKING, Any

from settings_sync.exceptions import NotFoundError, ValidationError
from settings_sync.types.repos import FileContent

if TYPE_CHECKING:
    from settings_sync.transport import HTTPTransport


class ContentsClient:
    """Client for reading and writing repository files."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the contents client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, owner: str, repo: str, path: str) -> FileContent | None:
        """
        Get a file from the default branch.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path of the file in the repository

        Returns:
            The decoded file, or None if nothing exists at ``path`` or the
            path is not a regular file

        Raises:
            ValidationError: If the file is not base64-encoded UTF-8 text
            SettingsSyncError: On any other failure except "not found"
        """
        try:
            data = self.transport.request(
                method="GET",
                path=f"/repos/{owner}/{repo}/contents/{path}",
            )
        except NotFoundError:
            return None

        # directories come back as a list of entries
        if not isinstance(data, dict) or data.get("type") != "file":
            return None

        try:
            content = base64.b64decode(data.get("content", "")).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValidationError(
                "INVALID_CONTENT", f"{path} in {owner}/{repo} is not UTF-8 text: {e}"
            ) from e

        return FileContent(
            path=data.get("path", path),
            content=content,
            sha=data["sha"],
        )

    def create_or_update(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> dict[str, Any]:
        """
        Create a file, or update it when ``sha`` names the current revision.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path of the file in the repository
            content: New file content (UTF-8 text)
            message: Commit message
            sha: Blob sha of the file being replaced; None creates the file

        Returns:
            Commit and content metadata

        Raises:
            ConflictError: If ``sha`` is stale
            ValidationError: If ``sha`` is missing for an existing file
        """
        body: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if sha is not None:
            body["sha"] = sha

        return self.transport.request(
            method="PUT",
            path=f"/repos/{owner}/{repo}/contents/{path}",
            body=body,
        ) or {}
