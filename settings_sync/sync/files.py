"""Reconciliation of tracked file contents."""

from pathlib import Path
from typing import TYPE_CHECKING

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.types.config import FileSyncSpec
from settings_sync.types.repos import Repository

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient

ACTION_CREATE = "create"
ACTION_UPDATE = "update"
ACTION_UNCHANGED = "unchanged"


def commit_message(path: str, sha: str | None) -> str:
    return f"Update {path}" if sha else f"Add {path}"


def read_local_file(local_path: str) -> str:
    """Read a local file as UTF-8 text, preserving its exact content."""
    with open(Path(local_path), encoding="utf-8", newline="") as f:
        return f.read()


class FileContentApplier:
    """Keep repository files identical to local templates."""

    def __init__(
        self,
        client: "GitHubClient",
        log: SyncLogger | None = None,
        dry_run: bool = False,
    ) -> None:
        self.client = client
        self.log = log or SyncLogger()
        self.dry_run = dry_run

    def apply(self, repo: Repository, files: list[FileSyncSpec]) -> dict[str, str | None]:
        """
        Sync every file in ``files``; each file succeeds or fails on its own.

        Returns:
            Remote path -> action taken (``ACTION_*``), None for failures
        """
        return {spec.remote_path: self.sync_file(repo, spec) for spec in files}

    def sync_file(self, repo: Repository, spec: FileSyncSpec) -> str | None:
        """
        Create or update one remote file from its local source.

        The remote file is written only when it is missing or its content
        differs from the local file.

        Args:
            repo: Repository holding the file
            spec: Remote and local paths

        Returns:
            ACTION_CREATE, ACTION_UPDATE or ACTION_UNCHANGED, or None if the
            file could not be read, fetched or written
        """
        path = spec.remote_path

        try:
            local_content = read_local_file(spec.local_path)
        except (OSError, UnicodeDecodeError) as e:
            self.log.failure(
                "Failed to sync file %s in %s: cannot read %s: %s",
                path, repo.name, spec.local_path, e,
            )
            return None

        try:
            current = self.client.contents.get(repo.owner, repo.name, path)
        except SettingsSyncError as e:
            self.log.failure("Failed to sync file %s in %s: %s", path, repo.name, e)
            return None

        if current is not None and current.content == local_content:
            self.log.skip("Skipping %s in %s - content matches", path, repo.name)
            return ACTION_UNCHANGED

        sha = current.sha if current is not None else None
        action = ACTION_UPDATE if sha else ACTION_CREATE

        if self.dry_run:
            self.log.preview("Would %s file %s in %s", action, path, repo.name)
            self.log.preview("Content length: %d characters", len(local_content))
            return action

        try:
            self.client.contents.create_or_update(
                repo.owner,
                repo.name,
                path,
                local_content,
                message=commit_message(path, sha),
                sha=sha,
            )
        except SettingsSyncError as e:
            self.log.failure("Failed to update %s in %s: %s", path, repo.name, e)
            return None

        done = "created" if action == ACTION_CREATE else "updated"
        self.log.success("Successfully %s %s in %s", done, path, repo.name)
        return action
