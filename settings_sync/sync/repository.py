"""Reconciliation of core repository settings."""

from typing import TYPE_CHECKING, Any

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.sync.diff import compute_diff
from settings_sync.types.repos import Repository
from settings_sync.types.sync import DiffResult

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient


class RepositorySettingsApplier:
    """Apply the differing subset of desired repository settings."""

    def __init__(
        self,
        client: "GitHubClient",
        log: SyncLogger | None = None,
        dry_run: bool = False,
    ) -> None:
        self.client = client
        self.log = log or SyncLogger()
        self.dry_run = dry_run

    def apply(self, repo: Repository, desired: dict[str, Any]) -> DiffResult | None:
        """
        Bring a repository's settings in line with ``desired``.

        Current settings are fetched and compared key by key; only the keys
        that differ are sent, in a single partial update.

        Args:
            repo: Repository to reconcile
            desired: Wanted setting values keyed by field name

        Returns:
            The computed diff (empty when nothing had to change), or None if
            the settings could not be read or written
        """
        try:
            current = self.client.repos.get(repo.owner, repo.name)
        except SettingsSyncError as e:
            self.log.failure("Failed to fetch settings for %s: %s", repo.name, e)
            return None

        diff = compute_diff(current, desired)

        if diff.is_empty:
            self.log.skip("Skipping %s - settings match", repo.name)
            return diff

        if self.dry_run:
            self.log.preview(
                "Would update repository settings for %s: %s", repo.name, diff.changes
            )
            return diff

        try:
            self.client.repos.update(repo.owner, repo.name, diff.changes)
        except SettingsSyncError as e:
            self.log.failure("Failed to update settings for %s: %s", repo.name, e)
            return None

        self.log.success(
            "Successfully updated settings for %s: %s", repo.name, ", ".join(sorted(diff.keys))
        )
        return diff
