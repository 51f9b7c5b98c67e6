"""
Reconciliation of an organization's repositories against desired settings.

Repositories are handled one at a time. For each repository that passes the
filter, the configured domains are applied in a fixed order: settings,
collaborators, branch protection, files. Only a failure to list the
organization's repositories stops a run.
"""

from typing import TYPE_CHECKING

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.sync.branch_protection import BranchProtectionApplier
from settings_sync.sync.collaborators import CollaboratorApplier
from settings_sync.sync.enumerator import list_repositories
from settings_sync.sync.files import FileContentApplier
from settings_sync.sync.filters import should_process_repository
from settings_sync.sync.repository import RepositorySettingsApplier
from settings_sync.types.config import DesiredConfiguration, RepositoryFilter
from settings_sync.types.repos import Repository
from settings_sync.types.sync import SyncOutcome

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient


class SettingsSync:
    """
    Drives enumeration, filtering and per-domain application.

    Example:
        ```python
        from settings_sync import GitHubClient, SettingsSync
        from settings_sync.config import load_settings

        with GitHubClient.from_env() as client:
            outcome = SettingsSync(client, dry_run=True).run(
                "acme", load_settings("settings.json")
            )
        print(outcome.processed, outcome.skipped)
        ```
    """

    def __init__(
        self,
        client: "GitHubClient",
        log: SyncLogger | None = None,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            client: Remote host client (real or mock)
            log: Receives every decision; defaults to the ``settings_sync.sync`` logger
            dry_run: Perform reads and comparisons only, never mutate
        """
        self.client = client
        self.log = log or SyncLogger()
        self.dry_run = dry_run

        self.settings_applier = RepositorySettingsApplier(client, self.log, dry_run)
        self.collaborator_applier = CollaboratorApplier(client, self.log, dry_run)
        self.branch_protection_applier = BranchProtectionApplier(client, self.log, dry_run)
        self.file_applier = FileContentApplier(client, self.log, dry_run)

    def run(
        self,
        org: str,
        settings: DesiredConfiguration,
        filters: RepositoryFilter | None = None,
    ) -> SyncOutcome:
        """
        Reconcile every matching repository of ``org``.

        Args:
            org: The organization login
            settings: Desired state; absent sections are left untouched
            filters: Repository predicates (default: match everything)

        Returns:
            Run counters and mode

        Raises:
            SettingsSyncError: If the repositories cannot be listed
        """
        filters = filters or RepositoryFilter()
        outcome = SyncOutcome(dry_run=self.dry_run)

        self.log.info("Starting settings sync for organization: %s", org)
        if self.dry_run:
            self.log.preview("Running in dry-run mode - no changes will be made")

        try:
            repos = list_repositories(self.client, org)
        except SettingsSyncError as e:
            self.log.failure("Error during sync: failed to list repositories for %s: %s", org, e)
            raise

        outcome.total_repositories = len(repos)
        self.log.info("Found %d repositories", len(repos))

        for repo in repos:
            if should_process_repository(self.client, repo, filters, self.log):
                self.sync_repository(repo, settings)
                outcome.processed += 1
            else:
                outcome.skipped += 1

        self.log.success(
            "Settings sync completed! Total repositories: %d, processed: %d, skipped: %d, mode: %s",
            outcome.total_repositories,
            outcome.processed,
            outcome.skipped,
            outcome.mode,
        )
        return outcome

    def sync_repository(self, repo: Repository, settings: DesiredConfiguration) -> None:
        """Apply every configured domain to one repository."""
        if settings.repository is not None:
            self.settings_applier.apply(repo, settings.repository)

        if settings.collaborators is not None:
            changes = self.collaborator_applier.apply(repo, settings.collaborators)
            ok = not any(change.failed for change in changes)
            self._domain_done(repo, ok, "Would update", "Successfully updated", "collaborators")

        if settings.branch_protection is not None:
            applied = self.branch_protection_applier.apply(repo, settings.branch_protection)
            ok = len(applied) == len(settings.branch_protection)
            self._domain_done(repo, ok, "Would update", "Successfully updated", "branch protection")

        if settings.files is not None:
            actions = self.file_applier.apply(repo, settings.files)
            ok = None not in actions.values()
            self._domain_done(repo, ok, "Would sync", "Successfully synced", "file content")

    def _domain_done(
        self, repo: Repository, ok: bool, preview: str, live: str, domain: str
    ) -> None:
        if not ok:
            self.log.failure("Finished %s for %s with errors", domain, repo.name)
        elif self.dry_run:
            self.log.preview("%s %s for %s", preview, domain, repo.name)
        else:
            self.log.info("%s %s for %s", live, domain, repo.name)


def sync_settings(
    client: "GitHubClient",
    org: str,
    settings: DesiredConfiguration,
    filters: RepositoryFilter | None = None,
    dry_run: bool = False,
    log: SyncLogger | None = None,
) -> SyncOutcome:
    """Run one reconciliation pass. See ``SettingsSync.run``."""
    return SettingsSync(client, log=log, dry_run=dry_run).run(org, settings, filters)
