"""Reconciliation of collaborator roles."""

from typing import TYPE_CHECKING

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.types.config import CollaboratorSpec
from settings_sync.types.repos import Repository
from settings_sync.types.sync import CollaboratorChange

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient


def plan_collaborator_changes(
    current: dict[str, str],
    desired: list[CollaboratorSpec],
) -> list[CollaboratorChange]:
    """
    Classify desired collaborators against the current role of each user.

    Users missing from ``current`` are added, users with a different role are
    updated, the rest are left alone. Nothing is ever removed.
    """
    changes: list[CollaboratorChange] = []
    for spec in desired:
        if spec.username not in current:
            changes.append(CollaboratorChange(spec.username, "add", spec.role))
        elif current[spec.username] != spec.role:
            changes.append(
                CollaboratorChange(spec.username, "update", spec.role, current[spec.username])
            )
    return changes


class CollaboratorApplier:
    """Add missing collaborators and correct roles."""

    def __init__(
        self,
        client: "GitHubClient",
        log: SyncLogger | None = None,
        dry_run: bool = False,
    ) -> None:
        self.client = client
        self.log = log or SyncLogger()
        self.dry_run = dry_run

    def apply(
        self,
        repo: Repository,
        desired: list[CollaboratorSpec],
    ) -> list[CollaboratorChange]:
        """
        Reconcile a repository's collaborators against ``desired``.

        Each change is attempted on its own. A failed change is logged and
        marked ``failed``; later changes still run. If the current
        collaborators cannot be read, the list is treated as empty and every
        desired user is granted its role.

        Returns:
            The planned changes
        """
        try:
            current = {
                collab.username: collab.role
                for collab in self.client.collaborators.list(repo.owner, repo.name)
            }
        except SettingsSyncError as e:
            self.log.warning("Could not fetch collaborators for %s: %s", repo.name, e)
            current = {}

        changes = plan_collaborator_changes(current, desired)
        for change in changes:
            self._apply_change(repo, change)
        return changes

    def _apply_change(self, repo: Repository, change: CollaboratorChange) -> None:
        is_add = change.action == "add"

        if self.dry_run:
            if is_add:
                self.log.preview(
                    "Would add collaborator %s with role %s to %s",
                    change.username, change.role, repo.name,
                )
            else:
                self.log.preview(
                    "Would update role for %s from %s to %s in %s",
                    change.username, change.previous_role, change.role, repo.name,
                )
            return

        try:
            self.client.collaborators.add(repo.owner, repo.name, change.username, change.role)
        except SettingsSyncError as e:
            verb = "add collaborator" if is_add else "update role for"
            self.log.failure("Failed to %s %s in %s: %s", verb, change.username, repo.name, e)
            change.failed = True
            return

        if is_add:
            self.log.success(
                "Added collaborator %s with role %s to %s", change.username, change.role, repo.name
            )
        else:
            self.log.success(
                "Updated role for %s from %s to %s in %s",
                change.username, change.previous_role, change.role, repo.name,
            )
