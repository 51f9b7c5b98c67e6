"""Reconciliation of branch protection rules."""

from typing import TYPE_CHECKING, Any

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.types.repos import Repository

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient


class BranchProtectionApplier:
    """
    Overwrite the protection rule of each configured branch.

    Current protection is never read: GitHub only accepts complete rules, so
    every configured branch is written in full on each run.
    """

    def __init__(
        self,
        client: "GitHubClient",
        log: SyncLogger | None = None,
        dry_run: bool = False,
    ) -> None:
        self.client = client
        self.log = log or SyncLogger()
        self.dry_run = dry_run

    def apply(self, repo: Repository, rules: dict[str, dict[str, Any]]) -> list[str]:
        """
        Write every rule in ``rules`` (branch name -> rule object).

        Returns:
            Branches whose rule was written (or previewed in dry-run)
        """
        applied: list[str] = []
        for branch, rule in rules.items():
            if self.apply_branch(repo, branch, rule):
                applied.append(branch)
        return applied

    def apply_branch(self, repo: Repository, branch: str, rule: dict[str, Any]) -> bool:
        if self.dry_run:
            self.log.preview(
                "Would update branch protection for %s in %s: %s", branch, repo.name, rule
            )
            return True

        try:
            self.client.branches.update_protection(repo.owner, repo.name, branch, rule)
        except SettingsSyncError as e:
            self.log.failure(
                "Failed to update branch protection for %s in %s: %s", branch, repo.name, e
            )
            return False

        self.log.success("Successfully updated branch protection for %s in %s", branch, repo.name)
        return True
