"""Reconciliation engine."""

from settings_sync.sync.branch_protection import BranchProtectionApplier
from settings_sync.sync.collaborators import CollaboratorApplier, plan_collaborator_changes
from settings_sync.sync.diff import compute_diff
from settings_sync.sync.enumerator import list_repositories
from settings_sync.sync.files import FileContentApplier
from settings_sync.sync.filters import should_process_repository
from settings_sync.sync.orchestrator import SettingsSync, sync_settings
from settings_sync.sync.repository import RepositorySettingsApplier

__all__ = [
    "SettingsSync",
    "sync_settings",
    "list_repositories",
    "should_process_repository",
    "compute_diff",
    "RepositorySettingsApplier",
    "CollaboratorApplier",
    "plan_collaborator_changes",
    "BranchProtectionApplier",
    "FileContentApplier",
]
