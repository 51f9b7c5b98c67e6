"""Settings sync type definitions.

This module exports all data model types used by the package.
"""

from settings_sync.types.config import (
    COLLABORATOR_ROLES,
    CollaboratorSpec,
    DesiredConfiguration,
    FileSyncSpec,
    RepositoryFilter,
)
from settings_sync.types.repos import Collaborator, FileContent, Repository
from settings_sync.types.sync import CollaboratorChange, DiffResult, SyncOutcome

__all__ = [
    # Remote records
    "Repository",
    "Collaborator",
    "FileContent",
    # Desired state
    "COLLABORATOR_ROLES",
    "CollaboratorSpec",
    "DesiredConfiguration",
    "FileSyncSpec",
    "RepositoryFilter",
    # Run results
    "CollaboratorChange",
    "DiffResult",
    "SyncOutcome",
]
