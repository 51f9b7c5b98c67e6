"""GitHub REST resource clients."""

from settings_sync.clients.branches import BranchesClient
from settings_sync.clients.collaborators import CollaboratorsClient
from settings_sync.clients.contents import ContentsClient
from settings_sync.clients.labels import LabelsClient
from settings_sync.clients.repos import ReposClient

__all__ = [
    "ReposClient",
    "CollaboratorsClient",
    "BranchesClient",
    "ContentsClient",
    "LabelsClient",
]
