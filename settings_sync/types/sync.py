"""Reconciliation result models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DiffResult:
    """Top-level keys whose desired value differs, mapped to the desired value."""

    changes: dict[str, Any] = field(default_factory=dict)

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(self.changes)

    @property
    def is_empty(self) -> bool:
        return not self.changes


@dataclass
class CollaboratorChange:
    """A planned add or role update for one collaborator."""

    username: str
    action: str  # "add" or "update"
    role: str
    previous_role: str | None = None
    failed: bool = False


@dataclass
class SyncOutcome:
    """Counters for one reconciliation run."""

    total_repositories: int = 0
    processed: int = 0
    skipped: int = 0
    dry_run: bool = False

    @property
    def mode(self) -> str:
        return "dry-run" if self.dry_run else "live"
