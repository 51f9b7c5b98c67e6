"""Desired-state configuration models."""

import re
from dataclasses import dataclass
from typing import Any

from settings_sync.exceptions import ConfigurationError

COLLABORATOR_ROLES = ("admin", "maintain", "write", "triage", "read")


@dataclass
class CollaboratorSpec:
    """A collaborator and the role they should hold."""

    username: str
    role: str  # one of COLLABORATOR_ROLES

    def __post_init__(self) -> None:
        if self.role not in COLLABORATOR_ROLES:
            raise ConfigurationError(
                f"Invalid role {self.role!r} for collaborator {self.username!r}. "
                f"Must be one of: {', '.join(COLLABORATOR_ROLES)}"
            )


@dataclass
class FileSyncSpec:
    """A repository path kept identical to a local file."""

    remote_path: str
    local_path: str


@dataclass
class DesiredConfiguration:
    """
    Target state for every matching repository.

    Each section is independently optional; None means the domain is left
    untouched.
    """

    repository: dict[str, Any] | None = None
    collaborators: list[CollaboratorSpec] | None = None
    branch_protection: dict[str, dict[str, Any]] | None = None
    files: list[FileSyncSpec] | None = None


@dataclass
class RepositoryFilter:
    """Predicates restricting which repositories are reconciled."""

    name_pattern: str | None = None
    label: str | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        if self.name_pattern:
            try:
                re.compile(self.name_pattern)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid name pattern {self.name_pattern!r}: {e}"
                ) from e

    @property
    def is_empty(self) -> bool:
        return not (self.name_pattern or self.label or self.language)
