"""Remote repository data models."""

from dataclasses import dataclass


@dataclass
class Repository:
    """Repository as listed for an organization."""

    name: str
    owner: str
    language: str | None
    archived: bool = False


@dataclass
class Collaborator:
    """Repository collaborator as reported by the remote host."""

    username: str
    role: str  # "admin", "maintain", "write", "triage", "read" or a custom role name


@dataclass
class FileContent:
    """Decoded file stored in a repository."""

    path: str
    content: str
    sha: str
