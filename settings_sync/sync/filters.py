"""Repository selection by name pattern, language and label."""

import re
from typing import TYPE_CHECKING

from settings_sync.exceptions import SettingsSyncError
from settings_sync.logging import SyncLogger
from settings_sync.types.config import RepositoryFilter
from settings_sync.types.repos import Repository

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient


def fetch_repository_labels(
    client: "GitHubClient",
    repo: Repository,
    log: SyncLogger,
) -> list[str] | None:
    """Return the repository's label names, or None if they cannot be read."""
    try:
        return client.labels.list(repo.owner, repo.name)
    except SettingsSyncError as e:
        log.warning("Could not fetch labels for %s: %s", repo.name, e.message)
        return None


def should_process_repository(
    client: "GitHubClient",
    repo: Repository,
    filters: RepositoryFilter,
    log: SyncLogger | None = None,
) -> bool:
    """
    Decide whether a repository is in scope for this run.

    An empty filter matches every repository, archived ones included.
    Otherwise archived repositories are rejected and every populated
    predicate must match. Labels are only fetched when a label filter is
    set, after the cheaper checks have passed.

    Args:
        client: Client used to fetch labels
        repo: The candidate repository
        filters: Populated predicates
        log: Receives one skip record per rejection

    Returns:
        True if the repository should be reconciled
    """
    log = log or SyncLogger()

    if filters.is_empty:
        return True

    if repo.archived:
        log.skip("Skipping %s - repository is archived", repo.name)
        return False

    if filters.name_pattern and not re.search(filters.name_pattern, repo.name):
        log.skip(
            "Skipping %s - does not match name pattern %s", repo.name, filters.name_pattern
        )
        return False

    if filters.language and (
        not repo.language or repo.language.lower() != filters.language.lower()
    ):
        log.skip("Skipping %s - does not match language %s", repo.name, filters.language)
        return False

    if filters.label:
        labels = fetch_repository_labels(client, repo, log)
        if labels is None or filters.label not in labels:
            log.skip("Skipping %s - does not have label %s", repo.name, filters.label)
            return False

    return True
