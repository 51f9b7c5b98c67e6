"""Organization repository enumeration."""

from typing import TYPE_CHECKING

from settings_sync.types.repos import Repository

if TYPE_CHECKING:
    from settings_sync.client import GitHubClient

PAGE_SIZE = 100


def list_repositories(client: "GitHubClient", org: str) -> list[Repository]:
    """
    Fetch every repository of an organization.

    Pages of ``PAGE_SIZE`` are requested from page 1 until an empty page is
    returned.

    Args:
        client: Client used for the listing calls
        org: The organization login

    Returns:
        All repositories, unfiltered, in listing order

    Raises:
        SettingsSyncError: If any page fails. No partial list is returned.
    """
    repos: list[Repository] = []
    page = 1

    while True:
        batch = client.repos.list_for_org(org, page=page, per_page=PAGE_SIZE)
        if not batch:
            return repos
        repos.extend(batch)
        page += 1
