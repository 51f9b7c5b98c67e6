#!/usr/bin/env python3
"""
Basic settings sync usage example.

Previews the changes the example settings would make to every Go
repository of an organization. Nothing is written.

Run with:
    GITHUB_TOKEN=... python examples/basic_usage.py acme
"""

import logging
import sys
from pathlib import Path

from settings_sync import (
    GitHubClient,
    RepositoryFilter,
    SettingsSyncError,
    configure_logging,
    load_settings,
    sync_settings,
)


def main() -> int:
    if len(sys.argv) != 2:
        print("usage: basic_usage.py <organization>")
        return 2

    configure_logging(level=logging.INFO)

    settings = load_settings(Path(__file__).parent / "settings.example.json")

    try:
        with GitHubClient.from_env() as client:
            outcome = sync_settings(
                client,
                sys.argv[1],
                settings,
                RepositoryFilter(language="Go"),
                dry_run=True,
            )
    except SettingsSyncError as e:
        print(f"Sync failed: {e}")
        return 1

    print(f"{outcome.processed} of {outcome.total_repositories} repositories would be reconciled")
    return 0


if __name__ == "__main__":
    sys.exit(main())
