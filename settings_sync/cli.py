"""github-settings-sync command line entry point."""

import logging

import click

from settings_sync import __version__
from settings_sync.client import GitHubClient
from settings_sync.config import load_settings
from settings_sync.exceptions import ConfigurationError, SettingsSyncError
from settings_sync.logging import configure_logging
from settings_sync.sync import sync_settings
from settings_sync.types.config import RepositoryFilter


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("--org", "-o", envvar="GITHUB_ORG", help="GitHub organization name")
@click.option(
    "--settings",
    "-s",
    "settings_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to JSON file with repository settings",
)
@click.option(
    "--name-pattern",
    "-n",
    default=None,
    help="Regular expression pattern to match repository names to include",
)
@click.option("--label", "-l", default=None, help="Only process repositories that have this label")
@click.option("--language", default=None, help="Only process repositories with this primary language")
@click.option(
    "--token",
    "-t",
    envvar="GITHUB_TOKEN",
    show_envvar=True,
    help="GitHub token (defaults to the GITHUB_TOKEN environment variable)",
)
@click.option(
    "--base-url",
    "-u",
    envvar="GITHUB_API_URL",
    default=None,
    help="GitHub API base URL (for GitHub Enterprise)",
)
@click.option("--dry-run", "-d", is_flag=True, help="Show what would be changed without making changes")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP traffic (tokens are masked)")
def main(
    org: str | None,
    settings_path: str,
    name_pattern: str | None,
    label: str | None,
    language: str | None,
    token: str | None,
    base_url: str | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Synchronize repository settings across a GitHub organization."""
    configure_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        http_level=logging.DEBUG if verbose else logging.WARNING,
    )

    if not org:
        click.echo(
            "Organization name is required. Use --org or set GITHUB_ORG environment variable",
            err=True,
        )
        raise SystemExit(1)

    if not token:
        click.echo(
            "GitHub token is required. Use --token or set GITHUB_TOKEN environment variable",
            err=True,
        )
        raise SystemExit(1)

    try:
        settings = load_settings(settings_path)
    except ConfigurationError as e:
        click.echo(f"Error reading settings file: {e.message}", err=True)
        raise SystemExit(1) from e

    try:
        filters = RepositoryFilter(name_pattern=name_pattern, label=label, language=language)
    except ConfigurationError as e:
        click.echo(e.message, err=True)
        raise SystemExit(1) from e

    try:
        with GitHubClient(token=token, base_url=base_url) as client:
            sync_settings(client, org, settings, filters, dry_run=dry_run)
    except SettingsSyncError as e:
        # already reported through the sync log
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
