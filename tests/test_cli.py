"""
Tests for the command line entry point.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from settings_sync.cli import main
from settings_sync.exceptions import AuthenticationError
from settings_sync.testing import MockGitHubClient
from settings_sync.types.config import DesiredConfiguration, RepositoryFilter


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"repository": {"has_wiki": False}}), encoding="utf-8")
    return path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


CLEAN_ENV = {"GITHUB_TOKEN": None, "GITHUB_ORG": None, "GITHUB_API_URL": None}


class TestMain:
    """Argument handling and exit codes."""

    def test_runs_sync(self, runner: CliRunner, settings_file: Path) -> None:
        with patch("settings_sync.cli.GitHubClient") as client_cls, patch(
            "settings_sync.cli.sync_settings"
        ) as sync:
            result = runner.invoke(
                main,
                [
                    "--org", "acme",
                    "--settings", str(settings_file),
                    "--token", "ghp_test",
                    "--language", "Go",
                    "--name-pattern", "^svc-",
                    "--dry-run",
                ],
                env=CLEAN_ENV,
            )

        assert result.exit_code == 0, result.output
        client_cls.assert_called_once_with(token="ghp_test", base_url=None)
        client = client_cls.return_value.__enter__.return_value
        sync.assert_called_once_with(
            client,
            "acme",
            DesiredConfiguration(repository={"has_wiki": False}),
            RepositoryFilter(name_pattern="^svc-", language="Go"),
            dry_run=True,
        )

    def test_environment_variables(self, runner: CliRunner, settings_file: Path) -> None:
        with patch("settings_sync.cli.GitHubClient") as client_cls, patch(
            "settings_sync.cli.sync_settings"
        ) as sync:
            result = runner.invoke(
                main,
                ["-s", str(settings_file)],
                env={
                    "GITHUB_TOKEN": "ghp_env",
                    "GITHUB_ORG": "acme",
                    "GITHUB_API_URL": "https://ghe.example.com/api/v3",
                },
            )

        assert result.exit_code == 0, result.output
        client_cls.assert_called_once_with(
            token="ghp_env", base_url="https://ghe.example.com/api/v3"
        )
        assert sync.call_args.args[1] == "acme"
        assert sync.call_args.kwargs == {"dry_run": False}

    def test_missing_org(self, runner: CliRunner, settings_file: Path) -> None:
        result = runner.invoke(
            main, ["--settings", str(settings_file), "--token", "ghp_test"], env=CLEAN_ENV
        )

        assert result.exit_code == 1
        assert "Organization name is required" in result.output

    def test_missing_token(self, runner: CliRunner, settings_file: Path) -> None:
        result = runner.invoke(
            main, ["--settings", str(settings_file), "--org", "acme"], env=CLEAN_ENV
        )

        assert result.exit_code == 1
        assert "GitHub token is required" in result.output

    def test_settings_required(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--org", "acme", "--token", "ghp_test"], env=CLEAN_ENV)

        assert result.exit_code == 2

    def test_invalid_settings(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"collaborators": [{"username": "alice", "role": "owner"}]}')

        with patch("settings_sync.cli.GitHubClient") as client_cls:
            result = runner.invoke(
                main,
                ["--org", "acme", "--token", "ghp_test", "--settings", str(path)],
                env=CLEAN_ENV,
            )

        assert result.exit_code == 1
        assert "Error reading settings file" in result.output
        client_cls.assert_not_called()

    def test_invalid_name_pattern(self, runner: CliRunner, settings_file: Path) -> None:
        with patch("settings_sync.cli.GitHubClient") as client_cls:
            result = runner.invoke(
                main,
                [
                    "--org", "acme",
                    "--token", "ghp_test",
                    "--settings", str(settings_file),
                    "--name-pattern", "svc-(",
                ],
                env=CLEAN_ENV,
            )

        assert result.exit_code == 1
        assert "Invalid name pattern" in result.output
        client_cls.assert_not_called()

    def test_sync_failure_exits_nonzero(self, runner: CliRunner, settings_file: Path) -> None:
        client = MockGitHubClient()
        client.repos.configure_list_for_org(
            error=AuthenticationError("UNAUTHORIZED", "Bad credentials")
        )

        with patch("settings_sync.cli.GitHubClient", return_value=client):
            result = runner.invoke(
                main,
                ["--org", "acme", "--token", "ghp_test", "--settings", str(settings_file)],
                env=CLEAN_ENV,
            )

        assert result.exit_code == 1
        assert "[UNAUTHORIZED] Bad credentials" in result.output
        assert result.output.count("Error during sync") == 1

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
