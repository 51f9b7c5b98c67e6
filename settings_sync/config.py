"""
Settings file loading.

A settings file is a JSON object with up to four sections::

    {
      "repository": {"has_wiki": false},
      "collaborators": [{"username": "alice", "role": "admin"}],
      "branch_protection": {"main": {"enforce_admins": true, ...}},
      "files": [{"path": ".gitignore", "localPath": "./templates/.gitignore"}]
    }
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from settings_sync.exceptions import ConfigurationError
from settings_sync.logging import get_logger
from settings_sync.types.config import CollaboratorSpec, DesiredConfiguration, FileSyncSpec

_logger = get_logger("config")

_KNOWN_SECTIONS = {"repository", "collaborators", "branch_protection", "branchProtection", "files"}


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Get the first of several alternative keys present in ``data``."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _parse_repository(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError("'repository' must be an object of setting names to values")
    return dict(value)


def _parse_collaborators(value: Any) -> list[CollaboratorSpec]:
    if not isinstance(value, list):
        raise ConfigurationError("'collaborators' must be a list of {username, role} objects")

    specs = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping) or "username" not in item or "role" not in item:
            raise ConfigurationError(
                f"collaborators[{index}] must be an object with 'username' and 'role'"
            )
        specs.append(CollaboratorSpec(username=str(item["username"]), role=item["role"]))
    return specs


def _parse_branch_protection(value: Any) -> dict[str, dict[str, Any]]:
    if not isinstance(value, Mapping):
        raise ConfigurationError("'branch_protection' must be an object of branch names to rules")

    rules = {}
    for branch, rule in value.items():
        if not isinstance(rule, Mapping):
            raise ConfigurationError(f"branch_protection[{branch!r}] must be an object")
        rules[str(branch)] = dict(rule)
    return rules


def _parse_files(value: Any) -> list[FileSyncSpec]:
    if not isinstance(value, list):
        raise ConfigurationError("'files' must be a list of {path, localPath} objects")

    specs = []
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"files[{index}] must be an object")
        remote_path = _get(item, "path", "remotePath", "remote_path")
        local_path = _get(item, "localPath", "local_path")
        if not remote_path or not local_path:
            raise ConfigurationError(f"files[{index}] must have 'path' and 'localPath'")
        specs.append(FileSyncSpec(remote_path=str(remote_path), local_path=str(local_path)))
    return specs


def parse_settings(data: Any) -> DesiredConfiguration:
    """
    Build a DesiredConfiguration from decoded settings data.

    Args:
        data: The decoded JSON document

    Returns:
        Validated configuration; sections missing from ``data`` are None

    Raises:
        ConfigurationError: If the document or any section is malformed, or
            a collaborator role is not one of the supported roles
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Settings must be a JSON object")
    if not data:
        raise ConfigurationError("Settings file is empty")

    for key in data:
        if key not in _KNOWN_SECTIONS:
            _logger.warning("Ignoring unknown settings section %r", key)

    settings = DesiredConfiguration()

    if data.get("repository") is not None:
        settings.repository = _parse_repository(data["repository"])
    if data.get("collaborators") is not None:
        settings.collaborators = _parse_collaborators(data["collaborators"])
    branch_protection = _get(data, "branch_protection", "branchProtection")
    if branch_protection is not None:
        settings.branch_protection = _parse_branch_protection(branch_protection)
    if data.get("files") is not None:
        settings.files = _parse_files(data["files"])

    return settings


def load_settings(path: str | Path) -> DesiredConfiguration:
    """
    Load and validate a JSON settings file.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid settings
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e

    return parse_settings(data)
