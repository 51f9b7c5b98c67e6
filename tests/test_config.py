"""
Tests for settings file loading and validation.
"""

import json
import logging
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from settings_sync.config import load_settings, parse_settings
from settings_sync.exceptions import ConfigurationError
from settings_sync.types.config import (
    COLLABORATOR_ROLES,
    CollaboratorSpec,
    FileSyncSpec,
    RepositoryFilter,
)

username_strategy = st.text(
    min_size=1,
    max_size=39,
    alphabet=st.characters(whitelist_categories=("Ll", "Nd"), whitelist_characters="-"),
)


@given(role=st.text(max_size=20).filter(lambda r: r not in COLLABORATOR_ROLES))
@settings(max_examples=100)
def test_property_unknown_roles_are_rejected(role: str) -> None:
    """
    Property: only the five supported roles are accepted

    For any role outside admin/maintain/write/triage/read, loading SHALL
    fail with a ConfigurationError.
    """
    with pytest.raises(ConfigurationError):
        parse_settings({"collaborators": [{"username": "alice", "role": role}]})


@given(
    collaborators=st.lists(
        st.tuples(username_strategy, st.sampled_from(COLLABORATOR_ROLES)), max_size=10
    )
)
@settings(max_examples=50)
def test_property_collaborators_keep_order(collaborators: list[tuple[str, str]]) -> None:
    """
    Property: collaborator entries are kept in file order

    For any list of valid collaborators, parsing SHALL produce one spec per
    entry, in order.
    """
    data = {"collaborators": [{"username": u, "role": r} for u, r in collaborators]}

    result = parse_settings(data)

    assert result.collaborators == [CollaboratorSpec(u, r) for u, r in collaborators]


class TestParseSettings:
    """Section parsing."""

    def test_full_document(self) -> None:
        result = parse_settings(
            {
                "repository": {"has_wiki": False, "allow_squash_merge": True},
                "collaborators": [{"username": "alice", "role": "admin"}],
                "branch_protection": {"main": {"enforce_admins": True}},
                "files": [{"path": ".gitignore", "localPath": "templates/.gitignore"}],
            }
        )

        assert result.repository == {"has_wiki": False, "allow_squash_merge": True}
        assert result.collaborators == [CollaboratorSpec("alice", "admin")]
        assert result.branch_protection == {"main": {"enforce_admins": True}}
        assert result.files == [FileSyncSpec(".gitignore", "templates/.gitignore")]

    def test_absent_sections_are_none(self) -> None:
        result = parse_settings({"repository": {"has_issues": True}})

        assert result.collaborators is None
        assert result.branch_protection is None
        assert result.files is None

    def test_empty_lists_are_kept(self) -> None:
        result = parse_settings({"collaborators": [], "files": []})

        assert result.collaborators == []
        assert result.files == []

    def test_camel_case_aliases(self) -> None:
        result = parse_settings(
            {
                "branchProtection": {"release": {"enforce_admins": False}},
                "files": [{"remotePath": "CODEOWNERS", "local_path": "owners"}],
            }
        )

        assert result.branch_protection == {"release": {"enforce_admins": False}}
        assert result.files == [FileSyncSpec("CODEOWNERS", "owners")]

    def test_unknown_section_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="settings_sync")

        parse_settings({"repository": {}, "labels": ["bug"]})

        assert any("labels" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "settings",
            {},
            {"repository": ["has_wiki"]},
            {"collaborators": {"alice": "admin"}},
            {"collaborators": [{"username": "alice"}]},
            {"branch_protection": {"main": True}},
            {"files": [{"path": ".gitignore"}]},
            {"files": ".gitignore"},
        ],
    )
    def test_malformed_documents(self, data: object) -> None:
        with pytest.raises(ConfigurationError):
            parse_settings(data)


class TestLoadSettings:
    """Reading settings from disk."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"repository": {"has_projects": False}}), encoding="utf-8")

        assert load_settings(path).repository == {"has_projects": False}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_settings(path)

    def test_example_settings_file(self) -> None:
        path = Path(__file__).parent.parent / "examples" / "settings.example.json"

        result = load_settings(path)

        assert result.repository
        assert result.collaborators


class TestRepositoryFilter:
    """Filter construction."""

    def test_empty(self) -> None:
        assert RepositoryFilter().is_empty
        assert RepositoryFilter(name_pattern="", label="", language="").is_empty

    def test_populated(self) -> None:
        assert not RepositoryFilter(language="Go").is_empty

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid name pattern"):
            RepositoryFilter(name_pattern="svc-(")
