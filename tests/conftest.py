"""Shared fixtures for the settings sync test suite."""

import logging
from collections.abc import Callable, Generator

import pytest

import settings_sync.logging as sync_logging

pytest_plugins = ["settings_sync.testing.conftest"]

_PACKAGE_LOGGERS = ("settings_sync", "settings_sync.http", "settings_sync.sync")


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo any configure_logging() call made by a test."""
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers))
        for name in _PACKAGE_LOGGERS
    }
    installed = sync_logging._installed_handler
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
    sync_logging._installed_handler = installed


@pytest.fixture
def sync_records(caplog: pytest.LogCaptureFixture) -> Callable[..., list[logging.LogRecord]]:
    """
    Capture reconciliation log records and filter them by category.

    Example:
        ```python
        def test_preview(sync_records):
            ...
            assert sync_records("dry_run")
        ```
    """
    caplog.set_level(logging.INFO, logger="settings_sync")

    def records(category: str | None = None) -> list[logging.LogRecord]:
        return [
            record
            for record in caplog.records
            if hasattr(record, "category") and (category is None or record.category == category)
        ]

    return records
