"""github-settings-sync - reconcile GitHub repository settings across an organization."""

from settings_sync.client import GitHubClient
from settings_sync.config import load_settings, parse_settings
from settings_sync.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    SettingsSyncError,
    ValidationError,
)
from settings_sync.logging import SyncLogger, configure_logging, get_logger
from settings_sync.sync import SettingsSync, sync_settings
from settings_sync.transport import HTTPTransport
from settings_sync.types import (
    CollaboratorSpec,
    DesiredConfiguration,
    FileSyncSpec,
    RepositoryFilter,
    SyncOutcome,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "GitHubClient",
    # Reconciliation
    "SettingsSync",
    "sync_settings",
    # Configuration
    "load_settings",
    "parse_settings",
    "DesiredConfiguration",
    "CollaboratorSpec",
    "FileSyncSpec",
    "RepositoryFilter",
    "SyncOutcome",
    # Exceptions
    "SettingsSyncError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    # Logging
    "SyncLogger",
    "configure_logging",
    "get_logger",
]
