"""
Settings sync logging utilities.

Provides configurable logging for HTTP traffic and for reconciliation
decisions. Ensures no GitHub token is ever written to a log.
"""

import logging
import re
from typing import Any

_sdk_logger = logging.getLogger("settings_sync")
_http_logger = logging.getLogger("settings_sync.http")
_sync_logger = logging.getLogger("settings_sync.sync")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-.]{8,}"), r"\1 [REDACTED]"),
    # Fine-grained personal access tokens
    (re.compile(r"github_pat_[A-Za-z0-9_]{20,}"), "[TOKEN_REDACTED]"),
    # Classic, OAuth, user-to-server, server-to-server and refresh tokens
    (re.compile(r"gh[pousr]_[A-Za-z0-9]{20,}"), "[TOKEN_REDACTED]"),
    # Secret/token key-value pairs
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_installed_handler: logging.Handler | None = None

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key"}

# Log record categories emitted by SyncLogger
CATEGORY_INFO = "info"
CATEGORY_SUCCESS = "success"
CATEGORY_SKIP = "skip"
CATEGORY_WARNING = "warning"
CATEGORY_FAILURE = "failure"
CATEGORY_PREVIEW = "dry_run"


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure settings sync logging.

    Args:
        level: Default log level for all loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: timestamp, level and message)

    Example:
        ```python
        import logging
        from settings_sync.logging import configure_logging

        # Show masked HTTP traffic as well
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    global _installed_handler

    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # replace rather than stack handlers on repeated configuration
    if _installed_handler is not None:
        _sdk_logger.removeHandler(_installed_handler)
    _installed_handler = handler

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _sync_logger.setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a settings sync logger.

    Args:
        name: Logger name suffix (e.g., "http", "sync"). If None, returns the root package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"settings_sync.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces GitHub tokens, bearer credentials and secret key-value pairs
    with redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, token, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        elif isinstance(value, str):
            result[key] = mask_sensitive_data(value)
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """Log an outgoing request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    if body:
        # file payloads are base64 blobs, the size is what matters
        if "content" in body:
            body = {**body, "content": f"<{len(str(body['content']))} chars>"}
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    request_id: str | None = None,
) -> None:
    """Log a response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if request_id:
        log_parts.append(f"request_id={request_id}")

    _http_logger.debug(" | ".join(log_parts))


class SyncLogger:
    """
    Category-tagged logger for reconciliation decisions.

    Every record carries a ``category`` attribute (one of the ``CATEGORY_*``
    constants) so handlers can filter or render decisions without parsing
    the message text. Pass a custom ``logging.Logger`` to redirect output.

    Example:
        ```python
        log = SyncLogger()
        log.skip("Skipping %s - settings match", "svc-a")
        log.preview("Would update repository settings for %s: %s", "svc-a", diff)
        ```
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or _sync_logger

    def info(self, msg: str, *args: Any) -> None:
        self._emit(logging.INFO, CATEGORY_INFO, msg, args)

    def success(self, msg: str, *args: Any) -> None:
        self._emit(logging.INFO, CATEGORY_SUCCESS, msg, args)

    def skip(self, msg: str, *args: Any) -> None:
        self._emit(logging.INFO, CATEGORY_SKIP, msg, args)

    def preview(self, msg: str, *args: Any) -> None:
        self._emit(logging.INFO, CATEGORY_PREVIEW, msg, args)

    def warning(self, msg: str, *args: Any) -> None:
        self._emit(logging.WARNING, CATEGORY_WARNING, msg, args)

    def failure(self, msg: str, *args: Any) -> None:
        self._emit(logging.ERROR, CATEGORY_FAILURE, msg, args)

    def _emit(self, level: int, category: str, msg: str, args: tuple[Any, ...]) -> None:
        self.logger.log(level, msg, *args, extra={"category": category})


__all__ = [
    "CATEGORY_FAILURE",
    "CATEGORY_INFO",
    "CATEGORY_PREVIEW",
    "CATEGORY_SKIP",
    "CATEGORY_SUCCESS",
    "CATEGORY_WARNING",
    "SyncLogger",
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
