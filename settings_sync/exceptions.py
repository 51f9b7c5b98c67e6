"""Settings sync exception classes."""


class SettingsSyncError(Exception):
    """Base exception for all settings sync errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(SettingsSyncError):
    """Raised when client configuration or a settings file is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(SettingsSyncError):
    """Raised when the token is missing, expired or rejected."""

    pass


class AuthorizationError(SettingsSyncError):
    """Raised when the token lacks access to the resource."""

    pass


class NotFoundError(SettingsSyncError):
    """Raised when a resource is not found."""

    pass


class ConflictError(SettingsSyncError):
    """Raised on conflicts (stale file sha, etc.)."""

    pass


class RateLimitedError(SettingsSyncError):
    """Raised when the API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(SettingsSyncError):
    """Raised when the API rejects a payload or returns one that cannot be decoded."""

    pass


class ServerError(SettingsSyncError):
    """Raised on server errors (5xx) and connection failures."""

    pass
