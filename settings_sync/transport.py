"""
HTTP Transport for the GitHub REST API.

Handles authentication headers, request/response logging and mapping of
error responses to typed exceptions. Every request is attempted exactly
once; callers decide what a failure means for them.
"""

import time
from typing import Any

import httpx

from settings_sync.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    SettingsSyncError,
    ValidationError,
)
from settings_sync.logging import log_http_request, log_http_response

API_VERSION = "2022-11-28"
USER_AGENT = "github-settings-sync"


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Token authentication and API version headers
    - Masked DEBUG logging of requests and responses
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub token sent as a bearer credential
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": USER_AGENT,
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, PATCH, PUT, etc.)
            path: API path (e.g., "/orgs/acme/repos")
            params: Query parameters
            body: JSON request body

        Returns:
            Parsed JSON response, or None for empty (204) responses

        Raises:
            ServerError: If a successful response does not carry JSON
            SettingsSyncError: On API or connection errors
        """
        log_http_request(method, path, params, body)
        started = time.monotonic()

        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            path,
            elapsed_ms=(time.monotonic() - started) * 1000,
            request_id=response.headers.get("X-GitHub-Request-Id"),
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE",
                f"Response from {path} is not valid JSON",
                response.headers.get("X-GitHub-Request-Id"),
            ) from e

    def paginate(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        per_page: int = 100,
    ) -> list[Any]:
        """
        Collect every item of a paged list endpoint.

        Pages are requested in order until one comes back shorter than
        ``per_page``.

        Args:
            path: API path of the list endpoint
            params: Extra query parameters
            per_page: Page size to request

        Returns:
            Items of all pages, in order

        Raises:
            SettingsSyncError: If any page fails
        """
        items: list[Any] = []
        page = 1
        while True:
            data = self.request(
                "GET", path, params={**(params or {}), "per_page": per_page, "page": page}
            )
            batch = data or []
            items.extend(batch)
            if len(batch) < per_page:
                return items
            page += 1

    def _parse_error_response(self, response: httpx.Response) -> SettingsSyncError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate SettingsSyncError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        status_code = response.status_code

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                return RateLimitedError(
                    "RATE_LIMITED", message, self._retry_after(response), request_id
                )
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code == 409:
            return ConflictError("CONFLICT", message, request_id)
        elif status_code == 429:
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after(response), request_id
            )
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, request_id)

    @staticmethod
    def _retry_after(response: httpx.Response) -> int:
        retry_after_str = response.headers.get("Retry-After", "60")
        try:
            return int(retry_after_str)
        except ValueError:
            return 60
