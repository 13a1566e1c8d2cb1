"""
Async HTTP Transport for CronoHub.

Handles async communication with the GitHub REST API using an httpx async
client: authentication headers, bounded concurrency, retry of transient
server errors, and error response parsing.
"""

import asyncio
import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx

from cronohub.exceptions import (
    AuthenticationError,
    CronoHubError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from cronohub.logging import get_logger, log_http_request, log_http_response

logger = get_logger("http")

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github.v3+json"


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior.

    Only server errors are retried. 403 and 429 responses carry rate-limit
    state and are surfaced to the caller immediately.
    """

    max_retries: int = 2
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [500, 502, 503, 504])
    max_backoff: float = 30.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


def is_rate_limit_message(message: str | None) -> bool:
    return bool(message) and "rate limit" in message.lower()  # type: ignore[union-attr]


def error_message(response: httpx.Response) -> str | None:
    """The ``message`` field of a GitHub error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        return message if isinstance(message, str) and message else None
    return None


class AsyncHTTPTransport:
    """
    Async HTTP transport for the GitHub REST API.

    Handles:
    - Bearer token and media type headers on every request
    - A semaphore bounding the number of requests in flight
    - Exponential backoff with jitter for 5xx responses
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        max_concurrency: int = 8,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            token: GitHub personal access token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            max_concurrency: Maximum number of requests in flight at once
            transport: Custom httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self.max_concurrency = max_concurrency
        self._semaphore = asyncio.Semaphore(max_concurrency)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": GITHUB_ACCEPT,
            },
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Make a request and return the raw response, whatever its status.

        Server errors listed in the retry config are retried; the last
        response is returned once retries run out.

        Args:
            method: HTTP method
            url: API path (e.g. "/search/issues") or absolute URL
            params: Query parameters
            body: JSON body (for POST)

        Raises:
            NetworkError: On transport-level failures
        """
        attempt = 0
        while True:
            response = await self._send(method, url, params, body)
            if not self._should_retry(response.status_code, attempt):
                return response

            wait_time = self._get_backoff_time(attempt)
            logger.debug(
                "Retrying %s %s after %s (attempt %d, waiting %.2fs)",
                method, url, response.status_code, attempt + 1, wait_time,
            )
            await asyncio.sleep(wait_time)
            attempt += 1

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a resource and return its parsed JSON body.

        Raises:
            CronoHubError: On non-2xx responses or transport failures
        """
        response = await self.request("GET", url, params=params)
        if not response.is_success:
            raise self._parse_error_response(response)
        return response.json()

    async def post_json(self, url: str, body: dict[str, Any]) -> Any:
        """
        POST a JSON body and return the parsed JSON response.

        Raises:
            CronoHubError: On non-2xx responses or transport failures
        """
        response = await self.request("POST", url, body=body)
        if not response.is_success:
            raise self._parse_error_response(response)
        return response.json()

    async def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        body: dict[str, Any] | None,
    ) -> httpx.Response:
        log_http_request(method, url, params=params)
        started = time.perf_counter()
        async with self._semaphore:
            try:
                response = await self._client.request(method, url, params=params, json=body)
            except httpx.RequestError as e:
                logger.debug("Request to %s failed: %s", url, e)
                raise NetworkError(str(e) or type(e).__name__) from e
        log_http_response(response.status_code, url, (time.perf_counter() - started) * 1000)
        return response

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(self, attempt: int) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, capped at ``max_backoff``.

        Args:
            attempt: Current attempt number (0-indexed)

        Returns:
            Time to wait in seconds
        """
        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)

        return min(base_wait + jitter, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> CronoHubError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate CronoHubError subclass
        """
        status_code = response.status_code
        message = error_message(response) or f"Error {status_code}"

        if status_code in (403, 429) and (
            is_rate_limit_message(message) or response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            return RateLimitedError(status_code=status_code, reset_at=_rate_limit_reset(response))
        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code)
        elif status_code == 403:
            return ForbiddenError("FORBIDDEN", message, status_code)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code)
        elif status_code == 422:
            return ValidationError(message)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code)
        else:
            return CronoHubError("HTTP_ERROR", message, status_code)


def _rate_limit_reset(response: httpx.Response) -> datetime | None:
    reset = response.headers.get("X-RateLimit-Reset")
    if not reset:
        return None
    try:
        return datetime.fromtimestamp(int(reset), tz=timezone.utc)
    except ValueError:
        return None
