"""
CronoHub async client.

Provides the async interface for time reports and time logging on GitHub.
"""

import os
from datetime import tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from cronohub.async_clients import (
    AsyncCommentsClient,
    AsyncMembersClient,
    AsyncPermissionsClient,
    AsyncReportsClient,
    AsyncSearchClient,
    AsyncTimeLogClient,
    AsyncUsersClient,
)
from cronohub.async_transport import GITHUB_API_URL, AsyncHTTPTransport, RetryConfig
from cronohub.dates import TimezoneNormalizer
from cronohub.exceptions import ConfigurationError


class AsyncCronoHubClient:
    """
    Async client for CronoHub time tracking on GitHub.

    Aggregates all async resource clients over one HTTP transport. Construct
    one per report or session and close it when done.

    Example:
        ```python
        import asyncio
        from cronohub import AsyncCronoHubClient

        async def main():
            async with AsyncCronoHubClient.from_env() as client:
                report = await client.reports.generate(
                    ["octocat"], org="my-org", start="2026-01-01", end="2026-01-31"
                )
                print(report.total)

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = GITHUB_API_URL
    DEFAULT_TIMEOUT = 30.0
    DEFAULT_MAX_CONCURRENCY = 8

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        tz: "tzinfo | str | None" = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        retry_config: RetryConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async CronoHub client.

        Args:
            token: GitHub personal access token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            tz: Viewer timezone as a tzinfo or IANA name (default: host local time)
            max_concurrency: Maximum GitHub requests in flight (default: 8)
            retry_config: Configuration for retry behavior (optional)
            transport: Custom httpx transport, mainly for tests (optional)

        Raises:
            ConfigurationError: If the token is empty or the timezone is unknown
        """
        if not token:
            raise ConfigurationError("A GitHub token is required")

        self.base_url = base_url
        self.timeout = timeout
        self.normalizer = TimezoneNormalizer(_resolve_timezone(tz))

        self._transport = AsyncHTTPTransport(
            token=token,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
            max_concurrency=max_concurrency,
            transport=transport,
        )

        self.search = AsyncSearchClient(self._transport)
        self.comments = AsyncCommentsClient(self._transport, self.normalizer)
        self.permissions = AsyncPermissionsClient(self._transport)
        self.members = AsyncMembersClient(self._transport)
        self.users = AsyncUsersClient(self._transport)
        self.reports = AsyncReportsClient(self.search, self.comments, self.members)
        self.time_log = AsyncTimeLogClient(self._transport, self.permissions)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncCronoHubClient":
        """
        Create an async client from environment variables.

        Environment variables:
            CRONOHUB_GITHUB_TOKEN: GitHub token (required, falls back to GITHUB_TOKEN)
            CRONOHUB_BASE_URL: Base URL for API (optional, default: https://api.github.com)
            CRONOHUB_TIMEZONE: IANA timezone of the viewer (optional, default: host local time)
            CRONOHUB_MAX_CONCURRENCY: Maximum requests in flight (optional, default: 8)

        Raises:
            ConfigurationError: If required environment variables are missing or invalid
        """
        token = os.environ.get("CRONOHUB_GITHUB_TOKEN") or os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("CRONOHUB_BASE_URL", cls.DEFAULT_BASE_URL)
        tz_name = os.environ.get("CRONOHUB_TIMEZONE") or None
        concurrency = os.environ.get("CRONOHUB_MAX_CONCURRENCY")

        if not token:
            raise ConfigurationError("CRONOHUB_GITHUB_TOKEN environment variable not set")

        max_concurrency = cls.DEFAULT_MAX_CONCURRENCY
        if concurrency:
            try:
                max_concurrency = int(concurrency)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid CRONOHUB_MAX_CONCURRENCY: {concurrency}. Must be a positive integer"
                ) from None
            if max_concurrency < 1:
                raise ConfigurationError(
                    f"Invalid CRONOHUB_MAX_CONCURRENCY: {concurrency}. Must be a positive integer"
                )

        return cls(
            token=token,
            base_url=base_url,
            timeout=timeout,
            tz=tz_name,
            max_concurrency=max_concurrency,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncCronoHubClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()


def _resolve_timezone(tz: "tzinfo | str | None") -> tzinfo | None:
    if tz is None or isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigurationError(f"Unknown timezone: {tz}") from None
