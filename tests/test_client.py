"""Tests for client construction and environment configuration."""

from datetime import timedelta, timezone

import pytest

from cronohub.async_client import AsyncCronoHubClient
from cronohub.exceptions import ConfigurationError

ENV_VARS = [
    "CRONOHUB_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "CRONOHUB_BASE_URL",
    "CRONOHUB_TIMEZONE",
    "CRONOHUB_MAX_CONCURRENCY",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_client_initialization() -> None:
    tz = timezone(timedelta(hours=-5))
    client = AsyncCronoHubClient(token="ghp_test", tz=tz, max_concurrency=4)

    assert client.base_url == "https://api.github.com"
    assert client.normalizer.tz is tz
    assert client.transport.max_concurrency == 4
    assert client.reports.search is client.search
    assert client.time_log.permissions is client.permissions


def test_empty_token_rejected() -> None:
    with pytest.raises(ConfigurationError):
        AsyncCronoHubClient(token="")


def test_unknown_timezone_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        AsyncCronoHubClient(token="ghp_test", tz="Mars/Olympus_Mons")
    assert "Mars/Olympus_Mons" in exc_info.value.message


def test_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("CRONOHUB_GITHUB_TOKEN", "ghp_test")
    clean_env.setenv("CRONOHUB_BASE_URL", "https://github.example.com/api/v3")
    clean_env.setenv("CRONOHUB_TIMEZONE", "UTC")
    clean_env.setenv("CRONOHUB_MAX_CONCURRENCY", "3")

    client = AsyncCronoHubClient.from_env()

    assert client.base_url == "https://github.example.com/api/v3"
    assert client.normalizer.tz is not None
    assert client.transport.max_concurrency == 3


def test_from_env_falls_back_to_github_token(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("GITHUB_TOKEN", "ghp_fallback")

    client = AsyncCronoHubClient.from_env()

    assert client.normalizer.tz is None
    assert client.transport.max_concurrency == AsyncCronoHubClient.DEFAULT_MAX_CONCURRENCY


def test_from_env_requires_token(clean_env: pytest.MonkeyPatch) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        AsyncCronoHubClient.from_env()
    assert "CRONOHUB_GITHUB_TOKEN" in exc_info.value.message


@pytest.mark.parametrize("value", ["many", "0", "-2"])
def test_from_env_rejects_bad_concurrency(clean_env: pytest.MonkeyPatch, value: str) -> None:
    clean_env.setenv("CRONOHUB_GITHUB_TOKEN", "ghp_test")
    clean_env.setenv("CRONOHUB_MAX_CONCURRENCY", value)

    with pytest.raises(ConfigurationError):
        AsyncCronoHubClient.from_env()
