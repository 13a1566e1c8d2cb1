"""
Integration tests against the live GitHub API.

Skipped unless CRONOHUB_INTEGRATION_TESTS=1. Also requires
CRONOHUB_GITHUB_TOKEN and CRONOHUB_TEST_REPO ("owner/repo").
"""

import asyncio
import os

import pytest

from cronohub.async_client import AsyncCronoHubClient
from cronohub.dates import default_date_range
from cronohub.types.reports import AggregatedReport

pytestmark = pytest.mark.skipif(
    os.environ.get("CRONOHUB_INTEGRATION_TESTS") != "1",
    reason="Integration tests require CRONOHUB_INTEGRATION_TESTS=1 and a GitHub token",
)


def get_test_repo() -> tuple[str, str]:
    owner, _, repo = os.environ.get("CRONOHUB_TEST_REPO", "").partition("/")
    if not owner or not repo:
        pytest.skip("CRONOHUB_TEST_REPO must be set to owner/repo")
    return owner, repo


def test_permission_check_and_weekly_report() -> None:
    owner, repo = get_test_repo()

    async def scenario():
        async with AsyncCronoHubClient.from_env() as client:
            user = await client.users.get_authenticated()
            access = await client.permissions.check(owner, repo)
            start, end = default_date_range(client.normalizer.today())
            report = await client.reports.generate([user.login], owner, start, end, repo=repo)
            return access, report

    access, report = asyncio.run(scenario())

    assert access.has_access or access.error
    assert isinstance(report, AggregatedReport)
    assert report.total == sum(entry.hours for entry in report.entries)
