"""
Payload factories and pytest fixtures for CronoHub tests.

Factories build the GitHub REST payloads CronoHub reads; fixtures provide a
fresh mock API and timezone normalizers.
"""

from datetime import timedelta, timezone
from typing import Any, Generator

import pytest

from cronohub.codec import format_time_comment
from cronohub.dates import TimezoneNormalizer
from cronohub.testing.mock import MockGitHubAPI

API = "https://api.github.com"

# Fixed offsets. Colombia observes no DST.
BOGOTA = timezone(timedelta(hours=-5), "COT")
TOKYO = timezone(timedelta(hours=9), "JST")


# ============================================================================
# Payload factories
# ============================================================================


def create_mock_issue(number: int = 1, owner: str = "acme", repo: str = "widgets", **overrides: Any) -> dict[str, Any]:
    """Build a search result item for an issue."""
    issue = {
        "number": number,
        "title": f"Issue {number}",
        "html_url": f"https://github.com/{owner}/{repo}/issues/{number}",
        "comments_url": f"{API}/repos/{owner}/{repo}/issues/{number}/comments",
        "updated_at": "2026-01-15T12:00:00Z",
    }
    issue.update(overrides)
    return issue


def create_mock_comment(
    login: str,
    body: str,
    created_at: str,
    comment_id: int = 1,
    **overrides: Any,
) -> dict[str, Any]:
    """Build an issue comment payload."""
    comment = {
        "id": comment_id,
        "user": {"login": login},
        "body": body,
        "created_at": created_at,
        "updated_at": created_at,
        "html_url": f"https://github.com/acme/widgets/issues/1#issuecomment-{comment_id}",
    }
    comment.update(overrides)
    return comment


def create_time_comment(
    login: str,
    hours: float,
    created_at: str,
    description: str = "",
    comment_id: int = 1,
) -> dict[str, Any]:
    """Build a comment carrying a time entry."""
    return create_mock_comment(login, format_time_comment(hours, description), created_at, comment_id)


def create_mock_member(login: str) -> dict[str, Any]:
    """Build an organization member payload."""
    return {
        "login": login,
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
        "type": "User",
    }


def create_mock_repository(
    owner: str = "acme",
    repo: str = "widgets",
    push: bool | None = True,
) -> dict[str, Any]:
    """Build a repository payload; ``push=None`` omits the permissions object."""
    data: dict[str, Any] = {
        "id": 1296269,
        "name": repo,
        "full_name": f"{owner}/{repo}",
        "private": False,
    }
    if push is not None:
        data["permissions"] = {"admin": False, "push": push, "pull": True}
    return data


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> Generator[MockGitHubAPI, None, None]:
    """Provide a fresh MockGitHubAPI."""
    api = MockGitHubAPI()
    yield api
    api.reset()


@pytest.fixture
def utc_normalizer() -> TimezoneNormalizer:
    return TimezoneNormalizer(timezone.utc)


@pytest.fixture
def bogota_normalizer() -> TimezoneNormalizer:
    """Normalizer for UTC-5."""
    return TimezoneNormalizer(BOGOTA)
