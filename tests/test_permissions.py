"""Tests for repository permission checks."""

import asyncio

import httpx
import pytest

from cronohub.exceptions import (
    CronoHubError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    ReadOnlyAccessError,
)
from cronohub.testing import MockGitHubAPI, create_mock_repository
from cronohub.types.repos import PermissionResult

REPO_PATH = "/repos/acme/widgets"
READ_ONLY = "Your token has read-only access. Write permission is required to log time."


def check(api: MockGitHubAPI, owner: str = "acme", repo: str = "widgets") -> PermissionResult:
    async def scenario() -> PermissionResult:
        async with api.client() as client:
            return await client.permissions.check(owner, repo)

    return asyncio.run(scenario())


class TestWriteAccess:
    def test_push_permission_grants_access(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, json=create_mock_repository(push=True))

        result = check(mock_api)

        assert result.has_access is True
        assert result.error is None

    def test_sends_token_and_media_type(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, json=create_mock_repository(push=True))

        check(mock_api)

        call = mock_api.calls_to(REPO_PATH)[0]
        assert call.headers["authorization"] == "Bearer test-token"
        assert call.headers["accept"] == "application/vnd.github.v3+json"

    def test_pull_only_is_read_only(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, json=create_mock_repository(push=False))

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == READ_ONLY
        assert result.reason == "read_only"

    @pytest.mark.parametrize(
        "payload",
        [
            create_mock_repository(push=None),
            {"name": "widgets", "permissions": {}},
            {"name": "widgets", "permissions": None},
            {"name": "widgets", "permissions": {"push": "true"}},
        ],
    )
    def test_missing_or_non_boolean_push_is_read_only(self, mock_api: MockGitHubAPI, payload: dict) -> None:
        mock_api.add("GET", REPO_PATH, json=payload)

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == READ_ONLY


class TestHttpFailures:
    def test_not_found(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, status=404, json={"message": "Not Found"})

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == "Repository not found or you don't have read access to it."

    def test_forbidden_passes_api_message(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, status=403, json={"message": "Resource not accessible by personal access token"})

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == "Access forbidden: Resource not accessible by personal access token"

    def test_forbidden_rate_limit_message_passes_through(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, status=403, json={"message": "API rate limit exceeded for user ID 1."})

        result = check(mock_api)

        assert result.error == "Access forbidden: API rate limit exceeded for user ID 1."
        assert result.reason == "forbidden"

    def test_forbidden_without_message(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, status=403, json={})

        result = check(mock_api)

        assert result.error == "Access forbidden: Your token doesn't have access to this repository."

    def test_forbidden_with_unparseable_body(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, respond=lambda request: httpx.Response(403, text="<html>nope</html>"))

        result = check(mock_api)

        assert result.error == "Access forbidden: Your token doesn't have access to this repository."

    @pytest.mark.parametrize("status", [401, 500, 502])
    def test_other_statuses(self, mock_api: MockGitHubAPI, status: int) -> None:
        mock_api.add("GET", REPO_PATH, status=status, json={"message": "nope"})

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == f"Error checking permissions: {status}"

    def test_network_error(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, error=httpx.ConnectError("Network request failed"))

        result = check(mock_api)

        assert result.has_access is False
        assert result.error == "Network error: Network request failed"

    def test_timeout(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", REPO_PATH, error=httpx.ReadTimeout("Request timeout"))

        result = check(mock_api)

        assert result.error == "Network error: Request timeout"


class TestRaiseForAccess:
    def test_granted_is_noop(self) -> None:
        PermissionResult(True).raise_for_access()

    @pytest.mark.parametrize(
        "reason,expected",
        [
            ("network", NetworkError),
            ("not_found", NotFoundError),
            ("forbidden", ForbiddenError),
            ("read_only", ReadOnlyAccessError),
            ("http_error", CronoHubError),
        ],
    )
    def test_denied_results_raise(self, reason: str, expected: type) -> None:
        result = PermissionResult(False, "denied", reason=reason)

        with pytest.raises(expected) as exc_info:
            result.raise_for_access()
        assert exc_info.value.message == "denied"
