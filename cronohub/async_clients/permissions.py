"""Async repository permission client.

Every outcome of a check, including transport failures, is
returned as a ``PermissionResult``. Nothing raises.
"""

from typing import TYPE_CHECKING

from cronohub.async_transport import error_message
from cronohub.exceptions import NetworkError
from cronohub.logging import get_logger
from cronohub.types.repos import PermissionResult

if TYPE_CHECKING:
    from cronohub.async_transport import AsyncHTTPTransport

logger = get_logger()

NOT_FOUND_MESSAGE = "Repository not found or you don't have read access to it."
FORBIDDEN_DEFAULT = "Your token doesn't have access to this repository."
READ_ONLY_MESSAGE = "Your token has read-only access. Write permission is required to log time."


class AsyncPermissionsClient:
    """Async client checking whether a token may log time in a repository."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async permissions client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def check(self, owner: str, repo: str) -> PermissionResult:
        """
        Classify the token's access to ``owner/repo``.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            PermissionResult with ``has_access`` true only for push access
        """
        try:
            response = await self.transport.request("GET", f"/repos/{owner}/{repo}")
        except NetworkError as e:
            return PermissionResult(False, f"Network error: {e.message}", reason="network")

        status = response.status_code

        if status == 404:
            return PermissionResult(False, NOT_FOUND_MESSAGE, reason="not_found", status_code=status)

        if status == 403:
            message = error_message(response) or FORBIDDEN_DEFAULT
            return PermissionResult(
                False, f"Access forbidden: {message}", reason="forbidden", status_code=status
            )

        if not response.is_success:
            return PermissionResult(
                False, f"Error checking permissions: {status}", reason="http_error", status_code=status
            )

        try:
            data = response.json()
        except ValueError:
            data = None

        permissions = data.get("permissions") if isinstance(data, dict) else None
        if not isinstance(permissions, dict) or permissions.get("push") is not True:
            logger.info("Token has no push access to %s/%s", owner, repo)
            return PermissionResult(False, READ_ONLY_MESSAGE, reason="read_only", status_code=status)

        return PermissionResult(True, None, status_code=status)
