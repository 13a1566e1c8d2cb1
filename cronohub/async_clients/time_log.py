"""Async time logging client (the write path)."""

from typing import TYPE_CHECKING

from cronohub.codec import format_time_comment, validate_hours
from cronohub.logging import get_logger
from cronohub.types.repos import LoggedTime

if TYPE_CHECKING:
    from cronohub.async_clients.permissions import AsyncPermissionsClient
    from cronohub.async_transport import AsyncHTTPTransport

logger = get_logger()


class AsyncTimeLogClient:
    """Async client that records time as an issue comment."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        permissions: "AsyncPermissionsClient",
    ) -> None:
        """
        Initialize the async time log client.

        Args:
            transport: Async HTTP transport for making requests
            permissions: Permission client gating every write
        """
        self.transport = transport
        self.permissions = permissions

    async def log(
        self,
        owner: str,
        repo: str,
        number: int,
        hours: "float | str",
        description: str = "",
        check_access: bool = True,
    ) -> LoggedTime:
        """
        Log time on an issue.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Issue number
            hours: Hours worked, in (0, 24]
            description: Optional free-text note
            check_access: Verify push access before posting

        Returns:
            LoggedTime describing the created comment

        Raises:
            ValidationError: If ``hours`` is out of range
            ReadOnlyAccessError: If the token cannot push to the repository
            CronoHubError: If the access check or the post fails
        """
        value = validate_hours(hours)

        if check_access:
            result = await self.permissions.check(owner, repo)
            result.raise_for_access()

        body = format_time_comment(value, description)
        data = await self.transport.post_json(
            f"/repos/{owner}/{repo}/issues/{number}/comments",
            body={"body": body},
        )
        logger.info("Logged %s hours on %s/%s#%d", value, owner, repo, number)

        return LoggedTime(
            comment_id=data["id"],
            url=data.get("html_url", ""),
            hours=value,
            body=body,
        )
