"""Async organization members client."""

from typing import TYPE_CHECKING

from cronohub.async_transport import error_message, is_rate_limit_message
from cronohub.exceptions import CronoHubError, ForbiddenError, RateLimitedError
from cronohub.types.repos import Collaborator

if TYPE_CHECKING:
    from cronohub.async_transport import AsyncHTTPTransport


class AsyncMembersClient:
    """Async client for organization membership."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async members client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(self, org: str) -> list[Collaborator]:
        """
        List the members of an organization (first 100).

        Args:
            org: Organization login

        Returns:
            List of Collaborator objects

        Raises:
            RateLimitedError: When the rate limit is exhausted
            ForbiddenError: When the token may not list members
            CronoHubError: On any other non-2xx response
        """
        response = await self.transport.request("GET", f"/orgs/{org}/members", params={"per_page": 100})

        if response.status_code == 403:
            message = error_message(response)
            if is_rate_limit_message(message):
                raise RateLimitedError()
            raise ForbiddenError("FORBIDDEN", message or "Access denied to organization members", 403)

        if not response.is_success:
            raise CronoHubError(
                "MEMBERS_ERROR",
                error_message(response) or "Error fetching organization members",
                response.status_code,
            )

        return [
            Collaborator(login=member["login"], avatar_url=member.get("avatar_url", ""))
            for member in response.json()
        ]
