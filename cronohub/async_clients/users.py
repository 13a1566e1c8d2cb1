"""Async users client."""

from typing import TYPE_CHECKING

from cronohub.exceptions import AuthenticationError, CronoHubError, NetworkError
from cronohub.types.repos import User

if TYPE_CHECKING:
    from cronohub.async_transport import AsyncHTTPTransport


class AsyncUsersClient:
    """Async client for user lookups."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get_authenticated(self) -> User:
        """
        Return the user the token belongs to.

        Raises:
            AuthenticationError: If GitHub rejects the token
            NetworkError: If GitHub cannot be reached
        """
        try:
            data = await self.transport.get_json("/user")
        except NetworkError:
            raise
        except CronoHubError as e:
            raise AuthenticationError("INVALID_TOKEN", "Invalid token", e.status_code) from e

        return User(
            login=data["login"],
            name=data.get("name") or data["login"],
            avatar_url=data.get("avatar_url"),
        )
