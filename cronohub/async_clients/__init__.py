"""CronoHub async resource clients."""

from cronohub.async_clients.comments import AsyncCommentsClient
from cronohub.async_clients.members import AsyncMembersClient
from cronohub.async_clients.permissions import AsyncPermissionsClient
from cronohub.async_clients.reports import AsyncReportsClient
from cronohub.async_clients.search import AsyncSearchClient
from cronohub.async_clients.time_log import AsyncTimeLogClient
from cronohub.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncSearchClient",
    "AsyncCommentsClient",
    "AsyncPermissionsClient",
    "AsyncMembersClient",
    "AsyncUsersClient",
    "AsyncReportsClient",
    "AsyncTimeLogClient",
]
