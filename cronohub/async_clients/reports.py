"""Async report generation.

Composes search, comment fetching and aggregation per user. In a
multi-user report each user's pipeline runs concurrently and a failure is
recorded in that user's slot instead of failing the batch.
"""

import asyncio
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING

import httpx

from cronohub.aggregate import aggregate
from cronohub.dates import require_date_range
from cronohub.exceptions import CronoHubError, PartialFetchError
from cronohub.logging import get_logger
from cronohub.types.reports import AggregatedReport, MultiUserReport, TimeEntry, UserReport
from cronohub.types.repos import Collaborator

if TYPE_CHECKING:
    from cronohub.async_clients.comments import AsyncCommentsClient
    from cronohub.async_clients.members import AsyncMembersClient
    from cronohub.async_clients.search import AsyncSearchClient

logger = get_logger("reports")


class AsyncReportsClient:
    """Async client producing single- and multi-user time reports."""

    def __init__(
        self,
        search: "AsyncSearchClient",
        comments: "AsyncCommentsClient",
        members: "AsyncMembersClient",
    ) -> None:
        """
        Initialize the async reports client.

        Args:
            search: Issue search client
            comments: Comment fetching client
            members: Organization members client, used when no users are given
        """
        self.search = search
        self.comments = comments
        self.members = members

    async def user_entries(
        self,
        username: str,
        org: str,
        start: "str | date",
        end: "str | date",
        repo: str | None = None,
    ) -> list[TimeEntry]:
        """
        Collect one user's time entries in the local window ``[start, end]``.

        Raises:
            CronoHubError: If the search fails
        """
        result = await self.search.time_tracked_issues(username, org, start, end, repo=repo)
        if not result.items:
            return []

        batches = await asyncio.gather(
            *(self.comments.fetch_matching(issue.comments_url, username, start, end) for issue in result.items)
        )
        return [entry for batch in batches for entry in batch]

    async def user_report(
        self,
        username: str,
        org: str,
        start: "str | date",
        end: "str | date",
        repo: str | None = None,
    ) -> AggregatedReport:
        """One user's entries grouped by local date."""
        start_date, end_date = require_date_range(start, end)
        entries = await self.user_entries(username, org, start_date, end_date, repo=repo)
        return aggregate(entries, username=username)

    async def generate(
        self,
        users: "Sequence[str | Collaborator] | None",
        org: str,
        start: "str | date",
        end: "str | date",
        repo: str | None = None,
    ) -> AggregatedReport | MultiUserReport:
        """
        Generate a time report.

        Args:
            users: Usernames or collaborators to report on. ``None`` or empty
                means every member of ``org``.
            org: Organization (or owner) to search in
            start: First local day of the window
            end: Last local day of the window (inclusive)
            repo: Restrict the report to ``org/repo``

        Returns:
            The user's AggregatedReport when exactly one user was requested,
            otherwise a MultiUserReport

        Raises:
            ValidationError: If the date range is invalid (before any request)
            CronoHubError: Any failure of a single-user report, or of member
                resolution
        """
        start_date, end_date = require_date_range(start, end)

        if users:
            requested = [
                user if isinstance(user, Collaborator) else Collaborator(login=user, avatar_url="")
                for user in users
            ]
        else:
            requested = await self.members.list(org)

        # One slot per login, first occurrence wins.
        collaborators: list[Collaborator] = []
        seen: set[str] = set()
        for collab in requested:
            if collab.login not in seen:
                seen.add(collab.login)
                collaborators.append(collab)

        if len(collaborators) == 1:
            return await self.user_report(collaborators[0].login, org, start_date, end_date, repo=repo)

        slots = await asyncio.gather(
            *(self._collaborator_slot(collab, org, start_date, end_date, repo) for collab in collaborators)
        )

        report = MultiUserReport()
        for slot in slots:
            report.per_user[slot.username] = slot
        report.grand_total = sum((slot.total for slot in report.per_user.values() if slot.ok), 0.0)

        if report.failures:
            logger.info(
                "Report for %s finished with %d of %d users failed",
                org, len(report.failures), len(collaborators),
            )
        return report

    async def _collaborator_slot(
        self,
        collaborator: Collaborator,
        org: str,
        start: date,
        end: date,
        repo: str | None,
    ) -> UserReport:
        try:
            entries = await self.user_entries(collaborator.login, org, start, end, repo=repo)
        except (CronoHubError, httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            # Malformed 2xx payloads land here as ValueError/KeyError/TypeError.
            failure = PartialFetchError(collaborator.login, e)
            logger.error("Error fetching entries for %s: %s", collaborator.login, failure.message)
            return UserReport(
                username=collaborator.login,
                avatar_url=collaborator.avatar_url or None,
                failure=failure,
            )

        return UserReport(
            username=collaborator.login,
            avatar_url=collaborator.avatar_url or None,
            report=aggregate(entries, username=collaborator.login),
        )
