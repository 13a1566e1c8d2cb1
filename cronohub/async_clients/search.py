"""Async issue search client."""

from datetime import date
from typing import TYPE_CHECKING

from cronohub.async_transport import error_message, is_rate_limit_message
from cronohub.exceptions import CronoHubError, ForbiddenError, RateLimitedError
from cronohub.logging import get_logger
from cronohub.query import build_search_query
from cronohub.types.search import IssueHit, SearchResult

if TYPE_CHECKING:
    from cronohub.async_transport import AsyncHTTPTransport

logger = get_logger("reports")

SEARCH_PAGE_SIZE = 100


class AsyncSearchClient:
    """Async client for the issue search endpoint."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async search client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def issues(self, query: str) -> SearchResult:
        """
        Run an issue search and return the first page of results.

        Only one page of up to 100 issues is fetched; ``incomplete`` is set
        when GitHub reports more matches than were returned.

        Args:
            query: Search query (see ``build_search_query``)

        Returns:
            SearchResult with the matching issues

        Raises:
            RateLimitedError: When the search rate limit is exhausted
            ForbiddenError: On other 403 responses
            CronoHubError: On any other non-2xx response
        """
        response = await self.transport.request(
            "GET",
            "/search/issues",
            params={
                "q": query,
                "per_page": SEARCH_PAGE_SIZE,
                "sort": "updated",
                "order": "desc",
            },
        )

        if response.status_code == 403:
            message = error_message(response)
            if is_rate_limit_message(message):
                raise RateLimitedError()
            raise ForbiddenError("FORBIDDEN", message or "API access error", 403)

        if not response.is_success:
            raise CronoHubError(
                "SEARCH_ERROR",
                error_message(response) or "Error searching comments",
                response.status_code,
            )

        data = response.json()
        items = [
            IssueHit(
                number=item.get("number", 0),
                title=item.get("title", ""),
                html_url=item.get("html_url", ""),
                comments_url=item["comments_url"],
            )
            for item in data.get("items") or []
            if isinstance(item, dict) and item.get("comments_url")
        ]
        total_count = data.get("total_count", len(items))
        incomplete = total_count > len(items) or bool(data.get("incomplete_results"))

        if incomplete:
            logger.warning(
                "Search returned %d of %d matching issues; results beyond the first page are not included (query: %s)",
                len(items), total_count, query,
            )

        return SearchResult(query=query, total_count=total_count, items=items, incomplete=incomplete)

    async def time_tracked_issues(
        self,
        username: str,
        org: str,
        start: "str | date",
        end: "str | date",
        repo: str | None = None,
    ) -> SearchResult:
        """Search the issues that may hold ``username``'s time entries in the window."""
        return await self.issues(build_search_query(username, org, start, end, repo=repo))
