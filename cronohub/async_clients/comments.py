"""Async issue comments client."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from cronohub.codec import decode_hours
from cronohub.dates import TimezoneNormalizer, parse_timestamp, to_iso_z
from cronohub.logging import get_logger
from cronohub.types.reports import TimeEntry

if TYPE_CHECKING:
    from cronohub.async_transport import AsyncHTTPTransport

logger = get_logger("reports")

COMMENTS_PAGE_SIZE = 100


class AsyncCommentsClient:
    """Async client that reads time entries out of an issue's comments."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        normalizer: TimezoneNormalizer,
    ) -> None:
        """
        Initialize the async comments client.

        Args:
            transport: Async HTTP transport for making requests
            normalizer: Converts the local report window to UTC and back
        """
        self.transport = transport
        self.normalizer = normalizer

    async def fetch_matching(
        self,
        comments_url: str,
        username: str,
        start: "str | date",
        end: "str | date",
    ) -> list[TimeEntry]:
        """
        Fetch one issue's comments and decode ``username``'s time entries
        created inside the local window ``[start, end]``.

        A non-2xx response yields an empty list so one broken issue does not
        sink the rest of the report.

        Args:
            comments_url: The issue's ``comments_url``
            username: Author whose entries are wanted
            start: First local day of the window
            end: Last local day of the window (inclusive)

        Returns:
            Time entries in API order
        """
        window_start = self.normalizer.local_date_to_utc(start, end_of_day=False)
        window_end = self.normalizer.local_date_to_utc(end, end_of_day=True)

        response = await self.transport.request(
            "GET",
            comments_url,
            params={"per_page": COMMENTS_PAGE_SIZE, "since": to_iso_z(window_start)},
        )
        if not response.is_success:
            logger.warning("Failed to fetch comments from %s (HTTP %d)", comments_url, response.status_code)
            return []

        comments: list[dict[str, Any]] = response.json() or []
        entries: list[TimeEntry] = []

        for comment in comments:
            if not isinstance(comment, dict):
                continue
            # Author and window checks run before the body is decoded.
            if (comment.get("user") or {}).get("login") != username:
                continue

            created_at = _created_at(comment)
            if created_at is None:
                logger.warning("Skipping comment %s with no usable created_at", comment.get("id"))
                continue
            # ``since`` has no upper bound and filters on update time.
            if created_at < window_start or created_at > window_end:
                continue

            body = comment.get("body") or ""
            hours = decode_hours(body)
            if hours > 0:
                entries.append(
                    TimeEntry(
                        date=self.normalizer.utc_to_local_date(created_at),
                        hours=hours,
                        raw_comment=body,
                        url=comment.get("html_url", ""),
                        created_at=created_at,
                    )
                )

        return entries


def _created_at(comment: dict[str, Any]) -> datetime | None:
    value = comment.get("created_at")
    if not isinstance(value, str):
        return None
    try:
        return parse_timestamp(value)
    except ValueError:
        return None
